"""
Feature modules for Race Points.

Each feature is a self-contained module with:
- models.py - Dataclasses (no I/O)
- schemas.py - Pydantic schemas
- service.py - Business logic
- calculators/ - Calculation logic (optional)
"""
