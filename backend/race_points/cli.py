"""
CLI interface for race points.

Usage:
    race-points score 5K 20:00 --gender men
    race-points score 1500m 3:50.5 --gender women --venue indoor --json
    race-points target "Media maratón" 800 --gender women
    race-points events
"""

import logging
import sys

import click

from race_points.config import settings
from race_points.shared.constants import Gender, Venue
from race_points.shared.formatters import format_mark, parse_mark, split_mark
from race_points.features.scoring import (
    EVENTS,
    PointsRequest,
    PointsResponse,
    PointsService,
    display_label,
    resolve_event,
    supported_labels,
)
from race_points.features.scoring.events import labels_for_event


GENDER_CHOICE = click.Choice([g.value for g in Gender])
VENUE_CHOICE = click.Choice([v.value for v in Venue])


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def _parse_mark_option(ctx, param, value: str) -> float:
    try:
        return parse_mark(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option("--verbose", is_flag=True, help="Log at DEBUG level")
@click.pass_context
def cli(ctx, verbose):
    """World Athletics style points for race results."""
    _configure_logging()
    if verbose:
        logging.getLogger("race_points").setLevel(logging.DEBUG)
    ctx.obj = PointsService()


@cli.command()
@click.argument("distance")
@click.argument("mark", callback=_parse_mark_option)
@click.option("--gender", required=True, type=GENDER_CHOICE, help="Scoring table gender")
@click.option("--venue", default=None, type=VENUE_CHOICE, help="indoor / outdoor / road")
@click.option("--track-type", default=None, help="Stored track type, e.g. 'Pista Cubierta'")
@click.option("--json", "as_json", is_flag=True, help="Print the response as JSON")
@click.pass_obj
def score(service: PointsService, distance, mark, gender, venue, track_type, as_json):
    """Score DISTANCE run in MARK ([[h:]m:]s)."""
    hours, minutes, seconds = split_mark(mark)
    request = PointsRequest(
        distance=distance,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        gender=gender,
        venue=venue,
        track_type=track_type,
    )
    response = PointsResponse.from_score(
        request, service.compute_points(request.to_race_result())
    )

    if as_json:
        click.echo(response.model_dump_json(indent=2))
    elif response.points is not None:
        click.echo(
            f"{display_label(distance)} {format_mark(mark)} ({response.event}, "
            f"{response.backend.value}): {response.points} pts"
        )

    if response.points is None:
        raise click.ClickException(f"{response.reason.value}: {response.detail}")


@cli.command()
@click.argument("distance")
@click.argument("points", type=float)
@click.option("--gender", required=True, type=GENDER_CHOICE, help="Scoring table gender")
@click.option("--venue", default=Venue.ROAD.value, type=VENUE_CHOICE, help="indoor / outdoor / road")
@click.pass_obj
def target(service: PointsService, distance, points, gender, venue):
    """Time needed at DISTANCE to score POINTS."""
    seconds = service.time_for_points(distance, gender, points, Venue(venue))
    if seconds is None:
        raise click.ClickException(f"No {gender} data for {distance!r} ({venue})")

    event = resolve_event(distance, Venue(venue))
    click.echo(f"{display_label(distance)} ({event.key}): {format_mark(seconds)} for {points:g} pts")


@cli.command()
def events():
    """List supported distance labels and their scoring backends."""
    click.echo(f"{'Event':<16}{'Backend':<12}Labels")
    for key, event in EVENTS.items():
        labels = ", ".join(labels_for_event(key))
        venue = " (indoor)" if event.indoor else ""
        click.echo(f"{key:<16}{event.backend.value:<12}{labels}{venue}")
    click.echo(f"\n{len(supported_labels())} labels, {len(EVENTS)} canonical events")


if __name__ == "__main__":
    cli()
