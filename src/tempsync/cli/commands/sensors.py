"""Sensor diagnostics command."""

import logging
import sys

import click

from tempsync.exceptions import SensorBackendError
from tempsync.sensors import TemperatureAggregator, open_backend

from ..common import config_from_context, echo_error

logger = logging.getLogger(__name__)


@click.command(name="sensors")
@click.pass_context
def sensors(ctx):
    """List every temperature reading and the aggregate used for lighting."""
    config_obj = config_from_context(ctx)

    try:
        backend = open_backend(config_obj.sensors)
    except SensorBackendError as e:
        echo_error(e)
        sys.exit(1)

    aggregator = TemperatureAggregator(backend)
    readings = list(aggregator.readings())

    click.echo(f"Temperature sensors ({backend.name}):\n")
    if not readings:
        click.echo("  No temperature readings found.")
    else:
        for reading in readings:
            click.echo(f"  {reading.source:<40} {reading.value:6.1f}°C")

    click.echo(f"\nHottest: {aggregator.sample():.1f}°C")
