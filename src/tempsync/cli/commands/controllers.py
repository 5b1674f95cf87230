"""Lighting controller diagnostics command."""

import logging
import sys

import click

from tempsync.exceptions import TempSyncError
from tempsync.lighting import DeviceSynchronizer

from ..common import config_from_context, echo_error

logger = logging.getLogger(__name__)


@click.command(name="controllers")
@click.pass_context
def controllers(ctx):
    """Connect to the OpenRGB server and list controllers with LED counts."""
    from tempsync.lighting.openrgb import OpenRGBBackend

    config_obj = config_from_context(ctx)
    backend = OpenRGBBackend(config_obj.lighting.host, config_obj.lighting.port)

    try:
        session = backend.connect(config_obj.lighting.client_name)
    except TempSyncError as e:
        echo_error(e)
        sys.exit(1)

    try:
        click.echo(f"Connected using protocol version {session.protocol_version}\n")
        targets = DeviceSynchronizer().targets(session)

        if not targets:
            click.echo("  No controllers found.")
        for target in targets:
            name = session.controller_name(target.index)
            click.echo(f"  [{target.index}] {name} ({target.led_count} LEDs)")
    except TempSyncError as e:
        echo_error(e)
        sys.exit(1)
    finally:
        session.close()
