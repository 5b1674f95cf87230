"""Helpers shared by CLI commands."""

import sys
from pathlib import Path
from typing import Optional

import click

from tempsync.exceptions import TempSyncError, format_error_for_display
from tempsync.models import AppConfig, DispatchPolicy, SensorBackendType


def echo_error(error: Exception) -> None:
    """Print an error banner and recovery hint to stderr."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)


def load_config(config_path: Optional[Path]) -> AppConfig:
    """Load configuration from file and environment."""
    return AppConfig.load_or_default(config_path)


def apply_cli_overrides(
    config_obj: AppConfig,
    interval: Optional[float] = None,
    on_change: Optional[bool] = None,
    sensor_backend: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> AppConfig:
    """Return a copy of the config with command-line options applied."""
    loop_updates = {}
    if interval is not None:
        loop_updates["poll_interval"] = interval
    if on_change is not None:
        loop_updates["dispatch_policy"] = DispatchPolicy.ON_CHANGE if on_change else DispatchPolicy.ALWAYS

    lighting_updates = {}
    if host is not None:
        lighting_updates["host"] = host
    if port is not None:
        lighting_updates["port"] = port

    sensor_updates = {}
    if sensor_backend is not None:
        sensor_updates["backend"] = SensorBackendType(sensor_backend.lower())

    return config_obj.model_copy(update={
        "loop": config_obj.loop.model_copy(update=loop_updates),
        "lighting": config_obj.lighting.model_copy(update=lighting_updates),
        "sensors": config_obj.sensors.model_copy(update=sensor_updates),
    })


def config_from_context(ctx: click.Context) -> AppConfig:
    """Load the effective config for a subcommand, exiting with status 1 if invalid."""
    obj = ctx.find_root().obj or {}
    try:
        return apply_cli_overrides(load_config(obj.get("config_path")), **obj.get("overrides", {}))
    except TempSyncError as e:
        echo_error(e)
        sys.exit(1)
