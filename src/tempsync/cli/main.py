"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from tempsync import __version__
from tempsync.models import SensorBackendType

from .commands import config, controllers, preview, sensors
from .common import apply_cli_overrides, echo_error, load_config

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log records go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "tempsync-debug.log"
    return Path.home() / ".tempsync" / "logs" / "tempsync.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used together with --log-file

    Returns:
        The log file path
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="tempsync")
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.tempsync/config.json)'
)
@click.option(
    '--interval', '-i',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Seconds between polls (default: from config, 0.5)'
)
@click.option(
    '--on-change/--every-tick',
    default=None,
    help='Only push colors when the temperature changed (default: every tick)'
)
@click.option(
    '--sensors', 'sensor_backend',
    type=click.Choice([b.value for b in SensorBackendType], case_sensitive=False),
    default=None,
    help='Sensor backend (default: from config, hwmon)'
)
@click.option('--host', type=str, default=None, help='OpenRGB SDK server address')
@click.option('--port', type=click.IntRange(1, 65535), default=None, help='OpenRGB SDK server port')
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./tempsync-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    interval: Optional[float],
    on_change: Optional[bool],
    sensor_backend: Optional[str],
    host: Optional[str],
    port: Optional[int],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    tempsync - color your RGB lighting by host temperature.

    Reads every temperature sensor, takes the hottest reading, maps it onto a
    base-to-red color scale and sets all LEDs of every OpenRGB controller to
    that color, twice a second by default.

    \b
    Examples:
      # Run with the default configuration
      tempsync

      # Poll once a second, only update lighting when the temperature moves
      tempsync --interval 1 --on-change

      # Use psutil instead of the hwmon tree
      tempsync --sensors psutil

      # Show what the sensors report
      tempsync sensors

      # Show the color for a few temperatures
      tempsync preview 30 50 90
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["overrides"] = dict(
        interval=interval,
        on_change=on_change,
        sensor_backend=sensor_backend,
        host=host,
        port=port,
    )

    if ctx.invoked_subcommand is not None:
        return

    from tempsync.core import TempSyncApplication

    log_path = setup_logging(verbose, debug, log_file, log_level)
    logger.info("Starting tempsync")

    app = None
    try:
        config_obj = apply_cli_overrides(load_config(config_path), **ctx.obj["overrides"])

        app = TempSyncApplication(config=config_obj, notify=click.echo)
        app.run()

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running tempsync")
        echo_error(e)
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        sys.exit(1)
    finally:
        if app is not None:
            app.shutdown()


cli.add_command(config)
cli.add_command(controllers)
cli.add_command(preview)
cli.add_command(sensors)

if __name__ == "__main__":
    cli()
