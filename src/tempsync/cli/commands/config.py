"""Configuration commands.

Commands:
    - config show                # Print the effective configuration as JSON
    - config validate            # Validate the config file
    - config init [--force]      # Write the defaults to the config file
"""

import click

from tempsync.models import AppConfig
from tempsync.models.config import DEFAULT_CONFIG_PATH
from tempsync.utils import PydanticPersistence

from ..common import config_from_context


def _config_path(ctx: click.Context):
    return (ctx.find_root().obj or {}).get("config_path") or DEFAULT_CONFIG_PATH


@click.group(name="config")
def config():
    """Inspect and manage tempsync configuration."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx):
    """Print the effective configuration (file, environment and options)."""
    config_obj = config_from_context(ctx)
    click.echo(f"# {_config_path(ctx)}")
    click.echo(config_obj.model_dump_json(indent=2))


@config.command(name="validate")
@click.pass_context
def validate_config(ctx):
    """Validate the configuration file."""
    path = _config_path(ctx)
    is_valid, error = PydanticPersistence.validate_json(path, AppConfig)

    if is_valid:
        click.echo(f"[OK] {path}")
        return

    click.echo(f"[FAIL] {error}", err=True)
    ctx.exit(1)


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init_config(ctx, force: bool):
    """Write the default configuration to the config file."""
    path = _config_path(ctx)
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    AppConfig().save(path)
    click.echo(f"Wrote default configuration to {path}")
