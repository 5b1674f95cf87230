"""Color scale preview command."""

import click

from tempsync.colors import ColorMapper

from ..common import config_from_context


@click.command(name="preview")
@click.argument("temperatures", nargs=-1, type=float, required=True)
@click.pass_context
def preview(ctx, temperatures: tuple[float, ...]):
    """
    Show the color each TEMPERATURES value maps to.

    \b
    Example:
      tempsync preview 30 50 70 90
    """
    config_obj = config_from_context(ctx)
    mapper = ColorMapper(config_obj.color_map)
    scale = config_obj.color_map

    click.echo(
        f"Scale: {scale.lower_temp:g}°C -> {scale.upper_temp:g}°C, "
        f"base={scale.base_value}, max={scale.max_value}\n"
    )
    for temp in temperatures:
        color = mapper.map(temp)
        click.echo(f"  {temp:6.1f}°C  {color.to_hex()}  {color}")
