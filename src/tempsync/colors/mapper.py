"""Temperature to color mapping."""

from tempsync.models import Color, ColorMapConfig


def _channel(value: float) -> int:
    """Truncate toward zero and clamp to the 8-bit range."""
    return max(0, min(255, int(value)))


def map_temperature(temp: float, config: ColorMapConfig) -> Color:
    """
    Map a temperature to a color on the configured scale.

    At or below ``lower_temp`` red and green both sit at ``base_value``.
    Above it, red rises linearly towards ``max_value`` and saturates there
    from ``upper_temp`` on, while green falls as ``base_value / (1 + scale)``
    with the scale capped at 1, so green bottoms out at ``base_value / 2``.
    Blue is always 0.

    Total for every float input; NaN maps like ``lower_temp``.

    Args:
        temp: Temperature in degrees Celsius
        config: Scale bounds

    Returns:
        The mapped color

    Example:
        >>> cfg = ColorMapConfig(lower_temp=32, upper_temp=80, base_value=20, max_value=30)
        >>> map_temperature(80.0, cfg).to_rgb_tuple()
        (30, 10, 0)
    """
    if not temp > config.lower_temp:
        return Color(r=_channel(config.base_value), g=_channel(config.base_value), b=0)

    scale = (temp - config.lower_temp) / (config.upper_temp - config.lower_temp)

    red = config.base_value + scale * (config.max_value - config.base_value)
    red = min(red, config.max_value)
    green = config.base_value / (1.0 + min(scale, 1.0))

    return Color(r=_channel(red), g=_channel(green), b=0)


class ColorMapper:
    """`map_temperature` bound to one configuration."""

    def __init__(self, config: ColorMapConfig):
        self.config = config

    def map(self, temp: float) -> Color:
        return map_temperature(temp, self.config)

    __call__ = map
