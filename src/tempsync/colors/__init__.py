"""Color scale used to encode thermal state.

Temperatures are turned into standard 8-bit RGB `Color` objects here; the
lighting layer repeats that color across every LED of every controller.

```
 lower_temp            upper_temp
 ----------|=====================|---------->  temp
 r = base  |  r: base -> max     |  r = max
 g = base  |  g: base -> base/2  |  g = base/2
```
"""

from .mapper import ColorMapper, map_temperature

__all__ = ["ColorMapper", "map_temperature"]
