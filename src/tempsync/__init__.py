"""tempsync: drive RGB lighting from host temperature sensors."""

__version__ = "0.1.0"

from .colors import ColorMapper, map_temperature
from .core import MonitorLoop, TempSyncApplication
from .lighting import DeviceSynchronizer
from .sensors import TemperatureAggregator

__all__ = [
    "ColorMapper",
    "DeviceSynchronizer",
    "MonitorLoop",
    "TempSyncApplication",
    "TemperatureAggregator",
    "map_temperature",
]
