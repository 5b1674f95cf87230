"""Temperature sensor backends and aggregation."""

from tempsync.models import SensorBackendType, SensorConfig

from .aggregator import NO_DATA, TemperatureAggregator
from .hwmon import HwmonBackend
from .protocols import Chip, Feature, FeatureKind, Quantity, SensorBackend, SubFeature, TypedReading


def open_backend(config: SensorConfig) -> SensorBackend:
    """
    Create and open the configured sensor backend.

    Raises:
        SensorBackendError: If the backend is unavailable on this host
    """
    if config.backend is SensorBackendType.PSUTIL:
        # psutil is only imported when selected
        from .psutil_backend import PsutilBackend

        return PsutilBackend().open()
    return HwmonBackend(config.hwmon_path).open()


__all__ = [
    "Chip",
    "Feature",
    "FeatureKind",
    "HwmonBackend",
    "NO_DATA",
    "Quantity",
    "SensorBackend",
    "SubFeature",
    "TemperatureAggregator",
    "TypedReading",
    "open_backend",
]
