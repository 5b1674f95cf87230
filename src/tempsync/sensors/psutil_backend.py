"""psutil sensor backend.

`psutil.sensors_temperatures()` returns `{chip: [shwtemp(label, current,
high, critical), ...]}`. Each entry becomes a temperature feature whose
sub-features are `input`, `max` and `crit`.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

import psutil

from tempsync.exceptions import SensorBackendError

from .protocols import FeatureKind, Quantity, TypedReading

logger = logging.getLogger(__name__)

# shwtemp field -> (sub-feature name, quantity)
_ENTRY_FIELDS = (
    ("current", "input", Quantity.TEMPERATURE_INPUT),
    ("high", "max", Quantity.TEMPERATURE_MAX),
    ("critical", "crit", Quantity.TEMPERATURE_CRIT),
)


@dataclass
class PsutilSubFeature:
    name: str
    quantity: Quantity
    value: Optional[float]

    def read(self) -> TypedReading:
        if self.value is None:
            raise ValueError(f"{self.name} not reported")
        return TypedReading(self.quantity, float(self.value))


@dataclass
class PsutilFeature:
    name: str
    entry: Any
    kind: FeatureKind = FeatureKind.TEMPERATURE

    def sub_features(self) -> list[PsutilSubFeature]:
        return [
            PsutilSubFeature(f"{self.name}_{suffix}", quantity, getattr(self.entry, attr, None))
            for attr, suffix, quantity in _ENTRY_FIELDS
        ]


@dataclass
class PsutilChip:
    name: str
    entries: list

    def features(self) -> list[PsutilFeature]:
        features = []
        for i, entry in enumerate(self.entries):
            label = getattr(entry, "label", "") or f"temp{i + 1}"
            features.append(PsutilFeature(label, entry))
        return features


class PsutilBackend:
    """Sensor backend over psutil's cross-platform temperature API."""

    name = "psutil"

    def open(self) -> "PsutilBackend":
        """
        Check psutil can report temperatures on this platform.

        Raises:
            SensorBackendError: If sensors_temperatures is unsupported
        """
        if not hasattr(psutil, "sensors_temperatures"):
            raise SensorBackendError(self.name, "psutil has no temperature support on this platform")
        logger.info(f"Using psutil {psutil.__version__} sensors")
        return self

    def chips(self) -> Iterator[PsutilChip]:
        for chip_name, entries in psutil.sensors_temperatures().items():
            yield PsutilChip(chip_name, list(entries))
