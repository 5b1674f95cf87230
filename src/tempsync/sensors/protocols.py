"""Sensor backend protocols.

A backend exposes chips, a chip exposes features, a feature exposes
sub-features and a sub-feature can be read. Any step may raise; the
aggregator decides what a failure means.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class FeatureKind(Enum):
    """Physical category of a chip feature."""

    TEMPERATURE = "temperature"
    FAN = "fan"
    VOLTAGE = "voltage"
    CURRENT = "current"
    POWER = "power"
    OTHER = "other"


class Quantity(Enum):
    """What a sub-feature value actually measures."""

    TEMPERATURE_INPUT = "temp_input"
    TEMPERATURE_MAX = "temp_max"
    TEMPERATURE_MIN = "temp_min"
    TEMPERATURE_CRIT = "temp_crit"
    TEMPERATURE_OTHER = "temp_other"
    FAN = "fan"
    VOLTAGE = "voltage"
    OTHER = "other"


@dataclass(frozen=True)
class TypedReading:
    """A decoded sub-feature value."""

    quantity: Quantity
    value: float

    @property
    def is_temperature_input(self) -> bool:
        return self.quantity is Quantity.TEMPERATURE_INPUT


class SubFeature(Protocol):
    """An individual readable value under a feature."""

    name: str

    def read(self) -> TypedReading:
        """Read and decode the value. Raises on failure."""
        ...


class Feature(Protocol):
    """A named measurement category on a chip."""

    name: str
    kind: FeatureKind

    def sub_features(self) -> Iterable[SubFeature]:
        ...


class Chip(Protocol):
    """A hardware sensor module."""

    name: str

    def features(self) -> Iterable[Feature]:
        ...


class SensorBackend(Protocol):
    """Source of chips for one poll."""

    name: str

    def chips(self) -> Iterable[Chip]:
        """Enumerate the chips currently visible."""
        ...
