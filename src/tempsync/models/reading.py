"""Sensor reading and controller target models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Reading:
    """A single temperature value and where it came from."""

    chip: str
    feature: str
    value: float

    @property
    def source(self) -> str:
        return f"{self.chip}/{self.feature}"


@dataclass(frozen=True)
class ControllerTarget:
    """A lighting controller as seen during one dispatch cycle."""

    index: int
    led_count: int
