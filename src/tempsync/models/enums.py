"""Enumerations for tempsync."""

from enum import Enum


class DispatchPolicy(str, Enum):
    """When the monitor loop pushes a color to the lighting session."""

    ALWAYS = "always"  # Dispatch on every tick
    ON_CHANGE = "on_change"  # Dispatch only when the sampled temperature moved


class SensorBackendType(str, Enum):
    """Available temperature sensor backends."""

    HWMON = "hwmon"  # Linux /sys/class/hwmon tree
    PSUTIL = "psutil"  # psutil.sensors_temperatures()
