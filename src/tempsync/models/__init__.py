"""Data models for tempsync."""

from .color import Color
from .config import AppConfig, ColorMapConfig, LightingConfig, LoopConfig, SensorConfig
from .enums import DispatchPolicy, SensorBackendType
from .reading import ControllerTarget, Reading

__all__ = [
    "AppConfig",
    "Color",
    "ColorMapConfig",
    "ControllerTarget",
    # Enums
    "DispatchPolicy",
    "LightingConfig",
    "LoopConfig",
    "Reading",
    "SensorBackendType",
    "SensorConfig",
]
