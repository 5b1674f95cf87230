"""Lighting sessions and color dispatch."""

from .protocols import LightingBackend, LightingSession
from .synchronizer import DeviceSynchronizer

__all__ = ["DeviceSynchronizer", "LightingBackend", "LightingSession"]
