"""Core control loop."""

from .application import TempSyncApplication
from .monitor import LoopState, MonitorLoop

__all__ = ["LoopState", "MonitorLoop", "TempSyncApplication"]
