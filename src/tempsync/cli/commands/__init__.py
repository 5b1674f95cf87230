"""CLI commands for tempsync."""

from .config import config
from .controllers import controllers
from .preview import preview
from .sensors import sensors

__all__ = ["config", "controllers", "preview", "sensors"]
