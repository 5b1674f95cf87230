"""Command-line interface for tempsync."""

from .main import cli

__all__ = ["cli"]
