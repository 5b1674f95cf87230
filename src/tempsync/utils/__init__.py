"""Utility helpers for tempsync."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
