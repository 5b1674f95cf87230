"""Lighting backend protocols."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tempsync.models import Color


class LightingSession(Protocol):
    """An open connection to a lighting server.

    Every method may raise; the synchronizer classifies failures.
    """

    @property
    def protocol_version(self) -> int:
        ...

    def controller_count(self) -> int:
        """Number of controllers currently attached."""
        ...

    def controller_name(self, index: int) -> str:
        ...

    def controller_leds(self, index: int) -> int:
        """Number of LEDs on a controller."""
        ...

    def write_leds(self, index: int, colors: Sequence[Color]) -> None:
        """
        Set every LED of a controller.

        Args:
            index: Controller index
            colors: One color per LED, in LED order
        """
        ...

    def close(self) -> None:
        ...


class LightingBackend(Protocol):
    """Factory for lighting sessions."""

    def connect(self, client_name: str) -> LightingSession:
        """
        Open a session, announcing ``client_name`` to the server.

        Raises:
            LightingConnectionError: If the server cannot be reached
        """
        ...
