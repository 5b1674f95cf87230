"""Push one color to every LED of every controller."""

import logging
from collections.abc import Callable
from typing import Optional

from tempsync.exceptions import ControllerCountError, LedCountError, LedWriteError
from tempsync.models import Color, ControllerTarget

from .protocols import LightingSession

logger = logging.getLogger(__name__)


class DeviceSynchronizer:
    """
    Writes a flat color across all controllers of a lighting session.

    Failure policy:
    - controller count unavailable: ControllerCountError (fatal)
    - one controller's LED count unavailable: logged, controller skipped
    - LED write rejected: LedWriteError (fatal)
    """

    def __init__(self, notify: Optional[Callable[[str], None]] = None):
        """
        Args:
            notify: Optional callback receiving one progress line per controller
        """
        self._notify = notify

    def targets(self, session: LightingSession) -> list[ControllerTarget]:
        """
        Fetch controllers and their LED counts for this cycle.

        Raises:
            ControllerCountError: If the controller count cannot be read
        """
        try:
            count = session.controller_count()
        except Exception as e:
            raise ControllerCountError(original_error=e) from e

        logger.debug(f"Found {count} controllers")

        found = []
        for index in range(count):
            try:
                led_count = session.controller_leds(index)
            except Exception as e:
                error = LedCountError(index, original_error=e)
                logger.warning(error.technical_message)
                continue
            found.append(ControllerTarget(index=index, led_count=led_count))
        return found

    def apply(self, color: Color, session: LightingSession) -> list[ControllerTarget]:
        """
        Set every reachable controller to ``color``.

        Returns:
            The controllers that were written

        Raises:
            ControllerCountError: If the controller count cannot be read
            LedWriteError: If a controller rejects the write
        """
        written = []
        for target in self.targets(session):
            if target.led_count <= 0:
                logger.debug(f"Controller {target.index} has no LEDs, skipping")
                continue

            try:
                session.write_leds(target.index, [color] * target.led_count)
            except Exception as e:
                raise LedWriteError(target.index, original_error=e) from e

            written.append(target)
            message = f"Controller {target.index} set to {color} ({target.led_count} LEDs)"
            logger.debug(message)
            if self._notify:
                self._notify(message)

        return written
