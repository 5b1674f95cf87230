"""Periodic sample -> map -> dispatch loop."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from tempsync.colors import ColorMapper
from tempsync.lighting import DeviceSynchronizer, LightingSession
from tempsync.models import DispatchPolicy
from tempsync.sensors import TemperatureAggregator

logger = logging.getLogger(__name__)


@dataclass
class LoopState:
    """Mutable state carried from one tick to the next.

    ``last_applied_temperature`` is None until the first dispatch, which
    guarantees the first tick always dispatches.
    """

    last_applied_temperature: Optional[float] = None
    ticks: int = 0
    dispatches: int = 0


class MonitorLoop:
    """
    Drives the lighting from the host temperature.

    Each tick samples the aggregate temperature, maps it to a color and
    dispatches it to every controller, then sleeps for ``poll_interval``.
    Ticks never overlap. Fatal dispatch errors propagate out of ``tick()``
    and ``run()`` unchanged; there is no retry.
    """

    def __init__(
        self,
        aggregator: TemperatureAggregator,
        mapper: ColorMapper,
        synchronizer: DeviceSynchronizer,
        session: LightingSession,
        poll_interval: float = 0.5,
        policy: DispatchPolicy = DispatchPolicy.ALWAYS,
        notify: Optional[Callable[[str], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            aggregator: Sensor aggregator sampled every tick
            mapper: Temperature to color mapping
            synchronizer: Pushes colors to the session
            session: Connected lighting session
            poll_interval: Seconds to wait between ticks
            policy: Dispatch every tick or only when the temperature changed
            notify: Optional callback for per-poll progress lines
            sleep: Sleep function (injectable for tests)
        """
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")

        self.aggregator = aggregator
        self.mapper = mapper
        self.synchronizer = synchronizer
        self.session = session
        self.poll_interval = poll_interval
        self.policy = policy
        self.state = LoopState()
        self._notify = notify
        self._sleep = sleep
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def should_dispatch(self, temperature: float) -> bool:
        """Apply the dispatch policy to a freshly sampled temperature."""
        if self.policy is DispatchPolicy.ALWAYS:
            return True
        return temperature != self.state.last_applied_temperature

    def tick(self) -> bool:
        """
        Run one poll cycle.

        Returns:
            True if a color was dispatched

        Raises:
            ControllerCountError: If the session can't enumerate controllers
            LedWriteError: If a controller rejects a write
        """
        temperature = self.aggregator.sample()
        self.state.ticks += 1

        message = f"Temperature: {temperature:.1f}°C"
        logger.debug(message)
        if self._notify:
            self._notify(message)

        if not self.should_dispatch(temperature):
            logger.debug("Temperature unchanged, skipping dispatch")
            return False

        color = self.mapper.map(temperature)
        self.synchronizer.apply(color, self.session)

        self.state.last_applied_temperature = temperature
        self.state.dispatches += 1
        return True

    def run(self, max_ticks: Optional[int] = None) -> None:
        """
        Poll until stopped, a fatal error propagates, or ``max_ticks`` ran.

        Args:
            max_ticks: Stop after this many ticks (None = forever, 0 = no ticks)
        """
        self._running = True
        logger.info(
            f"Monitor loop started (interval={self.poll_interval}s, policy={self.policy.value})"
        )
        ticks = 0
        try:
            while self._running and (max_ticks is None or ticks < max_ticks):
                self.tick()
                ticks += 1
                if max_ticks is not None and ticks >= max_ticks:
                    break
                self._sleep(self.poll_interval)
        finally:
            self._running = False
            logger.info(f"Monitor loop stopped after {ticks} ticks")

    def stop(self) -> None:
        """Ask the loop to exit after the current tick."""
        self._running = False
