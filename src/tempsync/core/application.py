"""High-level application facade."""

import logging
from collections.abc import Callable
from typing import Optional

from tempsync.colors import ColorMapper
from tempsync.exceptions import ErrorContext
from tempsync.lighting import DeviceSynchronizer, LightingBackend, LightingSession
from tempsync.models import AppConfig
from tempsync.sensors import SensorBackend, TemperatureAggregator, open_backend

from .monitor import MonitorLoop

logger = logging.getLogger(__name__)


class TempSyncApplication:
    """
    Wires sensors, color mapping and lighting into a MonitorLoop.

    Startup is all-or-nothing: if the sensor backend can't be opened or the
    lighting server can't be reached, ``start()`` raises before any loop
    exists.
    """

    def __init__(
        self,
        config: AppConfig,
        sensor_backend: Optional[SensorBackend] = None,
        lighting_backend: Optional[LightingBackend] = None,
        notify: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            config: Application configuration
            sensor_backend: Opened sensor backend (built from config if None)
            lighting_backend: Lighting backend (OpenRGB from config if None)
            notify: Optional callback for operator progress lines
        """
        self.config = config
        self._sensor_backend = sensor_backend
        self._lighting_backend = lighting_backend
        self._notify = notify

        self.session: Optional[LightingSession] = None
        self.loop: Optional[MonitorLoop] = None

    def _emit(self, message: str) -> None:
        logger.info(message)
        if self._notify:
            self._notify(message)

    def _default_lighting_backend(self) -> LightingBackend:
        # Lazy import keeps the SDK out of diagnostics that don't need it
        from tempsync.lighting.openrgb import OpenRGBBackend

        return OpenRGBBackend(self.config.lighting.host, self.config.lighting.port)

    def start(self) -> MonitorLoop:
        """
        Open backends and build the monitor loop.

        Raises:
            SensorBackendError: If the sensor backend is unavailable
            LightingConnectionError: If the lighting server is unreachable
        """
        with ErrorContext("open sensor backend", logger_instance=logger):
            if self._sensor_backend is None:
                self._sensor_backend = open_backend(self.config.sensors)

        with ErrorContext("connect to lighting server", logger_instance=logger):
            backend = self._lighting_backend or self._default_lighting_backend()
            self.session = backend.connect(self.config.lighting.client_name)

        self._emit(f"Connected using protocol version {self.session.protocol_version}")

        self.loop = MonitorLoop(
            aggregator=TemperatureAggregator(self._sensor_backend),
            mapper=ColorMapper(self.config.color_map),
            synchronizer=DeviceSynchronizer(notify=self._notify),
            session=self.session,
            poll_interval=self.config.loop.poll_interval,
            policy=self.config.loop.dispatch_policy,
            notify=self._notify,
        )
        return self.loop

    def run(self, max_ticks: Optional[int] = None) -> None:
        """Start if needed and run the loop until it stops or fails."""
        if self.loop is None:
            self.start()
        self.loop.run(max_ticks=max_ticks)

    def shutdown(self) -> None:
        """Stop the loop and close the lighting session."""
        if self.loop is not None:
            self.loop.stop()
        if self.session is not None:
            self.session.close()
            self.session = None
            logger.info("Lighting session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
