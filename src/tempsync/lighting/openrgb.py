"""OpenRGB SDK lighting backend."""

import logging
from collections.abc import Sequence

from openrgb import OpenRGBClient
from openrgb.utils import RGBColor, SDKVersionError

from tempsync.exceptions import LightingConnectionError
from tempsync.models import Color

logger = logging.getLogger(__name__)


class OpenRGBSession:
    """LightingSession over an `openrgb.OpenRGBClient`."""

    def __init__(self, client: OpenRGBClient):
        self._client = client

    @property
    def protocol_version(self) -> int:
        return self._client.protocol_version

    def controller_count(self) -> int:
        # Refresh so hot-plugged devices are picked up every cycle
        self._client.update()
        return len(self._client.devices)

    def controller_name(self, index: int) -> str:
        return self._client.devices[index].name

    def controller_leds(self, index: int) -> int:
        return len(self._client.devices[index].leds)

    def write_leds(self, index: int, colors: Sequence[Color]) -> None:
        device = self._client.devices[index]
        device.set_colors([RGBColor(c.r, c.g, c.b) for c in colors])

    def close(self) -> None:
        try:
            self._client.disconnect()
        except OSError as e:
            logger.warning(f"Error closing OpenRGB session: {e}")


class OpenRGBBackend:
    """Connects to an OpenRGB SDK server."""

    def __init__(self, host: str = "127.0.0.1", port: int = 6742):
        self.host = host
        self.port = port

    def connect(self, client_name: str) -> OpenRGBSession:
        """
        Connect and announce ``client_name``.

        Raises:
            LightingConnectionError: If the server cannot be reached or the SDK
                handshake fails
        """
        try:
            client = OpenRGBClient(self.host, self.port, client_name)
        except (OSError, SDKVersionError) as e:
            raise LightingConnectionError(self.host, self.port, original_error=e) from e

        logger.info(f"Connected to OpenRGB at {self.host}:{self.port} as '{client_name}'")
        return OpenRGBSession(client)
