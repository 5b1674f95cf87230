"""Sensor and lighting exceptions.

Every error raised while talking to a backend carries an `ErrorKind` so
callers can tell categories apart without parsing messages:

- UNREACHABLE_BACKEND: a backend could not be opened or connected
- PROTOCOL_VIOLATION: the lighting session can no longer be trusted
- DEVICE_FAILURE: a single controller misbehaved
"""

from enum import Enum
from typing import Optional

from .base import TempSyncError


class ErrorKind(Enum):
    """Failure category of a backend error."""

    UNREACHABLE_BACKEND = "unreachable_backend"
    PROTOCOL_VIOLATION = "protocol_violation"
    DEVICE_FAILURE = "device_failure"


class DispatchError(TempSyncError):
    """Base class for sensor and lighting failures."""

    kind: ErrorKind = ErrorKind.UNREACHABLE_BACKEND

    def __init__(self, user_message: str, original_error: Optional[BaseException] = None, **kwargs):
        if original_error is not None and "technical_message" not in kwargs:
            kwargs["technical_message"] = f"{user_message}: {original_error!r}"
        super().__init__(user_message, **kwargs)
        self.original_error = original_error


class SensorBackendError(DispatchError):
    """Sensor backend could not be initialized."""

    kind = ErrorKind.UNREACHABLE_BACKEND

    def __init__(self, backend: str, reason: str, original_error: Optional[BaseException] = None):
        super().__init__(
            f"Sensor backend '{backend}' is unavailable: {reason}",
            original_error=original_error,
            recovery_hint=(
                "Run 'tempsync sensors' to check which readings are visible, "
                "or switch backends with --sensors hwmon|psutil"
            ),
        )
        self.backend = backend


class LightingConnectionError(DispatchError):
    """Lighting server could not be reached."""

    kind = ErrorKind.UNREACHABLE_BACKEND

    def __init__(self, host: str, port: int, original_error: Optional[BaseException] = None):
        super().__init__(
            f"Couldn't connect to lighting server at {host}:{port}",
            original_error=original_error,
            recovery_hint=(
                "Make sure the OpenRGB SDK server is running "
                "(openrgb --server) and the host/port match your configuration"
            ),
        )
        self.host = host
        self.port = port


class ControllerCountError(DispatchError):
    """Controller enumeration failed; the session is unusable."""

    kind = ErrorKind.PROTOCOL_VIOLATION

    def __init__(self, original_error: Optional[BaseException] = None):
        super().__init__(
            "Couldn't read number of controllers from lighting server",
            original_error=original_error,
            recovery_hint="Restart the lighting server and try again",
        )


class LedCountError(DispatchError):
    """A single controller did not report its LED count."""

    kind = ErrorKind.DEVICE_FAILURE

    def __init__(self, controller_id: int, original_error: Optional[BaseException] = None):
        super().__init__(
            f"Couldn't read LED count of controller {controller_id}",
            original_error=original_error,
            recoverable=True,
        )
        self.controller_id = controller_id


class LedWriteError(DispatchError):
    """Writing colors to a controller failed."""

    kind = ErrorKind.PROTOCOL_VIOLATION

    def __init__(self, controller_id: int, original_error: Optional[BaseException] = None):
        super().__init__(
            f"Couldn't set controller {controller_id}",
            original_error=original_error,
            recovery_hint="The lighting session is no longer reliable; restart tempsync",
        )
        self.controller_id = controller_id
