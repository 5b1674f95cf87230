"""
Custom exception hierarchy for tempsync.

## Exception Hierarchy

```
TempSyncError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── DispatchError (carries an ErrorKind)
    ├── SensorBackendError       UNREACHABLE_BACKEND
    ├── LightingConnectionError  UNREACHABLE_BACKEND
    ├── ControllerCountError     PROTOCOL_VIOLATION
    ├── LedCountError            DEVICE_FAILURE (recoverable)
    └── LedWriteError            PROTOCOL_VIOLATION
```

All custom exceptions expose `user_message`, `technical_message`,
`recoverable` and `recovery_hint`.

### Example

```python
from tempsync.exceptions import ErrorKind, DispatchError

try:
    synchronizer.apply(color, session)
except DispatchError as e:
    if e.kind is ErrorKind.PROTOCOL_VIOLATION:
        ...
```
"""

from .base import TempSyncError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .dispatch import (
    ControllerCountError,
    DispatchError,
    ErrorKind,
    LedCountError,
    LedWriteError,
    LightingConnectionError,
    SensorBackendError,
)
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Dispatch
    "ControllerCountError",
    "DispatchError",
    "ErrorKind",
    "LedCountError",
    "LedWriteError",
    "LightingConnectionError",
    "SensorBackendError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
    # Base
    "TempSyncError",
]
