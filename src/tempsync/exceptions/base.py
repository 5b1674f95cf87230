"""Root of the tempsync exception tree.

Errors carry two messages: `user_message` is what the CLI banner prints,
`technical_message` is what goes to the log file. `recovery_hint` is printed
under the banner when present.
"""

from typing import Optional


class TempSyncError(Exception):
    """
    Base exception for all tempsync errors.

    Attributes:
        user_message: Short description for the operator
        technical_message: Description with the underlying cause, for logs
        recoverable: True if the monitor loop may carry on after this error
        recovery_hint: What the operator can do about it
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
