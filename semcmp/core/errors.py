"""
Errors
Failure raised when a string is not a valid semantic version.
"""

from typing import Any, Optional


class InvalidFormat(ValueError):
    """
    Raised by the parser when a value does not match the SemVer 2.0.0 grammar.

    Attributes:
        value: The offending raw input, exactly as received
        reason: Short description of what failed (e.g. "leading zero in minor")
        argument: Optional label of which caller input was rejected
    """

    def __init__(self, value: Any, reason: str = "invalid format", argument: Optional[str] = None):
        self.value = value
        self.reason = reason
        self.argument = argument
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = f"Invalid semver: {self.value!r} ({self.reason})"
        if self.argument:
            message = f"{self.argument} version: {message}"
        return message

    def for_argument(self, argument: str) -> "InvalidFormat":
        """Return a copy labelled with the caller's argument name."""
        return InvalidFormat(self.value, self.reason, argument=argument)
