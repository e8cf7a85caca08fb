"""
Cooperative cancellation for long-running sync operations.

The token is checked at chunk boundaries only, so at most one chunk of work
runs after cancel() is called.
"""

from typing import Optional

from application.exceptions import OperationCancelledError


class CancellationToken:
    """Flag shared between a caller and a running operation."""

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: Optional[str] = None

    def cancel(self, reason: Optional[str] = None) -> None:
        if not self._cancelled:
            self._cancelled = True
            self._reason = reason

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelledError if cancel() has been called."""
        if self._cancelled:
            message = "Operation cancelled"
            if self._reason:
                message = f"{message}: {self._reason}"
            raise OperationCancelledError(message, context={"reason": self._reason})
