"""Host deadline and cancellation carried through one resource operation."""

import threading
import time
from typing import Optional

from ..utils.errors import DeadlineExceededError, OperationCancelledError


class OperationContext:
    """
    Deadline and cancellation signal for a single operation.

    Args:
        timeout: Seconds until the deadline, or None for no deadline
        cancel_event: Optional event shared with the host; setting it cancels the operation
    """

    def __init__(self, timeout: Optional[float] = None, cancel_event: Optional[threading.Event] = None):
        self.deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancel = cancel_event or threading.Event()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline (never negative), or None without a deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def cancel(self) -> None:
        self._cancel.set()

    def check(self, operation: str = "operation") -> None:
        """
        Raise if the operation must stop now.

        Raises:
            OperationCancelledError: If the host cancelled
            DeadlineExceededError: If the deadline has passed
        """
        if self.cancelled:
            raise OperationCancelledError(f"{operation} cancelled")
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise DeadlineExceededError(f"{operation} exceeded its deadline")

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; returns True if cancelled meanwhile."""
        return self._cancel.wait(seconds)
