"""Exponential backoff for MediaConvert calls, bounded by the host deadline."""

from typing import Any, Callable, Optional

from .context import OperationContext
from .errors import classify_error, is_retryable
from ..config.models import RetryPolicy
from ..utils.errors import DeadlineExceededError, OperationCancelledError
from ..utils.logging import get_logger

logger = get_logger("client.retry")


def call_with_retry(
    fn: Callable[[], Any],
    policy: RetryPolicy,
    context: Optional[OperationContext] = None,
    operation: str = "call",
    kind: Optional[str] = None,
    identifier: Optional[str] = None,
) -> Any:
    """
    Call ``fn`` and retry throttled or transient failures.

    Args:
        fn: Zero-argument callable performing one SDK call
        policy: Backoff policy
        context: Deadline and cancellation; a fresh unbounded one if None
        operation: API operation name used in errors and logs
        kind: Resource kind for error context
        identifier: Resource name for error context

    Returns:
        Whatever ``fn`` returns

    Raises:
        RemoteError: Classified failure once it is not retryable or attempts run out
        DeadlineExceededError: If the next retry would finish past the deadline
        OperationCancelledError: If the host cancels before or during a backoff
    """
    context = context or OperationContext()
    attempt = 0
    while True:
        attempt += 1
        context.check(operation)
        try:
            return fn()
        except (OperationCancelledError, DeadlineExceededError):
            raise
        except Exception as exc:
            error = classify_error(exc, operation=operation, kind=kind, identifier=identifier)
            if not is_retryable(error) or attempt >= policy.max_attempts:
                if error is exc:
                    raise
                raise error from exc
            delay = policy.delay(attempt)
            remaining = context.remaining()
            if remaining is not None and delay >= remaining:
                raise DeadlineExceededError(
                    f"{operation} would exceed its deadline after {attempt} attempt(s): {error}"
                ) from error
            logger.warning(
                f"{operation} failed with {type(error).__name__}, retrying in {delay:.2f}s "
                f"(attempt {attempt}/{policy.max_attempts})"
            )
            if context.wait(delay):
                raise OperationCancelledError(f"{operation} cancelled during backoff") from error
