"""MediaConvert SDK boundary: client construction, error classification and retry."""

from .context import OperationContext
from .errors import classify_error, is_retryable
from .retry import call_with_retry
from .session import ClientFactory

__all__ = ["ClientFactory", "OperationContext", "call_with_retry", "classify_error", "is_retryable"]
