"""Custom exception classes for mcprovider."""

from typing import List, Optional


class McProviderError(Exception):
    """Base exception for all mcprovider errors."""
    pass


class ConfigError(McProviderError):
    """Raised when provider configuration is invalid or missing."""
    pass


class DocumentLoadError(McProviderError):
    """Raised when a resource document cannot be loaded or is invalid."""
    pass


class GraphConstructionError(McProviderError):
    """Raised when the resource dependency graph cannot be built."""
    pass


class StateError(McProviderError):
    """Raised when the local state file cannot be read or written."""
    pass


class FieldError:
    """A single validation failure anchored at a configuration path."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"FieldError({self.path!r}, {self.message!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return self.path == other.path and self.message == other.message


class ValidationError(McProviderError):
    """Raised when configuration violates a catalog constraint.

    Every violation found is kept in ``errors`` so the caller can report
    all of them at once, each with the offending field path.
    """

    def __init__(self, errors, kind: Optional[str] = None):
        if isinstance(errors, str):
            errors = [FieldError("", errors)]
        self.errors: List[FieldError] = list(errors)
        self.kind = kind
        prefix = f"invalid {kind} configuration" if kind else "invalid configuration"
        lines = "; ".join(str(e) for e in self.errors)
        super().__init__(f"{prefix}: {lines}")

    @property
    def paths(self) -> List[str]:
        return [e.path for e in self.errors]


class InternalError(McProviderError):
    """Raised when an invariant that validation should guarantee is broken."""
    pass


class OperationCancelledError(McProviderError):
    """Raised when the host cancels an operation."""
    pass


class DeadlineExceededError(McProviderError):
    """Raised when an operation cannot finish before the host deadline."""
    pass


class RemoteError(McProviderError):
    """Raised when a MediaConvert API call fails.

    Carries the resource kind, the API operation and the resource
    identifier so the failure can be traced back to a single resource.
    """

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        operation: Optional[str] = None,
        identifier: Optional[str] = None,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.kind = kind
        self.operation = operation
        self.identifier = identifier
        self.code = code
        self.status_code = status_code
        self.message = message
        super().__init__(self._render())

    def _render(self) -> str:
        context = []
        if self.kind:
            context.append(self.kind)
        if self.identifier:
            context.append(f"'{self.identifier}'")
        where = " ".join(context)
        op = f"{self.operation} " if self.operation else ""
        if where:
            return f"{op}{where} failed: {self.message}"
        return f"{op}failed: {self.message}" if op else self.message

    def with_context(self, kind: str, identifier: Optional[str]) -> "RemoteError":
        """Fill in resource context after classification."""
        self.kind = self.kind or kind
        self.identifier = self.identifier or identifier
        self.args = (self._render(),)
        return self


class AuthError(RemoteError):
    """Raised when credentials or endpoint resolution fail."""
    pass


class NotFoundError(RemoteError):
    """Raised when the remote resource does not exist."""
    pass


class ThrottledError(RemoteError):
    """Raised when the service rejects a call with a throttling response."""
    pass


class TransientError(RemoteError):
    """Raised on server-side or connection failures that may succeed on retry."""
    pass


class ConflictingStateError(RemoteError):
    """Raised when the resource is in a state that rejects the operation."""
    pass
