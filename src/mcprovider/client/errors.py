"""Classification of botocore failures into provider errors."""

from typing import Optional

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    HTTPClientError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
)

from ..utils.errors import (
    AuthError,
    ConflictingStateError,
    NotFoundError,
    RemoteError,
    ThrottledError,
    TransientError,
)

NOT_FOUND_CODES = {"NotFoundException", "NotFound", "ResourceNotFoundException"}
THROTTLING_CODES = {"TooManyRequestsException", "Throttling", "ThrottlingException", "ThrottledException"}
CONFLICT_CODES = {"ConflictException"}
AUTH_CODES = {
    "ForbiddenException",
    "AccessDeniedException",
    "UnrecognizedClientException",
    "InvalidSignatureException",
    "ExpiredTokenException",
}
TRANSIENT_CODES = {"InternalServerErrorException", "ServiceUnavailableException", "RequestTimeout"}


def _classify_client_error(code: str, status: Optional[int]):
    if code in NOT_FOUND_CODES or status == 404:
        return NotFoundError
    if code in THROTTLING_CODES or code.startswith("Throttling") or status == 429:
        return ThrottledError
    if code in TRANSIENT_CODES or (status is not None and status >= 500):
        return TransientError
    if code in CONFLICT_CODES or status == 409:
        return ConflictingStateError
    if code in AUTH_CODES or status in (401, 403):
        return AuthError
    return RemoteError


def classify_error(
    exc: Exception,
    operation: Optional[str] = None,
    kind: Optional[str] = None,
    identifier: Optional[str] = None,
) -> RemoteError:
    """
    Map an SDK exception to the provider error hierarchy.

    Args:
        exc: Exception raised by a boto3 call
        operation: API operation name (``GetPreset``)
        kind: Resource kind
        identifier: Resource name

    Returns:
        RemoteError subclass instance (not raised)
    """
    if isinstance(exc, RemoteError):
        return exc.with_context(kind, identifier)
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = error.get("Code", "") or ""
        message = error.get("Message") or str(exc)
        status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        cls = _classify_client_error(code, status)
        return cls(message, kind=kind, operation=operation, identifier=identifier, code=code, status_code=status)
    if isinstance(exc, (NoCredentialsError, PartialCredentialsError, NoRegionError)):
        return AuthError(str(exc), kind=kind, operation=operation, identifier=identifier)
    if isinstance(exc, (BotoConnectionError, HTTPClientError)):
        return TransientError(str(exc), kind=kind, operation=operation, identifier=identifier)
    if isinstance(exc, BotoCoreError):
        return RemoteError(str(exc), kind=kind, operation=operation, identifier=identifier)
    return RemoteError(str(exc), kind=kind, operation=operation, identifier=identifier)


def is_retryable(error: Exception) -> bool:
    return isinstance(error, (ThrottledError, TransientError))
