"""Error hierarchy for buildinify.

Every public error class inherits from :class:`BuildinifyError`.  Each
carries a machine-readable ``code`` (from :class:`ErrorCode`), a
human-readable ``message``, an optional structured ``context`` dict, and
an optional ``cause`` (chained exception).

Remote failures all derive from :class:`BuildinifyTransportError` so that
callers fetching a page can catch a single type.  Rendering never raises:
missing fields degrade to defaults instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error buildinify can raise."""

    CONFIG_ERROR = "CONFIG_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RETRY_EXHAUSTED = "RETRY_EXHAUSTED"
    NETWORK_ERROR = "NETWORK_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class BuildinifyError(Exception):
    """Base exception for all buildinify errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


class BuildinifyConfigError(BuildinifyError):
    """Configuration is missing or invalid (e.g. no API key in the environment).

    Context keys: ``variable``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONFIG_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Transport errors
# ---------------------------------------------------------------------------

class BuildinifyTransportError(BuildinifyError):
    """A remote call failed or returned data the client cannot use.

    Raised directly for malformed pagination payloads; the subclasses
    below cover HTTP status and network failures.

    Context keys: ``path``, plus subclass-specific keys.
    """

    def __init__(
        self,
        message: str = "Transport error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        code: str = ErrorCode.TRANSPORT_ERROR,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class BuildinifyValidationError(BuildinifyTransportError):
    """The API returned 400 (or another non-retryable 4xx).

    Context keys: ``status_code``, ``api_code``, ``body``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.VALIDATION_ERROR)


class BuildinifyAuthError(BuildinifyTransportError):
    """The API returned 401: the API key is invalid or revoked."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.AUTH_ERROR)


class BuildinifyPermissionError(BuildinifyTransportError):
    """The API returned 403: the integration cannot see the resource.

    Context keys: ``operation``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.PERMISSION_ERROR)


class BuildinifyNotFoundError(BuildinifyTransportError):
    """The API returned 404: the page or block id does not exist.

    Context keys: ``path``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.NOT_FOUND)


class BuildinifyRetryExhaustedError(BuildinifyTransportError):
    """Every retry attempt for a retryable request failed.

    Context keys: ``attempts``, ``last_status_code``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.RETRY_EXHAUSTED)


class BuildinifyNetworkError(BuildinifyTransportError):
    """A transport-level failure occurred (timeout, DNS, connection reset).

    Context keys: ``url``, ``attempt``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.NETWORK_ERROR)
