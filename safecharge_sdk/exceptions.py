"""Public exceptions for the SafeCharge SDK."""

from typing import Any


class SafechargeError(Exception):
    """Base exception for all SafeCharge SDK errors."""


class SafechargeTransportError(SafechargeError):
    """The request could not be sent or the reply could not be read."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class SafechargeConfigError(SafechargeError):
    """Configuration error (missing server host, invalid config)."""


class SafechargeValidationError(SafechargeError):
    """Validation error for request/response data."""


class UnregisteredRequestError(SafechargeError, LookupError):
    """No endpoint is registered for the request kind."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f"No endpoint registered for request kind {kind!r}")
        self.kind = kind
