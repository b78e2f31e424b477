"""SafeCharge SDK for Python.

This SDK executes typed requests against the SafeCharge REST payment API.

Public API:
    RequestExecutor - Sends requests and decodes typed responses
    init - Install the process-wide HTTP client (first call wins)
    models - Request and response models

Internal (not for direct use):
    _internal.transport - HTTP transport
    _internal.lifecycle - One-time transport installation
"""

import logging

import httpx

from safecharge_sdk._internal.lifecycle import get_default_guard
from safecharge_sdk._internal.transport import Transport
from safecharge_sdk._version import __version__
from safecharge_sdk.config import SafechargeConfig
from safecharge_sdk.exceptions import (
    SafechargeConfigError,
    SafechargeError,
    SafechargeTransportError,
    SafechargeValidationError,
    UnregisteredRequestError,
)
from safecharge_sdk.executor import DispatchResult, RequestExecutor, get_request_executor

logging.getLogger(__name__).addHandler(logging.NullHandler())


def init(client: httpx.Client | Transport | None = None) -> Transport:
    """Install the HTTP client shared by all executors.

    Only the first call (explicit or the lazy one made by the first dispatch)
    has an effect.
    """
    return get_default_guard().ensure_initialized(client)


__all__ = [
    "__version__",
    "init",
    "RequestExecutor",
    "DispatchResult",
    "get_request_executor",
    "SafechargeConfig",
    "Transport",
    "SafechargeError",
    "SafechargeTransportError",
    "SafechargeConfigError",
    "SafechargeValidationError",
    "UnregisteredRequestError",
]
