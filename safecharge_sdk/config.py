"""Environment configuration for the SafeCharge SDK."""

import os

from pydantic import BaseModel

TEST_HOST = "https://ppp-test.safecharge.com/ppp/"
PRODUCTION_HOST = "https://secure.safecharge.com/ppp/"

DEFAULT_TIMEOUT_MS = 30000


class SafechargeConfig(BaseModel):
    """Settings shared by the executor and the default transport.

    Attributes:
        server_host: Host used for requests that do not set their own.
            Must end with a slash, e.g. ``TEST_HOST``.
        timeout_ms: Timeout of the default HTTP client in milliseconds.
    """

    server_host: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    @classmethod
    def from_env(cls) -> "SafechargeConfig":
        """Create a config from environment variables.

        Optional environment variables:
            SAFECHARGE_SERVER_HOST: Default server host.
            SAFECHARGE_TIMEOUT_MS: Default client timeout in milliseconds.

        Raises:
            ValueError: If SAFECHARGE_TIMEOUT_MS is not an integer.
        """
        server_host = os.environ.get("SAFECHARGE_SERVER_HOST") or None
        timeout_ms = int(os.environ.get("SAFECHARGE_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        return cls(server_host=server_host, timeout_ms=timeout_ms)
