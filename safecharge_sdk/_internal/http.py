"""HTTP client and headers used to reach the SafeCharge API."""

import httpx

from safecharge_sdk._version import __version__
from safecharge_sdk.config import DEFAULT_TIMEOUT_MS

USER_AGENT = f"safecharge-sdk/{__version__}"

# Sent with every dispatched request, independent of the request kind.
REQUEST_HEADERS: dict[str, str] = {
    "Content-Type": "application/json; charset=utf-8",
}


def create_http_client(*, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> httpx.Client:
    """Create the client shared by every dispatch.

    The API only speaks JSON, so replies are requested as JSON and the
    SDK identifies itself in the user agent.

    Args:
        timeout_ms: Connect/read/write/pool timeout in milliseconds.

    Returns:
        Configured httpx.Client instance. Safe to share between threads.
    """
    return httpx.Client(
        timeout=httpx.Timeout(timeout_ms / 1000),
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )
