"""Transport used by the request executor to POST serialized requests."""

import logging
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import httpx

from safecharge_sdk.exceptions import SafechargeTransportError

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Sends a serialized body and returns the raw reply body.

    Implementations raise ``SafechargeTransportError`` when the connection
    cannot be established or the reply cannot be read. Builtin ``OSError``
    subclasses such as ``ConnectionRefusedError`` are treated the same way. A single instance is
    shared by every thread that dispatches requests.
    """

    def send(self, body: str, url: str, headers: Mapping[str, str]) -> str: ...


class HttpxTransport:
    """Transport backed by a shared ``httpx.Client``."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """The underlying HTTP client."""
        return self._client

    def send(self, body: str, url: str, headers: Mapping[str, str]) -> str:
        """POST ``body`` to ``url`` and return the reply body as text.

        The reply is returned whatever its status code; decoding it is up to
        the caller.

        Raises:
            SafechargeTransportError: On connect, timeout or read failures.
        """
        try:
            response = self._client.post(url, content=body.encode("utf-8"), headers=dict(headers))
        except (httpx.TransportError, httpx.StreamError) as e:
            raise SafechargeTransportError(f"POST {url} failed: {e}", url=url) from e

        if response.status_code >= 400:
            logger.debug("POST %s returned status %s", url, response.status_code)
        return response.text
