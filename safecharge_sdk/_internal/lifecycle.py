"""One-time installation of the shared transport.

The first configuration wins: once a transport is installed, later
initialization calls keep it and only emit a debug notice.
"""

import logging
import threading
from collections.abc import Callable

import httpx

from safecharge_sdk._internal.http import create_http_client
from safecharge_sdk._internal.transport import HttpxTransport, Transport
from safecharge_sdk.config import SafechargeConfig

logger = logging.getLogger(__name__)


def create_default_transport(config: SafechargeConfig | None = None) -> Transport:
    """Create the transport used when no client is supplied.

    Without a config, SAFECHARGE_TIMEOUT_MS is read from the environment.
    """
    config = config or SafechargeConfig.from_env()
    return HttpxTransport(create_http_client(timeout_ms=config.timeout_ms))


class LifecycleGuard:
    """Holds the transport shared by every dispatch.

    Installation is guarded by a lock so concurrent first calls agree on one
    transport and the factory runs at most once. After that, reads are
    lock-free.
    """

    def __init__(self, factory: Callable[[], Transport] = create_default_transport) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._transport: Transport | None = None

    @property
    def initialized(self) -> bool:
        """Check if a transport has been installed."""
        return self._transport is not None

    @property
    def transport(self) -> Transport | None:
        """The installed transport, or None before initialization."""
        return self._transport

    def ensure_initialized(
        self,
        client: httpx.Client | Transport | None = None,
        *,
        factory: Callable[[], Transport] | None = None,
    ) -> Transport:
        """Install a transport unless one is already installed.

        Args:
            client: An ``httpx.Client`` (wrapped in HttpxTransport) or any
                Transport. If None, a default transport is installed.
            factory: Builds the default transport instead of the guard's own
                factory. Ignored once a transport is installed.

        Returns:
            The installed transport, which is the first one ever supplied.
        """
        transport = self._transport
        if transport is not None:
            if client is not None:
                logger.debug("Transport is already initialized, ignoring %r", client)
            return transport

        with self._lock:
            if self._transport is None:
                if client is None:
                    self._transport = (factory or self._factory)()
                elif isinstance(client, httpx.Client):
                    self._transport = HttpxTransport(client)
                else:
                    self._transport = client
            elif client is not None:
                logger.debug("Transport is already initialized, ignoring %r", client)
            return self._transport


_default_guard = LifecycleGuard()


def get_default_guard() -> LifecycleGuard:
    """Return the process-wide guard used by executors without their own."""
    return _default_guard
