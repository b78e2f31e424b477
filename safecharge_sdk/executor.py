"""Request executor: the single dispatch path for SafeCharge API requests.

Example:
    from safecharge_sdk import RequestExecutor
    from safecharge_sdk.models import GetSessionTokenRequest

    executor = RequestExecutor(server_host="https://ppp-test.safecharge.com/ppp/")
    response = executor.execute(GetSessionTokenRequest(merchant_id="...", merchant_site_id="..."))
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

import httpx
from pydantic import ValidationError

from safecharge_sdk._internal.http import REQUEST_HEADERS
from safecharge_sdk._internal.lifecycle import (
    LifecycleGuard,
    create_default_transport,
    get_default_guard,
)
from safecharge_sdk._internal.redaction import redact_json
from safecharge_sdk._internal.transport import Transport
from safecharge_sdk.config import SafechargeConfig
from safecharge_sdk.exceptions import (
    SafechargeConfigError,
    SafechargeTransportError,
    SafechargeValidationError,
)
from safecharge_sdk.models.base import SafechargeRequest, SafechargeResponse
from safecharge_sdk.models.kinds import RequestKind
from safecharge_sdk.registry import EndpointEntry, kind_of, resolve_entry


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatch.

    ``response`` is None either when the transport failed (``error`` is set)
    or when the server replied with an empty body.
    """

    response: SafechargeResponse | None = None
    error: SafechargeTransportError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def transport_failed(self) -> bool:
        return self.error is not None


class RequestExecutor:
    """Executes SafeCharge requests over a shared transport.

    The executor holds no per-call state, so one instance can be used from
    many threads at once. The transport comes from a LifecycleGuard; unless
    one is passed in, the process-wide guard is used.
    """

    def __init__(
        self,
        *,
        guard: LifecycleGuard | None = None,
        server_host: str | None = None,
        headers: Mapping[str, str] | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        transport_factory: Callable[[], Transport] | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            guard: Guard holding the shared transport. Defaults to the
                process-wide guard.
            server_host: Host used for requests whose ``server_host`` is unset.
            headers: Headers sent with every request. Defaults to REQUEST_HEADERS.
            logger: Logger receiving debug traces of sent and received bodies.
            transport_factory: Builds the transport if this executor is the
                first to dispatch. Defaults to the guard's own factory.
        """
        self._guard = guard or get_default_guard()
        self._server_host = server_host
        self._headers = dict(headers if headers is not None else REQUEST_HEADERS)
        self._logger = logger or logging.getLogger(__name__)
        self._transport_factory = transport_factory

    @classmethod
    def from_env(cls) -> "RequestExecutor":
        """Create an executor using SAFECHARGE_* environment variables.

        See ``SafechargeConfig.from_env`` for the variables read.
        """
        return cls.from_config(SafechargeConfig.from_env())

    @classmethod
    def from_config(cls, config: SafechargeConfig) -> "RequestExecutor":
        """Create an executor from a SafechargeConfig.

        ``config.timeout_ms`` applies to the shared transport only if no
        transport has been installed when this executor first dispatches.
        """
        return cls(
            server_host=config.server_host,
            transport_factory=partial(create_default_transport, config),
        )

    @property
    def guard(self) -> LifecycleGuard:
        return self._guard

    def init(self, client: httpx.Client | Transport | None = None) -> Transport:
        """Install the shared transport. Only the first call has an effect."""
        return self._guard.ensure_initialized(client, factory=self._transport_factory)

    def _log_debug(self, message: str, *args: object) -> None:
        self._logger.debug(message, *args)

    def execute(self, request: SafechargeRequest) -> SafechargeResponse | None:
        """Send a request and return its typed response.

        Args:
            request: A request of a registered kind.

        Returns:
            The decoded response, or None if the transport failed or the
            server replied with an empty body.

        Raises:
            UnregisteredRequestError: If the request kind has no endpoint.
            SafechargeConfigError: If no server host is available.
            SafechargeValidationError: If the reply cannot be decoded.
        """
        return self.execute_with_result(request).response

    def execute_with_result(self, request: SafechargeRequest) -> DispatchResult:
        """Send a request and report whether the transport failed.

        Same as ``execute`` but transport failures are returned in
        ``DispatchResult.error`` instead of collapsing to None.
        """
        transport = self._guard.ensure_initialized(factory=self._transport_factory)

        entry = resolve_entry(kind_of(request))
        url = self._build_url(request, entry)
        request.server_host = None

        body = request.model_dump_json(by_alias=True, exclude_none=True)

        try:
            reply = self._send(transport, body, url, self._headers, entry)
        except SafechargeTransportError as e:
            self._log_debug("%s failed: %s", entry.request_kind, e)
            return DispatchResult(error=e)

        if not reply.strip():
            return DispatchResult()
        return DispatchResult(response=self._decode(reply, entry))

    def execute_json(
        self,
        body: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        request_kind: RequestKind | None = None,
    ) -> str:
        """POST a prebuilt JSON body and return the raw reply body.

        Args:
            body: Serialized request.
            url: Full service URL.
            headers: Headers to send. Defaults to the executor's headers.
            request_kind: Kind used to label debug traces, if known.

        Raises:
            SafechargeTransportError: If the request cannot be sent or read.
        """
        transport = self._guard.ensure_initialized(factory=self._transport_factory)
        entry = resolve_entry(request_kind) if request_kind is not None else None
        return self._send(
            transport, body, url, self._headers if headers is None else headers, entry
        )

    def _build_url(self, request: SafechargeRequest, entry: EndpointEntry) -> str:
        host = request.server_host or self._server_host
        if not host:
            raise SafechargeConfigError(
                f"No server host set for {entry.request_kind} request"
            )
        return host + entry.path

    def _send(
        self,
        transport: Transport,
        body: str,
        url: str,
        headers: Mapping[str, str],
        entry: EndpointEntry | None,
    ) -> str:
        debug = self._logger.isEnabledFor(logging.DEBUG)
        if debug:
            label = entry.request_kind if entry else "Request"
            self._log_debug("%s sent to %s: %s", label, url, redact_json(body))

        try:
            reply = transport.send(body, url, headers)
        except OSError as e:
            raise SafechargeTransportError(f"POST {url} failed: {e}", url=url) from e

        if debug:
            label = entry.response_model.__name__ if entry else "Response"
            self._log_debug("%s received: %s", label, redact_json(reply))
        return reply

    def _decode(self, reply: str, entry: EndpointEntry) -> SafechargeResponse:
        try:
            return entry.response_model.model_validate_json(reply)
        except ValidationError as e:
            raise SafechargeValidationError(
                f"Could not decode {entry.response_model.__name__} "
                f"for {entry.request_kind}: {e}"
            ) from e


def get_request_executor() -> RequestExecutor:
    """Get a request executor configured from environment variables.

    Every executor returned here shares the process-wide transport.

    Returns:
        A configured RequestExecutor instance.
    """
    return RequestExecutor.from_env()
