"""Shared fixtures: stub transports and isolated lifecycle guards."""

import json
from collections.abc import Mapping

import pytest

from safecharge_sdk._internal.lifecycle import LifecycleGuard

HOST = "http://dummy:1234/ppp/"


class StubTransport:
    """Transport returning a fixed reply (or raising) and recording calls."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str, dict[str, str]]] = []

    def send(self, body: str, url: str, headers: Mapping[str, str]) -> str:
        self.calls.append((body, url, dict(headers)))
        if self.error is not None:
            raise self.error
        return self.reply


class EchoTransport:
    """Transport replying with the request body itself."""

    def send(self, body: str, url: str, headers: Mapping[str, str]) -> str:
        return body


class TokenEchoTransport:
    """Transport replying SUCCESS with the request's clientRequestId as session token."""

    def send(self, body: str, url: str, headers: Mapping[str, str]) -> str:
        client_request_id = json.loads(body)["clientRequestId"]
        return json.dumps({
            "status": "SUCCESS",
            "clientRequestId": client_request_id,
            "sessionToken": f"token-{client_request_id}",
        })


@pytest.fixture
def host() -> str:
    return HOST


@pytest.fixture
def make_stub():
    """Factory for StubTransport instances."""
    return StubTransport


@pytest.fixture
def echo_transport() -> EchoTransport:
    return EchoTransport()


@pytest.fixture
def token_echo_transport() -> TokenEchoTransport:
    return TokenEchoTransport()


@pytest.fixture
def make_guard():
    """Factory for guards with a transport already installed."""

    def _make_guard(transport) -> LifecycleGuard:
        guard = LifecycleGuard(factory=lambda: pytest.fail("factory should not be called"))
        guard.ensure_initialized(transport)
        return guard

    return _make_guard
