"""
Shared pytest configuration for the cnotes test suite.

This file centralizes reusable testing utilities so that:
    • client tests talk to an in-memory fake service, never the network
    • CLI tests drive the real Typer app against that same fake
    • every test can inspect the exact requests that were sent

The fake service is built on httpx.MockTransport and injected through the
client's `transport` parameter.
"""

import functools
import json
from typing import Any, List, Optional

import httpx
import pytest
from typer.testing import CliRunner

from cnotes.client import CollectedNotesClient

BASE_URL = "https://api.example.test"
TOKEN = "test-token"

SITE = {"id": 1, "name": "My Site", "site_path": "my-site"}
NOTE = {"id": 7, "title": "Hello", "body": "# Hello\n\nworld", "visibility": "public"}


# ============================================================================
# FAKE SERVICE
# ============================================================================


class FakeService:
    """
    Deterministic stand-in for the Collected Notes API.

    Every request is recorded in `.requests`. The next response is set with
    reply(); raise_error() makes the transport fail instead of answering.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status = 200
        self.content = b""
        self.content_type = "application/json"
        self.error: Optional[Exception] = None

    def reply(
        self,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        content_type: str = "application/json",
    ) -> None:
        self.status = status
        self.content_type = content_type
        if text is not None:
            self.content = text.encode("utf-8")
        elif json_body is not None:
            self.content = json.dumps(json_body).encode("utf-8")
        else:
            self.content = b""

    def raise_error(self, error: Exception) -> None:
        self.error = error

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status,
            content=self.content,
            headers={"Content-Type": self.content_type},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def fake_service() -> FakeService:
    return FakeService()


@pytest.fixture
def site_json() -> dict:
    """A site record as the service returns it."""
    return dict(SITE)


@pytest.fixture
def note_json() -> dict:
    """A note record as the service returns it."""
    return dict(NOTE)


@pytest.fixture
def client(fake_service: FakeService) -> CollectedNotesClient:
    """A client wired to the fake service."""
    return CollectedNotesClient(BASE_URL, TOKEN, transport=fake_service.transport)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """
    Point ~ at an empty temporary directory and clear the token env var,
    so no real credentials leak into a test.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("COLLECTED_NOTES_TOKEN", raising=False)
    return tmp_path


@pytest.fixture
def cli_service(fake_service: FakeService, isolated_home, monkeypatch) -> FakeService:
    """
    Route every client the CLI builds to the fake service.

    Token resolution and settings handling still run for real; only the
    transport is swapped.
    """
    import cnotes.cli.app as app_module

    monkeypatch.setattr(
        app_module,
        "CollectedNotesClient",
        functools.partial(CollectedNotesClient, transport=fake_service.transport),
    )
    return fake_service
