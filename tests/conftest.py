"""Shared fixtures for the API tests."""

from collections.abc import AsyncIterator, Callable, Iterator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from waitlist_api.config import Settings, get_settings
from waitlist_api.main import app
from waitlist_api.resend import get_resend_client

RESEND_ENV_VARS = (
    "RESEND_API_KEY",
    "RESEND_AUDIENCE_ID",
    "WAITLIST_API_RESEND_API_KEY",
    "WAITLIST_API_RESEND_AUDIENCE_ID",
)

Handler = Callable[[httpx.Request], httpx.Response]


class ResendStub:
    """Record outbound Resend calls and answer them with canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.contacts: Handler = lambda request: httpx.Response(200, json={"object": "contact", "id": "c-1"})
        self.emails: Handler = lambda request: httpx.Response(200, json={"id": "e-1"})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/contacts"):
            return self.contacts(request)
        if request.url.path == "/emails":
            return self.emails(request)
        return httpx.Response(404, json={"message": "not found"})

    def calls_to(self, suffix: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.path.endswith(suffix)]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # A developer .env at the project root must not leak credentials into tests
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    for name in RESEND_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def resend_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESEND_API_KEY", "re_test_key")
    monkeypatch.setenv("RESEND_AUDIENCE_ID", "aud-123")
    get_settings.cache_clear()


@pytest.fixture()
def resend_stub() -> Iterator[ResendStub]:
    stub = ResendStub()

    async def override() -> AsyncIterator[httpx.AsyncClient]:
        transport = httpx.MockTransport(stub)
        async with httpx.AsyncClient(transport=transport, base_url="https://api.resend.test") as client:
            yield client

    app.dependency_overrides[get_resend_client] = override
    yield stub
    app.dependency_overrides.pop(get_resend_client, None)


@pytest_asyncio.fixture()
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
