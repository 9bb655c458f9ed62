import contextlib
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from src.accounts.urls import SIGNUP_URL
from src.config.database import engine
from src.email_service import EmailServiceBase, get_email_service
from src.main import app
from src.models.tables import BaseModel

HOST_PASSWORD = "correct horse battery staple"


@dataclass(frozen=True)
class SentEmail:
    to_address: str
    subject: str
    html_body: str
    text_body: str


class InMemoryEmailService(EmailServiceBase):
    """Records rendered emails instead of delivering them."""

    def __init__(self) -> None:
        self.sent: list[SentEmail] = []
        self.failing_addresses: set[str] = set()

    async def _send(self, to_address: str, subject: str, html_body: str, text_body: str) -> None:
        if to_address in self.failing_addresses:
            raise ConnectionError(f"Mailbox {to_address} unavailable")
        self.sent.append(SentEmail(to_address, subject, html_body, text_body))

    @property
    def recipients(self) -> list[str]:
        return [email.to_address for email in self.sent]


@pytest.fixture(autouse=True)
async def database():
    """Fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)
        await conn.run_sync(BaseModel.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)


@pytest.fixture
def email_service() -> InMemoryEmailService:
    return InMemoryEmailService()


@pytest.fixture
def client_factory(email_service):
    """Build clients against the app with the given dependency overrides.

    Emails always go to the in-memory ``email_service``.
    """

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides[get_email_service] = lambda: email_service
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    yield factory
    app.dependency_overrides.clear()


@pytest.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac


async def _sign_up(client: AsyncClient, email: str) -> dict:
    response = await client.post(SIGNUP_URL, json={"email": email, "password": HOST_PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()["user"]


@pytest.fixture
async def host_client(client_factory):
    """Client signed in as host@example.com."""
    async with client_factory() as ac:
        await _sign_up(ac, "host@example.com")
        yield ac


@pytest.fixture
async def other_host_client(client_factory):
    """Client signed in as a second, unrelated host."""
    async with client_factory() as ac:
        await _sign_up(ac, "other-host@example.com")
        yield ac


def _iso_from_now(**delta) -> str:
    return (datetime.now(UTC) + timedelta(**delta)).strftime("%Y-%m-%dT%H:%M:%SZ")


# Always in the future, so polls created with it stay open
EVENT_START = _iso_from_now(days=60)
POLL_END = _iso_from_now(days=30)


async def create_event(client: AsyncClient, guests: list[dict] | None = None, **fields) -> dict:
    """Create an event through the API; returns ``{"event": ..., "invitations": [...]}``."""
    payload = {"title": "Summer party", "startDateTime": EVENT_START, **fields}
    if guests is not None:
        payload["guests"] = guests
    response = await client.post("/api/events", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


async def create_guest_list(client: AsyncClient, members: list[dict], name: str = "Friends") -> dict:
    """Create a guest list and add ``members`` to it; returns the list."""
    response = await client.post("/api/guest-lists", json={"name": name})
    assert response.status_code == 201, response.text
    guest_list = response.json()
    for member in members:
        added = await client.post(f"/api/guest-lists/{guest_list['id']}/members", json=member)
        assert added.status_code == 201, added.text
    return guest_list


async def create_event_group(client: AsyncClient, title: str = "Wedding weekend") -> dict:
    response = await client.post("/api/event-groups", json={"title": title})
    assert response.status_code == 201, response.text
    return response.json()


async def create_poll(client: AsyncClient, options: list[str] | None = None, **fields) -> dict:
    """Create a poll through the API; three date options unless given."""
    payload = {
        "title": "When shall we meet?",
        "options": options or ["Friday", "Saturday", "Sunday"],
        "endDate": POLL_END,
        **fields,
    }
    response = await client.post("/api/polls", json=payload)
    assert response.status_code == 200, response.text
    return response.json()
