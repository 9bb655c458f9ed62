import pytest

from src.conftest import create_event
from src.events.urls import CANCEL_EVENT_URL, EVENT_URL
from src.invitations.urls import EVENT_INVITATIONS_URL, INVITATION_RSVP_URL


async def _answer(client, token: str, status: str) -> None:
    response = await client.post(INVITATION_RSVP_URL.format(token=token), json={"rsvpStatus": status})
    assert response.status_code == 200


@pytest.fixture
async def event_with_answers(host_client, client, email_service):
    """Ann and Bob said yes, Cy said no, one phone-only guest said yes."""
    created = await create_event(
        host_client,
        guests=[
            {"email": "ann@example.com"},
            {"email": "bob@example.com"},
            {"email": "cy@example.com"},
        ],
    )
    event_id = created["event"]["id"]
    ann, bob, cy = created["invitations"]
    phone_only = await host_client.post(
        EVENT_INVITATIONS_URL.format(event_id=event_id), json={"phone": "+15550100"}
    )

    await _answer(client, ann["token"], "yes")
    await _answer(client, bob["token"], "yes")
    await _answer(client, cy["token"], "no")
    await _answer(client, phone_only.json()["token"], "yes")
    email_service.sent.clear()
    return created["event"]


@pytest.mark.asyncio
async def test_cancel_emails_attending_guests(host_client, email_service, event_with_answers):
    event_id = event_with_answers["id"]

    response = await host_client.post(CANCEL_EVENT_URL.format(event_id=event_id))

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Event cancelled. 2 cancellation emails sent."
    assert data["event"]["status"] == "cancelled"
    assert sorted(email_service.recipients) == ["ann@example.com", "bob@example.com"]
    assert all(
        email.subject == "Event Cancelled: Summer party" for email in email_service.sent
    )


@pytest.mark.asyncio
async def test_cancel_is_durable_when_emails_fail(host_client, email_service, event_with_answers):
    event_id = event_with_answers["id"]
    email_service.failing_addresses.update({"ann@example.com", "bob@example.com"})

    response = await host_client.post(CANCEL_EVENT_URL.format(event_id=event_id))

    assert response.status_code == 200
    event = await host_client.get(EVENT_URL.format(event_id=event_id))
    assert event.json()["status"] == "cancelled"


@pytest.mark.asyncio
async def test_cancel_foreign_event(host_client, other_host_client, email_service, event_with_answers):
    event_id = event_with_answers["id"]

    response = await other_host_client.post(CANCEL_EVENT_URL.format(event_id=event_id))

    assert response.status_code == 403
    assert email_service.sent == []
    event = await host_client.get(EVENT_URL.format(event_id=event_id))
    assert event.json()["status"] == "upcoming"
