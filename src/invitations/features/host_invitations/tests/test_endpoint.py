import pytest

from src.conftest import create_event
from src.invitations.urls import (
    ADD_INVITATIONS_URL,
    EVENT_INVITATIONS_URL,
    INVITATION_RSVP_URL,
    RESEND_INVITATION_URL,
    RESEND_INVITATIONS_URL,
)


@pytest.fixture
async def party(host_client):
    return await create_event(
        host_client,
        guests=[
            {"name": "Ann", "email": "ann@example.com"},
            {"name": "Bob", "email": "bob@example.com"},
        ],
    )


@pytest.mark.asyncio
async def test_create_single_invitation_sends_no_email(host_client, email_service):
    created = await create_event(host_client)
    url = EVENT_INVITATIONS_URL.format(event_id=created["event"]["id"])

    response = await host_client.post(url, json={"name": "Cy", "phone": "+32 470 00 00 00"})

    assert response.status_code == 200
    invitation = response.json()
    assert invitation["name"] == "Cy"
    assert invitation["phone"] == "+32 470 00 00 00"
    assert invitation["email"] is None
    assert invitation["rsvpStatus"] == "pending"
    assert len(invitation["token"]) >= 40
    assert email_service.sent == []


@pytest.mark.asyncio
async def test_every_invitation_gets_its_own_token(host_client, party):
    url = EVENT_INVITATIONS_URL.format(event_id=party["event"]["id"])
    await host_client.post(url, json={"email": "ann@example.com"})

    response = await host_client.get(url)

    assert response.status_code == 200
    tokens = [invitation["token"] for invitation in response.json()]
    assert len(tokens) == 3
    assert len(set(tokens)) == 3


@pytest.mark.asyncio
async def test_invitations_of_foreign_event(other_host_client, party):
    url = EVENT_INVITATIONS_URL.format(event_id=party["event"]["id"])

    listed = await other_host_client.get(url)
    created = await other_host_client.post(url, json={"email": "x@example.com"})

    assert listed.status_code == 403
    assert created.status_code == 403


@pytest.mark.asyncio
async def test_add_invitations_skips_already_invited_emails(host_client, party, email_service):
    email_service.sent.clear()
    url = ADD_INVITATIONS_URL.format(event_id=party["event"]["id"])

    response = await host_client.post(
        url,
        json={
            "guests": [
                {"email": "ann@example.com"},
                {"name": "Cy", "email": "cy@example.com"},
                {"email": "cy@example.com"},
                {"name": "No email"},
            ]
        },
    )

    assert response.status_code == 200
    added = response.json()["invitations"]
    assert [invitation["email"] for invitation in added] == ["cy@example.com"]
    assert email_service.recipients == ["cy@example.com"]


@pytest.mark.asyncio
async def test_add_invitations_requires_guests(host_client, party):
    url = ADD_INVITATIONS_URL.format(event_id=party["event"]["id"])

    response = await host_client.post(url, json={"guests": []})

    assert response.status_code == 400
    assert response.json() == {"error": "Guest information is required"}


@pytest.mark.asyncio
async def test_resend_targets_pending_invitations_only(host_client, client, party, email_service):
    ann, _bob = party["invitations"]
    await client.post(INVITATION_RSVP_URL.format(token=ann["token"]), json={"rsvpStatus": "yes"})
    email_service.sent.clear()

    response = await host_client.post(
        RESEND_INVITATIONS_URL.format(event_id=party["event"]["id"])
    )

    assert response.status_code == 200
    assert response.json()["message"] == "1 pending invitations resent successfully"
    assert email_service.recipients == ["bob@example.com"]


@pytest.mark.asyncio
async def test_resend_counts_only_delivered_emails(host_client, party, email_service):
    email_service.sent.clear()
    email_service.failing_addresses.add("ann@example.com")

    response = await host_client.post(
        RESEND_INVITATIONS_URL.format(event_id=party["event"]["id"])
    )

    assert response.status_code == 200
    assert response.json()["message"] == "1 pending invitations resent successfully"
    assert email_service.recipients == ["bob@example.com"]


@pytest.mark.asyncio
async def test_resend_single_invitation(host_client, party, email_service):
    email_service.sent.clear()
    ann = party["invitations"][0]

    response = await host_client.post(RESEND_INVITATION_URL.format(invitation_id=ann["id"]))

    assert response.status_code == 200
    assert response.json()["message"] == "Invitation resent successfully"
    assert email_service.recipients == ["ann@example.com"]
    assert ann["token"] in email_service.sent[0].html_body


@pytest.mark.asyncio
async def test_resend_single_invitation_without_email(host_client):
    created = await create_event(host_client)
    invitation = (
        await host_client.post(
            EVENT_INVITATIONS_URL.format(event_id=created["event"]["id"]), json={"name": "Cy"}
        )
    ).json()

    response = await host_client.post(RESEND_INVITATION_URL.format(invitation_id=invitation["id"]))

    assert response.status_code == 400
    assert response.json() == {"error": "No email address for this invitation"}


@pytest.mark.asyncio
async def test_resend_single_invitation_delivery_failure(host_client, party, email_service):
    email_service.failing_addresses.add("ann@example.com")

    response = await host_client.post(
        RESEND_INVITATION_URL.format(invitation_id=party["invitations"][0]["id"])
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to send email"}


@pytest.mark.asyncio
async def test_resend_single_invitation_of_foreign_event(other_host_client, party):
    response = await other_host_client.post(
        RESEND_INVITATION_URL.format(invitation_id=party["invitations"][0]["id"])
    )

    assert response.status_code == 403
