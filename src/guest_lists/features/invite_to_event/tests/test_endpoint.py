import pytest

from src.conftest import create_event, create_guest_list
from src.guest_lists.urls import INVITE_TO_EVENT_URL
from src.invitations.urls import EVENT_INVITATIONS_URL

MEMBERS = [
    {"name": "Ann", "email": "ann@example.com"},
    {"name": "Bob", "email": "bob@example.com", "phone": "555-0101"},
]


@pytest.mark.asyncio
async def test_invite_whole_list_to_event(host_client, email_service):
    guest_list = await create_guest_list(host_client, MEMBERS)
    event = (await create_event(host_client))["event"]

    response = await host_client.post(
        INVITE_TO_EVENT_URL.format(guest_list_id=guest_list["id"]), json={"eventId": event["id"]}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["invitationCount"] == 2
    assert [i["name"] for i in data["invitations"]] == ["Ann", "Bob"]
    assert data["invitations"][1]["phone"] == "555-0101"
    assert email_service.recipients == ["ann@example.com", "bob@example.com"]


@pytest.mark.asyncio
async def test_inviting_twice_issues_new_invitations(host_client):
    guest_list = await create_guest_list(host_client, MEMBERS)
    event = (await create_event(host_client))["event"]
    url = INVITE_TO_EVENT_URL.format(guest_list_id=guest_list["id"])

    await host_client.post(url, json={"eventId": event["id"]})
    await host_client.post(url, json={"eventId": event["id"]})

    invitations = await host_client.get(EVENT_INVITATIONS_URL.format(event_id=event["id"]))
    assert len(invitations.json()) == 4


@pytest.mark.asyncio
async def test_event_id_is_required(host_client):
    guest_list = await create_guest_list(host_client, MEMBERS)

    response = await host_client.post(
        INVITE_TO_EVENT_URL.format(guest_list_id=guest_list["id"]), json={}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Event ID is required"}


@pytest.mark.asyncio
async def test_cannot_invite_into_another_hosts_event(host_client, other_host_client):
    guest_list = await create_guest_list(host_client, MEMBERS)
    foreign_event = (await create_event(other_host_client))["event"]

    response = await host_client.post(
        INVITE_TO_EVENT_URL.format(guest_list_id=guest_list["id"]),
        json={"eventId": foreign_event["id"]},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Event not found"}


@pytest.mark.asyncio
async def test_cannot_invite_another_hosts_list(host_client, other_host_client):
    foreign_list = await create_guest_list(other_host_client, MEMBERS)
    event = (await create_event(host_client))["event"]

    response = await host_client.post(
        INVITE_TO_EVENT_URL.format(guest_list_id=foreign_list["id"]), json={"eventId": event["id"]}
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Guest list not found"}
