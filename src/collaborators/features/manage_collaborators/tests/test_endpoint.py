import pytest

from src.accounts.urls import ME_URL
from src.collaborators.urls import (
    COLLABORATED_EVENTS_URL,
    EVENT_COLLABORATOR_URL,
    EVENT_COLLABORATORS_URL,
)
from src.conftest import create_event


@pytest.fixture
async def event(host_client):
    return (await create_event(host_client))["event"]


@pytest.fixture
async def other_user_id(other_host_client):
    return (await other_host_client.get(ME_URL)).json()["user"]["id"]


async def add_collaborator(host_client, event, user_id, **fields) -> dict:
    response = await host_client.post(
        EVENT_COLLABORATORS_URL.format(event_id=event["id"]), json={"userId": user_id, **fields}
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.mark.asyncio
async def test_add_collaborator_defaults(host_client, event, other_user_id):
    me = (await host_client.get(ME_URL)).json()["user"]

    collaborator = await add_collaborator(host_client, event, other_user_id)

    assert collaborator["userId"] == other_user_id
    assert collaborator["role"] == "collaborator"
    assert collaborator["permissions"] == []
    assert collaborator["status"] == "pending"
    assert collaborator["invitedBy"] == me["id"]


@pytest.mark.asyncio
async def test_add_unknown_user(host_client, event):
    response = await host_client.post(
        EVENT_COLLABORATORS_URL.format(event_id=event["id"]),
        json={"userId": "00000000-0000-0000-0000-000000000000"},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


@pytest.mark.asyncio
async def test_update_and_list_collaborators(host_client, event, other_user_id):
    collaborator = await add_collaborator(host_client, event, other_user_id)
    url = EVENT_COLLABORATOR_URL.format(event_id=event["id"], collaborator_id=collaborator["id"])

    response = await host_client.put(
        url, json={"role": "co-host", "permissions": ["manage_guests", "manage_event"]}
    )
    listed = await host_client.get(EVENT_COLLABORATORS_URL.format(event_id=event["id"]))

    assert response.status_code == 200
    assert response.json()["role"] == "co-host"
    assert response.json()["permissions"] == ["manage_guests", "manage_event"]
    assert response.json()["status"] == "pending"
    assert [row["id"] for row in listed.json()] == [collaborator["id"]]


@pytest.mark.asyncio
async def test_invalid_role_is_rejected(host_client, event, other_user_id):
    response = await host_client.post(
        EVENT_COLLABORATORS_URL.format(event_id=event["id"]),
        json={"userId": other_user_id, "role": "owner"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_remove_collaborator(host_client, event, other_user_id):
    collaborator = await add_collaborator(host_client, event, other_user_id)
    url = EVENT_COLLABORATOR_URL.format(event_id=event["id"], collaborator_id=collaborator["id"])

    removed = await host_client.delete(url)
    again = await host_client.delete(url)

    assert removed.json()["message"] == "Collaborator removed successfully"
    assert again.status_code == 404
    assert again.json() == {"error": "Collaborator not found"}


@pytest.mark.asyncio
async def test_only_the_owner_manages_collaborators(host_client, other_host_client, event, other_user_id):
    response = await other_host_client.post(
        EVENT_COLLABORATORS_URL.format(event_id=event["id"]), json={"userId": other_user_id}
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_collaborated_events_include_the_event(host_client, other_host_client, event, other_user_id):
    await add_collaborator(host_client, event, other_user_id, role="organizer")

    mine = await other_host_client.get(COLLABORATED_EVENTS_URL)
    owners = await host_client.get(COLLABORATED_EVENTS_URL)

    assert mine.status_code == 200
    assert len(mine.json()) == 1
    assert mine.json()[0]["role"] == "organizer"
    assert mine.json()[0]["event"]["id"] == event["id"]
    assert mine.json()[0]["event"]["title"] == event["title"]
    assert owners.json() == []


@pytest.mark.asyncio
async def test_collaborated_events_requires_sign_in(client):
    response = await client.get(COLLABORATED_EVENTS_URL)

    assert response.status_code == 401
