import pytest

from src.conftest import create_event
from src.events.urls import EVENT_MESSAGES_URL
from src.invitations.urls import BLOCK_GUEST_URL


@pytest.fixture
async def party(host_client):
    return await create_event(host_client, guests=[{"name": "Ann", "email": "ann@example.com"}])


@pytest.mark.asyncio
async def test_host_and_guest_share_the_chat(host_client, client, party):
    event_id = party["event"]["id"]
    invitation = party["invitations"][0]
    url = EVENT_MESSAGES_URL.format(event_id=event_id)

    host_post = await host_client.post(url, json={"message": "  Welcome!  "})
    guest_post = await client.post(url, json={"message": "Thanks", "token": invitation["token"]})

    assert host_post.status_code == 200
    assert host_post.json()["message"] == "Welcome!"
    assert host_post.json()["senderType"] == "host"
    assert guest_post.status_code == 200
    assert guest_post.json()["senderType"] == "guest"
    assert guest_post.json()["senderId"] == invitation["id"]

    as_guest = await client.get(url, params={"token": invitation["token"]})
    as_host = await host_client.get(url)
    assert as_guest.status_code == 200
    assert [message["message"] for message in as_guest.json()] == ["Welcome!", "Thanks"]
    assert as_host.json() == as_guest.json()


@pytest.mark.asyncio
async def test_message_is_required(host_client, party):
    url = EVENT_MESSAGES_URL.format(event_id=party["event"]["id"])

    response = await host_client.post(url, json={"message": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}


@pytest.mark.asyncio
async def test_token_of_another_event_is_denied(host_client, client, party):
    other = await create_event(host_client, guests=[{"email": "bob@example.com"}])
    url = EVENT_MESSAGES_URL.format(event_id=party["event"]["id"])
    foreign_token = other["invitations"][0]["token"]

    read = await client.get(url, params={"token": foreign_token})
    write = await client.post(url, json={"message": "hi", "token": foreign_token})

    assert read.status_code == 403
    assert write.status_code == 403


@pytest.mark.asyncio
async def test_chat_without_token_or_session(client, party):
    response = await client.get(EVENT_MESSAGES_URL.format(event_id=party["event"]["id"]))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_foreign_host_cannot_read_chat(other_host_client, party):
    response = await other_host_client.get(EVENT_MESSAGES_URL.format(event_id=party["event"]["id"]))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_blocked_guest_cannot_post(host_client, client, party):
    event_id = party["event"]["id"]
    invitation = party["invitations"][0]
    await host_client.put(
        BLOCK_GUEST_URL.format(event_id=event_id, invitation_id=invitation["id"]),
        json={"blocked": True},
    )

    response = await client.post(
        EVENT_MESSAGES_URL.format(event_id=event_id),
        json={"message": "hello?", "token": invitation["token"]},
    )

    assert response.status_code == 403
    history = await client.get(
        EVENT_MESSAGES_URL.format(event_id=event_id), params={"token": invitation["token"]}
    )
    assert history.json() == []
