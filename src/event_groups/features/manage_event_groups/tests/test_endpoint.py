import pytest

from src.conftest import create_event, create_event_group, create_guest_list
from src.event_groups.urls import (
    EVENT_GROUP_GUEST_LIST_URL,
    EVENT_GROUP_GUEST_LISTS_URL,
    EVENT_GROUP_URL,
    EVENT_GROUPS_URL,
)
from src.events.urls import EVENT_URL


@pytest.mark.asyncio
async def test_create_update_and_list_groups(host_client, other_host_client):
    group = await create_event_group(host_client)
    await create_event_group(other_host_client, title="Not mine")

    updated = await host_client.put(
        EVENT_GROUP_URL.format(group_id=group["id"]), json={"description": "Three days"}
    )
    listed = await host_client.get(EVENT_GROUPS_URL)

    assert updated.status_code == 200
    assert updated.json()["title"] == "Wedding weekend"
    assert updated.json()["description"] == "Three days"
    assert [row["id"] for row in listed.json()] == [group["id"]]


@pytest.mark.asyncio
async def test_title_cannot_be_cleared(host_client):
    group = await create_event_group(host_client)

    response = await host_client.put(EVENT_GROUP_URL.format(group_id=group["id"]), json={"title": None})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_foreign_group_is_not_found(host_client, other_host_client):
    group = await create_event_group(host_client)

    response = await other_host_client.delete(EVENT_GROUP_URL.format(group_id=group["id"]))

    assert response.status_code == 404
    assert response.json() == {"error": "Event group not found"}


@pytest.mark.asyncio
async def test_deleting_group_keeps_its_events(host_client):
    group = await create_event_group(host_client)
    event = (await create_event(host_client, groupId=group["id"]))["event"]
    assert event["groupId"] == group["id"]

    response = await host_client.delete(EVENT_GROUP_URL.format(group_id=group["id"]))

    assert response.json()["message"] == "Event group deleted successfully"
    stored = await host_client.get(EVENT_URL.format(event_id=event["id"]))
    assert stored.status_code == 200
    assert stored.json()["groupId"] is None


@pytest.mark.asyncio
async def test_link_and_unlink_guest_lists(host_client):
    group = await create_event_group(host_client)
    guest_list = await create_guest_list(host_client, [])
    links_url = EVENT_GROUP_GUEST_LISTS_URL.format(group_id=group["id"])

    first = await host_client.post(links_url, json={"guestListId": guest_list["id"]})
    again = await host_client.post(links_url, json={"guestListId": guest_list["id"]})
    listed = await host_client.get(links_url)

    assert first.status_code == 201
    assert again.json()["id"] == first.json()["id"]
    assert [link["guestListId"] for link in listed.json()] == [guest_list["id"]]

    removed = await host_client.delete(
        EVENT_GROUP_GUEST_LIST_URL.format(group_id=group["id"], guest_list_id=guest_list["id"])
    )
    assert removed.json()["message"] == "Guest list removed from event group"
    assert (await host_client.get(links_url)).json() == []


@pytest.mark.asyncio
async def test_cannot_link_another_hosts_guest_list(host_client, other_host_client):
    group = await create_event_group(host_client)
    foreign_list = await create_guest_list(other_host_client, [])

    response = await host_client.post(
        EVENT_GROUP_GUEST_LISTS_URL.format(group_id=group["id"]),
        json={"guestListId": foreign_list["id"]},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Guest list not found"}
