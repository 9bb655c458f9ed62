import pytest

from src.conftest import EVENT_START, create_event_group, create_poll
from src.events.urls import EVENT_URL
from src.polls.urls import CONVERT_POLL_URL, END_POLL_URL, POLL_URL, POLL_VOTE_URL

EVENT_DATA = {"startDateTime": EVENT_START, "location": "Town hall"}


@pytest.fixture
async def poll(host_client):
    return await create_poll(host_client, description="Pick a night")


@pytest.mark.asyncio
async def test_convert_creates_event_and_stamps_poll(host_client, poll):
    response = await host_client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]), json={"eventData": EVENT_DATA}
    )

    assert response.status_code == 200
    data = response.json()
    event = data["event"]
    assert event["title"] == poll["title"]
    assert event["description"] == "Pick a night"
    assert event["location"] == "Town hall"
    assert event["hostId"] == poll["hostId"]
    assert event["status"] == "upcoming"
    assert data["poll"]["status"] == "converted"
    assert data["poll"]["convertedEventId"] == event["id"]

    stored = await host_client.get(EVENT_URL.format(event_id=event["id"]))
    assert stored.status_code == 200
    assert (await host_client.get(POLL_URL.format(poll_id=poll["id"]))).json()["status"] == "converted"


@pytest.mark.asyncio
async def test_event_fields_override_poll_fields(host_client, poll):
    response = await host_client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]),
        json={"eventData": {**EVENT_DATA, "title": "Friday dinner"}},
    )

    assert response.json()["event"]["title"] == "Friday dinner"


@pytest.mark.asyncio
async def test_poll_converts_only_once(host_client, poll):
    url = CONVERT_POLL_URL.format(poll_id=poll["id"])

    await host_client.post(url, json={"eventData": EVENT_DATA})
    second = await host_client.post(url, json={"eventData": EVENT_DATA})
    ended = await host_client.post(END_POLL_URL.format(poll_id=poll["id"]))

    assert second.status_code == 400
    assert "already been converted" in second.json()["error"]
    assert ended.status_code == 400


@pytest.mark.asyncio
async def test_converted_poll_takes_no_votes(host_client, client, poll):
    await host_client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]), json={"eventData": EVENT_DATA}
    )

    response = await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]),
        json={"selectedOptions": ["0"], "voterEmail": "ann@x.com"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Poll is not active"}


@pytest.mark.asyncio
async def test_start_date_is_required(host_client, poll):
    response = await host_client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]), json={"eventData": {"location": "Home"}}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Start date and time is required"}
    assert (await host_client.get(POLL_URL.format(poll_id=poll["id"]))).json()["status"] == "active"


@pytest.mark.asyncio
async def test_only_the_owner_converts(other_host_client, poll):
    response = await other_host_client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]), json={"eventData": EVENT_DATA}
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_convert_into_own_group(host_client, poll):
    group = await create_event_group(host_client)

    response = await host_client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]),
        json={"eventData": {**EVENT_DATA, "groupId": group["id"]}},
    )

    assert response.status_code == 200
    assert response.json()["event"]["groupId"] == group["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("foreign", [False, True])
async def test_convert_rejects_unknown_or_foreign_group(host_client, other_host_client, poll, foreign):
    if foreign:
        group_id = (await create_event_group(other_host_client, title="Not mine"))["id"]
    else:
        group_id = "00000000-0000-0000-0000-000000000001"

    response = await host_client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]),
        json={"eventData": {**EVENT_DATA, "groupId": group_id}},
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Event group not found"}
    stored = (await host_client.get(POLL_URL.format(poll_id=poll["id"]))).json()
    assert stored["status"] == "active"
    assert stored["convertedEventId"] is None
