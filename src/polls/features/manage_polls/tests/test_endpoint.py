import pytest

from src.conftest import POLL_END, create_guest_list, create_poll
from src.polls.urls import END_POLL_URL, POLL_URL, POLL_VOTE_URL, POLLS_URL


@pytest.mark.asyncio
async def test_create_poll_trims_options(host_client):
    poll = await create_poll(host_client, options=[" Friday ", "", "Saturday", "   "])

    assert poll["options"] == ["Friday", "Saturday"]
    assert poll["status"] == "active"
    assert poll["allowMultipleChoices"] is False
    assert poll["convertedEventId"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("options", [[], ["Only one"], ["One", "  "]])
async def test_poll_needs_two_options(host_client, options):
    response = await host_client.post(
        POLLS_URL, json={"title": "Q", "options": options, "endDate": POLL_END}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "A poll needs at least 2 options"}


@pytest.mark.asyncio
async def test_create_poll_requires_a_host(client):
    response = await client.post(
        POLLS_URL, json={"title": "Q", "options": ["a", "b"], "endDate": POLL_END}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_polls_newest_first(host_client, other_host_client):
    await create_poll(host_client, title="First")
    await create_poll(host_client, title="Second")
    await create_poll(other_host_client, title="Not mine")

    response = await host_client.get(POLLS_URL)

    assert [poll["title"] for poll in response.json()] == ["Second", "First"]


@pytest.mark.asyncio
async def test_results_are_public_and_tallied(host_client, client):
    poll = await create_poll(host_client, options=["A", "B", "C"], allowMultipleChoices=True)
    vote_url = POLL_VOTE_URL.format(poll_id=poll["id"])
    await client.post(vote_url, json={"selectedOptions": ["0", "1"], "voterEmail": "a@x.com"})
    await client.post(vote_url, json={"selectedOptions": ["0"], "voterEmail": "b@x.com"})
    await client.post(vote_url, json={"selectedOptions": ["1"], "voterEmail": "c@x.com"})

    response = await client.get(POLL_URL.format(poll_id=poll["id"]))

    assert response.status_code == 200
    assert response.json()["voteCounts"] == [2, 2, 0]
    assert response.json()["totalVotes"] == 3


@pytest.mark.asyncio
async def test_results_of_unknown_poll(client):
    response = await client.get(POLL_URL.format(poll_id="00000000-0000-0000-0000-000000000000"))

    assert response.status_code == 404
    assert response.json() == {"error": "Poll not found"}


@pytest.mark.asyncio
async def test_expired_poll_reads_as_ended(host_client):
    poll = await create_poll(host_client, endDate="2020-01-01T00:00:00Z")

    response = await host_client.get(POLL_URL.format(poll_id=poll["id"]))

    assert poll["status"] == "ended"
    assert response.json()["status"] == "ended"


@pytest.mark.asyncio
async def test_update_poll_is_partial(host_client):
    poll = await create_poll(host_client)

    response = await host_client.put(
        POLL_URL.format(poll_id=poll["id"]), json={"description": "Pick one"}
    )

    assert response.status_code == 200
    assert response.json()["description"] == "Pick one"
    assert response.json()["options"] == poll["options"]


@pytest.mark.asyncio
async def test_update_poll_validates_options(host_client):
    poll = await create_poll(host_client)

    response = await host_client.put(POLL_URL.format(poll_id=poll["id"]), json={"options": ["x"]})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_other_host_cannot_change_poll(host_client, other_host_client):
    poll = await create_poll(host_client)
    url = POLL_URL.format(poll_id=poll["id"])

    updated = await other_host_client.put(url, json={"title": "Hijacked"})
    deleted = await other_host_client.delete(url)
    ended = await other_host_client.post(END_POLL_URL.format(poll_id=poll["id"]))

    assert updated.status_code == 403
    assert deleted.status_code == 403
    assert ended.status_code == 403


@pytest.mark.asyncio
async def test_delete_poll(host_client):
    poll = await create_poll(host_client)
    url = POLL_URL.format(poll_id=poll["id"])

    response = await host_client.delete(url)

    assert response.json()["message"] == "Poll deleted successfully"
    assert (await host_client.get(url)).status_code == 404


@pytest.mark.asyncio
async def test_end_poll_is_idempotent(host_client, client):
    poll = await create_poll(host_client)
    url = END_POLL_URL.format(poll_id=poll["id"])

    first = await host_client.post(url)
    second = await host_client.post(url)
    vote = await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]),
        json={"selectedOptions": ["0"], "voterEmail": "late@x.com"},
    )

    assert first.json()["status"] == "ended"
    assert second.status_code == 200
    assert second.json()["status"] == "ended"
    assert vote.status_code == 400
    assert vote.json() == {"error": "Poll is not active"}


@pytest.mark.asyncio
async def test_create_poll_emails_guest_lists_once_per_address(host_client, email_service):
    friends = await create_guest_list(
        host_client,
        [{"name": "Ann", "email": "ann@example.com"}, {"name": "Bob", "email": "bob@example.com"}],
    )
    family = await create_guest_list(
        host_client, [{"name": "Ann", "email": "ann@example.com"}], name="Family"
    )

    poll = await create_poll(
        host_client, sendEmail=True, notifyGuestListIds=[friends["id"], family["id"]]
    )

    assert sorted(email_service.recipients) == ["ann@example.com", "bob@example.com"]
    html = email_service.sent[0].html_body
    assert f"/api/polls/{poll['id']}/vote-email?option=0" in html


@pytest.mark.asyncio
async def test_poll_emails_skip_other_hosts_lists(host_client, other_host_client, email_service):
    foreign = await create_guest_list(
        other_host_client, [{"name": "Eve", "email": "eve@example.com"}]
    )

    await create_poll(host_client, sendEmail=True, notifyGuestListIds=[foreign["id"]])

    assert email_service.sent == []


@pytest.mark.asyncio
async def test_no_emails_without_send_email(host_client, email_service):
    friends = await create_guest_list(host_client, [{"name": "Ann", "email": "ann@example.com"}])

    await create_poll(host_client, notifyGuestListIds=[friends["id"]])

    assert email_service.sent == []
