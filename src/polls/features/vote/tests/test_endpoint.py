import pytest

from src.conftest import EVENT_START, create_poll
from src.polls.urls import (
    CONVERT_POLL_URL,
    END_POLL_URL,
    POLL_EMAIL_VOTE_URL,
    POLL_URL,
    POLL_VOTE_URL,
)


@pytest.fixture
async def poll(host_client):
    return await create_poll(host_client)


async def results(client, poll) -> dict:
    return (await client.get(POLL_URL.format(poll_id=poll["id"]))).json()


@pytest.mark.asyncio
async def test_voting_again_replaces_the_ballot(client, poll):
    url = POLL_VOTE_URL.format(poll_id=poll["id"])

    first = await client.post(url, json={"selectedOptions": ["0"], "voterEmail": "ann@x.com"})
    second = await client.post(url, json={"selectedOptions": ["2"], "voterEmail": "ann@x.com"})

    assert first.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["selectedOptions"] == ["2"]
    tally = await results(client, poll)
    assert tally["voteCounts"] == [0, 0, 1]
    assert tally["totalVotes"] == 1


@pytest.mark.asyncio
async def test_signed_in_voter_is_identified_by_account(host_client, poll):
    url = POLL_VOTE_URL.format(poll_id=poll["id"])

    first = await host_client.post(url, json={"selectedOptions": ["1"]})
    second = await host_client.post(
        url, json={"selectedOptions": ["0"], "voterEmail": "ignored@x.com"}
    )

    assert first.status_code == 200
    assert first.json()["userId"] is not None
    assert first.json()["voterEmail"] == "host@example.com"
    assert second.json()["id"] == first.json()["id"]
    assert (await results(host_client, poll))["totalVotes"] == 1


@pytest.mark.asyncio
async def test_anonymous_vote_needs_an_email(client, poll):
    response = await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]), json={"selectedOptions": ["0"], "voterEmail": " "}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Voter email is required"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "selection, error",
    [
        ([], "Select at least one option"),
        (["3"], "Invalid option"),
        (["-1"], "Invalid option"),
        (["first"], "Invalid option"),
        (["0", "1"], "This poll allows only one choice"),
    ],
)
async def test_invalid_selections(client, poll, selection, error):
    response = await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]),
        json={"selectedOptions": selection, "voterEmail": "ann@x.com"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": error}


@pytest.mark.asyncio
async def test_multiple_choice_selection_is_deduplicated(host_client, client):
    poll = await create_poll(host_client, allowMultipleChoices=True)

    response = await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]),
        json={"selectedOptions": ["2", "0", "2"], "voterEmail": "ann@x.com"},
    )

    assert response.json()["selectedOptions"] == ["2", "0"]


@pytest.mark.asyncio
async def test_vote_after_end_date(host_client, client):
    poll = await create_poll(host_client, endDate="2020-01-01T00:00:00Z")

    response = await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]),
        json={"selectedOptions": ["0"], "voterEmail": "ann@x.com"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Poll has ended"}


async def end_poll(client, poll):
    response = await client.post(END_POLL_URL.format(poll_id=poll["id"]))
    assert response.status_code == 200, response.text


async def convert_poll(client, poll):
    response = await client.post(
        CONVERT_POLL_URL.format(poll_id=poll["id"]),
        json={"eventData": {"startDateTime": EVENT_START}},
    )
    assert response.status_code == 200, response.text


@pytest.mark.asyncio
@pytest.mark.parametrize("close_poll", [end_poll, convert_poll])
async def test_closed_poll_rejects_votes_before_its_end_date(host_client, client, poll, close_poll):
    await close_poll(host_client, poll)

    api_vote = await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]),
        json={"selectedOptions": ["0"], "voterEmail": "ann@x.com"},
    )
    email_vote = await client.get(
        POLL_EMAIL_VOTE_URL.format(poll_id=poll["id"]),
        params={"option": "0", "voterEmail": "ann@x.com"},
    )

    assert api_vote.status_code == 400
    assert api_vote.json() == {"error": "Poll is not active"}
    assert email_vote.status_code == 400
    assert email_vote.json() == {"error": "Poll is not active"}
    assert (await results(client, poll))["totalVotes"] == 0


@pytest.mark.asyncio
async def test_vote_on_unknown_poll(client):
    response = await client.post(
        POLL_VOTE_URL.format(poll_id="00000000-0000-0000-0000-000000000000"),
        json={"selectedOptions": ["0"], "voterEmail": "ann@x.com"},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_email_vote_records_and_redirects(client, poll):
    response = await client.get(
        POLL_EMAIL_VOTE_URL.format(poll_id=poll["id"]),
        params={"option": "1", "voterEmail": "ann@x.com"},
    )

    assert response.status_code == 302
    assert response.headers["location"] == f"/polls/{poll['id']}?voted=true"
    assert (await results(client, poll))["voteCounts"] == [0, 1, 0]


@pytest.mark.asyncio
async def test_email_vote_and_api_vote_share_the_ballot(client, poll):
    await client.post(
        POLL_VOTE_URL.format(poll_id=poll["id"]),
        json={"selectedOptions": ["0"], "voterEmail": "ann@x.com"},
    )

    await client.get(
        POLL_EMAIL_VOTE_URL.format(poll_id=poll["id"]),
        params={"option": "2", "voterEmail": "ann@x.com"},
    )

    tally = await results(client, poll)
    assert tally["voteCounts"] == [0, 0, 1]
    assert tally["totalVotes"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"option": "0"}, {"option": "0", "voterEmail": "USER_EMAIL"}])
async def test_email_vote_without_address_goes_to_poll_page(client, poll, params):
    response = await client.get(POLL_EMAIL_VOTE_URL.format(poll_id=poll["id"]), params=params)

    assert response.status_code == 302
    assert response.headers["location"] == f"/polls/{poll['id']}"
    assert (await results(client, poll))["totalVotes"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("option", ["7", "x", None])
async def test_email_vote_with_invalid_option(client, poll, option):
    params = {"voterEmail": "ann@x.com"}
    if option is not None:
        params["option"] = option

    response = await client.get(POLL_EMAIL_VOTE_URL.format(poll_id=poll["id"]), params=params)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid option"}
