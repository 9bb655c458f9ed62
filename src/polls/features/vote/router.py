"""Public voting, from the poll page or straight from a poll email."""

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse

from src.accounts.dependencies import optional_user
from src.accounts.dtos import UserDTO
from src.models.schemas import CamelModel
from src.polls.dependencies import get_poll_or_404, get_poll_write_model
from src.polls.dtos import PollDTO, PollNotOpenError, VoterIdentity
from src.polls.repository.write_models import PollWriteModel
from src.polls.urls import POLL_EMAIL_VOTE_URL, POLL_PAGE_PATH, POLL_VOTE_URL

logger = logging.getLogger(__name__)

router = APIRouter()

# Literal left in poll emails whose recipient address was never filled in
EMAIL_PLACEHOLDER = "USER_EMAIL"


class VoteSubmit(CamelModel):
    selected_options: list[str] = []
    voter_email: str | None = None
    voter_name: str | None = None


class VoteResponse(CamelModel):
    id: UUID
    poll_id: UUID
    user_id: UUID | None = None
    voter_email: str | None = None
    voter_name: str | None = None
    selected_options: list[str]
    created_at: datetime


def ensure_open(poll: PollDTO) -> None:
    try:
        poll.ensure_open()
    except PollNotOpenError as e:
        raise HTTPException(status_code=400, detail=str(e))


def is_option_index(poll: PollDTO, option: str) -> bool:
    return option.isascii() and option.isdigit() and int(option) < len(poll.options)


def validated_selection(poll: PollDTO, selected_options: list[str]) -> list[str]:
    """Option indices as strings, each within range and listed once."""
    if not selected_options:
        raise HTTPException(status_code=400, detail="Select at least one option")
    selection: list[str] = []
    for option in selected_options:
        if not is_option_index(poll, option):
            raise HTTPException(status_code=400, detail="Invalid option")
        index = str(int(option))
        if index not in selection:
            selection.append(index)
    if len(selection) > 1 and not poll.allow_multiple_choices:
        raise HTTPException(status_code=400, detail="This poll allows only one choice")
    return selection


@router.post(POLL_VOTE_URL, response_model=VoteResponse)
async def vote(
    body: VoteSubmit,
    poll: PollDTO = Depends(get_poll_or_404),
    user: UserDTO | None = Depends(optional_user),
    write_model: PollWriteModel = Depends(get_poll_write_model),
):
    """
    Cast or replace a ballot.
    Signed-in voters are identified by their account, everyone else by email.
    """
    ensure_open(poll)
    voter_email = (body.voter_email or "").strip() or None
    if user is None and voter_email is None:
        raise HTTPException(status_code=400, detail="Voter email is required")

    selection = validated_selection(poll, body.selected_options)
    voter = VoterIdentity(
        user_id=user.id if user else None,
        voter_email=user.email if user else voter_email,
        voter_name=body.voter_name,
    )
    return await write_model.record_vote(poll.id, voter, selection)


@router.get(POLL_EMAIL_VOTE_URL)
async def vote_from_email(
    option: str | None = None,
    voter_email: str | None = Query(default=None, alias="voterEmail"),
    poll: PollDTO = Depends(get_poll_or_404),
    write_model: PollWriteModel = Depends(get_poll_write_model),
) -> RedirectResponse:
    ensure_open(poll)
    if option is None or not is_option_index(poll, option.strip()):
        raise HTTPException(status_code=400, detail="Invalid option")

    poll_page = POLL_PAGE_PATH.format(poll_id=poll.id)
    if not voter_email or voter_email == EMAIL_PLACEHOLDER:
        return RedirectResponse(url=poll_page, status_code=302)

    await write_model.record_vote(
        poll.id, VoterIdentity(voter_email=voter_email), [str(int(option.strip()))]
    )
    logger.info("Email vote recorded on poll %s", poll.id)
    return RedirectResponse(url=f"{poll_page}?voted=true", status_code=302)
