import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.email_service import EmailServiceBase, get_email_service
from src.email_service.links import get_link_base_url
from src.guest_lists.dependencies import get_guest_list_read_model
from src.guest_lists.repository.read_models import GuestListReadModel
from src.models.schemas import SuccessResponse
from src.polls.dependencies import get_owned_poll, get_poll_read_model, get_poll_write_model
from src.polls.dtos import (
    MIN_POLL_OPTIONS,
    PollAlreadyConvertedError,
    PollCreateDTO,
    PollDTO,
    clean_options,
)
from src.polls.notifications import notify_guest_lists
from src.polls.repository.read_models import PollReadModel
from src.polls.repository.write_models import PollWriteModel
from src.polls.schemas import (
    PollNotification,
    PollResponse,
    PollResultsResponse,
    poll_payload,
    results_payload,
)
from src.polls.urls import END_POLL_URL, POLL_URL, POLLS_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class PollCreate(PollNotification):
    title: str = Field(min_length=1)
    description: str | None = None
    options: list[str]
    allow_multiple_choices: bool = False
    end_date: datetime


class PollUpdate(PollNotification):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    options: list[str] | None = None
    allow_multiple_choices: bool | None = None
    end_date: datetime | None = None


def validated_options(options: list[str]) -> list[str]:
    cleaned = clean_options(options)
    if len(cleaned) < MIN_POLL_OPTIONS:
        raise HTTPException(
            status_code=400, detail=f"A poll needs at least {MIN_POLL_OPTIONS} options"
        )
    return cleaned


@router.get(POLLS_URL, response_model=list[PollResponse])
async def list_polls(
    host: HostDTO = Depends(require_host),
    read_model: PollReadModel = Depends(get_poll_read_model),
):
    return [poll_payload(poll) for poll in await read_model.list_host_polls(host.id)]


@router.post(POLLS_URL, response_model=PollResponse)
async def create_poll(
    body: PollCreate,
    host: HostDTO = Depends(require_host),
    write_model: PollWriteModel = Depends(get_poll_write_model),
    guest_list_read_model: GuestListReadModel = Depends(get_guest_list_read_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    base_url: str = Depends(get_link_base_url),
):
    """
    Create a poll. With sendEmail, the members of the listed guest lists
    get one-click voting links.
    """
    poll = await write_model.create_poll(
        host.id,
        PollCreateDTO(
            title=body.title,
            description=body.description,
            options=validated_options(body.options),
            allow_multiple_choices=body.allow_multiple_choices,
            end_date=body.end_date,
        ),
    )

    if body.send_email and body.notify_guest_list_ids:
        sent = await notify_guest_lists(
            email_service, guest_list_read_model, poll, host, body.notify_guest_list_ids, base_url
        )
        logger.info("Poll %s emailed to %d guests", poll.id, sent)

    return poll_payload(poll)


@router.get(POLL_URL, response_model=PollResultsResponse)
async def get_poll_results(
    poll_id: UUID,
    read_model: PollReadModel = Depends(get_poll_read_model),
):
    """Public: the poll with its tally."""
    results = await read_model.get_results(poll_id)
    if not results:
        raise HTTPException(status_code=404, detail="Poll not found")
    return results_payload(results)


@router.put(POLL_URL, response_model=PollResponse)
async def update_poll(
    body: PollUpdate,
    poll: PollDTO = Depends(get_owned_poll),
    host: HostDTO = Depends(require_host),
    write_model: PollWriteModel = Depends(get_poll_write_model),
    guest_list_read_model: GuestListReadModel = Depends(get_guest_list_read_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    base_url: str = Depends(get_link_base_url),
):
    changes = body.model_dump(exclude_unset=True, exclude={"send_email", "notify_guest_list_ids"})
    for field in ("title", "options", "allow_multiple_choices", "end_date"):
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
    if "options" in changes:
        changes["options"] = validated_options(changes["options"])

    updated = await write_model.update_poll(poll.id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Poll not found")

    if body.send_email and body.notify_guest_list_ids:
        await notify_guest_lists(
            email_service, guest_list_read_model, updated, host, body.notify_guest_list_ids, base_url
        )

    return poll_payload(updated)


@router.delete(POLL_URL, response_model=SuccessResponse)
async def delete_poll(
    poll: PollDTO = Depends(get_owned_poll),
    write_model: PollWriteModel = Depends(get_poll_write_model),
) -> SuccessResponse:
    await write_model.delete_poll(poll.id)
    return SuccessResponse(message="Poll deleted successfully")


@router.post(END_POLL_URL, response_model=PollResponse)
async def end_poll(
    poll: PollDTO = Depends(get_owned_poll),
    write_model: PollWriteModel = Depends(get_poll_write_model),
):
    try:
        ended = await write_model.end_poll(poll.id)
    except PollAlreadyConvertedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not ended:
        raise HTTPException(status_code=404, detail="Poll not found")
    return poll_payload(ended)
