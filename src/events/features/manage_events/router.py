import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.email_service import EmailServiceBase, get_email_service
from src.email_service.links import get_link_base_url
from src.event_groups.dependencies import find_owned_group, get_event_group_read_model
from src.event_groups.repository.read_models import EventGroupReadModel
from src.events.dependencies import get_event_read_model, get_event_write_model, get_owned_event
from src.events.dtos import EventDTO
from src.events.repository.read_models import EventReadModel
from src.events.repository.write_models import EventWriteModel
from src.events.schemas import EventFields, EventResponse, EventSummaryResponse, EventUpdate
from src.events.urls import EVENT_URL, EVENTS_URL
from src.invitations.dependencies import get_invitation_write_model
from src.invitations.notifications import send_invitation_emails
from src.invitations.repository.write_models import InvitationWriteModel
from src.invitations.schemas import GuestInput, InvitationResponse, guests_with_email
from src.models.schemas import CamelModel, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Columns that cannot be cleared by sending null
REQUIRED_EVENT_FIELDS = ("title", "start_date_time", "is_all_day", "status")


class EventCreate(EventFields):
    guests: list[GuestInput] = []


class EventCreateResponse(CamelModel):
    event: EventResponse
    invitations: list[InvitationResponse]


@router.get(EVENTS_URL, response_model=list[EventSummaryResponse])
async def list_events(
    host: HostDTO = Depends(require_host),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[dict]:
    summaries = await read_model.list_host_events(host.id)
    return [
        {
            **asdict(summary.event),
            "rsvp_counts": asdict(summary.rsvp_counts),
            "message_count": summary.message_count,
        }
        for summary in summaries
    ]


@router.post(EVENTS_URL, response_model=EventCreateResponse)
async def create_event(
    body: EventCreate,
    host: HostDTO = Depends(require_host),
    write_model: EventWriteModel = Depends(get_event_write_model),
    group_read_model: EventGroupReadModel = Depends(get_event_group_read_model),
    invitation_write_model: InvitationWriteModel = Depends(get_invitation_write_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    base_url: str = Depends(get_link_base_url),
) -> EventCreateResponse:
    """
    Create an event, optionally inviting guests straight away.
    Every guest row with an email gets an invitation and an email; repeats are not filtered.
    """
    if body.group_id is not None:
        await find_owned_group(body.group_id, host, group_read_model)
    event = await write_model.create_event(host.id, body.to_dto())

    invitations = await invitation_write_model.create_invitations(
        event.id, guests_with_email(body.guests)
    )
    if invitations:
        sent = await send_invitation_emails(email_service, event, host, invitations, base_url)
        logger.info("Sent %d of %d invitations for event %s", sent, len(invitations), event.id)

    return EventCreateResponse(
        event=EventResponse.model_validate(event),
        invitations=[InvitationResponse.model_validate(invitation) for invitation in invitations],
    )


@router.get(EVENT_URL, response_model=EventResponse)
async def get_event(event: EventDTO = Depends(get_owned_event)) -> EventDTO:
    return event


@router.put(EVENT_URL, response_model=EventResponse)
async def update_event(
    body: EventUpdate,
    event: EventDTO = Depends(get_owned_event),
    host: HostDTO = Depends(require_host),
    write_model: EventWriteModel = Depends(get_event_write_model),
    group_read_model: EventGroupReadModel = Depends(get_event_group_read_model),
) -> EventDTO:
    changes = body.model_dump(exclude_unset=True)
    for field in REQUIRED_EVENT_FIELDS:
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
    if changes.get("group_id") is not None:
        await find_owned_group(changes["group_id"], host, group_read_model)

    updated = await write_model.update_event(event.id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Event not found")
    return updated


@router.delete(EVENT_URL, response_model=SuccessResponse)
async def delete_event(
    event: EventDTO = Depends(get_owned_event),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> SuccessResponse:
    await write_model.delete_event(event.id)
    return SuccessResponse(message="Event deleted successfully")
