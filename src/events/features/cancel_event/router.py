import logging

from fastapi import APIRouter, Depends, HTTPException

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.email_service import EmailServiceBase, format_event_date, get_email_service
from src.email_service.dispatch import send_to_each
from src.events.dependencies import get_event_write_model, get_owned_event
from src.events.dtos import EventDTO, EventStatus
from src.events.repository.write_models import EventWriteModel
from src.events.schemas import EventResponse
from src.events.urls import CANCEL_EVENT_URL
from src.invitations.dependencies import get_invitation_read_model
from src.invitations.dtos import InvitationDTO, RSVPStatus
from src.invitations.repository.read_models import InvitationReadModel
from src.models.schemas import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter()


class CancelEventResponse(CamelModel):
    success: bool
    message: str
    event: EventResponse


def cancellation_recipients(invitations: list[InvitationDTO]) -> list[InvitationDTO]:
    """Guests who said yes and can be reached by email."""
    return [
        invitation
        for invitation in invitations
        if invitation.rsvp_status == RSVPStatus.YES and invitation.email
    ]


@router.post(CANCEL_EVENT_URL, response_model=CancelEventResponse)
async def cancel_event(
    event: EventDTO = Depends(get_owned_event),
    host: HostDTO = Depends(require_host),
    write_model: EventWriteModel = Depends(get_event_write_model),
    invitation_read_model: InvitationReadModel = Depends(get_invitation_read_model),
    email_service: EmailServiceBase = Depends(get_email_service),
) -> CancelEventResponse:
    """
    Cancel the event, then tell every attending guest.
    The cancellation is committed before any email goes out.
    """
    cancelled = await write_model.set_status(event.id, EventStatus.CANCELLED)
    if not cancelled:
        raise HTTPException(status_code=404, detail="Event not found")
    logger.info("Event %s cancelled by host %s", event.id, host.id)

    recipients = cancellation_recipients(await invitation_read_model.list_for_event(event.id))
    await send_to_each(
        recipients,
        lambda invitation: email_service.send_cancellation(
            to_address=invitation.email,
            event_title=event.title,
            event_date=format_event_date(event.start_date_time),
            host_name=host.display_name,
            guest_name=invitation.name,
            event_location=event.location,
        ),
        describe=lambda invitation: invitation.email,
        email_type="cancellation email",
    )

    return CancelEventResponse(
        success=True,
        message=f"Event cancelled. {len(recipients)} cancellation emails sent.",
        event=EventResponse.model_validate(cancelled),
    )
