import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.accounts.dependencies import assert_owned_by, require_host
from src.accounts.dtos import HostDTO
from src.email_service import EmailServiceBase, get_email_service
from src.email_service.links import get_link_base_url
from src.events.dependencies import get_event_or_404, get_event_read_model, get_owned_event
from src.events.dtos import EventDTO
from src.events.repository.read_models import EventReadModel
from src.invitations.dependencies import get_invitation_read_model, get_invitation_write_model
from src.invitations.dtos import GuestDTO, RSVPStatus
from src.invitations.notifications import send_invitation_email, send_invitation_emails
from src.invitations.repository.read_models import InvitationReadModel
from src.invitations.repository.write_models import InvitationWriteModel
from src.invitations.schemas import GuestInput, InvitationResponse, guests_with_email
from src.invitations.urls import (
    ADD_INVITATIONS_URL,
    EVENT_INVITATIONS_URL,
    RESEND_INVITATION_URL,
    RESEND_INVITATIONS_URL,
)
from src.models.schemas import CamelModel, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class InvitationCreate(CamelModel):
    email: str | None = None
    phone: str | None = None
    name: str | None = None


class AddInvitations(CamelModel):
    guests: list[GuestInput] = []


class AddInvitationsResponse(CamelModel):
    invitations: list[InvitationResponse]


@router.post(EVENT_INVITATIONS_URL, response_model=InvitationResponse)
async def create_invitation(
    body: InvitationCreate,
    event: EventDTO = Depends(get_owned_event),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
):
    """Issue a single invitation without emailing it."""
    return await write_model.create_invitation(
        event.id, email=body.email, phone=body.phone, name=body.name
    )


@router.get(EVENT_INVITATIONS_URL, response_model=list[InvitationResponse])
async def list_invitations(
    event: EventDTO = Depends(get_owned_event),
    read_model: InvitationReadModel = Depends(get_invitation_read_model),
):
    return await read_model.list_for_event(event.id)


def new_guests(guests: list[GuestDTO], existing_emails: set[str]) -> list[GuestDTO]:
    """Guests whose email has not been invited to the event yet."""
    seen = set(existing_emails)
    fresh = []
    for guest in guests:
        if guest.email in seen:
            continue
        seen.add(guest.email)
        fresh.append(guest)
    return fresh


@router.post(ADD_INVITATIONS_URL, response_model=AddInvitationsResponse)
async def add_invitations(
    body: AddInvitations,
    event: EventDTO = Depends(get_owned_event),
    host: HostDTO = Depends(require_host),
    read_model: InvitationReadModel = Depends(get_invitation_read_model),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    base_url: str = Depends(get_link_base_url),
):
    if not body.guests:
        raise HTTPException(status_code=400, detail="Guest information is required")

    existing = await read_model.list_for_event(event.id)
    guests = new_guests(
        guests_with_email(body.guests),
        {invitation.email for invitation in existing if invitation.email},
    )
    invitations = await write_model.create_invitations(event.id, guests)
    if invitations:
        await send_invitation_emails(email_service, event, host, invitations, base_url)

    return {"invitations": invitations}


@router.post(RESEND_INVITATIONS_URL, response_model=SuccessResponse)
async def resend_pending_invitations(
    event: EventDTO = Depends(get_owned_event),
    host: HostDTO = Depends(require_host),
    read_model: InvitationReadModel = Depends(get_invitation_read_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    base_url: str = Depends(get_link_base_url),
) -> SuccessResponse:
    invitations = await read_model.list_for_event(event.id)
    pending = [
        invitation for invitation in invitations if invitation.rsvp_status == RSVPStatus.PENDING
    ]
    sent = await send_invitation_emails(email_service, event, host, pending, base_url)
    return SuccessResponse(message=f"{sent} pending invitations resent successfully")


@router.post(RESEND_INVITATION_URL, response_model=SuccessResponse)
async def resend_invitation(
    invitation_id: UUID,
    host: HostDTO = Depends(require_host),
    read_model: InvitationReadModel = Depends(get_invitation_read_model),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    base_url: str = Depends(get_link_base_url),
) -> SuccessResponse:
    invitation = await read_model.get_by_id(invitation_id)
    if not invitation:
        raise HTTPException(status_code=404, detail="Invitation not found")

    event = await get_event_or_404(invitation.event_id, event_read_model)
    assert_owned_by(event.host_id, host)

    if not invitation.email:
        raise HTTPException(status_code=400, detail="No email address for this invitation")

    try:
        await send_invitation_email(email_service, event, host, invitation, base_url)
    except Exception:
        logger.exception("Failed to resend invitation %s to %s", invitation.id, invitation.email)
        raise HTTPException(status_code=500, detail="Failed to send email")

    return SuccessResponse(message="Invitation resent successfully")
