import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.email_service import EmailServiceBase, get_email_service
from src.email_service.links import get_link_base_url
from src.events.dependencies import get_event_read_model
from src.events.repository.read_models import EventReadModel
from src.guest_lists.dependencies import find_owned_guest_list, get_guest_list_read_model
from src.guest_lists.repository.read_models import GuestListReadModel
from src.guest_lists.urls import INVITE_TO_EVENT_URL
from src.invitations.dependencies import get_invitation_write_model
from src.invitations.dtos import GuestDTO
from src.invitations.notifications import send_invitation_emails
from src.invitations.repository.write_models import InvitationWriteModel
from src.invitations.schemas import InvitationResponse
from src.models.schemas import CamelModel

logger = logging.getLogger(__name__)

router = APIRouter()


class InviteToEvent(CamelModel):
    event_id: UUID | None = None


class InviteToEventResponse(CamelModel):
    success: bool
    invitation_count: int
    invitations: list[InvitationResponse]


@router.post(INVITE_TO_EVENT_URL, response_model=InviteToEventResponse)
async def invite_guest_list_to_event(
    guest_list_id: UUID,
    body: InviteToEvent,
    host: HostDTO = Depends(require_host),
    read_model: GuestListReadModel = Depends(get_guest_list_read_model),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    invitation_write_model: InvitationWriteModel = Depends(get_invitation_write_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    base_url: str = Depends(get_link_base_url),
):
    """
    Invite every member of the list to one of the host's events.
    Members already invited get a second invitation.
    """
    if not body.event_id:
        raise HTTPException(status_code=400, detail="Event ID is required")

    guest_list = await find_owned_guest_list(guest_list_id, host, read_model)
    event = await event_read_model.get_event(body.event_id)
    if not event or event.host_id != host.id:
        raise HTTPException(status_code=404, detail="Event not found")

    members = await read_model.list_members(guest_list.id)
    invitations = await invitation_write_model.create_invitations(
        event.id,
        [GuestDTO(email=member.email, name=member.name, phone=member.phone) for member in members],
    )
    sent = await send_invitation_emails(email_service, event, host, invitations, base_url)
    logger.info(
        "Guest list %s invited to event %s: %d invitations, %d emails",
        guest_list.id,
        event.id,
        len(invitations),
        sent,
    )

    return {"success": True, "invitation_count": len(invitations), "invitations": invitations}
