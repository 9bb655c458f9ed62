from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.events.dependencies import get_owned_event
from src.events.dtos import EventDTO
from src.invitations.dependencies import get_invitation_read_model, get_invitation_write_model
from src.invitations.dtos import InvitationDTO
from src.invitations.repository.read_models import InvitationReadModel
from src.invitations.repository.write_models import InvitationWriteModel
from src.invitations.urls import BLOCK_GUEST_URL, EVENT_GUEST_URL, SUSPEND_GUEST_URL
from src.models.schemas import CamelModel, SuccessResponse

router = APIRouter()


class SuspendGuest(CamelModel):
    suspended: bool


class BlockGuest(CamelModel):
    blocked: bool


async def get_event_invitation(
    invitation_id: UUID,
    event: EventDTO = Depends(get_owned_event),
    read_model: InvitationReadModel = Depends(get_invitation_read_model),
) -> InvitationDTO:
    """An invitation of an event the host owns; anything else is a 404."""
    invitation = await read_model.get_by_id(invitation_id)
    if not invitation or invitation.event_id != event.id:
        raise HTTPException(status_code=404, detail="Invitation not found")
    return invitation


@router.delete(EVENT_GUEST_URL, response_model=SuccessResponse)
async def remove_guest(
    invitation: InvitationDTO = Depends(get_event_invitation),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> SuccessResponse:
    await write_model.remove_invitation(invitation.id)
    return SuccessResponse(message="Guest removed successfully")


@router.put(SUSPEND_GUEST_URL, response_model=SuccessResponse)
async def suspend_guest(
    body: SuspendGuest,
    invitation: InvitationDTO = Depends(get_event_invitation),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> SuccessResponse:
    await write_model.set_suspended(invitation.id, body.suspended)
    return SuccessResponse(
        message="Guest suspended" if body.suspended else "Guest suspension removed"
    )


@router.put(BLOCK_GUEST_URL, response_model=SuccessResponse)
async def block_guest(
    body: BlockGuest,
    invitation: InvitationDTO = Depends(get_event_invitation),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> SuccessResponse:
    await write_model.set_blocked(invitation.id, body.blocked)
    return SuccessResponse(
        message="Guest blocked from messaging"
        if body.blocked
        else "Guest messaging restriction removed"
    )
