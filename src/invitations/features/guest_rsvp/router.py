"""Public routes reached through an invitation token."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from src.events.dependencies import get_event_or_404, get_event_read_model
from src.events.repository.read_models import EventReadModel
from src.events.schemas import EventResponse
from src.invitations.dependencies import get_invitation_read_model, get_invitation_write_model
from src.invitations.dtos import EMAIL_RSVP_RESPONSES, InvitationDTO, RSVPStatus
from src.invitations.repository.read_models import InvitationReadModel
from src.invitations.repository.write_models import InvitationWriteModel
from src.invitations.schemas import InvitationResponse
from src.invitations.urls import EMAIL_RSVP_URL, INVITATION_RSVP_URL, INVITATION_URL
from src.models.schemas import CamelModel, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class InvitationPage(CamelModel):
    invitation: InvitationResponse
    event: EventResponse


class RSVPSubmit(CamelModel):
    rsvp_status: str | None = None


async def get_invitation_by_token(
    token: str,
    read_model: InvitationReadModel = Depends(get_invitation_read_model),
) -> InvitationDTO:
    invitation = await read_model.get_by_token(token)
    if not invitation:
        raise HTTPException(status_code=404, detail="Invitation not found")
    return invitation


@router.get(INVITATION_URL, response_model=InvitationPage)
async def get_invitation(
    invitation: InvitationDTO = Depends(get_invitation_by_token),
    event_read_model: EventReadModel = Depends(get_event_read_model),
):
    """Everything the guest's invite page shows."""
    event = await get_event_or_404(invitation.event_id, event_read_model)
    return {"invitation": invitation, "event": event}


@router.post(INVITATION_RSVP_URL, response_model=SuccessResponse)
async def submit_rsvp(
    token: str,
    body: RSVPSubmit,
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
) -> SuccessResponse:
    try:
        status = RSVPStatus(body.rsvp_status)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid RSVP status")

    invitation = await write_model.update_rsvp(token, status)
    if not invitation:
        raise HTTPException(status_code=404, detail="Invitation not found")
    logger.info("Invitation %s answered %s", invitation.id, status.value)
    return SuccessResponse()


@router.get(EMAIL_RSVP_URL)
async def email_rsvp(
    token: str,
    response: str,
    read_model: InvitationReadModel = Depends(get_invitation_read_model),
    write_model: InvitationWriteModel = Depends(get_invitation_write_model),
    event_read_model: EventReadModel = Depends(get_event_read_model),
) -> RedirectResponse:
    """One-click answer from the invitation email, then back to the invite page."""
    if response not in {status.value for status in EMAIL_RSVP_RESPONSES}:
        raise HTTPException(status_code=400, detail="Invalid RSVP response")

    invitation = await read_model.get_by_token(token)
    if not invitation:
        raise HTTPException(status_code=404, detail="Invitation not found")

    await write_model.update_rsvp(token, RSVPStatus(response))
    await get_event_or_404(invitation.event_id, event_read_model)
    return RedirectResponse(
        url=f"/invite/{token}?rsvp={response}&confirmed=true", status_code=302
    )
