"""Event chat, shared by the host (session) and guests (invitation token)."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request

from src.accounts.dependencies import (
    assert_owned_by,
    get_account_read_model,
    require_host,
    require_user,
)
from src.accounts.repository.read_models import AccountReadModel
from src.events.dependencies import get_event_or_404, get_event_read_model, get_event_write_model
from src.events.dtos import EventMessageDTO, GuestSender, HostSender, Sender, SenderType
from src.events.repository.read_models import EventReadModel
from src.events.repository.write_models import EventWriteModel
from src.events.urls import EVENT_MESSAGES_URL
from src.invitations.dependencies import get_invitation_read_model
from src.invitations.dtos import InvitationDTO
from src.invitations.repository.read_models import InvitationReadModel
from src.models.schemas import CamelModel

router = APIRouter()


class MessageCreate(CamelModel):
    message: str | None = None
    token: str | None = None


class MessageResponse(CamelModel):
    id: UUID
    event_id: UUID
    sender_type: SenderType
    sender_id: UUID
    message: str
    created_at: datetime


def to_response(message: EventMessageDTO) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        event_id=message.event_id,
        sender_type=message.sender.sender_type,
        sender_id=message.sender.sender_id,
        message=message.message,
        created_at=message.created_at,
    )


async def _guest_invitation(
    event_id: UUID, token: str, invitation_read_model: InvitationReadModel
) -> InvitationDTO:
    invitation = await invitation_read_model.get_by_token(token)
    if not invitation or invitation.event_id != event_id:
        raise HTTPException(status_code=403, detail="Access denied")
    return invitation


async def _resolve_sender(
    event_id: UUID,
    token: str | None,
    request: Request,
    account_read_model: AccountReadModel,
    event_read_model: EventReadModel,
    invitation_read_model: InvitationReadModel,
) -> tuple[Sender, InvitationDTO | None]:
    """Guest mode when a token is present, host mode otherwise."""
    if token:
        invitation = await _guest_invitation(event_id, token, invitation_read_model)
        return GuestSender(invitation_id=invitation.id), invitation

    user = await require_user(request, account_read_model)
    event = await get_event_or_404(event_id, event_read_model)
    host = await require_host(user, account_read_model)
    assert_owned_by(event.host_id, host)
    return HostSender(host_id=host.id), None


@router.get(EVENT_MESSAGES_URL, response_model=list[MessageResponse])
async def list_messages(
    event_id: UUID,
    request: Request,
    token: str | None = None,
    account_read_model: AccountReadModel = Depends(get_account_read_model),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    invitation_read_model: InvitationReadModel = Depends(get_invitation_read_model),
) -> list[MessageResponse]:
    await _resolve_sender(
        event_id, token, request, account_read_model, event_read_model, invitation_read_model
    )
    messages = await event_read_model.list_messages(event_id)
    return [to_response(message) for message in messages]


@router.post(EVENT_MESSAGES_URL, response_model=MessageResponse)
async def post_message(
    event_id: UUID,
    body: MessageCreate,
    request: Request,
    account_read_model: AccountReadModel = Depends(get_account_read_model),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    invitation_read_model: InvitationReadModel = Depends(get_invitation_read_model),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> MessageResponse:
    text = (body.message or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail="Message is required")

    sender, invitation = await _resolve_sender(
        event_id, body.token, request, account_read_model, event_read_model, invitation_read_model
    )
    if invitation and invitation.message_blocked:
        raise HTTPException(status_code=403, detail="You are blocked from sending messages")

    message = await write_model.post_message(event_id, sender, text)
    return to_response(message)
