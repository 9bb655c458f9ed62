from datetime import datetime
from uuid import UUID

from src.invitations.dtos import GuestDTO, RSVPStatus
from src.models.schemas import CamelModel


class GuestInput(CamelModel):
    """Guest row as typed by the host; rows without an email are skipped."""

    email: str | None = None
    name: str | None = None


def guests_with_email(guests: list[GuestInput]) -> list[GuestDTO]:
    return [
        GuestDTO(email=guest.email.strip(), name=(guest.name or "").strip() or None)
        for guest in guests
        if guest.email and guest.email.strip()
    ]


class InvitationResponse(CamelModel):
    id: UUID
    event_id: UUID
    token: str
    email: str | None = None
    phone: str | None = None
    name: str | None = None
    rsvp_status: RSVPStatus
    is_blocked: bool
    is_suspended: bool
    message_blocked: bool
    created_at: datetime
    updated_at: datetime
