from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.invitations.repository.orm_models import Invitation


class RSVPStatus(str, Enum):
    PENDING = "pending"
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"


# Responses a guest can give from the one-click email links
EMAIL_RSVP_RESPONSES = (RSVPStatus.YES, RSVPStatus.NO, RSVPStatus.MAYBE)


@dataclass(frozen=True)
class GuestDTO:
    """A guest to invite: an email plus an optional display name."""

    email: str
    name: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class InvitationDTO:
    id: UUID
    event_id: UUID
    token: str
    email: str | None
    phone: str | None
    name: str | None
    rsvp_status: RSVPStatus
    is_blocked: bool
    is_suspended: bool
    message_blocked: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_invitation(cls, invitation: "Invitation") -> "InvitationDTO":
        return cls(
            id=invitation.id,
            event_id=invitation.event_id,
            token=invitation.token,
            email=invitation.email,
            phone=invitation.phone,
            name=invitation.name,
            rsvp_status=RSVPStatus(invitation.rsvp_status),
            is_blocked=bool(invitation.is_blocked),
            is_suspended=bool(invitation.is_suspended),
            message_blocked=bool(invitation.message_blocked),
            created_at=invitation.created_at,
            updated_at=invitation.updated_at,
        )
