from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.collaborators.repository.orm_models import EventCollaborator
    from src.events.dtos import EventDTO


class CollaboratorRole(str, Enum):
    CO_HOST = "co-host"
    ORGANIZER = "organizer"
    COLLABORATOR = "collaborator"


class CollaboratorPermission(str, Enum):
    MANAGE_GUESTS = "manage_guests"
    MANAGE_GROUPS = "manage_groups"
    MANAGE_EVENT = "manage_event"


class CollaboratorStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


@dataclass(frozen=True)
class EventCollaboratorDTO:
    id: UUID
    event_id: UUID
    user_id: UUID
    role: CollaboratorRole
    invited_by: UUID
    status: CollaboratorStatus
    created_at: datetime
    updated_at: datetime
    permissions: list[CollaboratorPermission] = field(default_factory=list)

    @classmethod
    def from_collaborator(cls, collaborator: "EventCollaborator") -> "EventCollaboratorDTO":
        return cls(
            id=collaborator.id,
            event_id=collaborator.event_id,
            user_id=collaborator.user_id,
            role=CollaboratorRole(collaborator.role),
            invited_by=collaborator.invited_by,
            status=CollaboratorStatus(collaborator.status),
            created_at=collaborator.created_at,
            updated_at=collaborator.updated_at,
            permissions=[CollaboratorPermission(p) for p in collaborator.permissions or []],
        )


@dataclass(frozen=True)
class CollaboratedEventDTO:
    """A collaboration of the signed-in user, with the event it grants access to."""

    collaboration: EventCollaboratorDTO
    event: "EventDTO"
