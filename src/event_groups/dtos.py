from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.event_groups.repository.orm_models import EventGroup, EventGroupGuestList


@dataclass(frozen=True)
class EventGroupDTO:
    id: UUID
    host_id: UUID
    title: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_group(cls, group: "EventGroup") -> "EventGroupDTO":
        return cls(
            id=group.id,
            host_id=group.host_id,
            title=group.title,
            description=group.description,
            created_at=group.created_at,
            updated_at=group.updated_at,
        )


@dataclass(frozen=True)
class EventGroupGuestListDTO:
    id: UUID
    event_group_id: UUID
    guest_list_id: UUID
    created_at: datetime

    @classmethod
    def from_link(cls, link: "EventGroupGuestList") -> "EventGroupGuestListDTO":
        return cls(
            id=link.id,
            event_group_id=link.event_group_id,
            guest_list_id=link.guest_list_id,
            created_at=link.created_at,
        )
