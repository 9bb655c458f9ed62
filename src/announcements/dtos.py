from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.announcements.repository.orm_models import Announcement


class TargetAudience(str, Enum):
    ALL_USERS = "all_users"
    EVENT_ATTENDEES = "event_attendees"
    SPECIFIC_USERS = "specific_users"


class AnnouncementAudienceError(ValueError):
    """eventId must be given exactly when the audience is an event's attendees."""


def check_audience(target_audience: TargetAudience, event_id: UUID | None) -> None:
    if target_audience == TargetAudience.EVENT_ATTENDEES and event_id is None:
        raise AnnouncementAudienceError("eventId is required when targeting event attendees")
    if target_audience != TargetAudience.EVENT_ATTENDEES and event_id is not None:
        raise AnnouncementAudienceError("eventId is only allowed when targeting event attendees")


@dataclass(frozen=True)
class AnnouncementDTO:
    id: UUID
    host_id: UUID
    title: str
    content: str
    target_audience: TargetAudience
    event_id: UUID | None
    is_published: bool
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_announcement(cls, announcement: "Announcement") -> "AnnouncementDTO":
        return cls(
            id=announcement.id,
            host_id=announcement.host_id,
            title=announcement.title,
            content=announcement.content,
            target_audience=TargetAudience(announcement.target_audience),
            event_id=announcement.event_id,
            is_published=bool(announcement.is_published),
            published_at=announcement.published_at,
            created_at=announcement.created_at,
            updated_at=announcement.updated_at,
        )
