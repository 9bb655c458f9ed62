from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.events.repository.orm_models import Event, EventMessage


class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    CANCELLED = "cancelled"
    PAST = "past"


class SenderType(str, Enum):
    HOST = "host"
    GUEST = "guest"


@dataclass(frozen=True)
class EventDTO:
    id: UUID
    host_id: UUID
    title: str
    description: str | None
    start_date_time: datetime
    end_date_time: datetime | None
    is_all_day: bool
    location: str | None
    exact_address: str | None
    custom_directions: str | None
    status: EventStatus
    group_id: UUID | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_event(cls, event: "Event") -> "EventDTO":
        return cls(
            id=event.id,
            host_id=event.host_id,
            title=event.title,
            description=event.description,
            start_date_time=event.start_date_time,
            end_date_time=event.end_date_time,
            is_all_day=bool(event.is_all_day),
            location=event.location,
            exact_address=event.exact_address,
            custom_directions=event.custom_directions,
            status=EventStatus(event.status),
            group_id=event.group_id,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


@dataclass(frozen=True)
class EventCreateDTO:
    title: str
    start_date_time: datetime
    description: str | None = None
    end_date_time: datetime | None = None
    is_all_day: bool = False
    location: str | None = None
    exact_address: str | None = None
    custom_directions: str | None = None
    group_id: UUID | None = None


@dataclass(frozen=True)
class RSVPCountsDTO:
    total: int = 0
    yes: int = 0
    no: int = 0
    maybe: int = 0
    pending: int = 0


@dataclass(frozen=True)
class EventSummaryDTO:
    """An event as listed on the host dashboard."""

    event: EventDTO
    rsvp_counts: RSVPCountsDTO = field(default_factory=RSVPCountsDTO)
    message_count: int = 0


@dataclass(frozen=True)
class HostSender:
    host_id: UUID

    @property
    def sender_type(self) -> SenderType:
        return SenderType.HOST

    @property
    def sender_id(self) -> UUID:
        return self.host_id


@dataclass(frozen=True)
class GuestSender:
    invitation_id: UUID

    @property
    def sender_type(self) -> SenderType:
        return SenderType.GUEST

    @property
    def sender_id(self) -> UUID:
        return self.invitation_id


Sender = HostSender | GuestSender


@dataclass(frozen=True)
class EventMessageDTO:
    id: UUID
    event_id: UUID
    sender: Sender
    message: str
    created_at: datetime

    @classmethod
    def from_message(cls, message: "EventMessage") -> "EventMessageDTO":
        sender: Sender
        if SenderType(message.sender_type) == SenderType.HOST:
            sender = HostSender(host_id=message.host_id)
        else:
            sender = GuestSender(invitation_id=message.invitation_id)
        return cls(
            id=message.id,
            event_id=message.event_id,
            sender=sender,
            message=message.message,
            created_at=message.created_at,
        )
