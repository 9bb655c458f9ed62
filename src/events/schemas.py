from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.events.dtos import EventCreateDTO, EventStatus
from src.models.schemas import CamelModel


class EventFields(CamelModel):
    title: str = Field(min_length=1)
    description: str | None = None
    start_date_time: datetime
    end_date_time: datetime | None = None
    is_all_day: bool = False
    location: str | None = None
    exact_address: str | None = None
    custom_directions: str | None = None
    group_id: UUID | None = None

    def to_dto(self) -> EventCreateDTO:
        return EventCreateDTO(
            title=self.title,
            start_date_time=self.start_date_time,
            description=self.description,
            end_date_time=self.end_date_time,
            is_all_day=self.is_all_day,
            location=self.location,
            exact_address=self.exact_address,
            custom_directions=self.custom_directions,
            group_id=self.group_id,
        )


class EventUpdate(CamelModel):
    """Partial update; only fields present in the body change."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    start_date_time: datetime | None = None
    end_date_time: datetime | None = None
    is_all_day: bool | None = None
    location: str | None = None
    exact_address: str | None = None
    custom_directions: str | None = None
    status: EventStatus | None = None
    group_id: UUID | None = None


class EventResponse(CamelModel):
    id: UUID
    host_id: UUID
    title: str
    description: str | None = None
    start_date_time: datetime
    end_date_time: datetime | None = None
    is_all_day: bool
    location: str | None = None
    exact_address: str | None = None
    custom_directions: str | None = None
    status: EventStatus
    group_id: UUID | None = None
    created_at: datetime
    updated_at: datetime


class RSVPCountsResponse(CamelModel):
    total: int
    yes: int
    no: int
    maybe: int
    pending: int


class EventSummaryResponse(EventResponse):
    rsvp_counts: RSVPCountsResponse
    message_count: int
