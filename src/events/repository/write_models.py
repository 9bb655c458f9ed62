"""Event write models - return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import (
    EventCreateDTO,
    EventDTO,
    EventMessageDTO,
    EventStatus,
    GuestSender,
    HostSender,
    Sender,
)
from src.events.repository.orm_models import Event, EventMessage

logger = logging.getLogger(__name__)

EDITABLE_EVENT_FIELDS = (
    "title",
    "description",
    "start_date_time",
    "end_date_time",
    "is_all_day",
    "location",
    "exact_address",
    "custom_directions",
    "status",
    "group_id",
)


class EventWriteModel(ABC):
    @abstractmethod
    async def create_event(self, host_id: UUID, data: EventCreateDTO) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_event(self, event_id: UUID, changes: dict) -> EventDTO | None:
        """Apply a partial update. Returns None when the event does not exist."""
        raise NotImplementedError

    @abstractmethod
    async def set_status(self, event_id: UUID, status: EventStatus) -> EventDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def delete_event(self, event_id: UUID) -> bool:
        """Delete the event with its invitations and chat. False when absent."""
        raise NotImplementedError

    @abstractmethod
    async def post_message(self, event_id: UUID, sender: Sender, message: str) -> EventMessageDTO:
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_event(self, host_id: UUID, data: EventCreateDTO) -> EventDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = Event(host_id=host_id, status=EventStatus.UPCOMING, **asdict(data))
            session.add(event)
            await session.flush()
            await session.refresh(event)
            logger.info("Created event %s for host %s", event.id, host_id)
            return EventDTO.from_event(event)

    async def update_event(self, event_id: UUID, changes: dict) -> EventDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await session.get(Event, event_id)
            if not event:
                return None
            for field, value in changes.items():
                if field in EDITABLE_EVENT_FIELDS:
                    setattr(event, field, value)
            await session.flush()
            await session.refresh(event)
            return EventDTO.from_event(event)

    async def set_status(self, event_id: UUID, status: EventStatus) -> EventDTO | None:
        return await self.update_event(event_id, {"status": status})

    async def delete_event(self, event_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await session.get(Event, event_id)
            if not event:
                return False
            await session.delete(event)
            await session.flush()
            logger.info("Deleted event %s", event_id)
            return True

    async def post_message(self, event_id: UUID, sender: Sender, message: str) -> EventMessageDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            row = EventMessage(event_id=event_id, sender_type=sender.sender_type, message=message)
            match sender:
                case HostSender(host_id=host_id):
                    row.host_id = host_id
                case GuestSender(invitation_id=invitation_id):
                    row.invitation_id = invitation_id
            session.add(row)
            await session.flush()
            await session.refresh(row)
            return EventMessageDTO.from_message(row)
