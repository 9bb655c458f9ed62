import abc
from collections import defaultdict
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventDTO, EventMessageDTO, EventSummaryDTO, RSVPCountsDTO
from src.events.repository.orm_models import Event, EventMessage
from src.invitations.dtos import RSVPStatus
from src.invitations.repository.orm_models import Invitation


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_event(self, event_id: UUID) -> EventDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_host_events(self, host_id: UUID) -> list[EventSummaryDTO]:
        """Host's events by start time, with RSVP and chat counts."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_messages(self, event_id: UUID) -> list[EventMessageDTO]:
        """Chat history, oldest first."""
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_event(self, event_id: UUID) -> EventDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await session.get(Event, event_id)
            return EventDTO.from_event(event) if event else None

    async def list_host_events(self, host_id: UUID) -> list[EventSummaryDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(Event).where(Event.host_id == host_id).order_by(Event.start_date_time)
            )
            events = result.scalars().all()
            if not events:
                return []
            event_ids = [event.id for event in events]

            rsvp_rows = await session.execute(
                select(Invitation.event_id, Invitation.rsvp_status, func.count())
                .where(Invitation.event_id.in_(event_ids))
                .group_by(Invitation.event_id, Invitation.rsvp_status)
            )
            rsvp_counts: dict[UUID, dict[str, int]] = defaultdict(dict)
            for event_id, status, count in rsvp_rows:
                rsvp_counts[event_id][RSVPStatus(status).value] = count

            message_rows = await session.execute(
                select(EventMessage.event_id, func.count())
                .where(EventMessage.event_id.in_(event_ids))
                .group_by(EventMessage.event_id)
            )
            message_counts = {event_id: count for event_id, count in message_rows}

            summaries = []
            for event in events:
                counts = rsvp_counts.get(event.id, {})
                summaries.append(
                    EventSummaryDTO(
                        event=EventDTO.from_event(event),
                        rsvp_counts=RSVPCountsDTO(total=sum(counts.values()), **counts),
                        message_count=message_counts.get(event.id, 0),
                    )
                )
            return summaries

    async def list_messages(self, event_id: UUID) -> list[EventMessageDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventMessage)
                .where(EventMessage.event_id == event_id)
                .order_by(EventMessage.created_at, EventMessage.id)
            )
            return [EventMessageDTO.from_message(message) for message in result.scalars().all()]
