import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.collaborators.dtos import CollaboratedEventDTO, EventCollaboratorDTO
from src.collaborators.repository.orm_models import EventCollaborator
from src.config.database import async_session_manager
from src.events.dtos import EventDTO
from src.events.repository.orm_models import Event


class CollaboratorReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_collaborator(self, collaborator_id: UUID) -> EventCollaboratorDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_for_event(self, event_id: UUID) -> list[EventCollaboratorDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_collaborated_events(self, user_id: UUID) -> list[CollaboratedEventDTO]:
        """Events the user has been added to as a collaborator, by start time."""
        raise NotImplementedError


class SqlCollaboratorReadModel(CollaboratorReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_collaborator(self, collaborator_id: UUID) -> EventCollaboratorDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            collaborator = await session.get(EventCollaborator, collaborator_id)
            return EventCollaboratorDTO.from_collaborator(collaborator) if collaborator else None

    async def list_for_event(self, event_id: UUID) -> list[EventCollaboratorDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventCollaborator)
                .where(EventCollaborator.event_id == event_id)
                .order_by(EventCollaborator.created_at)
            )
            return [EventCollaboratorDTO.from_collaborator(row) for row in result.scalars().all()]

    async def list_collaborated_events(self, user_id: UUID) -> list[CollaboratedEventDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventCollaborator, Event)
                .join(Event, Event.id == EventCollaborator.event_id)
                .where(EventCollaborator.user_id == user_id)
                .order_by(Event.start_date_time)
            )
            return [
                CollaboratedEventDTO(
                    collaboration=EventCollaboratorDTO.from_collaborator(collaborator),
                    event=EventDTO.from_event(event),
                )
                for collaborator, event in result.all()
            ]
