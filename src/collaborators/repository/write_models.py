"""Collaborator write models - return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.collaborators.dtos import (
    CollaboratorPermission,
    CollaboratorRole,
    CollaboratorStatus,
    EventCollaboratorDTO,
)
from src.collaborators.repository.orm_models import EventCollaborator
from src.config.database import async_session_manager

EDITABLE_COLLABORATOR_FIELDS = ("role", "permissions", "status")


class CollaboratorWriteModel(ABC):
    @abstractmethod
    async def add_collaborator(
        self,
        event_id: UUID,
        user_id: UUID,
        invited_by: UUID,
        role: CollaboratorRole = CollaboratorRole.COLLABORATOR,
        permissions: list[CollaboratorPermission] | None = None,
    ) -> EventCollaboratorDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_collaborator(
        self, collaborator_id: UUID, changes: dict
    ) -> EventCollaboratorDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def remove_collaborator(self, collaborator_id: UUID) -> bool:
        raise NotImplementedError


class SqlCollaboratorWriteModel(CollaboratorWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def add_collaborator(
        self,
        event_id: UUID,
        user_id: UUID,
        invited_by: UUID,
        role: CollaboratorRole = CollaboratorRole.COLLABORATOR,
        permissions: list[CollaboratorPermission] | None = None,
    ) -> EventCollaboratorDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            collaborator = EventCollaborator(
                event_id=event_id,
                user_id=user_id,
                invited_by=invited_by,
                role=role,
                permissions=[CollaboratorPermission(p).value for p in permissions or []],
                status=CollaboratorStatus.PENDING,
            )
            session.add(collaborator)
            await session.flush()
            await session.refresh(collaborator)
            return EventCollaboratorDTO.from_collaborator(collaborator)

    async def update_collaborator(
        self, collaborator_id: UUID, changes: dict
    ) -> EventCollaboratorDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            collaborator = await session.get(EventCollaborator, collaborator_id)
            if not collaborator:
                return None
            for field, value in changes.items():
                if field not in EDITABLE_COLLABORATOR_FIELDS:
                    continue
                if field == "permissions":
                    value = [CollaboratorPermission(p).value for p in value]
                setattr(collaborator, field, value)
            await session.flush()
            await session.refresh(collaborator)
            return EventCollaboratorDTO.from_collaborator(collaborator)

    async def remove_collaborator(self, collaborator_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            collaborator = await session.get(EventCollaborator, collaborator_id)
            if not collaborator:
                return False
            await session.delete(collaborator)
            await session.flush()
            return True
