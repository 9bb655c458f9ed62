"""Event group write models - return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.event_groups.dtos import EventGroupDTO, EventGroupGuestListDTO
from src.event_groups.repository.orm_models import EventGroup, EventGroupGuestList

EDITABLE_GROUP_FIELDS = ("title", "description")


class EventGroupWriteModel(ABC):
    @abstractmethod
    async def create_group(
        self, host_id: UUID, title: str, description: str | None = None
    ) -> EventGroupDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_group(self, group_id: UUID, changes: dict) -> EventGroupDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def delete_group(self, group_id: UUID) -> bool:
        """Events in the group are kept and lose their group."""
        raise NotImplementedError

    @abstractmethod
    async def link_guest_list(self, group_id: UUID, guest_list_id: UUID) -> EventGroupGuestListDTO:
        """Linking an already linked list returns the existing link."""
        raise NotImplementedError

    @abstractmethod
    async def unlink_guest_list(self, group_id: UUID, guest_list_id: UUID) -> bool:
        raise NotImplementedError


class SqlEventGroupWriteModel(EventGroupWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_group(
        self, host_id: UUID, title: str, description: str | None = None
    ) -> EventGroupDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = EventGroup(host_id=host_id, title=title, description=description)
            session.add(group)
            await session.flush()
            await session.refresh(group)
            return EventGroupDTO.from_group(group)

    async def update_group(self, group_id: UUID, changes: dict) -> EventGroupDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = await session.get(EventGroup, group_id)
            if not group:
                return None
            for field, value in changes.items():
                if field in EDITABLE_GROUP_FIELDS:
                    setattr(group, field, value)
            await session.flush()
            await session.refresh(group)
            return EventGroupDTO.from_group(group)

    async def delete_group(self, group_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = await session.get(EventGroup, group_id)
            if not group:
                return False
            await session.delete(group)
            await session.flush()
            return True

    async def link_guest_list(self, group_id: UUID, guest_list_id: UUID) -> EventGroupGuestListDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventGroupGuestList).where(
                    EventGroupGuestList.event_group_id == group_id,
                    EventGroupGuestList.guest_list_id == guest_list_id,
                )
            )
            link = result.scalar_one_or_none()
            if not link:
                link = EventGroupGuestList(event_group_id=group_id, guest_list_id=guest_list_id)
                session.add(link)
                await session.flush()
                await session.refresh(link)
            return EventGroupGuestListDTO.from_link(link)

    async def unlink_guest_list(self, group_id: UUID, guest_list_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                delete(EventGroupGuestList).where(
                    EventGroupGuestList.event_group_id == group_id,
                    EventGroupGuestList.guest_list_id == guest_list_id,
                )
            )
            return result.rowcount > 0
