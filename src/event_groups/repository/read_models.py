import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.event_groups.dtos import EventGroupDTO, EventGroupGuestListDTO
from src.event_groups.repository.orm_models import EventGroup, EventGroupGuestList


class EventGroupReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_group(self, group_id: UUID) -> EventGroupDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_host_groups(self, host_id: UUID) -> list[EventGroupDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_guest_list_links(self, group_id: UUID) -> list[EventGroupGuestListDTO]:
        raise NotImplementedError


class SqlEventGroupReadModel(EventGroupReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_group(self, group_id: UUID) -> EventGroupDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            group = await session.get(EventGroup, group_id)
            return EventGroupDTO.from_group(group) if group else None

    async def list_host_groups(self, host_id: UUID) -> list[EventGroupDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventGroup)
                .where(EventGroup.host_id == host_id)
                .order_by(EventGroup.created_at)
            )
            return [EventGroupDTO.from_group(row) for row in result.scalars().all()]

    async def list_guest_list_links(self, group_id: UUID) -> list[EventGroupGuestListDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventGroupGuestList)
                .where(EventGroupGuestList.event_group_id == group_id)
                .order_by(EventGroupGuestList.created_at)
            )
            return [EventGroupGuestListDTO.from_link(row) for row in result.scalars().all()]
