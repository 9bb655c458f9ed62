import abc
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guest_lists.dtos import GuestListDTO, GuestListMemberDTO
from src.guest_lists.repository.orm_models import GuestList, GuestListMember


class GuestListReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_guest_list(self, guest_list_id: UUID) -> GuestListDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_host_guest_lists(self, host_id: UUID) -> list[GuestListDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_members(self, guest_list_id: UUID) -> list[GuestListMemberDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_member(self, member_id: UUID) -> GuestListMemberDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def member_emails(self, host_id: UUID, guest_list_ids: list[UUID]) -> list[str]:
        """Member emails across the given lists, restricted to lists the host owns."""
        raise NotImplementedError


class SqlGuestListReadModel(GuestListReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def _member_counts(self, session: AsyncSession, guest_list_ids: list[UUID]) -> dict[UUID, int]:
        if not guest_list_ids:
            return {}
        rows = await session.execute(
            select(GuestListMember.guest_list_id, func.count())
            .where(GuestListMember.guest_list_id.in_(guest_list_ids))
            .group_by(GuestListMember.guest_list_id)
        )
        return {guest_list_id: count for guest_list_id, count in rows}

    async def get_guest_list(self, guest_list_id: UUID) -> GuestListDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest_list = await session.get(GuestList, guest_list_id)
            if not guest_list:
                return None
            counts = await self._member_counts(session, [guest_list.id])
            return GuestListDTO.from_guest_list(guest_list, counts.get(guest_list.id, 0))

    async def list_host_guest_lists(self, host_id: UUID) -> list[GuestListDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(GuestList).where(GuestList.host_id == host_id).order_by(GuestList.created_at)
            )
            guest_lists = result.scalars().all()
            counts = await self._member_counts(session, [row.id for row in guest_lists])
            return [GuestListDTO.from_guest_list(row, counts.get(row.id, 0)) for row in guest_lists]

    async def list_members(self, guest_list_id: UUID) -> list[GuestListMemberDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(GuestListMember)
                .where(GuestListMember.guest_list_id == guest_list_id)
                .order_by(GuestListMember.created_at)
            )
            return [GuestListMemberDTO.from_member(row) for row in result.scalars().all()]

    async def get_member(self, member_id: UUID) -> GuestListMemberDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            member = await session.get(GuestListMember, member_id)
            return GuestListMemberDTO.from_member(member) if member else None

    async def member_emails(self, host_id: UUID, guest_list_ids: list[UUID]) -> list[str]:
        if not guest_list_ids:
            return []
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(GuestListMember.email)
                .join(GuestList, GuestList.id == GuestListMember.guest_list_id)
                .where(
                    GuestList.host_id == host_id,
                    GuestList.id.in_(guest_list_ids),
                )
                .order_by(GuestListMember.created_at)
            )
            return list(result.scalars().all())
