"""Guest list write models - return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guest_lists.dtos import GuestListDTO, GuestListMemberDTO
from src.guest_lists.repository.orm_models import GuestList, GuestListMember

logger = logging.getLogger(__name__)

EDITABLE_LIST_FIELDS = ("name", "description")
EDITABLE_MEMBER_FIELDS = ("name", "email", "phone")


class GuestListWriteModel(ABC):
    @abstractmethod
    async def create_guest_list(
        self, host_id: UUID, name: str, description: str | None = None
    ) -> GuestListDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_guest_list(self, guest_list_id: UUID, changes: dict) -> GuestListDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def delete_guest_list(self, guest_list_id: UUID) -> bool:
        """Delete the list with its members."""
        raise NotImplementedError

    @abstractmethod
    async def add_member(
        self, guest_list_id: UUID, name: str, email: str, phone: str | None = None
    ) -> GuestListMemberDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_member(self, member_id: UUID, changes: dict) -> GuestListMemberDTO | None:
        raise NotImplementedError

    @abstractmethod
    async def remove_member(self, member_id: UUID) -> bool:
        raise NotImplementedError


class SqlGuestListWriteModel(GuestListWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_guest_list(
        self, host_id: UUID, name: str, description: str | None = None
    ) -> GuestListDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest_list = GuestList(host_id=host_id, name=name, description=description)
            session.add(guest_list)
            await session.flush()
            await session.refresh(guest_list)
            return GuestListDTO.from_guest_list(guest_list)

    async def update_guest_list(self, guest_list_id: UUID, changes: dict) -> GuestListDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest_list = await session.get(GuestList, guest_list_id)
            if not guest_list:
                return None
            for field, value in changes.items():
                if field in EDITABLE_LIST_FIELDS:
                    setattr(guest_list, field, value)
            await session.flush()
            await session.refresh(guest_list)
            member_count = await session.scalar(
                select(func.count())
                .select_from(GuestListMember)
                .where(GuestListMember.guest_list_id == guest_list_id)
            )
            return GuestListDTO.from_guest_list(guest_list, member_count or 0)

    async def delete_guest_list(self, guest_list_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest_list = await session.get(GuestList, guest_list_id)
            if not guest_list:
                return False
            await session.delete(guest_list)
            await session.flush()
            logger.info("Deleted guest list %s", guest_list_id)
            return True

    async def add_member(
        self, guest_list_id: UUID, name: str, email: str, phone: str | None = None
    ) -> GuestListMemberDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            member = GuestListMember(guest_list_id=guest_list_id, name=name, email=email, phone=phone)
            session.add(member)
            await session.flush()
            await session.refresh(member)
            return GuestListMemberDTO.from_member(member)

    async def update_member(self, member_id: UUID, changes: dict) -> GuestListMemberDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            member = await session.get(GuestListMember, member_id)
            if not member:
                return None
            for field, value in changes.items():
                if field in EDITABLE_MEMBER_FIELDS:
                    setattr(member, field, value)
            await session.flush()
            await session.refresh(member)
            return GuestListMemberDTO.from_member(member)

    async def remove_member(self, member_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            member = await session.get(GuestListMember, member_id)
            if not member:
                return False
            await session.delete(member)
            await session.flush()
            return True
