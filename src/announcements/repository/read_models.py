import abc
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.announcements.dtos import AnnouncementDTO
from src.announcements.repository.orm_models import Announcement
from src.config.database import async_session_manager


class AnnouncementReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_announcement(self, announcement_id: UUID) -> AnnouncementDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_host_announcements(self, host_id: UUID) -> list[AnnouncementDTO]:
        """Newest first."""
        raise NotImplementedError


class SqlAnnouncementReadModel(AnnouncementReadModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_announcement(self, announcement_id: UUID) -> AnnouncementDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            announcement = await session.get(Announcement, announcement_id)
            return AnnouncementDTO.from_announcement(announcement) if announcement else None

    async def list_host_announcements(self, host_id: UUID) -> list[AnnouncementDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(Announcement)
                .where(Announcement.host_id == host_id)
                .order_by(Announcement.created_at.desc())
            )
            return [AnnouncementDTO.from_announcement(row) for row in result.scalars().all()]
