"""Announcement write models - return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.announcements.dtos import AnnouncementDTO, TargetAudience, check_audience
from src.announcements.repository.orm_models import Announcement
from src.config.database import async_session_manager
from src.models.base import utc_now

EDITABLE_ANNOUNCEMENT_FIELDS = ("title", "content", "target_audience", "event_id")


class AnnouncementWriteModel(ABC):
    @abstractmethod
    async def create_announcement(
        self,
        host_id: UUID,
        title: str,
        content: str,
        target_audience: TargetAudience,
        event_id: UUID | None = None,
        publish: bool = False,
    ) -> AnnouncementDTO:
        """Raises AnnouncementAudienceError when eventId does not match the audience."""
        raise NotImplementedError

    @abstractmethod
    async def update_announcement(self, announcement_id: UUID, changes: dict) -> AnnouncementDTO | None:
        """Raises AnnouncementAudienceError when the result would be inconsistent."""
        raise NotImplementedError

    @abstractmethod
    async def publish(self, announcement_id: UUID) -> AnnouncementDTO | None:
        """Publishing is one-way; publishing twice keeps the first publishedAt."""
        raise NotImplementedError

    @abstractmethod
    async def delete_announcement(self, announcement_id: UUID) -> bool:
        raise NotImplementedError


class SqlAnnouncementWriteModel(AnnouncementWriteModel):
    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_announcement(
        self,
        host_id: UUID,
        title: str,
        content: str,
        target_audience: TargetAudience,
        event_id: UUID | None = None,
        publish: bool = False,
    ) -> AnnouncementDTO:
        check_audience(target_audience, event_id)
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            announcement = Announcement(
                host_id=host_id,
                title=title,
                content=content,
                target_audience=target_audience,
                event_id=event_id,
                is_published=publish,
                published_at=utc_now() if publish else None,
            )
            session.add(announcement)
            await session.flush()
            await session.refresh(announcement)
            return AnnouncementDTO.from_announcement(announcement)

    async def update_announcement(self, announcement_id: UUID, changes: dict) -> AnnouncementDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            announcement = await session.get(Announcement, announcement_id)
            if not announcement:
                return None
            for field, value in changes.items():
                if field in EDITABLE_ANNOUNCEMENT_FIELDS:
                    setattr(announcement, field, value)
            check_audience(TargetAudience(announcement.target_audience), announcement.event_id)
            await session.flush()
            await session.refresh(announcement)
            return AnnouncementDTO.from_announcement(announcement)

    async def publish(self, announcement_id: UUID) -> AnnouncementDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            announcement = await session.get(Announcement, announcement_id)
            if not announcement:
                return None
            if not announcement.is_published:
                announcement.is_published = True
                announcement.published_at = utc_now()
                await session.flush()
                await session.refresh(announcement)
            return AnnouncementDTO.from_announcement(announcement)

    async def delete_announcement(self, announcement_id: UUID) -> bool:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            announcement = await session.get(Announcement, announcement_id)
            if not announcement:
                return False
            await session.delete(announcement)
            await session.flush()
            return True
