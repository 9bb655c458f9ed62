from uuid import UUID

from fastapi import Depends, HTTPException

from src.accounts.dependencies import assert_owned_by, require_host
from src.accounts.dtos import HostDTO
from src.announcements.dtos import AnnouncementDTO
from src.announcements.repository.read_models import (
    AnnouncementReadModel,
    SqlAnnouncementReadModel,
)
from src.announcements.repository.write_models import (
    AnnouncementWriteModel,
    SqlAnnouncementWriteModel,
)


def get_announcement_read_model() -> AnnouncementReadModel:
    """Dependency to get announcement read model instance."""
    return SqlAnnouncementReadModel()


def get_announcement_write_model() -> AnnouncementWriteModel:
    """Dependency to get announcement write model instance."""
    return SqlAnnouncementWriteModel()


async def get_owned_announcement(
    announcement_id: UUID,
    host: HostDTO = Depends(require_host),
    read_model: AnnouncementReadModel = Depends(get_announcement_read_model),
) -> AnnouncementDTO:
    announcement = await read_model.get_announcement(announcement_id)
    if not announcement:
        raise HTTPException(status_code=404, detail="Announcement not found")
    assert_owned_by(announcement.host_id, host)
    return announcement
