import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from src.accounts.dependencies import require_host
from src.accounts.dtos import HostDTO
from src.announcements.dependencies import (
    get_announcement_read_model,
    get_announcement_write_model,
    get_owned_announcement,
)
from src.announcements.dtos import (
    AnnouncementAudienceError,
    AnnouncementDTO,
    TargetAudience,
    check_audience,
)
from src.announcements.notifications import announcement_recipients, send_announcement_emails
from src.announcements.repository.read_models import AnnouncementReadModel
from src.announcements.repository.write_models import AnnouncementWriteModel
from src.announcements.urls import (
    ANNOUNCEMENT_URL,
    ANNOUNCEMENTS_URL,
    PUBLISH_ANNOUNCEMENT_URL,
)
from src.email_service import EmailServiceBase, get_email_service
from src.events.dependencies import get_event_read_model
from src.events.repository.read_models import EventReadModel
from src.guest_lists.dependencies import get_guest_list_read_model
from src.guest_lists.repository.read_models import GuestListReadModel
from src.invitations.dependencies import get_invitation_read_model
from src.invitations.repository.read_models import InvitationReadModel
from src.models.schemas import CamelModel, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class AnnouncementCreate(CamelModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    target_audience: TargetAudience = TargetAudience.ALL_USERS
    event_id: UUID | None = None
    is_published: bool = False
    send_email: bool = False
    specific_user_emails: list[str] = Field(default_factory=list)


class AnnouncementUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)
    target_audience: TargetAudience | None = None
    event_id: UUID | None = None


class AnnouncementResponse(CamelModel):
    id: UUID
    host_id: UUID
    title: str
    content: str
    target_audience: TargetAudience
    event_id: UUID | None = None
    is_published: bool
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


async def ensure_host_event(
    target_audience: TargetAudience,
    event_id: UUID | None,
    host: HostDTO,
    event_read_model: EventReadModel,
) -> None:
    """Validate the audience, then that its event belongs to the host."""
    try:
        check_audience(target_audience, event_id)
    except AnnouncementAudienceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if event_id is None:
        return
    event = await event_read_model.get_event(event_id)
    if not event or event.host_id != host.id:
        raise HTTPException(status_code=404, detail="Event not found")


@router.get(ANNOUNCEMENTS_URL, response_model=list[AnnouncementResponse])
async def list_announcements(
    host: HostDTO = Depends(require_host),
    read_model: AnnouncementReadModel = Depends(get_announcement_read_model),
):
    return await read_model.list_host_announcements(host.id)


@router.post(ANNOUNCEMENTS_URL, response_model=AnnouncementResponse)
async def create_announcement(
    body: AnnouncementCreate,
    host: HostDTO = Depends(require_host),
    write_model: AnnouncementWriteModel = Depends(get_announcement_write_model),
    event_read_model: EventReadModel = Depends(get_event_read_model),
    guest_list_read_model: GuestListReadModel = Depends(get_guest_list_read_model),
    invitation_read_model: InvitationReadModel = Depends(get_invitation_read_model),
    email_service: EmailServiceBase = Depends(get_email_service),
):
    """
    Create an announcement and, with sendEmail, mail it to its audience:
    guest list members, the event's attending guests, or the listed emails.
    """
    await ensure_host_event(body.target_audience, body.event_id, host, event_read_model)
    announcement = await write_model.create_announcement(
        host.id,
        title=body.title,
        content=body.content,
        target_audience=body.target_audience,
        event_id=body.event_id,
        publish=body.is_published,
    )

    if body.send_email:
        recipients = await announcement_recipients(
            announcement,
            host,
            guest_list_read_model,
            invitation_read_model,
            body.specific_user_emails,
        )
        sent = await send_announcement_emails(email_service, announcement, host, recipients)
        logger.info(
            "Announcement %s emailed to %d of %d recipients",
            announcement.id,
            sent,
            len(recipients),
        )

    return announcement


@router.put(ANNOUNCEMENT_URL, response_model=AnnouncementResponse)
async def update_announcement(
    body: AnnouncementUpdate,
    announcement: AnnouncementDTO = Depends(get_owned_announcement),
    host: HostDTO = Depends(require_host),
    write_model: AnnouncementWriteModel = Depends(get_announcement_write_model),
    event_read_model: EventReadModel = Depends(get_event_read_model),
):
    changes = body.model_dump(exclude_unset=True)
    for field in ("title", "content", "target_audience"):
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=400, detail=f"{field} cannot be empty")

    await ensure_host_event(
        changes.get("target_audience", announcement.target_audience),
        changes.get("event_id", announcement.event_id),
        host,
        event_read_model,
    )
    updated = await write_model.update_announcement(announcement.id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Announcement not found")
    return updated


@router.post(PUBLISH_ANNOUNCEMENT_URL, response_model=AnnouncementResponse)
async def publish_announcement(
    announcement: AnnouncementDTO = Depends(get_owned_announcement),
    write_model: AnnouncementWriteModel = Depends(get_announcement_write_model),
):
    published = await write_model.publish(announcement.id)
    if not published:
        raise HTTPException(status_code=404, detail="Announcement not found")
    return published


@router.delete(ANNOUNCEMENT_URL, response_model=SuccessResponse)
async def delete_announcement(
    announcement: AnnouncementDTO = Depends(get_owned_announcement),
    write_model: AnnouncementWriteModel = Depends(get_announcement_write_model),
) -> SuccessResponse:
    await write_model.delete_announcement(announcement.id)
    return SuccessResponse(message="Announcement deleted successfully")
