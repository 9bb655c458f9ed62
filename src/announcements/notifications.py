"""Who receives an announcement email, and sending it to them."""

from src.accounts.dtos import HostDTO
from src.announcements.dtos import AnnouncementDTO, TargetAudience
from src.email_service import EmailServiceBase
from src.email_service.dispatch import send_to_each, unique_emails
from src.guest_lists.repository.read_models import GuestListReadModel
from src.invitations.dtos import RSVPStatus
from src.invitations.repository.read_models import InvitationReadModel


async def announcement_recipients(
    announcement: AnnouncementDTO,
    host: HostDTO,
    guest_list_read_model: GuestListReadModel,
    invitation_read_model: InvitationReadModel,
    specific_user_emails: list[str] | None = None,
) -> list[str]:
    match announcement.target_audience:
        case TargetAudience.ALL_USERS:
            guest_lists = await guest_list_read_model.list_host_guest_lists(host.id)
            emails = await guest_list_read_model.member_emails(
                host.id, [guest_list.id for guest_list in guest_lists]
            )
        case TargetAudience.EVENT_ATTENDEES:
            invitations = await invitation_read_model.list_for_event(announcement.event_id)
            emails = [
                invitation.email
                for invitation in invitations
                if invitation.rsvp_status == RSVPStatus.YES
            ]
        case TargetAudience.SPECIFIC_USERS:
            emails = list(specific_user_emails or [])
    return unique_emails(emails)


async def send_announcement_emails(
    email_service: EmailServiceBase,
    announcement: AnnouncementDTO,
    host: HostDTO,
    recipients: list[str],
) -> int:
    return await send_to_each(
        recipients,
        lambda email: email_service.send_announcement(
            to_address=email,
            title=announcement.title,
            content=announcement.content,
            host_name=host.display_name,
        ),
        email_type="announcement",
    )
