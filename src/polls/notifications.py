from uuid import UUID

from src.accounts.dtos import HostDTO
from src.email_service import EmailServiceBase, format_event_date
from src.email_service.dispatch import send_to_each, unique_emails
from src.guest_lists.repository.read_models import GuestListReadModel
from src.polls.dtos import PollDTO


async def notify_guest_lists(
    email_service: EmailServiceBase,
    guest_list_read_model: GuestListReadModel,
    poll: PollDTO,
    host: HostDTO,
    guest_list_ids: list[UUID],
    base_url: str,
) -> int:
    """Email the poll to every distinct member of the host's given lists."""
    recipients = unique_emails(await guest_list_read_model.member_emails(host.id, guest_list_ids))
    return await send_to_each(
        recipients,
        lambda email: email_service.send_poll(
            to_address=email,
            poll_id=str(poll.id),
            title=poll.title,
            options=poll.options,
            end_date=format_event_date(poll.end_date),
            base_url=base_url,
            host_name=host.display_name,
            description=poll.description,
        ),
        email_type="poll email",
    )
