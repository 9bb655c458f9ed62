from src.accounts.dtos import HostDTO
from src.email_service import EmailServiceBase, format_event_date
from src.email_service.dispatch import send_to_each
from src.events.dtos import EventDTO
from src.invitations.dtos import InvitationDTO


async def send_invitation_email(
    email_service: EmailServiceBase,
    event: EventDTO,
    host: HostDTO,
    invitation: InvitationDTO,
    base_url: str,
) -> None:
    """Send one invitation. Raises on delivery failure."""
    if not invitation.email:
        raise ValueError(f"Invitation {invitation.id} has no email address")
    await email_service.send_invitation(
        to_address=invitation.email,
        event_title=event.title,
        event_date=format_event_date(event.start_date_time),
        token=invitation.token,
        base_url=base_url,
        host_name=host.display_name,
        host_email=host.email,
        guest_name=invitation.name,
        event_description=event.description,
        event_location=event.location,
    )


async def send_invitation_emails(
    email_service: EmailServiceBase,
    event: EventDTO,
    host: HostDTO,
    invitations: list[InvitationDTO],
    base_url: str,
) -> int:
    """Email every invitation that has an address, one at a time.

    Returns the number delivered; failures are logged and skipped.
    """
    return await send_to_each(
        [invitation for invitation in invitations if invitation.email],
        lambda invitation: send_invitation_email(email_service, event, host, invitation, base_url),
        describe=lambda invitation: invitation.email,
        email_type="invitation",
    )
