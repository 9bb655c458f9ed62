from abc import ABC, abstractmethod
from datetime import datetime
from html import escape
from urllib.parse import urlencode

from src.email_service.templates import FOOTER_HTML, EmailTemplates


def format_event_date(value: datetime) -> str:
    return value.strftime("%A, %B %d, %Y at %I:%M %p")


def _paragraph(text: str | None, style: str = "color: #374151;") -> str:
    if not text:
        return ""
    return f'<p style="{style}">{escape(text)}</p>'


class EmailServiceBase(ABC):
    """Renders the EventHost emails; subclasses only deliver them."""

    @abstractmethod
    async def _send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> None:
        """Deliver one rendered email. Raises when the provider rejects it."""
        raise NotImplementedError

    async def send_invitation(
        self,
        to_address: str,
        event_title: str,
        event_date: str,
        token: str,
        base_url: str,
        host_name: str,
        host_email: str,
        guest_name: str | None = None,
        event_description: str | None = None,
        event_location: str | None = None,
    ) -> None:
        rsvp_url = f"{base_url}/api/rsvp/{token}"
        host_label = f"{host_name} ({host_email})" if host_name != host_email else host_email
        values = {
            "event_title": event_title,
            "event_date": event_date,
            "host_label": host_label,
            "invite_url": f"{base_url}/invite/{token}",
            "rsvp_yes_url": f"{rsvp_url}/yes",
            "rsvp_maybe_url": f"{rsvp_url}/maybe",
            "rsvp_no_url": f"{rsvp_url}/no",
        }
        html_body = EmailTemplates.INVITATION_HTML.format(
            **{key: escape(value) for key, value in values.items()},
            greeting_html=_paragraph(f"Hi {guest_name}," if guest_name else None),
            description_html=_paragraph(event_description, "color: #64748b; margin: 5px 0;"),
            location_html=_location_html(event_location, "Where"),
            footer=FOOTER_HTML,
        )
        text_body = EmailTemplates.INVITATION_TEXT.format(
            **values,
            greeting_text=f"Hi {guest_name}," if guest_name else "Hello,",
            event_location=event_location or "TBD",
        )
        await self._send(
            to_address=to_address,
            subject=EmailTemplates.INVITATION_SUBJECT.format(event_title=event_title),
            html_body=html_body,
            text_body=text_body,
        )

    async def send_cancellation(
        self,
        to_address: str,
        event_title: str,
        event_date: str,
        host_name: str,
        guest_name: str | None = None,
        event_location: str | None = None,
    ) -> None:
        values = {
            "event_title": event_title,
            "event_date": event_date,
            "host_name": host_name,
        }
        html_body = EmailTemplates.CANCELLATION_HTML.format(
            **{key: escape(value) for key, value in values.items()},
            greeting_html=_paragraph(f"Hi {guest_name}," if guest_name else None),
            location_html=_location_html(event_location, "Location"),
            footer=FOOTER_HTML,
        )
        text_body = EmailTemplates.CANCELLATION_TEXT.format(
            **values,
            greeting_text=f"Hi {guest_name}," if guest_name else "Hello,",
            event_location=event_location or "TBD",
        )
        await self._send(
            to_address=to_address,
            subject=EmailTemplates.CANCELLATION_SUBJECT.format(event_title=event_title),
            html_body=html_body,
            text_body=text_body,
        )

    async def send_announcement(
        self,
        to_address: str,
        title: str,
        content: str,
        host_name: str,
    ) -> None:
        html_body = EmailTemplates.ANNOUNCEMENT_HTML.format(
            title=escape(title),
            content=escape(content),
            host_name=escape(host_name),
            footer=FOOTER_HTML,
        )
        text_body = EmailTemplates.ANNOUNCEMENT_TEXT.format(
            title=title, content=content, host_name=host_name
        )
        await self._send(
            to_address=to_address,
            subject=EmailTemplates.ANNOUNCEMENT_SUBJECT.format(title=title),
            html_body=html_body,
            text_body=text_body,
        )

    async def send_poll(
        self,
        to_address: str,
        poll_id: str,
        title: str,
        options: list[str],
        end_date: str,
        base_url: str,
        host_name: str,
        description: str | None = None,
    ) -> None:
        vote_urls = [
            f"{base_url}/api/polls/{poll_id}/vote-email?"
            + urlencode({"option": index, "voterEmail": to_address})
            for index in range(len(options))
        ]
        poll_url = f"{base_url}/polls/{poll_id}"
        options_html = "\n".join(
            EmailTemplates.POLL_OPTION_HTML.format(vote_url=escape(url), option=escape(option))
            for option, url in zip(options, vote_urls)
        )
        options_text = "\n".join(
            EmailTemplates.POLL_OPTION_TEXT.format(vote_url=url, option=option)
            for option, url in zip(options, vote_urls)
        )
        html_body = EmailTemplates.POLL_HTML.format(
            title=escape(title),
            description_html=_paragraph(description, "color: #64748b;"),
            host_name=escape(host_name),
            end_date=escape(end_date),
            options_html=options_html,
            poll_url=escape(poll_url),
            footer=FOOTER_HTML,
        )
        text_body = EmailTemplates.POLL_TEXT.format(
            title=title,
            description=description or "",
            host_name=host_name,
            end_date=end_date,
            options_text=options_text,
            poll_url=poll_url,
        )
        await self._send(
            to_address=to_address,
            subject=EmailTemplates.POLL_SUBJECT.format(title=title),
            html_body=html_body,
            text_body=text_body,
        )


def _location_html(location: str | None, label: str) -> str:
    if not location:
        return ""
    return f'<p style="margin: 5px 0;"><strong>{label}:</strong> {escape(location)}</p>'
