from dataclasses import dataclass

FOOTER_HTML = """
        <hr style="border: none; border-top: 1px solid #e5e7eb; margin: 20px 0;">
        <p style="color: #9ca3af; font-size: 12px; text-align: center;">
            Sent by EventHost - Private Event Management Platform
        </p>
"""


@dataclass
class EmailTemplates:
    INVITATION_SUBJECT = "You're invited to {event_title}"
    INVITATION_HTML = """
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"></head>
    <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #2563eb; margin-bottom: 20px;">You're Invited!</h1>
        {greeting_html}
        <div style="background-color: #f8fafc; padding: 20px; border-radius: 8px; margin-bottom: 20px;">
            <h2 style="margin: 0 0 10px 0; color: #1e293b;">{event_title}</h2>
            {description_html}
            <p style="margin: 5px 0;"><strong>When:</strong> {event_date}</p>
            {location_html}
            <p style="margin: 5px 0;"><strong>Host:</strong> {host_label}</p>
        </div>

        <p style="color: #374151; text-align: center; font-weight: bold;">Please respond to this invitation:</p>

        <div style="text-align: center; margin: 30px 0;">
            <a href="{rsvp_yes_url}" style="background-color: #16a34a; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px;">Yes</a>
            <a href="{rsvp_maybe_url}" style="background-color: #ca8a04; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px;">Maybe</a>
            <a href="{rsvp_no_url}" style="background-color: #dc2626; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px;">No</a>
        </div>

        <div style="text-align: center; margin: 20px 0;">
            <a href="{invite_url}" style="color: #2563eb;">View Full Event Details</a>
        </div>

        <p style="color: #6b7280; font-size: 14px;">
            This is a private event invitation. Please don't share this link with others.
        </p>
        {footer}
    </body>
    </html>
    """

    INVITATION_TEXT = """
    {greeting_text}

    You're invited to {event_title}.

    When: {event_date}
    Where: {event_location}
    Host: {host_label}

    Respond with one click:
    Yes: {rsvp_yes_url}
    Maybe: {rsvp_maybe_url}
    No: {rsvp_no_url}

    Full event details: {invite_url}

    This is a private event invitation. Please don't share this link with others.
    """

    CANCELLATION_SUBJECT = "Event Cancelled: {event_title}"
    CANCELLATION_HTML = """
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"></head>
    <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #dc2626; margin-bottom: 20px;">Event Cancelled</h1>
        {greeting_html}
        <div style="background-color: #fef2f2; padding: 20px; border-radius: 8px; border-left: 4px solid #dc2626;">
            <h2 style="margin: 0 0 10px 0; color: #1e293b;">{event_title}</h2>
            <p style="margin: 5px 0;"><strong>Was scheduled for:</strong> {event_date}</p>
            {location_html}
            <p style="margin: 5px 0;"><strong>Host:</strong> {host_name}</p>
        </div>
        <p style="color: #374151; margin: 20px 0;">
            We regret to inform you that this event has been cancelled by the host.
            We apologize for any inconvenience this may cause.
        </p>
        <p style="color: #6b7280;">If you have any questions, please contact the host directly.</p>
        {footer}
    </body>
    </html>
    """

    CANCELLATION_TEXT = """
    {greeting_text}

    {event_title} has been cancelled by the host.

    Was scheduled for: {event_date}
    Where: {event_location}
    Host: {host_name}

    If you have any questions, please contact the host directly.
    """

    ANNOUNCEMENT_SUBJECT = "{title}"
    ANNOUNCEMENT_HTML = """
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"></head>
    <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #2563eb; margin-bottom: 20px;">{title}</h1>
        <div style="background-color: #f8fafc; padding: 20px; border-radius: 8px; white-space: pre-line;">{content}</div>
        <p style="color: #6b7280; margin-top: 20px;">From {host_name}</p>
        {footer}
    </body>
    </html>
    """

    ANNOUNCEMENT_TEXT = """
    {title}

    {content}

    From {host_name}
    """

    POLL_SUBJECT = "Poll: {title}"
    POLL_HTML = """
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"></head>
    <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #2563eb; margin-bottom: 20px;">{title}</h1>
        {description_html}
        <p style="color: #374151;">{host_name} would like your input. Voting closes {end_date}.</p>
        <p style="color: #374151; font-weight: bold;">Vote with one click:</p>
        <ul style="list-style: none; padding: 0;">
            {options_html}
        </ul>
        <div style="text-align: center; margin: 20px 0;">
            <a href="{poll_url}" style="color: #2563eb;">View the poll</a>
        </div>
        {footer}
    </body>
    </html>
    """

    POLL_TEXT = """
    {title}

    {description}

    {host_name} would like your input. Voting closes {end_date}.

    Vote with one click:
    {options_text}

    View the poll: {poll_url}
    """

    POLL_OPTION_HTML = (
        '<li style="margin: 8px 0;"><a href="{vote_url}" style="background-color: #2563eb; '
        'color: white; padding: 8px 16px; text-decoration: none; border-radius: 4px;">{option}</a></li>'
    )
    POLL_OPTION_TEXT = "- {option}: {vote_url}"
