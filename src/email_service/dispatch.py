"""Sequential, failure-isolated email fan-out.

Every caller sends after its own write has been committed, so a failed send
never undoes the mutation that triggered it.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def send_to_each(
    recipients: Iterable[T],
    send: Callable[[T], Awaitable[object]],
    describe: Callable[[T], str] = str,
    email_type: str = "email",
) -> int:
    """Await ``send`` for each recipient in turn and return how many succeeded."""
    sent = 0
    for recipient in recipients:
        try:
            await send(recipient)
        except Exception:
            logger.exception("Failed to send %s to %s", email_type, describe(recipient))
            continue
        sent += 1
    return sent


def unique_emails(emails: Iterable[str | None]) -> list[str]:
    """Drop blanks and repeats, keeping first-seen order."""
    seen: dict[str, None] = {}
    for email in emails:
        if email and email.strip():
            seen.setdefault(email.strip(), None)
    return list(seen)
