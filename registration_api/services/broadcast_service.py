# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Broadcast email to every subscribed attendee.

Sends fan out concurrently and are joined before the result is reported.
The outcome is all-or-nothing for reporting only: messages accepted by the
relay before a failure stay delivered.
"""

import asyncio

from sqlalchemy.exc import SQLAlchemyError

from registration_api.core.config import settings
from registration_api.core.exceptions import MailDeliveryError, NotFound, ServerError
from registration_api.core.logging import get_logger
from registration_api.metrics import BROADCAST_RECIPIENTS, EMAILS_SENT
from registration_api.models.domain import Attendee
from registration_api.repositories.attendee_repository import AttendeeRepository
from registration_api.services.email_templates import render_broadcast
from registration_api.services.mail_client import MailClient, OutgoingMail

logger = get_logger(__name__)


def unsubscribe_links(attendee_id: str) -> tuple[str, str]:
    """Return (front-end page link, direct API link) for one attendee."""
    base = settings.PUBLIC_BASE_URL
    return (
        f"{base}/unsubscribe/{attendee_id}",
        f"{base}{settings.API_PREFIX}/unsubscribe/{attendee_id}",
    )


def build_broadcast_mail(attendee: Attendee, custom_html: str) -> OutgoingMail:
    page_link, direct_link = unsubscribe_links(attendee.id)
    return OutgoingMail(
        to=attendee.email,
        subject=settings.BROADCAST_SUBJECT,
        html=render_broadcast(attendee.first_name, custom_html, page_link),
        headers={
            "List-Unsubscribe": f"<{direct_link}>",
            "List-Unsubscribe-Post": "List-Unsubscribe=One-Click",
        },
    )


class BroadcastService:
    def __init__(self, repo: AttendeeRepository, mail_client: MailClient) -> None:
        self._repo = repo
        self._mail = mail_client

    async def broadcast(self, custom_html: str) -> int:
        """Email ``custom_html`` to every subscribed attendee; return the count."""
        try:
            recipients = await asyncio.to_thread(self._repo.list_subscribed)
        except SQLAlchemyError as exc:
            logger.error("Store failure loading broadcast recipients: %s", exc)
            raise ServerError("Failed to send broadcast.") from exc
        if not recipients:
            raise NotFound("No users to send the message to.")

        mails = [build_broadcast_mail(a, custom_html) for a in recipients]
        BROADCAST_RECIPIENTS.observe(len(mails))
        try:
            count = await self._mail.send_many(mails)
        except MailDeliveryError as exc:
            EMAILS_SENT.labels(kind="broadcast", status="failed").inc()
            logger.error("Error sending broadcast: %s", exc)
            raise ServerError("Failed to send broadcast.") from exc
        EMAILS_SENT.labels(kind="broadcast", status="sent").inc(count)
        logger.info("Broadcast sent to %d users", count)
        return count
