# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service: forwards contact-form submissions to the organisers' inbox."""
from typing import Optional

from registration_api.core.config import settings
from registration_api.core.exceptions import MailDeliveryError, ServerError
from registration_api.core.logging import get_logger
from registration_api.metrics import EMAILS_SENT
from registration_api.services.email_templates import render_contact
from registration_api.services.mail_client import MailClient, OutgoingMail

logger = get_logger(__name__)


class ContactService:
    def __init__(self, mail_client: MailClient, receiver: str = settings.CONTACT_RECEIVER_EMAIL) -> None:
        self._mail = mail_client
        self._receiver = receiver

    async def submit(self, name: str, email: str, phone: Optional[str],
                     message: str, reason: Optional[str]) -> None:
        rendered = render_contact(reason, name=name, email=email, phone=phone, message=message)
        if not self._receiver:
            logger.error("CONTACT_RECEIVER_EMAIL is not configured")
            raise ServerError("Something went wrong.")
        try:
            await self._mail.send(OutgoingMail(
                to=self._receiver, subject=rendered.subject, text=rendered.body,
            ))
        except MailDeliveryError as exc:
            EMAILS_SENT.labels(kind="contact", status="failed").inc()
            logger.error("Error sending contact email: %s", exc)
            raise ServerError("Something went wrong.") from exc
        EMAILS_SENT.labels(kind="contact", status="sent").inc()
        logger.info("Contact form forwarded reason=%s from=%s", reason or "other", email)
