# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Mail client — SMTP relay access.

Messages go out over implicit TLS (``SMTP_SSL``). When no relay credentials
are configured the client only logs what it would have sent.
"""

import asyncio
import smtplib
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import Dict, List, Optional

from registration_api.core.config import settings
from registration_api.core.exceptions import MailDeliveryError
from registration_api.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class OutgoingMail:
    to: str
    subject: str
    html: Optional[str] = None
    text: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)


class MailClient:
    """Sends single messages and concurrent batches through one SMTP relay."""

    def __init__(
        self,
        host: str = settings.SMTP_HOST,
        port: int = settings.SMTP_PORT,
        username: str = settings.MAIL_USERNAME,
        password: str = settings.MAIL_PASSWORD,
        sender: str = settings.MAIL_FROM,
        timeout: float = settings.SMTP_TIMEOUT,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender or username
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._username and self._password)

    def build_message(self, mail: OutgoingMail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = mail.to
        message["Subject"] = mail.subject
        for name, value in mail.headers.items():
            message[name] = value
        if mail.text is not None:
            message.set_content(mail.text)
            if mail.html is not None:
                message.add_alternative(mail.html, subtype="html")
        else:
            message.set_content(mail.html or "", subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        if not self.configured:
            logger.info(
                "[MOCK EMAIL] To: %s | Subject: %s",
                message["To"], message["Subject"],
            )
            return
        try:
            with smtplib.SMTP_SSL(self._host, self._port, timeout=self._timeout) as smtp:
                smtp.login(self._username, self._password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery to %s failed: %s", message["To"], exc)
            raise MailDeliveryError(str(exc)) from exc
        logger.info("Email delivered to %s subject=%r", message["To"], message["Subject"])

    async def send(self, mail: OutgoingMail) -> None:
        """Deliver one message. Raises ``MailDeliveryError`` on failure,
        including a message that cannot be built (e.g. a header with CR/LF).
        """
        try:
            message = self.build_message(mail)
        except (ValueError, TypeError) as exc:
            logger.error("Cannot build message to %r: %s", mail.to, exc)
            raise MailDeliveryError(str(exc)) from exc
        await asyncio.to_thread(self._deliver, message)

    async def send_many(self, mails: List[OutgoingMail]) -> int:
        """Send every message concurrently and wait for all of them.

        Messages already accepted by the relay stay sent; if any send failed
        a ``MailDeliveryError`` summarising the failures is raised afterwards.
        """
        results = await asyncio.gather(
            *(self.send(mail) for mail in mails), return_exceptions=True,
        )
        failures = [
            (mail.to, result) for mail, result in zip(mails, results)
            if isinstance(result, BaseException)
        ]
        if failures:
            logger.error(
                "Batch send finished with %d/%d failures (first: %s: %s)",
                len(failures), len(mails), failures[0][0], failures[0][1],
            )
            raise MailDeliveryError(
                f"{len(failures)} of {len(mails)} messages failed"
            )
        return len(mails)
