# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Attendee registration, attendance tracking and queries.

Every store call runs in a worker thread so request handlers stay
non-blocking. Store faults are logged and surfaced as ``ServerError``.
"""

import asyncio
import uuid
from datetime import datetime
from typing import Any, Callable, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from registration_api.core.exceptions import (
    MailDeliveryError, NotFound, ServerError, ValidationConflict,
)
from registration_api.core.logging import get_logger
from registration_api.metrics import ATTENDANCE_CHANGES, EMAILS_SENT, REGISTRATIONS_TOTAL
from registration_api.models.domain import Attendee
from registration_api.repositories.attendee_repository import AttendeeRepository
from registration_api.services.email_templates import REGISTRATION_SUBJECT, render_registration
from registration_api.services.mail_client import MailClient, OutgoingMail

logger = get_logger(__name__)

DUPLICATE_EMAIL = "A user with this email already exists."
NOT_FOUND_FOR_YEAR = "User not found for this year."
ATTENDANCE_WRITE_ATTEMPTS = 5


def current_year() -> int:
    return datetime.now().year


class AttendeeService:
    """Business logic for attendee records."""

    def __init__(self, repo: AttendeeRepository, mail_client: MailClient) -> None:
        self._repo = repo
        self._mail = mail_client

    async def _store(self, operation: str, func: Callable[..., Any], *args) -> Any:
        try:
            return await asyncio.to_thread(func, *args)
        except IntegrityError:
            raise
        except SQLAlchemyError as exc:
            logger.error("Store failure during %s: %s", operation, exc)
            raise ServerError() from exc

    # ── Registration ──

    async def register(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        year: Optional[int] = None,
    ) -> str:
        """Create the attendee and send the confirmation email.

        Returns the user-facing message. A failed confirmation email does
        not undo the registration.
        """
        if await self._store("registration lookup", self._repo.find_by_email, email):
            REGISTRATIONS_TOTAL.labels(outcome="duplicate").inc()
            raise ValidationConflict(DUPLICATE_EMAIL)

        attendee = Attendee(
            id=str(uuid.uuid4()),
            email=email,
            year=year if year is not None else current_year(),
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            address=address,
        )
        try:
            await self._store("registration insert", self._repo.create, attendee)
        except IntegrityError as exc:
            # A concurrent registration won the race on the unique email.
            logger.warning("Duplicate email rejected by store: %s", email)
            REGISTRATIONS_TOTAL.labels(outcome="duplicate").inc()
            raise ValidationConflict(DUPLICATE_EMAIL) from exc
        REGISTRATIONS_TOTAL.labels(outcome="created").inc()
        logger.info("Attendee registered id=%s email=%s year=%s", attendee.id, email, attendee.year)

        try:
            await self._mail.send(OutgoingMail(
                to=email,
                subject=REGISTRATION_SUBJECT,
                html=render_registration(first_name),
            ))
        except MailDeliveryError as exc:
            EMAILS_SENT.labels(kind="registration", status="failed").inc()
            logger.error("Error sending registration email to %s: %s", email, exc)
            return "Registered, but failed to send confirmation email."
        EMAILS_SENT.labels(kind="registration", status="sent").inc()
        logger.info("Registration email sent to %s", email)
        return "Registration successful and email sent!"

    # ── Attendance ──

    async def _get_for_year(self, email: str, year: Optional[int]) -> Attendee:
        year = year if year is not None else current_year()
        attendee = await self._store(
            "attendee lookup", self._repo.find_by_email_and_year, email, year,
        )
        if attendee is None:
            raise NotFound(NOT_FOUND_FOR_YEAR)
        return attendee

    async def _change_attendance(self, email: str, year: Optional[int], operation: str,
                                 change: Callable[[Attendee], None]) -> Attendee:
        """Read, apply ``change`` and write back only if nobody wrote in between.

        A lost compare-and-set re-reads the record and re-applies ``change``,
        so the conflict checks always run against the latest stored set.
        """
        for _ in range(ATTENDANCE_WRITE_ATTEMPTS):
            attendee = await self._get_for_year(email, year)
            previous = list(attendee.attendance)
            change(attendee)
            written = await self._store(
                operation, self._repo.update_attendance,
                attendee.id, previous, attendee.attendance,
            )
            if written:
                return attendee
            logger.warning("Concurrent %s on id=%s; re-reading", operation, attendee.id)
        logger.error("Gave up on %s for %s after %d attempts",
                     operation, email, ATTENDANCE_WRITE_ATTEMPTS)
        raise ServerError()

    async def mark_attendance(self, email: str, session: int, year: Optional[int] = None) -> str:
        def add(attendee: Attendee) -> None:
            if attendee.has_attended(session):
                raise ValidationConflict("Attendance already marked for this session.")
            attendee.add_session(session)

        attendee = await self._change_attendance(email, year, "attendance mark", add)
        ATTENDANCE_CHANGES.labels(action="mark").inc()
        logger.info("Attendance marked id=%s session=%d", attendee.id, session)
        return f"Attendance marked for session {session}."

    async def remove_attendance(self, email: str, session: int, year: Optional[int] = None) -> str:
        def remove(attendee: Attendee) -> None:
            if not attendee.has_attended(session):
                raise ValidationConflict("Attendance not found for this session.")
            attendee.remove_session(session)

        attendee = await self._change_attendance(email, year, "attendance removal", remove)
        ATTENDANCE_CHANGES.labels(action="remove").inc()
        logger.info("Attendance removed id=%s session=%d", attendee.id, session)
        return f"Attendance removed for session {session}."

    async def check_attendance(self, email: str, session: int, year: Optional[int] = None) -> bool:
        attendee = await self._get_for_year(email, year)
        return attendee.has_attended(session)

    # ── Queries ──

    async def list_by_session(self, session: int, year: int) -> List[Attendee]:
        return await self._store("attendance listing", self._repo.list_by_session, session, year)

    async def list_by_year(self, year: int) -> List[Attendee]:
        attendees = await self._store("year listing", self._repo.list_by_year, year)
        if not attendees:
            raise NotFound(f"No users found for year {year}.")
        return attendees

    async def list_without_attendance(self, year: int) -> List[Attendee]:
        return await self._store(
            "no-attendance listing", self._repo.list_without_attendance, year,
        )

    # ── Subscription ──

    async def unsubscribe(self, attendee_id: str) -> Attendee:
        """Flag the attendee as unsubscribed. There is no way back."""
        attendee = await self._store("unsubscribe lookup", self._repo.find_by_id, attendee_id)
        if attendee is None:
            raise NotFound("User not found.")
        await self._store("unsubscribe", self._repo.mark_unsubscribed, attendee_id)
        attendee.unsubscribed = True
        logger.info("Attendee unsubscribed id=%s", attendee_id)
        return attendee
