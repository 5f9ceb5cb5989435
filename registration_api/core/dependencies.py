# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — collaborators are built once at import
and handed to services explicitly.
"""

from registration_api.core.database import engine
from registration_api.repositories.attendee_repository import AttendeeRepository
from registration_api.services.attendee_service import AttendeeService
from registration_api.services.broadcast_service import BroadcastService
from registration_api.services.checkout_service import CheckoutService
from registration_api.services.contact_service import ContactService
from registration_api.services.mail_client import MailClient
from registration_api.services.payment_client import PaymentClient

# ── Collaborators ──
_attendee_repo = AttendeeRepository(engine)
_mail_client = MailClient()
_payment_client = PaymentClient()

# ── Services (with injected dependencies) ──
_attendee_service = AttendeeService(_attendee_repo, _mail_client)
_broadcast_service = BroadcastService(_attendee_repo, _mail_client)
_contact_service = ContactService(_mail_client)
_checkout_service = CheckoutService(_payment_client)


# ── FastAPI dependency functions ──
def get_attendee_repo() -> AttendeeRepository:
    return _attendee_repo


def get_mail_client() -> MailClient:
    return _mail_client


def get_payment_client() -> PaymentClient:
    return _payment_client


def get_attendee_service() -> AttendeeService:
    return _attendee_service


def get_broadcast_service() -> BroadcastService:
    return _broadcast_service


def get_contact_service() -> ContactService:
    return _contact_service


def get_checkout_service() -> CheckoutService:
    return _checkout_service
