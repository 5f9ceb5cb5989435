# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Email bodies: registration confirmation, contact-form forwarding, broadcast.

Broadcast content is operator-authored HTML and is embedded verbatim.
Only trusted operators may reach the broadcast endpoint.
"""

from html import escape
from typing import NamedTuple

from registration_api.core.config import settings


REGISTRATION_SUBJECT = f"Registration Successful – {settings.EVENT_NAME}"

REGISTRATION_HTML = """
<div style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <h2 style="color: #2c3e50;">Hello {first_name},</h2>
  <p>Thank you for registering for <strong>{event_name}</strong>! We are excited to receive you.</p>
  <p>Please be sure to check the website for important information concerning the meeting.</p>
  <p>In the meantime, feel free to explore our website at
    <a href="{site_url}" target="_blank" style="color: #1e90ff;">{site_label}</a>
    for resources that will bless you.
  </p>
  <p style="margin-top: 30px;">See you at the <strong>{event_full_name}</strong>!</p>
  <p>Looking forward to receiving you,</p>
  <p style="font-weight: bold;">{organizer}</p>
</div>
"""


def render_registration(first_name: str | None) -> str:
    site_label = settings.EVENT_SITE_URL.split("://", 1)[-1].capitalize()
    return REGISTRATION_HTML.format(
        first_name=escape(first_name or "there"),
        event_name=settings.EVENT_NAME,
        site_url=settings.EVENT_SITE_URL,
        site_label=site_label,
        event_full_name=settings.EVENT_FULL_NAME,
        organizer=settings.ORGANIZER_NAME,
    )


class ContactTemplate(NamedTuple):
    subject: str
    body: str


_CONTACT_DETAILS = "Email: {email}\nPhone: {phone}\nMessage: {message}"

CONTACT_TEMPLATES: dict[str, ContactTemplate] = {
    "prayer_request": ContactTemplate(
        "{name} needs prayer",
        "{name} needs prayer.\n\n" + _CONTACT_DETAILS,
    ),
    "ask_question": ContactTemplate(
        "{name} has a question",
        "{name} has a question.\n\n" + _CONTACT_DETAILS,
    ),
    "get_involved": ContactTemplate(
        "{name} wants to get involved",
        "{name} wants to get involved.\n\n" + _CONTACT_DETAILS,
    ),
}
DEFAULT_CONTACT_TEMPLATE = ContactTemplate(
    "New Contact Form Submission",
    "Name: {name}\n" + _CONTACT_DETAILS,
)


def render_contact(reason: str | None, **fields: str) -> ContactTemplate:
    """Pick the template for ``reason`` (falling back to the catch-all) and fill it."""
    template = CONTACT_TEMPLATES.get(reason or "", DEFAULT_CONTACT_TEMPLATE)
    values = {key: "" if value is None else value for key, value in fields.items()}
    return ContactTemplate(
        subject=template.subject.format(**values),
        body=template.body.format(**values),
    )


BROADCAST_HTML = """
<p>Hello {first_name},</p>
{custom_html}
<hr />
<p><a href="{unsubscribe_link}">Unsubscribe</a></p>
"""


def render_broadcast(first_name: str | None, custom_html: str, unsubscribe_link: str) -> str:
    return BROADCAST_HTML.format(
        first_name=escape(first_name or "there"),
        custom_html=custom_html,
        unsubscribe_link=escape(unsubscribe_link, quote=True),
    )
