# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.

Field names on the wire are camelCase to match the front-end bundle;
attendee identifiers are exposed as ``_id``.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from registration_api.models.domain import Attendee, normalize_session

CONTACT_REASONS = ("prayer_request", "ask_question", "get_involved")


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _clean_email(v: str) -> str:
    v = v.strip()
    if any(ord(ch) < 32 or ord(ch) == 127 for ch in v):
        raise ValueError("email must not contain control characters")
    return v


class RegisterRequest(_CamelModel):
    first_name: Optional[str] = Field(default=None, alias="firstName", max_length=255)
    last_name: Optional[str] = Field(default=None, alias="lastName", max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: str = Field(..., min_length=3, max_length=320)
    address: Optional[str] = Field(default=None, max_length=1000)
    year: Optional[int] = Field(default=None, ge=1900, le=9999)

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        v = _clean_email(v)
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v


class AttendanceRequest(_CamelModel):
    email: str = Field(..., min_length=1, max_length=320)
    session: int
    year: Optional[int] = Field(default=None, ge=1900, le=9999)

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return _clean_email(v)

    @field_validator("session", mode="before")
    @classmethod
    def canonical_session(cls, v: Any) -> int:
        return normalize_session(v)


class ContactRequest(_CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=320)
    phone: Optional[str] = Field(default=None, max_length=50)
    message: str = Field(..., min_length=1, max_length=10000)
    reason: Optional[str] = Field(default=None, max_length=50)


class BroadcastRequest(_CamelModel):
    custom_html: str = Field(..., alias="customHtml", min_length=1)


class CheckoutRequest(_CamelModel):
    amount: float = Field(..., gt=0)
    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=320)
    type: Optional[str] = Field(default=None, max_length=50)
    event: Optional[str] = Field(default=None, max_length=255)


class AttendeeOut(_CamelModel):
    id: str = Field(..., alias="_id")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    phone: Optional[str] = None
    email: str
    address: Optional[str] = None
    year: int
    attendance: List[int]
    unsubscribed: bool

    @classmethod
    def from_domain(cls, attendee: Attendee) -> "AttendeeOut":
        return cls(**attendee.model_dump())


class MessageResponse(BaseModel):
    message: str


class AttendanceCheckResponse(BaseModel):
    attendanceMarked: bool


class UsersResponse(BaseModel):
    users: List[AttendeeOut]


class BroadcastResponse(MessageResponse):
    count: int


class CheckoutResponse(BaseModel):
    id: str


class CheckoutErrorResponse(BaseModel):
    error: str
