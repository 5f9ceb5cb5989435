# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Attendee(BaseModel):
    """One registrant for one program year."""
    id: str
    email: str
    year: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    attendance: list[int] = Field(default_factory=list)
    unsubscribed: bool = False

    def has_attended(self, session: int) -> bool:
        return session in self.attendance

    def add_session(self, session: int) -> None:
        self.attendance = sorted(set(self.attendance) | {session})

    def remove_session(self, session: int) -> None:
        self.attendance = [s for s in self.attendance if s != session]


def normalize_session(value) -> int:
    """Canonical session id: a non-negative integer.

    Accepts ints, integral floats and numeric strings (query-string values
    arrive as text, JSON bodies may carry numbers). Anything else raises
    ``ValueError``.
    """
    if isinstance(value, bool):
        raise ValueError("session must be a number")
    if isinstance(value, int):
        session = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValueError("session must be a whole number")
        session = int(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            session = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise ValueError("session must be a number") from None
            if not number.is_integer():
                raise ValueError("session must be a whole number")
            session = int(number)
    else:
        raise ValueError("session must be a number")
    if session < 0:
        raise ValueError("session must not be negative")
    return session
