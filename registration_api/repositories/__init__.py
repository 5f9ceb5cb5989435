# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package."""
from registration_api.repositories.attendee_repository import AttendeeRepository

__all__ = ["AttendeeRepository"]
