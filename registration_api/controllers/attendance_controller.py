# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: per-session attendance and attendee listings.
Thin HTTP layer — delegates ALL logic to AttendeeService.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from registration_api.core.config import settings
from registration_api.core.dependencies import get_attendee_service
from registration_api.core.exceptions import InvalidInput
from registration_api.models.domain import normalize_session
from registration_api.schemas import (
    AttendanceCheckResponse, AttendanceRequest, AttendeeOut,
    MessageResponse, UsersResponse,
)
from registration_api.services.attendee_service import AttendeeService

router = APIRouter(prefix=settings.API_PREFIX, tags=["Attendance"])


def _users(attendees) -> UsersResponse:
    return UsersResponse(users=[AttendeeOut.from_domain(a) for a in attendees])


@router.post("/mark-attendance", response_model=MessageResponse)
async def mark_attendance(payload: AttendanceRequest,
                          service: AttendeeService = Depends(get_attendee_service)):
    message = await service.mark_attendance(payload.email, payload.session, payload.year)
    return MessageResponse(message=message)


@router.post("/remove-attendance", response_model=MessageResponse)
async def remove_attendance(payload: AttendanceRequest,
                            service: AttendeeService = Depends(get_attendee_service)):
    message = await service.remove_attendance(payload.email, payload.session, payload.year)
    return MessageResponse(message=message)


@router.get("/check-attendance", response_model=AttendanceCheckResponse)
async def check_attendance(
    email: str = Query(..., min_length=1),
    session: str = Query(...),
    year: Optional[int] = Query(default=None),
    service: AttendeeService = Depends(get_attendee_service),
):
    """Query-string session ids arrive as text; normalise before the membership test."""
    try:
        session_id = normalize_session(session)
    except ValueError as exc:
        raise InvalidInput(str(exc)) from exc
    marked = await service.check_attendance(email.strip(), session_id, year)
    return AttendanceCheckResponse(attendanceMarked=marked)


@router.get("/attendance/{session}/{year}", response_model=UsersResponse)
async def list_session_attendance(session: str, year: int,
                                  service: AttendeeService = Depends(get_attendee_service)):
    try:
        session_id = normalize_session(session)
    except ValueError as exc:
        raise InvalidInput(str(exc)) from exc
    return _users(await service.list_by_session(session_id, year))


@router.get("/users/{year}", response_model=UsersResponse)
async def list_users(year: int, service: AttendeeService = Depends(get_attendee_service)):
    """All attendees for a year; 404 when there are none."""
    return _users(await service.list_by_year(year))


@router.get("/users-no-attendance/{year}", response_model=UsersResponse)
async def list_users_without_attendance(year: int,
                                        service: AttendeeService = Depends(get_attendee_service)):
    return _users(await service.list_without_attendance(year))
