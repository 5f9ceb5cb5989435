# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: attendee registration."""
from fastapi import APIRouter, Depends

from registration_api.core.config import settings
from registration_api.core.dependencies import get_attendee_service
from registration_api.schemas import MessageResponse, RegisterRequest
from registration_api.services.attendee_service import AttendeeService

router = APIRouter(prefix=settings.API_PREFIX, tags=["Registration"])


@router.post("/register", response_model=MessageResponse)
async def register(payload: RegisterRequest,
                   service: AttendeeService = Depends(get_attendee_service)):
    """Register an attendee and send the confirmation email."""
    message = await service.register(
        email=payload.email, first_name=payload.first_name,
        last_name=payload.last_name, phone=payload.phone,
        address=payload.address, year=payload.year,
    )
    return MessageResponse(message=message)
