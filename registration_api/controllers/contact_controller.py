# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: contact form."""
from fastapi import APIRouter, Depends

from registration_api.core.config import settings
from registration_api.core.dependencies import get_contact_service
from registration_api.schemas import ContactRequest, MessageResponse
from registration_api.services.contact_service import ContactService

router = APIRouter(prefix=settings.API_PREFIX, tags=["Contact"])


@router.post("/contact", response_model=MessageResponse)
async def contact(payload: ContactRequest,
                  service: ContactService = Depends(get_contact_service)):
    await service.submit(
        name=payload.name, email=payload.email, phone=payload.phone,
        message=payload.message, reason=payload.reason,
    )
    return MessageResponse(message="Message sent successfully!")
