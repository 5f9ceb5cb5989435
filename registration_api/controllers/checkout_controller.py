# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: payment checkout session."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from registration_api.core.config import settings
from registration_api.core.dependencies import get_checkout_service
from registration_api.core.exceptions import ServerError
from registration_api.schemas import CheckoutErrorResponse, CheckoutRequest, CheckoutResponse
from registration_api.services.checkout_service import CheckoutService

router = APIRouter(prefix=settings.API_PREFIX, tags=["Payments"])


@router.post("/create-checkout-session", response_model=CheckoutResponse,
             responses={500: {"model": CheckoutErrorResponse}})
async def create_checkout_session(payload: CheckoutRequest,
                                  service: CheckoutService = Depends(get_checkout_service)):
    try:
        session_id = await service.create_session(
            amount=payload.amount, name=payload.name, email=payload.email,
            donation_type=payload.type, event=payload.event,
        )
    except ServerError as exc:
        return JSONResponse(status_code=500, content={"error": exc.message})
    return CheckoutResponse(id=session_id)
