# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: broadcast email and unsubscribe links.

``customHtml`` is embedded into every message unescaped; this endpoint is
for trusted operators only.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from registration_api.core.config import settings
from registration_api.core.dependencies import get_attendee_service, get_broadcast_service
from registration_api.core.exceptions import ServiceError
from registration_api.schemas import BroadcastRequest, BroadcastResponse
from registration_api.services.attendee_service import AttendeeService
from registration_api.services.broadcast_service import BroadcastService

router = APIRouter(prefix=settings.API_PREFIX, tags=["Broadcast"])


@router.post("/send-user-broadcast", response_model=BroadcastResponse)
async def send_user_broadcast(payload: BroadcastRequest,
                              service: BroadcastService = Depends(get_broadcast_service)):
    count = await service.broadcast(payload.custom_html)
    return BroadcastResponse(message=f"Broadcast sent to {count} users.", count=count)


@router.api_route("/unsubscribe/{attendee_id}", methods=["GET", "POST"],
                  response_class=HTMLResponse)
async def unsubscribe(attendee_id: str,
                      service: AttendeeService = Depends(get_attendee_service)):
    """Link-click target (GET) and RFC 8058 one-click target (POST); answers in HTML."""
    try:
        await service.unsubscribe(attendee_id)
    except ServiceError as exc:
        body = "User not found." if exc.status_code == 404 else "Server error."
        return HTMLResponse(content=body, status_code=exc.status_code)
    return HTMLResponse(content="<h1>You have been unsubscribed.</h1>")
