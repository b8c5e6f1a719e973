"""Version banner for API v2."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/Info", response_class=PlainTextResponse)
async def get_info(request: Request) -> str:
    """Tell the caller which API version they are talking to."""
    return f"You are using {request.app.state.settings.application_name} Version 2!"
