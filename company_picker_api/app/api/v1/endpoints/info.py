"""Welcome endpoint used as a liveness check."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to the Company Picker backend!"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    """Return a plain‑text greeting."""
    return WELCOME_MESSAGE
