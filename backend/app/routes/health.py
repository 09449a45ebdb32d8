import logging
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from backend.app.models.schemas import PingRequest, PingResponse

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"

@router.post("/ping", response_model=PingResponse)
async def ping(payload: PingRequest | None = None):
    message = payload.message if payload else PingRequest().message
    logger.info(f"Received ping with message: {message}")
    return PingResponse(reply=f"pong - received: {message}")
