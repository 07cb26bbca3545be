"""Send-message-to-AI command exposed to the desktop front end."""

from fastapi import APIRouter, HTTPException

from airelay.config import settings
from airelay.models import AIResponse, SendMessageRequest
from airelay.services.relay import RelayError, relay_client

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/send", response_model=AIResponse)
async def send_message_to_ai(req: SendMessageRequest):
    """Forward the message to the AI endpoint and return its reply."""
    api_url = req.api_url or settings.default_api_url
    if not api_url:
        raise HTTPException(status_code=400, detail="AI API URL not configured")
    try:
        return await relay_client.send(req.message, api_url)
    except RelayError as e:
        raise HTTPException(
            status_code=502,
            detail=str(e),
            headers={"X-Relay-Error-Kind": e.kind.value},
        )
