"""AI relay client: forwards a user message to a remote AI endpoint.

API: POST <api_url>
Body: {"message": "your message text"}
Reply: {"reply": "the model's answer"} with a 2xx status

Every failure is raised as a RelayError whose text is what the front end
shows the user; ``kind`` tells the three failure paths apart.
"""

import enum
import logging

import httpx
from pydantic import ValidationError

from airelay.models import AIRequest, AIResponse

logger = logging.getLogger(__name__)


class RelayErrorKind(str, enum.Enum):
    SEND = "send"
    STATUS = "status"
    PARSE = "parse"


class RelayError(Exception):
    def __init__(self, kind: RelayErrorKind, message: str, status_code: int | None = None):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class AIRelayClient:
    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client

    async def send(self, message: str, api_url: str) -> AIResponse:
        """POST one message to ``api_url`` and return the parsed reply."""
        if self._client is not None:
            return await self._send(self._client, message, api_url)
        async with httpx.AsyncClient(follow_redirects=True, timeout=None) as client:
            return await self._send(client, message, api_url)

    async def _send(self, client: httpx.AsyncClient, message: str, api_url: str) -> AIResponse:
        request = AIRequest(message=message)
        try:
            resp = await client.post(
                api_url,
                headers={"Content-Type": "application/json"},
                json=request.model_dump(),
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            cause = str(exc) or type(exc).__name__
            logger.warning("AI request to %s failed before a response: %s", api_url, cause)
            raise RelayError(RelayErrorKind.SEND, f"Failed to send request: {cause}") from exc

        logger.info("AI request to %s returned status %d", api_url, resp.status_code)
        if not resp.is_success:
            raise RelayError(
                RelayErrorKind.STATUS,
                f"API request failed: status code {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return AIResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            logger.warning("AI response from %s did not match the expected shape", api_url)
            raise RelayError(RelayErrorKind.PARSE, f"Failed to parse response: {exc}") from exc


relay_client = AIRelayClient()


async def relay(message: str, api_url: str) -> AIResponse:
    return await relay_client.send(message, api_url)
