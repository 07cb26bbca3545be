from pydantic import BaseModel


class AIRequest(BaseModel):
    message: str


class AIResponse(BaseModel):
    reply: str


class SendMessageRequest(BaseModel):
    message: str
    api_url: str | None = None
