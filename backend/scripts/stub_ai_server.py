#!/usr/bin/env python3
"""Local stand-in for the remote AI service.

Answers any POST to /chat with {"reply": "<message>-reply"}.

Run:
    uvicorn stub_ai_server:app --port 9999
"""

from __future__ import annotations

import argparse
import logging

import uvicorn
from fastapi import FastAPI

from airelay.models import AIRequest, AIResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="airelay stub AI service")


@app.post("/chat", response_model=AIResponse)
async def chat(req: AIRequest) -> AIResponse:
    logger.info("Stub received message (%d chars)", len(req.message))
    return AIResponse(reply=f"{req.message}-reply")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=9999, help="Bind port (default: 9999)")
    args = parser.parse_args()
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
