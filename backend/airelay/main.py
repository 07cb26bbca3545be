import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from airelay.config import settings
from airelay.routers import ai

if settings.debug:
    logging.basicConfig(level=logging.INFO)

app = FastAPI(title="airelay", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ai.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
