"""FastAPI server adapter for the unitshift core lookups."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env before importing modules that may resolve/capture settings.
ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(ROOT_DIR / ".env")

from ..config import Settings, get_settings
from .routers import api

settings = get_settings()

_LOG_LEVEL_BY_VERBOSITY = {
    "low": logging.WARNING,
    "medium": logging.INFO,
    "high": logging.DEBUG,
}


def log_level_for(config: Settings) -> int:
    if config.debug:
        return logging.DEBUG
    return _LOG_LEVEL_BY_VERBOSITY.get(config.log_verbosity, logging.INFO)


logger = logging.getLogger("uvicorn.error")
logger.setLevel(log_level_for(settings))


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        summary="Resolve display units and unit prices for weight and volume variants",
        version="1.0.0",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(api.router)
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("unitshift.server.main:app", host="0.0.0.0", port=8000, reload=settings.debug)


__all__ = ["app", "create_app", "log_level_for", "logger", "run", "settings"]
