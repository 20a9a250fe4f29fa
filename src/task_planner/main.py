"""FastAPI application entrypoint with Lambda handler."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from .config import settings
from .routes import health, tasks

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log service start and stop with the task draft defaults in effect."""
    logger.info(
        f"Starting {settings.service_name} {settings.service_version} in {settings.environment} mode "
        f"(duration={settings.default_duration_minutes}min, max_title={settings.max_title_length})"
    )
    yield
    logger.info(f"Shutting down {settings.service_name}")


def create_app() -> FastAPI:
    """Build the API; interactive docs are only served in debug mode."""
    api = FastAPI(
        title="Task Planner Service",
        description="Time and recurrence extraction for typed task titles",
        version=settings.service_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    api.include_router(health.router)
    api.include_router(tasks.router, prefix="/tasks")
    return api


app = create_app()

# AWS Lambda entrypoint
handler = Mangum(app, lifespan="off")
