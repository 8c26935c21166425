from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.origin_guard import OriginGuardMiddleware
from app.api.routers import billing
from app.api.schemas.health import HealthResponse
from app.shared.config import get_settings
from app.shared.logging import configure_logging


API_VERSION = "1.0.0"

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("PixelFit API started port=%s mode=%s", settings.port, settings.environment)
    yield


app = FastAPI(title="PixelFit API", version=API_VERSION, lifespan=lifespan)

register_exception_handlers(app)

# Added in reverse execution order: the origin guard runs before CORS headers are applied.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(OriginGuardMiddleware, allowed_origins=settings.allowed_origins)

app.include_router(billing.router)


@app.get("/", response_model=HealthResponse)
def health():
    return HealthResponse(status="PixelFit API running", version=API_VERSION)
