from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:5500",
    "https://pixelfit.netlify.app",
    "https://pixelfit.io",
)


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _allowed_origins(frontend_url: str) -> tuple[str, ...]:
    origins = list(DEFAULT_ALLOWED_ORIGINS)
    if frontend_url and frontend_url not in origins:
        origins.append(frontend_url)
    return tuple(origins)


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str
    stripe_webhook_secret: str
    frontend_url: str
    port: int
    environment: str
    log_level: str
    allowed_origins: tuple[str, ...]


def load_settings() -> Settings:
    frontend_url = _env("FRONTEND_URL", "")
    return Settings(
        stripe_secret_key=_env("STRIPE_SECRET_KEY", ""),
        stripe_webhook_secret=_env("STRIPE_WEBHOOK_SECRET", ""),
        frontend_url=frontend_url,
        port=int(_env("PORT", "4000")),
        environment=_env("NODE_ENV") or _env("APP_ENV", "development"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        allowed_origins=_allowed_origins(frontend_url),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
