from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from app.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from app.application.use_cases.create_portal_session import CreatePortalSessionUseCase
from app.application.use_cases.get_pro_status import GetProStatusUseCase
from app.application.use_cases.process_stripe_webhook import ProcessStripeWebhookUseCase
from app.infrastructure.clients.stripe_client import StripeClient
from app.infrastructure.notifications.logging_event_handler import LoggingBillingEventHandler
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_stripe_client() -> StripeClient:
    settings = get_settings()
    if not settings.stripe_secret_key:
        raise HTTPException(status_code=500, detail="STRIPE_SECRET_KEY is required.")
    return StripeClient(
        secret_key=settings.stripe_secret_key,
        webhook_secret=settings.stripe_webhook_secret,
    )


@lru_cache(maxsize=1)
def _get_billing_event_handler() -> LoggingBillingEventHandler:
    return LoggingBillingEventHandler()


def get_create_checkout_session_use_case() -> CreateCheckoutSessionUseCase:
    return CreateCheckoutSessionUseCase(
        stripe_port=_get_stripe_client(),
        frontend_url=get_settings().frontend_url,
    )


def get_pro_status_use_case() -> GetProStatusUseCase:
    return GetProStatusUseCase(stripe_port=_get_stripe_client())


def get_create_portal_session_use_case() -> CreatePortalSessionUseCase:
    return CreatePortalSessionUseCase(
        stripe_port=_get_stripe_client(),
        frontend_url=get_settings().frontend_url,
    )


def get_process_stripe_webhook_use_case() -> ProcessStripeWebhookUseCase:
    if not get_settings().stripe_webhook_secret:
        raise HTTPException(status_code=500, detail="STRIPE_WEBHOOK_SECRET is required.")
    return ProcessStripeWebhookUseCase(
        stripe_port=_get_stripe_client(),
        event_handler=_get_billing_event_handler(),
    )
