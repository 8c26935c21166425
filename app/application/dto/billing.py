from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.subscription import ProStatus


@dataclass(frozen=True)
class CreateCheckoutSessionInput:
    price_id: str | None
    success_url: str | None
    cancel_url: str | None


@dataclass(frozen=True)
class CreateCheckoutSessionOutput:
    session_id: str


@dataclass(frozen=True)
class GetProStatusInput:
    email: str | None


@dataclass(frozen=True)
class GetProStatusOutput:
    is_pro: bool
    customer_id: str | None
    subscription_status: ProStatus


@dataclass(frozen=True)
class CreatePortalSessionInput:
    customer_id: str | None
    return_url: str | None


@dataclass(frozen=True)
class CreatePortalSessionOutput:
    url: str


@dataclass(frozen=True)
class StripeWebhookInput:
    signature: str | None
    payload: bytes


@dataclass(frozen=True)
class StripeWebhookOutput:
    event_type: str
    handled: bool


@dataclass(frozen=True)
class StripeCheckoutSessionRequest:
    price_id: str
    success_url: str
    cancel_url: str
    trial_period_days: int
    allow_promotion_codes: bool
