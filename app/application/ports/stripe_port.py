from __future__ import annotations

from typing import Protocol

from app.application.dto.billing import StripeCheckoutSessionRequest
from app.domain.entities.billing_event import BillingEvent


class StripePort(Protocol):
    def create_checkout_session(self, request: StripeCheckoutSessionRequest) -> str:
        ...

    def find_customer_id_by_email(self, *, email: str) -> str | None:
        ...

    def find_subscription_status(self, *, customer_id: str, status: str) -> str | None:
        ...

    def create_portal_session(self, *, customer_id: str | None, return_url: str) -> str:
        ...

    def verify_webhook(self, *, signature: str | None, payload: bytes) -> BillingEvent:
        ...
