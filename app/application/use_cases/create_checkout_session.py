from __future__ import annotations

from app.application.dto.billing import (
    CreateCheckoutSessionInput,
    CreateCheckoutSessionOutput,
    StripeCheckoutSessionRequest,
)
from app.application.ports.stripe_port import StripePort
from app.domain.exceptions import BillingValidationError


TRIAL_PERIOD_DAYS = 7
CHECKOUT_SUCCESS_PATH = "/success?session_id={CHECKOUT_SESSION_ID}"


class CreateCheckoutSessionUseCase:
    def __init__(self, *, stripe_port: StripePort, frontend_url: str):
        self._stripe_port = stripe_port
        self._frontend_url = frontend_url

    def execute(self, command: CreateCheckoutSessionInput) -> CreateCheckoutSessionOutput:
        if not command.price_id:
            raise BillingValidationError("priceId is required")

        session_id = self._stripe_port.create_checkout_session(
            StripeCheckoutSessionRequest(
                price_id=command.price_id,
                success_url=command.success_url or f"{self._frontend_url}{CHECKOUT_SUCCESS_PATH}",
                cancel_url=command.cancel_url or self._frontend_url,
                trial_period_days=TRIAL_PERIOD_DAYS,
                allow_promotion_codes=True,
            )
        )
        return CreateCheckoutSessionOutput(session_id=session_id)
