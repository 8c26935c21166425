from __future__ import annotations

from app.application.dto.billing import GetProStatusInput, GetProStatusOutput
from app.application.ports.stripe_port import StripePort
from app.domain.entities.subscription import PRO_STATUSES
from app.domain.exceptions import BillingValidationError


class GetProStatusUseCase:
    """Answers whether the customer behind an email holds a paying or trialing plan.

    Only the first Stripe customer for the email is inspected. Statuses are
    queried one by one in `PRO_STATUSES` order, so an active subscription wins
    over a trialing one.
    """

    def __init__(self, *, stripe_port: StripePort):
        self._stripe_port = stripe_port

    def execute(self, command: GetProStatusInput) -> GetProStatusOutput:
        if not command.email:
            raise BillingValidationError("Email required")

        customer_id = self._stripe_port.find_customer_id_by_email(email=command.email)
        if customer_id is None:
            return GetProStatusOutput(is_pro=False, customer_id=None, subscription_status="none")

        found = [
            self._stripe_port.find_subscription_status(customer_id=customer_id, status=status)
            for status in PRO_STATUSES
        ]
        subscription_status = next((status for status in found if status), None)
        return GetProStatusOutput(
            is_pro=subscription_status is not None,
            customer_id=customer_id,
            subscription_status=subscription_status or "none",
        )
