from __future__ import annotations

import logging

from app.application.dto.billing import StripeWebhookInput, StripeWebhookOutput
from app.application.ports.billing_event_handler_port import BillingEventHandlerPort
from app.application.ports.stripe_port import StripePort
from app.domain.entities.billing_event import BillingEvent, BillingEventKind
from app.domain.entities.subscription import is_access_revoked


logger = logging.getLogger(__name__)


class ProcessStripeWebhookUseCase:
    def __init__(
        self,
        *,
        stripe_port: StripePort,
        event_handler: BillingEventHandlerPort,
    ):
        self._stripe_port = stripe_port
        self._event_handler = event_handler

    def execute(self, command: StripeWebhookInput) -> StripeWebhookOutput:
        event = self._stripe_port.verify_webhook(signature=command.signature, payload=command.payload)

        try:
            handled = self._dispatch(event)
        except Exception:
            # Stripe is acknowledged once the signature verified; handler failures stay local.
            logger.exception(
                "process_stripe_webhook: handler_failed event_id=%s event_type=%s",
                event.event_id,
                event.event_type,
            )
            handled = False
        return StripeWebhookOutput(event_type=event.event_type, handled=handled)

    def _dispatch(self, event: BillingEvent) -> bool:
        if event.kind is BillingEventKind.CHECKOUT_COMPLETED:
            self._event_handler.on_checkout_completed(
                customer_email=event.customer_email,
                customer_id=event.customer_id,
            )
            return True

        if event.kind is BillingEventKind.SUBSCRIPTION_CHANGED:
            if not is_access_revoked(event.status):
                return False
            self._event_handler.on_access_revoked(customer_id=event.customer_id, status=event.status)
            return True

        if event.kind is BillingEventKind.INVOICE_PAYMENT_FAILED:
            self._event_handler.on_payment_failed(
                customer_email=event.customer_email,
                customer_id=event.customer_id,
            )
            return True

        if event.kind is BillingEventKind.TRIAL_WILL_END:
            self._event_handler.on_trial_will_end(customer_id=event.customer_id)
            return True

        logger.debug("process_stripe_webhook: ignored event_type=%s", event.event_type)
        return False
