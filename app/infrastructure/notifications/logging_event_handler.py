from __future__ import annotations

import logging

from app.application.ports.billing_event_handler_port import BillingEventHandlerPort


logger = logging.getLogger(__name__)


class LoggingBillingEventHandler(BillingEventHandlerPort):
    """Records billing events in the application log.

    Nothing is persisted and no email is sent; a store or mailer adapter can
    replace this class behind the same port.
    """

    def on_checkout_completed(self, *, customer_email: str | None, customer_id: str | None) -> None:
        logger.info(
            "billing_event: checkout_completed customer_email=%s customer_id=%s",
            customer_email,
            customer_id,
        )

    def on_access_revoked(self, *, customer_id: str | None, status: str) -> None:
        logger.info("billing_event: access_revoked customer_id=%s status=%s", customer_id, status)

    def on_payment_failed(self, *, customer_email: str | None, customer_id: str | None) -> None:
        logger.warning(
            "billing_event: payment_failed customer_email=%s customer_id=%s",
            customer_email,
            customer_id,
        )

    def on_trial_will_end(self, *, customer_id: str | None) -> None:
        logger.info("billing_event: trial_will_end customer_id=%s", customer_id)
