from __future__ import annotations

import json
import logging

import stripe

from app.application.dto.billing import StripeCheckoutSessionRequest
from app.application.ports.stripe_port import StripePort
from app.domain.entities.billing_event import BillingEvent, BillingEventKind, kind_for_event_type
from app.domain.exceptions import BillingProviderError, WebhookSignatureError


logger = logging.getLogger(__name__)


class StripeClient(StripePort):
    def __init__(self, *, secret_key: str, webhook_secret: str):
        stripe.api_key = secret_key
        self._webhook_secret = webhook_secret

    def create_checkout_session(self, request: StripeCheckoutSessionRequest) -> str:
        try:
            session = stripe.checkout.Session.create(
                mode="subscription",
                payment_method_types=["card"],
                line_items=[{"price": request.price_id, "quantity": 1}],
                success_url=request.success_url,
                cancel_url=request.cancel_url,
                subscription_data={"trial_period_days": request.trial_period_days},
                allow_promotion_codes=request.allow_promotion_codes,
            )
        except Exception as exc:  # any SDK or transport failure surfaces as a provider error
            raise _provider_error("create_checkout_session", exc) from exc
        return str(session.id)

    def find_customer_id_by_email(self, *, email: str) -> str | None:
        try:
            customers = stripe.Customer.list(email=email, limit=1)
        except Exception as exc:  # any SDK or transport failure surfaces as a provider error
            raise _provider_error("find_customer", exc) from exc
        if not customers.data:
            return None
        return str(customers.data[0].id)

    def find_subscription_status(self, *, customer_id: str, status: str) -> str | None:
        try:
            subscriptions = stripe.Subscription.list(customer=customer_id, status=status, limit=1)
        except Exception as exc:  # any SDK or transport failure surfaces as a provider error
            raise _provider_error("find_subscription", exc) from exc
        if not subscriptions.data:
            return None
        return str(subscriptions.data[0].status)

    def create_portal_session(self, *, customer_id: str | None, return_url: str) -> str:
        try:
            session = stripe.billing_portal.Session.create(customer=customer_id, return_url=return_url)
        except Exception as exc:  # any SDK or transport failure surfaces as a provider error
            raise _provider_error("create_portal_session", exc) from exc
        return str(session.url)

    def verify_webhook(self, *, signature: str | None, payload: bytes) -> BillingEvent:
        if not signature:
            logger.warning("stripe_client: webhook_rejected reason=missing_signature")
            raise WebhookSignatureError("Missing Stripe-Signature header")

        try:
            body = payload.decode("utf-8")
            stripe.WebhookSignature.verify_header(
                body,
                signature,
                self._webhook_secret,
                stripe.Webhook.DEFAULT_TOLERANCE,
            )
            event = json.loads(body)
        except stripe.SignatureVerificationError as exc:
            logger.warning("stripe_client: webhook_rejected reason=signature detail=%s", exc.user_message)
            raise WebhookSignatureError(exc.user_message or str(exc)) from exc
        except ValueError as exc:
            logger.warning("stripe_client: webhook_rejected reason=payload detail=%s", exc)
            raise WebhookSignatureError(f"Invalid payload: {exc}") from exc

        if not isinstance(event, dict):
            raise WebhookSignatureError("Invalid payload: event must be a JSON object")
        return _to_billing_event(event)


def _provider_error(operation: str, exc: Exception) -> BillingProviderError:
    message = getattr(exc, "user_message", None) or str(exc)
    logger.error("stripe_client: %s_failed error=%s detail=%s", operation, type(exc).__name__, message)
    return BillingProviderError(message)


def _to_billing_event(event: dict) -> BillingEvent:
    event_type = str(event.get("type", ""))
    data = event.get("data")
    data_object = data.get("object") if isinstance(data, dict) else None
    if not isinstance(data_object, dict):
        # signed but malformed envelope: acknowledge without dispatching
        return BillingEvent(
            event_id=event.get("id"),
            event_type=event_type,
            kind=BillingEventKind.UNKNOWN,
            customer_id=None,
            customer_email=None,
            status=None,
        )

    customer_email = data_object.get("customer_email")
    if not customer_email:
        customer_details = data_object.get("customer_details")
        customer_email = customer_details.get("email") if isinstance(customer_details, dict) else None

    customer_id = data_object.get("customer")
    status = data_object.get("status")
    return BillingEvent(
        event_id=event.get("id"),
        event_type=event_type,
        kind=kind_for_event_type(event_type),
        customer_id=str(customer_id) if customer_id else None,
        customer_email=customer_email,
        status=str(status) if status is not None else None,
    )
