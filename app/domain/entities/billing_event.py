from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BillingEventKind(str, Enum):
    CHECKOUT_COMPLETED = "checkout_completed"
    SUBSCRIPTION_CHANGED = "subscription_changed"
    INVOICE_PAYMENT_FAILED = "invoice_payment_failed"
    TRIAL_WILL_END = "trial_will_end"
    UNKNOWN = "unknown"


_KINDS_BY_TYPE: dict[str, BillingEventKind] = {
    "checkout.session.completed": BillingEventKind.CHECKOUT_COMPLETED,
    "customer.subscription.updated": BillingEventKind.SUBSCRIPTION_CHANGED,
    "customer.subscription.deleted": BillingEventKind.SUBSCRIPTION_CHANGED,
    "invoice.payment_failed": BillingEventKind.INVOICE_PAYMENT_FAILED,
    "customer.subscription.trial_will_end": BillingEventKind.TRIAL_WILL_END,
}


def kind_for_event_type(event_type: str) -> BillingEventKind:
    return _KINDS_BY_TYPE.get(event_type, BillingEventKind.UNKNOWN)


@dataclass(frozen=True)
class BillingEvent:
    """Verified Stripe event reduced to the fields the dispatcher reads.

    `event_type` keeps the raw Stripe tag so unknown events can still be
    reported back; `kind` is what dispatch switches on.
    """

    event_id: str | None
    event_type: str
    kind: BillingEventKind
    customer_id: str | None
    customer_email: str | None
    status: str | None
