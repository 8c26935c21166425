from __future__ import annotations

from typing import Protocol


class BillingEventHandlerPort(Protocol):
    def on_checkout_completed(self, *, customer_email: str | None, customer_id: str | None) -> None:
        ...

    def on_access_revoked(self, *, customer_id: str | None, status: str) -> None:
        ...

    def on_payment_failed(self, *, customer_email: str | None, customer_id: str | None) -> None:
        ...

    def on_trial_will_end(self, *, customer_id: str | None) -> None:
        ...
