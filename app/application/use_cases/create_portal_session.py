from __future__ import annotations

from app.application.dto.billing import CreatePortalSessionInput, CreatePortalSessionOutput
from app.application.ports.stripe_port import StripePort


class CreatePortalSessionUseCase:
    def __init__(self, *, stripe_port: StripePort, frontend_url: str):
        self._stripe_port = stripe_port
        self._frontend_url = frontend_url

    def execute(self, command: CreatePortalSessionInput) -> CreatePortalSessionOutput:
        # customer id goes to Stripe as-is; it reports unknown ids itself
        url = self._stripe_port.create_portal_session(
            customer_id=command.customer_id,
            return_url=command.return_url or self._frontend_url,
        )
        return CreatePortalSessionOutput(url=url)
