from __future__ import annotations


class DomainError(Exception):
    """Base for billing relay errors."""


class BillingValidationError(DomainError):
    """A required request field is missing."""


class OriginNotAllowedError(DomainError):
    """Request origin is not in the allow-list."""


class WebhookSignatureError(DomainError):
    """Webhook payload could not be authenticated."""


class BillingProviderError(DomainError):
    """Stripe rejected the call or could not be reached."""
