from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateCheckoutSessionRequest(BaseModel):
    price_id: str | None = Field(default=None, alias="priceId")
    success_url: str | None = Field(default=None, alias="successUrl")
    cancel_url: str | None = Field(default=None, alias="cancelUrl")

    model_config = ConfigDict(populate_by_name=True)


class CreateCheckoutSessionResponse(BaseModel):
    session_id: str = Field(alias="sessionId")

    model_config = ConfigDict(populate_by_name=True)


class ProStatusResponse(BaseModel):
    is_pro: bool = Field(alias="isPro")
    customer_id: str | None = Field(default=None, alias="customerId")
    subscription_status: str = Field(alias="subscriptionStatus")

    model_config = ConfigDict(populate_by_name=True)


class CreatePortalSessionRequest(BaseModel):
    customer_id: str | None = Field(default=None, alias="customerId")
    return_url: str | None = Field(default=None, alias="returnUrl")

    model_config = ConfigDict(populate_by_name=True)


class CreatePortalSessionResponse(BaseModel):
    url: str


class StripeWebhookResponse(BaseModel):
    received: bool
