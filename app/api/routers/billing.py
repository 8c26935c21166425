from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from app.api.deps import (
    get_create_checkout_session_use_case,
    get_create_portal_session_use_case,
    get_pro_status_use_case,
    get_process_stripe_webhook_use_case,
)
from app.api.schemas.billing import (
    CreateCheckoutSessionRequest,
    CreateCheckoutSessionResponse,
    CreatePortalSessionRequest,
    CreatePortalSessionResponse,
    ProStatusResponse,
    StripeWebhookResponse,
)
from app.application.dto.billing import (
    CreateCheckoutSessionInput,
    CreatePortalSessionInput,
    GetProStatusInput,
    StripeWebhookInput,
)
from app.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from app.application.use_cases.create_portal_session import CreatePortalSessionUseCase
from app.application.use_cases.get_pro_status import GetProStatusUseCase
from app.application.use_cases.process_stripe_webhook import ProcessStripeWebhookUseCase
from app.domain.exceptions import (
    BillingProviderError,
    BillingValidationError,
    WebhookSignatureError,
)


router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/create-checkout-session", response_model=CreateCheckoutSessionResponse)
def create_checkout_session(
    req: CreateCheckoutSessionRequest | None = None,
    use_case: CreateCheckoutSessionUseCase = Depends(get_create_checkout_session_use_case),
):
    if req is None:
        req = CreateCheckoutSessionRequest()
    try:
        output = use_case.execute(
            CreateCheckoutSessionInput(
                price_id=req.price_id,
                success_url=req.success_url,
                cancel_url=req.cancel_url,
            )
        )
    except BillingValidationError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except BillingProviderError as exc:
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return CreateCheckoutSessionResponse(session_id=output.session_id)


@router.get("/pro-status", response_model=ProStatusResponse, response_model_exclude_none=True)
def get_pro_status(
    email: str | None = Query(default=None),
    use_case: GetProStatusUseCase = Depends(get_pro_status_use_case),
):
    try:
        output = use_case.execute(GetProStatusInput(email=email))
    except BillingValidationError as exc:
        return JSONResponse(status_code=400, content={"isPro": False, "error": str(exc)})
    except BillingProviderError as exc:
        return JSONResponse(status_code=500, content={"isPro": False, "error": str(exc)})

    return ProStatusResponse(
        is_pro=output.is_pro,
        customer_id=output.customer_id,
        subscription_status=output.subscription_status,
    )


@router.post("/create-portal-session", response_model=CreatePortalSessionResponse)
def create_portal_session(
    req: CreatePortalSessionRequest | None = None,
    use_case: CreatePortalSessionUseCase = Depends(get_create_portal_session_use_case),
):
    # an empty body still reaches Stripe, which reports the missing customer
    if req is None:
        req = CreatePortalSessionRequest()
    try:
        output = use_case.execute(
            CreatePortalSessionInput(
                customer_id=req.customer_id,
                return_url=req.return_url,
            )
        )
    except BillingProviderError as exc:
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return CreatePortalSessionResponse(url=output.url)


@router.post("/webhook", response_model=StripeWebhookResponse)
async def stripe_webhook(
    request: Request,
    stripe_signature: str | None = Header(default=None, alias="Stripe-Signature"),
    use_case: ProcessStripeWebhookUseCase = Depends(get_process_stripe_webhook_use_case),
):
    payload = await request.body()
    try:
        output = use_case.execute(
            StripeWebhookInput(
                signature=stripe_signature,
                payload=payload,
            )
        )
    except WebhookSignatureError as exc:
        return PlainTextResponse(f"Webhook Error: {exc}", status_code=400)

    logger.info("stripe_webhook: received event_type=%s handled=%s", output.event_type, output.handled)
    return StripeWebhookResponse(received=True)
