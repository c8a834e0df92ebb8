# 📄 File: app/modules/payments/presentation/api/v1/paypal.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for paying with PayPal: open an order, then complete it after the user approves.
#
# 🧪 Purpose (Technical Summary):
# FastAPI /paypal endpoints over CheckoutService. PayPal failures answer 502, incomplete
# captures 402.
#
# 🔗 Dependencies:
# - FastAPI router, CheckoutService, get_current_user
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/paypal)

"""
PayPal API Endpoints

Endpoints:
- POST /create-order: Open a CAPTURE order for ``amount`` and return its id
- POST /complete-order: Capture the order, upgrade the user and record the payment
"""

from fastapi import APIRouter, Depends

from app.modules.payments.domain.services import CheckoutService
from app.modules.payments.presentation.api.schemas import (
    CompleteOrderRequest,
    CompleteOrderResponse,
    CreateOrderRequest,
    CreateOrderResponse,
)
from app.shared.core.dependencies import CurrentUser, get_current_user

paypal_router = APIRouter()


@paypal_router.post("/create-order", response_model=CreateOrderResponse, summary="Create PayPal order")
async def create_order(
    request: CreateOrderRequest,
    current_user: CurrentUser = Depends(get_current_user),
    checkout_service: CheckoutService = Depends(),
):
    order_id = await checkout_service.create_order(request.amount)
    return CreateOrderResponse(id=order_id)


@paypal_router.post("/complete-order", response_model=CompleteOrderResponse, summary="Complete PayPal order")
async def complete_order(
    request: CompleteOrderRequest,
    current_user: CurrentUser = Depends(get_current_user),
    checkout_service: CheckoutService = Depends(),
):
    result = await checkout_service.complete_order(request.order_id, request.user_id)
    return CompleteOrderResponse(**result)
