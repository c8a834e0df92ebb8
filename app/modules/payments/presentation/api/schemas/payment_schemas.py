# 📄 File: app/modules/payments/presentation/api/schemas/payment_schemas.py
# 🧭 Purpose (Layman Explanation):
# The data formats for payment receipts and the PayPal checkout steps.
#
# 🧪 Purpose (Technical Summary):
# Pydantic (camelCase) request/response schemas for /payment and /paypal endpoints.
#
# 🔗 Dependencies:
# - app.shared.utils.schemas.CamelModel
#
# 🔄 Connected Modules / Calls From:
# - app.modules.payments.presentation.api.v1.payments / paypal

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, Field

from app.shared.utils.schemas import CamelModel


class PaymentRequest(CamelModel):
    user_id: int
    title: str = Field(..., min_length=1, max_length=64)
    creation_date: Optional[datetime] = None


class PaymentResponse(CamelModel):
    id: int
    user_id: int
    title: str
    creation_date: Optional[datetime] = None


class CreateOrderRequest(CamelModel):
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class CreateOrderResponse(CamelModel):
    id: str


class CompleteOrderRequest(CamelModel):
    """Body of ``/paypal/complete-order``; accepts ``orderId``/``userId`` (or ``orderID``/``userID``)."""
    order_id: str = Field(..., min_length=1, validation_alias=AliasChoices("orderId", "orderID", "order_id"))
    user_id: int = Field(..., validation_alias=AliasChoices("userId", "userID", "user_id"))


class CompleteOrderResponse(CamelModel):
    status: str
    order_id: str
