# 📄 File: app/modules/payments/domain/services/checkout_service.py
# 🧭 Purpose (Layman Explanation):
# The PayPal checkout: start an order for an amount, and once PayPal confirms the money was
# collected, turn the user into a premium member and keep a receipt.
# 🧪 Purpose (Technical Summary):
# Orchestrates PayPalClient order creation/capture with the premium upgrade (UserService) and
# Payment recording (PaymentService) inside the request's unit of work.
# 🔗 Dependencies:
# PayPalClient, UserService, PaymentService
# 🔄 Connected Modules / Calls From:
# app.modules.payments.presentation.api.v1.paypal

import logging
from decimal import Decimal
from typing import Dict

from fastapi import Depends

from app.modules.user_management.domain.services.user_service import UserService
from app.shared.core.exceptions import ExternalAPIError, PaymentError, ValidationError
from app.shared.infrastructure.external_apis.paypal_client import PayPalClient, get_paypal_client

from .payment_service import PaymentService

logger = logging.getLogger(__name__)

PAYPAL_PAYMENT_TITLE = "PayPal Payment"
STATUS_COMPLETED = "COMPLETED"


class CheckoutService:
    """PayPal checkout flow."""

    def __init__(
        self,
        paypal_client: PayPalClient = Depends(get_paypal_client),
        user_service: UserService = Depends(),
        payment_service: PaymentService = Depends(),
    ):
        self.paypal_client = paypal_client
        self.user_service = user_service
        self.payment_service = payment_service

    async def create_order(self, amount: Decimal) -> str:
        """
        Open a PayPal order and return its id.

        Raises:
            ValidationError: If the amount is not positive
            ExternalAPIError: If PayPal fails or returns no order id
        """
        if amount <= 0:
            raise ValidationError("Amount must be greater than zero", field="amount", value=str(amount))

        order = await self.paypal_client.create_order(amount)
        order_id = order.get("id")
        if not order_id:
            raise ExternalAPIError("PayPal did not return an order id", service="paypal")
        return order_id

    async def complete_order(self, order_id: str, user_id: int) -> Dict[str, str]:
        """
        Capture an approved order and upgrade the user.

        Raises:
            ValidationError: If the order id is blank
            NotFoundError: If the user does not exist
            PaymentError: If PayPal did not complete the capture
        """
        if not order_id or not order_id.strip():
            raise ValidationError("Invalid data", field="orderId")

        # The user must exist before money is captured
        await self.user_service.get_user(user_id)

        result = await self.paypal_client.capture_order(order_id.strip())
        capture_status = result.get("status", "")
        if capture_status != STATUS_COMPLETED:
            logger.warning(f"PayPal order {order_id} not completed: {capture_status or 'no status'}")
            raise PaymentError("Error completing payment.", order_id=order_id)

        await self.user_service.set_role_paid(user_id, True)
        await self.payment_service.record_payment(user_id, PAYPAL_PAYMENT_TITLE)
        logger.info(f"User {user_id} upgraded through PayPal order {order_id}")
        return {"status": capture_status, "order_id": order_id}
