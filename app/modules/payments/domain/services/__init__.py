from .checkout_service import CheckoutService
from .payment_service import PaymentService

__all__ = ["CheckoutService", "PaymentService"]
