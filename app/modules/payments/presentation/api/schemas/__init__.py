from .payment_schemas import (
    CompleteOrderRequest,
    CompleteOrderResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    PaymentRequest,
    PaymentResponse,
)

__all__ = [
    "CompleteOrderRequest",
    "CompleteOrderResponse",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "PaymentRequest",
    "PaymentResponse",
]
