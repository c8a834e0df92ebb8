from .payments import payments_router
from .paypal import paypal_router

__all__ = ["payments_router", "paypal_router"]
