# 📄 File: app/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# The place where Leaflings keeps the code that talks to outside services (PayPal).

# 🧪 Purpose (Technical Summary):
# External API clients package; each client owns its httpx session, retries and error translation.

# 🔗 Dependencies:
# - paypal_client: PayPal Orders v2 client

# 🔄 Connected Modules / Calls From:
# Used by: payments module, app.main (shutdown)

from .paypal_client import PayPalClient, close_paypal_client, get_paypal_client

__all__ = ["PayPalClient", "close_paypal_client", "get_paypal_client"]
