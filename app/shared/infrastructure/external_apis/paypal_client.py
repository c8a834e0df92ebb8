# 📄 File: app/shared/infrastructure/external_apis/paypal_client.py

# 🧭 Purpose (Layman Explanation):
# This file talks to PayPal on behalf of Leaflings: it logs in with the shop's credentials,
# opens an order for the amount a user wants to pay, and collects the money once they approve it.

# 🧪 Purpose (Technical Summary):
# Async PayPal REST client (Orders v2) built on httpx with tenacity retries for transport errors.
# OAuth client-credentials token, order creation and capture; non-2xx answers and exhausted
# retries surface as ExternalAPIError (502).

# 🔗 Dependencies:
# - httpx: Async HTTP client
# - tenacity: Retry logic and backoff strategies
# - app.shared.config.settings (PAYPAL_* settings)

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.payments.domain.services.checkout_service, app.main (shutdown)

import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import ExternalAPIError

logger = logging.getLogger(__name__)

SERVICE_NAME = "paypal"


class PayPalClient:
    """
    Async client for the PayPal Orders v2 REST API.

    Features:
    - OAuth2 client-credentials token per operation
    - Automatic retry with exponential backoff on transport errors
    - Uniform error translation to ExternalAPIError
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        base_url: str,
        currency: str = "EUR",
        timeout: float = 15.0,
        retry_attempts: int = 3,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        self.currency = currency
        self.timeout = timeout
        self.retry_attempts = max(retry_attempts, 1)
        self._client = http_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "PayPalClient":
        return cls(
            client_id=settings.PAYPAL_CLIENT_ID,
            client_secret=settings.PAYPAL_CLIENT_SECRET,
            base_url=settings.PAYPAL_BASE_URL,
            currency=settings.PAYPAL_CURRENCY,
            timeout=settings.PAYPAL_TIMEOUT_SECONDS,
            retry_attempts=settings.PAYPAL_RETRY_ATTEMPTS,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json", "User-Agent": "Leaflings/1.0 (paypal-client)"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.info("PayPal client closed")

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    async def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """Send a request with retries and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.retry_attempts),
                wait=wait_exponential(multiplier=0.5, max=4),
                retry=retry_if_exception_type(httpx.TransportError),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    response = await self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"PayPal request failed: {method} {path} - {e}")
            raise ExternalAPIError(f"PayPal is unreachable: {e}", service=SERVICE_NAME) from e

        if not response.is_success:
            logger.error(f"PayPal answered {response.status_code} for {method} {path}: {response.text}")
            raise ExternalAPIError(
                f"PayPal request failed with status {response.status_code}",
                service=SERVICE_NAME,
                upstream_status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ExternalAPIError("PayPal returned an invalid response", service=SERVICE_NAME) from e

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    async def get_access_token(self) -> str:
        payload = await self._request(
            "POST",
            "/v1/oauth2/token",
            auth=(self.client_id, self.client_secret),
            data={"grant_type": "client_credentials"},
        )
        token = payload.get("access_token")
        if not token:
            raise ExternalAPIError("PayPal did not return an access token", service=SERVICE_NAME)
        return token

    async def create_order(self, amount: Decimal) -> Dict[str, Any]:
        """
        Open a CAPTURE order for ``amount`` in the configured currency.

        Returns:
            The PayPal order document (``id``, ``status``, ``links``)
        """
        token = await self.get_access_token()
        body = {
            "intent": "CAPTURE",
            "purchase_units": [
                {"amount": {"currency_code": self.currency, "value": f"{amount:.2f}"}}
            ],
        }
        order = await self._request(
            "POST",
            "/v2/checkout/orders",
            json=body,
            headers={"Authorization": f"Bearer {token}"},
        )
        logger.info(f"PayPal order created: {order.get('id')}")
        return order

    async def capture_order(self, order_id: str) -> Dict[str, Any]:
        token = await self.get_access_token()
        result = await self._request(
            "POST",
            f"/v2/checkout/orders/{order_id}/capture",
            headers={"Authorization": f"Bearer {token}", "Content-Type": "application/json"},
        )
        logger.info(f"PayPal order {order_id} capture status: {result.get('status')}")
        return result


# Global client instance
_paypal_client: Optional[PayPalClient] = None


def get_paypal_client() -> PayPalClient:
    """Get the shared PayPal client (FastAPI dependency)."""
    global _paypal_client
    if _paypal_client is None:
        _paypal_client = PayPalClient.from_settings(get_settings())
    return _paypal_client


async def close_paypal_client() -> None:
    global _paypal_client
    if _paypal_client is not None:
        await _paypal_client.close()
        _paypal_client = None
