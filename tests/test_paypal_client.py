"""
Tests for the PayPal REST client against the in-process fake PayPal API.
"""

import json
from decimal import Decimal

import httpx
import pytest

from app.shared.core.exceptions import ExternalAPIError

TOKEN_PATH = "/v1/oauth2/token"


@pytest.fixture()
async def paypal(fake_paypal):
    client = fake_paypal.client(retry_attempts=2)
    yield client
    await client.close()


async def test_access_token_uses_client_credentials(paypal, fake_paypal):
    token = await paypal.get_access_token()

    assert token == "A21-token"
    request = fake_paypal.requests_to(TOKEN_PATH)[-1]
    assert request.headers["Authorization"].startswith("Basic ")
    assert b"grant_type=client_credentials" in request.content


async def test_create_order_sends_capture_intent(paypal, fake_paypal):
    fake_paypal.on("POST", "/v2/checkout/orders", (201, {"id": "5O190127TN364715T", "status": "CREATED"}))

    order = await paypal.create_order(Decimal("4.5"))

    assert order["id"] == "5O190127TN364715T"
    sent = fake_paypal.requests_to("/v2/checkout/orders")[-1]
    assert sent.headers["Authorization"] == "Bearer A21-token"
    body = json.loads(sent.content)
    assert body["intent"] == "CAPTURE"
    assert body["purchase_units"][0]["amount"] == {"currency_code": "EUR", "value": "4.50"}


async def test_capture_order(paypal, fake_paypal):
    fake_paypal.on("POST", "/v2/checkout/orders/ORDER-1/capture", (201, {"id": "ORDER-1", "status": "COMPLETED"}))

    result = await paypal.capture_order("ORDER-1")

    assert result["status"] == "COMPLETED"


async def test_error_status_becomes_external_api_error(paypal, fake_paypal):
    fake_paypal.on("POST", "/v2/checkout/orders/BAD/capture", (422, {"name": "UNPROCESSABLE_ENTITY"}))

    with pytest.raises(ExternalAPIError) as exc_info:
        await paypal.capture_order("BAD")

    assert exc_info.value.status_code == 502


async def test_missing_access_token_is_rejected(paypal, fake_paypal):
    fake_paypal.on("POST", TOKEN_PATH, (200, {}))

    with pytest.raises(ExternalAPIError, match="access token"):
        await paypal.get_access_token()


async def test_transport_errors_are_retried(paypal, fake_paypal):
    fake_paypal.on("POST", TOKEN_PATH, httpx.ConnectError("connection refused"), (200, {"access_token": "after-retry"}))

    assert await paypal.get_access_token() == "after-retry"
    assert len(fake_paypal.requests_to(TOKEN_PATH)) == 2


async def test_unreachable_paypal_raises_after_retries(paypal, fake_paypal):
    fake_paypal.on("POST", TOKEN_PATH, httpx.ConnectError("down"))

    with pytest.raises(ExternalAPIError, match="unreachable"):
        await paypal.get_access_token()
    assert len(fake_paypal.requests_to(TOKEN_PATH)) == 2
