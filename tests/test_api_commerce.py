"""
API tests for advertisements, payment receipts and the PayPal checkout.
"""

from datetime import datetime, timedelta, timezone

from app.shared.infrastructure.storage.image_storage import get_image_storage


def ad_form(start: datetime, end: datetime, active: bool = True, **fields):
    return {
        "startDate": start.isoformat(),
        "endDate": end.isoformat(),
        "isActive": "true" if active else "false",
        **{key: str(value) for key, value in fields.items()},
    }


def now_utc() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


class TestAds:

    async def create_ad(self, client, admin, start=None, end=None, active=True, files=None, **fields):
        start = start or now_utc() - timedelta(days=1)
        end = end or now_utc() + timedelta(days=1)
        return await client.post("/api/ad", data=ad_form(start, end, active, **fields), files=files,
                                 headers=admin.headers)

    async def test_create_ad_with_file(self, client, admin, png_bytes):
        response = await self.create_ad(client, admin, files={"adFile": ("banner.png", png_bytes, "image/png")})

        assert response.status_code == 201
        body = response.json()
        assert body["adminId"] == admin.id
        assert body["isActive"] is True
        assert body["adFile"].startswith("images/")
        assert get_image_storage().resolve(body["adFile"]).is_file()

    async def test_create_ad_without_file(self, client, admin):
        response = await self.create_ad(client, admin)

        assert response.status_code == 201
        assert response.json()["adFile"] is None

    async def test_window_must_not_end_before_start(self, client, admin):
        response = await self.create_ad(client, admin, start=datetime(2024, 5, 31), end=datetime(2024, 5, 1))

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "endDate"

    async def test_ad_needs_known_admin(self, client, admin):
        response = await self.create_ad(client, admin, adminId=999)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"

    async def test_users_cannot_create_ads(self, client, user):
        response = await self.create_ad(client, user)
        assert response.status_code == 403

    async def test_window_lookups(self, client, admin, user):
        ad = (await self.create_ad(client, admin, start=datetime(2024, 5, 1, 9), end=datetime(2024, 5, 31, 18))).json()

        start = await client.get(f"/api/ad/start/{ad['id']}", headers=user.headers)
        end = await client.get(f"/api/ad/end/{ad['id']}", headers=user.headers)
        creator = await client.get(f"/api/ad/creator/{ad['id']}", headers=user.headers)

        assert start.json() == "2024-05-01T09:00:00"
        assert end.json() == "2024-05-31T18:00:00"
        assert creator.json() == admin.id

    async def test_missing_ad(self, client, user):
        response = await client.get("/api/ad/77", headers=user.headers)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Ad with ID number 77 was not found."

    async def test_count_ads(self, client, admin, user):
        await self.create_ad(client, admin)
        await self.create_ad(client, admin, active=False)

        response = await client.get("/api/ad/count", headers=user.headers)

        assert response.json() == {"total": 2, "active": 1}

    async def test_random_ad_is_public(self, client, admin):
        showing = (await self.create_ad(client, admin)).json()
        await self.create_ad(client, admin, active=False)
        await self.create_ad(client, admin, start=datetime(2020, 1, 1), end=datetime(2020, 1, 31))

        response = await client.get("/api/ad/random")

        assert response.status_code == 200
        assert response.json()["id"] == showing["id"]

    async def test_random_ad_when_nothing_is_showing(self, client, admin):
        await self.create_ad(client, admin, active=False)

        response = await client.get("/api/ad/random")
        assert response.status_code == 204

    async def test_list_ads(self, client, admin, user):
        for _ in range(3):
            await self.create_ad(client, admin)

        response = await client.get("/api/ad", params={"_limit": 2}, headers=user.headers)

        assert response.json()["total"] == 3
        assert len(response.json()["data"]) == 2

    async def test_update_ad_replaces_file(self, client, admin, png_bytes):
        ad = (await self.create_ad(client, admin, files={"adFile": ("a.png", png_bytes, "image/png")})).json()

        response = await client.put(
            f"/api/ad/{ad['id']}",
            data=ad_form(datetime(2025, 1, 1), datetime(2025, 2, 1), active=False),
            files={"adFile": ("b.png", png_bytes, "image/png")},
            headers=admin.headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["isActive"] is False
        assert body["startDate"] == "2025-01-01T00:00:00"
        assert body["adFile"] != ad["adFile"]
        assert not get_image_storage().resolve(ad["adFile"]).exists()

    async def test_delete_ad_removes_file(self, client, admin, png_bytes):
        ad = (await self.create_ad(client, admin, files={"adFile": ("a.png", png_bytes, "image/png")})).json()

        response = await client.delete(f"/api/ad/{ad['id']}", headers=admin.headers)

        assert response.status_code == 204
        assert not get_image_storage().resolve(ad["adFile"]).exists()
        assert (await client.get(f"/api/ad/{ad['id']}", headers=admin.headers)).status_code == 404


class TestPayments:

    async def record(self, client, account, user_id, title="Premium"):
        return await client.post("/api/payment", json={"userId": user_id, "title": title}, headers=account.headers)

    async def test_record_payment(self, client, user):
        response = await self.record(client, user, user.id)

        assert response.status_code == 201
        assert response.json()["userId"] == user.id
        assert response.json()["title"] == "Premium"
        assert response.json()["creationDate"]

    async def test_payment_needs_known_user(self, client, user):
        response = await self.record(client, user, 999)
        assert response.status_code == 400

    async def test_payments_of_user(self, client, user):
        await self.record(client, user, user.id, "January")
        await self.record(client, user, user.id, "February")

        response = await client.get(f"/api/payment/user/{user.id}", headers=user.headers)

        assert response.json()["total"] == 2
        assert [payment["title"] for payment in response.json()["data"]] == ["January", "February"]

    async def test_user_without_payments(self, client, user):
        response = await client.get(f"/api/payment/user/{user.id}", headers=user.headers)

        assert response.status_code == 200
        assert response.json() == {"data": [], "total": 0}

    async def test_update_and_delete_payment(self, client, user):
        payment = (await self.record(client, user, user.id)).json()

        updated = await client.put(f"/api/payment/{payment['id']}",
                                   json={"userId": user.id, "title": "Premium yearly"}, headers=user.headers)
        assert updated.json()["title"] == "Premium yearly"

        assert (await client.delete(f"/api/payment/{payment['id']}", headers=user.headers)).status_code == 204
        missing = await client.get(f"/api/payment/{payment['id']}", headers=user.headers)
        assert missing.status_code == 404
        assert missing.json()["error"]["message"] == "Payment not found!"

    async def test_empty_listing(self, client, user):
        response = await client.get("/api/payment", headers=user.headers)
        assert response.status_code == 204


class TestPayPalCheckout:

    async def test_create_order(self, client, user, fake_paypal):
        fake_paypal.on("POST", "/v2/checkout/orders", (201, {"id": "ORDER-1", "status": "CREATED"}))

        response = await client.post("/api/paypal/create-order", json={"amount": "4.5"}, headers=user.headers)

        assert response.status_code == 200
        assert response.json() == {"id": "ORDER-1"}

    async def test_amount_must_be_positive(self, client, user, fake_paypal):
        response = await client.post("/api/paypal/create-order", json={"amount": 0}, headers=user.headers)

        assert response.status_code == 422
        assert fake_paypal.requests == []

    async def test_paypal_failure_is_bad_gateway(self, client, user, fake_paypal):
        fake_paypal.on("POST", "/v2/checkout/orders", (500, {"name": "INTERNAL_SERVICE_ERROR"}))

        response = await client.post("/api/paypal/create-order", json={"amount": "4.50"}, headers=user.headers)

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "EXTERNAL_API_ERROR"

    async def test_complete_order_upgrades_user(self, client, user, fake_paypal):
        fake_paypal.on("POST", "/v2/checkout/orders/ORDER-1/capture", (201, {"id": "ORDER-1", "status": "COMPLETED"}))

        response = await client.post("/api/paypal/complete-order", json={"orderID": "ORDER-1", "userID": user.id},
                                     headers=user.headers)

        assert response.status_code == 200
        assert response.json() == {"status": "COMPLETED", "orderId": "ORDER-1"}
        profile = await client.get(f"/api/user/{user.id}", headers=user.headers)
        assert profile.json()["rolePaid"] is True
        payments = await client.get(f"/api/payment/user/{user.id}", headers=user.headers)
        assert [payment["title"] for payment in payments.json()["data"]] == ["PayPal Payment"]

    async def test_incomplete_capture(self, client, user, fake_paypal):
        fake_paypal.on("POST", "/v2/checkout/orders/ORDER-2/capture", (201, {"id": "ORDER-2", "status": "PENDING"}))

        response = await client.post("/api/paypal/complete-order", json={"orderId": "ORDER-2", "userId": user.id},
                                     headers=user.headers)

        assert response.status_code == 402
        assert response.json()["error"]["code"] == "PAYMENT_ERROR"
        assert response.json()["error"]["message"] == "Error completing payment."
        profile = await client.get(f"/api/user/{user.id}", headers=user.headers)
        assert profile.json()["rolePaid"] is False

    async def test_unknown_user_is_not_charged(self, client, user, fake_paypal):
        fake_paypal.on("POST", "/v2/checkout/orders/ORDER-3/capture", (201, {"status": "COMPLETED"}))

        response = await client.post("/api/paypal/complete-order", json={"orderId": "ORDER-3", "userId": 999},
                                     headers=user.headers)

        assert response.status_code == 404
        assert fake_paypal.requests_to("/v2/checkout/orders/ORDER-3/capture") == []

    async def test_checkout_requires_token(self, client):
        response = await client.post("/api/paypal/create-order", json={"amount": "4.50"})
        assert response.status_code == 401
