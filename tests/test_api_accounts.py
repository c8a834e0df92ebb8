"""
API tests for authentication, user accounts and admin accounts.
"""

from app.shared.infrastructure.storage.image_storage import get_image_storage
from tests.conftest import DEFAULT_PASSWORD, register_admin, register_user, user_form


class TestAuth:

    async def test_login_returns_token(self, client, user):
        response = await client.post("/api/auth/login", json={"email": user.email, "password": DEFAULT_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["auth"] is True
        assert body["userId"] == user.id
        assert body["rolePaid"] is False
        assert body["token"]
        assert body["expiration"]

    async def test_login_email_is_case_insensitive(self, client, user):
        response = await client.post("/api/auth/login",
                                     json={"email": user.email.upper(), "password": DEFAULT_PASSWORD})
        assert response.status_code == 200

    async def test_wrong_password(self, client, user):
        response = await client.post("/api/auth/login", json={"email": user.email, "password": "nope-nope"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid Credentials"

    async def test_unknown_email(self, client):
        response = await client.post("/api/auth/login",
                                     json={"email": "ghost@leaflings.pt", "password": DEFAULT_PASSWORD})
        assert response.status_code == 401

    async def test_admin_login_has_no_paid_flag(self, client, admin):
        response = await client.post("/api/auth/login", json={"email": admin.email, "password": DEFAULT_PASSWORD})

        assert response.status_code == 200
        assert response.json()["rolePaid"] is None

    async def test_refresh_token(self, client, user):
        response = await client.get(f"/api/auth/{user.token}")

        assert response.status_code == 200
        assert response.json()["userId"] == user.id

    async def test_refresh_rejects_garbage(self, client):
        response = await client.get("/api/auth/not-a-token")
        assert response.status_code == 401

    async def test_protected_route_requires_token(self, client, user):
        response = await client.get(f"/api/user/{user.id}")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_errors_carry_request_id(self, client):
        response = await client.get("/api/user/1", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
        assert response.json()["error"]["request_id"] == "req-123"


class TestUsers:

    async def test_register_user(self, client):
        response = await client.post("/api/user", data=user_form("Ana@Leaflings.pt", careExperience="2"))

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "ana@leaflings.pt"
        assert body["careExperience"] == "Expert"
        assert body["waterAvailability"] == "Low"
        assert body["role"] == "user"
        assert body["rolePaid"] is False
        assert "passwordHash" not in body
        assert "password_hash" not in body

    async def test_register_with_avatar(self, client, png_bytes):
        response = await client.post(
            "/api/user",
            data=user_form("avatar@leaflings.pt"),
            files={"userAvatar": ("me.png", png_bytes, "image/png")},
        )

        assert response.status_code == 201
        avatar = response.json()["userAvatar"]
        assert avatar.startswith("images/")
        assert get_image_storage().resolve(avatar).is_file()

    async def test_duplicate_email_conflicts(self, client, user):
        response = await client.post("/api/user", data=user_form(user.email))

        assert response.status_code == 409
        assert response.json()["error"]["message"] == "Email already in use."

    async def test_email_shared_with_admins(self, client, admin):
        response = await client.post("/api/user", data=user_form(admin.email))
        assert response.status_code == 409

    async def test_invalid_contact(self, client):
        response = await client.post("/api/user", data=user_form("c@leaflings.pt", contact="123"))

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "contact"

    async def test_short_password(self, client):
        response = await client.post("/api/user", data=user_form("p@leaflings.pt", password="abc"))
        assert response.status_code == 422

    async def test_unknown_care_level(self, client):
        response = await client.post("/api/user", data=user_form("l@leaflings.pt", waterAvailability="Flooded"))

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "waterAvailability"

    async def test_get_user(self, client, user):
        response = await client.get(f"/api/user/{user.id}", headers=user.headers)

        assert response.status_code == 200
        assert response.json()["location"] == "Porto"

    async def test_get_missing_user(self, client, user):
        response = await client.get("/api/user/9999", headers=user.headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_list_users_paginates(self, client, admin, user):
        await register_user(client, "second@leaflings.pt")

        response = await client.get("/api/user", params={"_limit": 1, "_page": 2}, headers=admin.headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [item["email"] for item in body["data"]] == ["second@leaflings.pt"]

    async def test_list_users_sorted_descending(self, client, admin, user):
        await register_user(client, "second@leaflings.pt", username="Zoe")

        response = await client.get("/api/user", params={"_sort": "username", "_order": "DESC"},
                                    headers=admin.headers)

        assert [item["username"] for item in response.json()["data"]] == ["Zoe", "Rita"]

    async def test_empty_page_is_no_content(self, client, admin, user):
        response = await client.get("/api/user", params={"_page": 5}, headers=admin.headers)
        assert response.status_code == 204

    async def test_update_preferences(self, client, user):
        response = await client.put(
            f"/api/user/preferences/{user.id}",
            json={"careExperience": "Intermediate", "waterAvailability": 2, "luminosityAvailability": "medium"},
            headers=user.headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["careExperience"] == "Intermediate"
        assert body["waterAvailability"] == "High"
        assert body["luminosityAvailability"] == "Medium"

    async def test_change_password(self, client, user):
        response = await client.put(
            f"/api/user/password/{user.id}",
            json={"oldPassword": DEFAULT_PASSWORD, "newPassword": "greener-thumb"},
            headers=user.headers,
        )
        assert response.status_code == 200

        login = await client.post("/api/auth/login", json={"email": user.email, "password": "greener-thumb"})
        assert login.status_code == 200

    async def test_change_password_requires_current_password(self, client, user):
        response = await client.put(
            f"/api/user/password/{user.id}",
            json={"oldPassword": "wrong-one", "newPassword": "greener-thumb"},
            headers=user.headers,
        )
        assert response.status_code == 401

    async def test_update_information(self, client, user):
        response = await client.put(
            f"/api/user/{user.id}",
            json={"username": "Rita M.", "location": "Braga", "contact": "931234567"},
            headers=user.headers,
        )

        assert response.status_code == 200
        assert response.json()["location"] == "Braga"
        assert response.json()["contact"] == "931234567"

    async def test_update_information_rejects_blanks(self, client, user):
        response = await client.put(f"/api/user/{user.id}", json={"username": " ", "location": "Braga",
                                                                  "contact": "931234567"},
                                    headers=user.headers)

        assert response.status_code == 422
        assert response.json()["error"]["message"] == "New data can't be empty!"

    async def test_replace_avatar_removes_old_file(self, client, user, png_bytes):
        first = await client.put(f"/api/user/image/{user.id}", files={"image": ("a.png", png_bytes, "image/png")},
                                 headers=user.headers)
        old_avatar = first.json()["userAvatar"]

        second = await client.put(f"/api/user/image/{user.id}", files={"image": ("b.png", png_bytes, "image/png")},
                                  headers=user.headers)

        assert second.status_code == 200
        new_avatar = second.json()["userAvatar"]
        assert new_avatar != old_avatar
        assert get_image_storage().resolve(new_avatar).is_file()
        assert not get_image_storage().resolve(old_avatar).exists()

    async def test_avatar_must_be_an_image(self, client, user):
        response = await client.put(f"/api/user/image/{user.id}",
                                    files={"image": ("notes.txt", b"hello", "text/plain")},
                                    headers=user.headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "FILE_STORAGE_ERROR"

    async def test_delete_user_requires_admin(self, client, user):
        response = await client.delete(f"/api/user/{user.id}", headers=user.headers)

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "AUTHORIZATION_ERROR"

    async def test_admin_deletes_user(self, client, admin, user):
        response = await client.delete(f"/api/user/{user.id}", headers=admin.headers)
        assert response.status_code == 204

        missing = await client.get(f"/api/user/{user.id}", headers=admin.headers)
        assert missing.status_code == 404


class TestAdmins:

    async def test_create_admin_is_public(self, client):
        response = await client.post("/api/admin", json={
            "username": "Back Office", "email": "Office@Leaflings.pt",
            "password": DEFAULT_PASSWORD, "contact": "921234567",
        })

        assert response.status_code == 201
        assert response.json()["email"] == "office@leaflings.pt"
        assert response.json()["role"] == "admin"

    async def test_admin_email_must_be_unique(self, client, user):
        response = await client.post("/api/admin", json={
            "username": "Copycat", "email": user.email, "password": DEFAULT_PASSWORD, "contact": "921234567",
        })
        assert response.status_code == 409

    async def test_admin_routes_reject_users(self, client, user):
        response = await client.get("/api/admin", headers=user.headers)
        assert response.status_code == 403

    async def test_list_and_get_admins(self, client, admin):
        await register_admin(client, "other@leaflings.pt")

        listing = await client.get("/api/admin", headers=admin.headers)
        assert listing.json()["total"] == 2

        single = await client.get(f"/api/admin/{admin.id}", headers=admin.headers)
        assert single.json()["email"] == admin.email

    async def test_update_admin(self, client, admin):
        response = await client.put(f"/api/admin/{admin.id}", json={"username": "Chief", "contact": "931111111"},
                                    headers=admin.headers)

        assert response.status_code == 200
        assert response.json()["username"] == "Chief"

    async def test_delete_admin(self, client, admin):
        other = await register_admin(client, "other@leaflings.pt")

        assert (await client.delete(f"/api/admin/{other.id}", headers=admin.headers)).status_code == 204
        assert (await client.delete(f"/api/admin/{other.id}", headers=admin.headers)).status_code == 404
