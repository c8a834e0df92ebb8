"""
API tests for the plant catalog, care tasks and plant matching.
"""

import pytest

from app.shared.config.settings import get_settings
from app.shared.infrastructure.storage.image_storage import get_image_storage
from tests.conftest import plant_form, register_admin, register_user


class TestPlants:

    async def test_create_plant(self, client, admin):
        response = await client.post("/api/plant", data=plant_form("Aloe Vera", type="Succulent",
                                                                    waterNeeds="0", luminosityNeeded="High"),
                                     headers=admin.headers)

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Aloe Vera"
        assert body["type"] == "Succulent"
        assert body["waterNeeds"] == "Low"
        assert body["luminosityNeeded"] == "High"
        assert body["adminId"] == admin.id
        assert body["plantImage"] is None

    async def test_create_plant_with_image(self, client, create_plant, png_bytes):
        plant = await create_plant("Fern", files={"plantImage": ("fern.png", png_bytes, "image/png")})

        assert plant["plantImage"].startswith("images/")
        assert get_image_storage().resolve(plant["plantImage"]).is_file()

    async def test_users_cannot_create_plants(self, client, user):
        response = await client.post("/api/plant", data=plant_form(), headers=user.headers)
        assert response.status_code == 403

    async def test_unknown_plant_type(self, client, admin):
        response = await client.post("/api/plant", data=plant_form(type="Mushroom"), headers=admin.headers)

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "type"

    async def test_get_plant(self, client, user, create_plant):
        plant = await create_plant("Mint")

        response = await client.get(f"/api/plant/{plant['id']}", headers=user.headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Mint"

    async def test_get_missing_plant(self, client, user):
        response = await client.get("/api/plant/404", headers=user.headers)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Plant not found"

    async def test_list_filters(self, client, user, create_plant):
        await create_plant("Basil", waterNeeds="Medium", type="Vegetable")
        await create_plant("Cactus", waterNeeds="Low", type="Succulent")
        await create_plant("Rose", waterNeeds="Medium", type="Flower")

        by_water = await client.get("/api/plant", params={"water": "Medium"}, headers=user.headers)
        assert [plant["name"] for plant in by_water.json()["data"]] == ["Basil", "Rose"]
        assert by_water.json()["total"] == 2

        by_type = await client.get("/api/plant", params={"type": "succulent"}, headers=user.headers)
        assert [plant["name"] for plant in by_type.json()["data"]] == ["Cactus"]

        nothing = await client.get("/api/plant", params={"water": "High"}, headers=user.headers)
        assert nothing.status_code == 204

    async def test_list_sorting(self, client, user, create_plant):
        for name in ("Rose", "Aloe", "Mint"):
            await create_plant(name)

        by_id = await client.get("/api/plant", headers=user.headers)
        assert by_id.status_code == 200
        assert [plant["name"] for plant in by_id.json()["data"]] == ["Rose", "Aloe", "Mint"]

        by_name = await client.get("/api/plant", params={"_sort": "name", "_order": "DESC"}, headers=user.headers)
        assert by_name.status_code == 200
        assert [plant["name"] for plant in by_name.json()["data"]] == ["Rose", "Mint", "Aloe"]

        unknown = await client.get("/api/plant", params={"_sort": "colour"}, headers=user.headers)
        assert [plant["name"] for plant in unknown.json()["data"]] == ["Rose", "Aloe", "Mint"]

    async def test_list_rejects_unknown_filter_value(self, client, user):
        response = await client.get("/api/plant", params={"light": "Blinding"}, headers=user.headers)
        assert response.status_code == 422

    async def test_search_is_public_and_case_insensitive(self, client, create_plant):
        await create_plant("Sweet Basil")
        await create_plant("Thai Basil")
        await create_plant("Rosemary")

        response = await client.get("/api/plant/search/BASIL")

        assert response.status_code == 200
        assert [plant["name"] for plant in response.json()["data"]] == ["Sweet Basil", "Thai Basil"]
        assert response.json()["total"] == 2

    async def test_search_without_results(self, client, create_plant):
        await create_plant("Rosemary")

        response = await client.get("/api/plant/search/orchid")

        assert response.status_code == 200
        assert response.json() == {"data": [], "total": 0}

    async def test_update_plant_replaces_image(self, client, admin, create_plant, png_bytes):
        plant = await create_plant("Fern", files={"plantImage": ("fern.png", png_bytes, "image/png")})

        response = await client.put(
            f"/api/plant/{plant['id']}",
            data=plant_form("Boston Fern", type="Decorative", waterNeeds="High"),
            files={"plantImage": ("fern2.png", png_bytes, "image/png")},
            headers=admin.headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Boston Fern"
        assert body["waterNeeds"] == "High"
        assert body["plantImage"] != plant["plantImage"]
        assert not get_image_storage().resolve(plant["plantImage"]).exists()

    async def test_update_keeps_image_without_upload(self, client, admin, create_plant, png_bytes):
        plant = await create_plant("Fern", files={"plantImage": ("fern.png", png_bytes, "image/png")})

        response = await client.put(f"/api/plant/{plant['id']}", data=plant_form("Fern"), headers=admin.headers)

        assert response.json()["plantImage"] == plant["plantImage"]

    async def test_delete_plant(self, client, admin, create_plant, png_bytes):
        plant = await create_plant("Fern", files={"plantImage": ("fern.png", png_bytes, "image/png")})

        response = await client.delete(f"/api/plant/{plant['id']}", headers=admin.headers)

        assert response.status_code == 204
        assert not get_image_storage().resolve(plant["plantImage"]).exists()
        assert (await client.get(f"/api/plant/{plant['id']}", headers=admin.headers)).status_code == 404


class TestTasks:

    @pytest.fixture()
    async def plant(self, create_plant):
        return await create_plant("Basil")

    async def create_task(self, client, admin, plant_id, name="Water", **fields):
        body = {"plantId": plant_id, "taskName": name, "taskDescription": "Keep the soil moist", **fields}
        return await client.post("/api/task", json=body, headers=admin.headers)

    async def test_create_task_defaults_admin_to_caller(self, client, admin, plant):
        response = await self.create_task(client, admin, plant["id"])

        assert response.status_code == 201
        body = response.json()
        assert body["adminId"] == admin.id
        assert body["plantId"] == plant["id"]
        assert body["taskName"] == "Water"

    async def test_task_references_must_exist(self, client, admin):
        response = await self.create_task(client, admin, plant_id=999)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Admin or Plant not found for the provided IDs."

    async def test_task_fields_are_bounded(self, client, admin, plant):
        response = await self.create_task(client, admin, plant["id"], name="x" * 49)
        assert response.status_code == 422

    async def test_tasks_for_plant(self, client, admin, user, plant):
        await self.create_task(client, admin, plant["id"], "Water")
        await self.create_task(client, admin, plant["id"], "Prune")

        response = await client.get(f"/api/task/plant/{plant['id']}", headers=user.headers)

        assert response.status_code == 200
        assert [task["taskName"] for task in response.json()["data"]] == ["Water", "Prune"]

    async def test_plant_without_tasks(self, client, user, plant):
        response = await client.get(f"/api/task/plant/{plant['id']}", headers=user.headers)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "This plant doesn't have tasks."

    async def test_tasks_by_admin(self, client, admin, user, plant):
        other = await register_admin(client, "other@leaflings.pt")
        await self.create_task(client, admin, plant["id"], "Water")
        await self.create_task(client, other, plant["id"], "Repot")

        response = await client.get(f"/api/task/admin/{other.id}", headers=user.headers)

        assert [task["taskName"] for task in response.json()["data"]] == ["Repot"]

    async def test_update_and_delete_task(self, client, admin, plant):
        task = (await self.create_task(client, admin, plant["id"])).json()

        updated = await client.put(f"/api/task/{task['id']}",
                                   json={"plantId": plant["id"], "taskName": "Mist", "taskDescription": "Daily"},
                                   headers=admin.headers)
        assert updated.status_code == 200
        assert updated.json()["taskName"] == "Mist"

        assert (await client.delete(f"/api/task/{task['id']}", headers=admin.headers)).status_code == 204
        missing = await client.get(f"/api/task/{task['id']}", headers=admin.headers)
        assert missing.json()["error"]["message"] == "Task not found!"

    async def test_list_tasks(self, client, admin, plant):
        for name in ("Water", "Prune", "Feed"):
            await self.create_task(client, admin, plant["id"], name)

        response = await client.get("/api/task", params={"_limit": 2}, headers=admin.headers)

        assert response.json()["total"] == 3
        assert len(response.json()["data"]) == 2


class TestMatching:

    async def test_reference_scenario(self, client, create_plant):
        await create_plant("A", expSuggested="Beginner", waterNeeds="Low", luminosityNeeded="Low")
        await create_plant("B", expSuggested="Expert", waterNeeds="High", luminosityNeeded="High")
        await create_plant("C", expSuggested="Expert", waterNeeds="Low", luminosityNeeded="Medium")
        await create_plant("D", expSuggested="Intermediate", waterNeeds="Medium", luminosityNeeded="High")
        gardener = await register_user(client, "expert@leaflings.pt", careExperience="Expert",
                                       waterAvailability="High", luminosityAvailability="Medium")

        response = await client.get(f"/api/user/match/{gardener.id}", headers=gardener.headers)

        assert response.status_code == 200
        body = response.json()
        assert [plant["name"] for plant in body["perfectMatches"]] == ["A", "C"]
        assert [plant["name"] for plant in body["averageMatches"]] == ["B", "D"]
        assert body["weakMatches"] == []
        assert body["noMatches"] == []
        assert {plant["matchType"] for plant in body["perfectMatches"]} == {"Perfect Match (3/3)"}
        assert {plant["matchType"] for plant in body["averageMatches"]} == {"Average Match (2/3)"}

    async def test_every_plant_lands_in_one_bucket(self, client, create_plant, user):
        for index, (exp, water, light) in enumerate([(0, 0, 0), (1, 1, 1), (2, 2, 2), (2, 0, 0)]):
            await create_plant(f"P{index}", expSuggested=exp, waterNeeds=water, luminosityNeeded=light)

        body = (await client.get(f"/api/user/match/{user.id}", headers=user.headers)).json()

        names = [plant["name"] for bucket in ("perfectMatches", "averageMatches", "weakMatches", "noMatches")
                 for plant in body[bucket]]
        assert sorted(names) == ["P0", "P1", "P2", "P3"]
        assert [plant["name"] for plant in body["perfectMatches"]] == ["P0"]
        assert [plant["name"] for plant in body["averageMatches"]] == ["P3"]
        assert [plant["name"] for plant in body["noMatches"]] == ["P1", "P2"]
        assert {plant["matchType"] for plant in body["noMatches"]} == {"Weak Match (0/3)"}

    async def test_unknown_user_gets_empty_buckets(self, client, user, create_plant):
        await create_plant("Basil")

        response = await client.get("/api/user/match/9999", headers=user.headers)

        assert response.status_code == 200
        assert response.json() == {"perfectMatches": [], "averageMatches": [], "weakMatches": [], "noMatches": []}

    async def test_unknown_user_in_strict_mode(self, client, user, monkeypatch):
        monkeypatch.setattr(get_settings(), "MATCH_STRICT_USER_LOOKUP", True)

        response = await client.get("/api/user/match/9999", headers=user.headers)

        assert response.status_code == 404

    async def test_empty_catalog(self, client, user):
        body = (await client.get(f"/api/user/match/{user.id}", headers=user.headers)).json()
        assert body == {"perfectMatches": [], "averageMatches": [], "weakMatches": [], "noMatches": []}

    async def test_match_requires_token(self, client, user):
        response = await client.get(f"/api/user/match/{user.id}")
        assert response.status_code == 401
