"""
API tests for plant ownership, diaries, diary entries and care reminders.
"""

import pytest

from tests.conftest import register_user, set_role_paid


async def own(client, account, user_id, plant_id):
    return await client.post("/api/userplants", json={"userId": user_id, "plantId": plant_id},
                             headers=account.headers)


@pytest.fixture()
async def basil(create_plant):
    return await create_plant("Basil")


@pytest.fixture()
async def user_plant(client, user, basil):
    response = await own(client, user, user.id, basil["id"])
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
async def diary(client, user, user_plant):
    response = await client.post("/api/diary", json={"userPlantId": user_plant["id"], "title": "Basil on the sill"},
                                 headers=user.headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestUserPlants:

    async def test_add_plant_to_user(self, client, user, basil):
        response = await own(client, user, user.id, basil["id"])

        assert response.status_code == 201
        assert response.json()["userId"] == user.id
        assert response.json()["plantId"] == basil["id"]

    async def test_pair_is_unique(self, client, user, basil, user_plant):
        response = await own(client, user, user.id, basil["id"])

        assert response.status_code == 409
        assert response.json()["error"]["message"] == "Plant already added to user"

    async def test_unknown_plant_or_user(self, client, user, basil):
        assert (await own(client, user, user.id, 999)).status_code == 404
        assert (await own(client, user, 999, basil["id"])).status_code == 404

    async def test_free_users_are_limited(self, client, user, create_plant):
        plants = [await create_plant(f"Plant {index}") for index in range(4)]
        for plant in plants[:3]:
            assert (await own(client, user, user.id, plant["id"])).status_code == 201

        response = await own(client, user, user.id, plants[3]["id"])

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "NON_PAID_USER"
        assert response.json()["error"]["message"] == "Free users can only have 3 plants associated"

    async def test_paid_users_are_not_limited(self, client, user, create_plant, session_manager):
        await set_role_paid(session_manager, user.id)
        plants = [await create_plant(f"Plant {index}") for index in range(5)]

        for plant in plants:
            assert (await own(client, user, user.id, plant["id"])).status_code == 201

    async def test_plants_of_user_include_catalog_details(self, client, user, basil, user_plant):
        response = await client.get(f"/api/userplants/{user.id}", headers=user.headers)

        assert response.status_code == 200
        owned = response.json()
        assert len(owned) == 1
        assert owned[0]["id"] == user_plant["id"]
        assert owned[0]["plant"]["name"] == "Basil"
        assert owned[0]["plant"]["waterNeeds"] == "Medium"

    async def test_user_without_plants(self, client, user):
        response = await client.get(f"/api/userplants/{user.id}", headers=user.headers)
        assert response.status_code == 204

    async def test_plants_of_unknown_user(self, client, user):
        response = await client.get("/api/userplants/999", headers=user.headers)
        assert response.status_code == 404

    async def test_owners_of_plant(self, client, user, basil, user_plant):
        neighbour = await register_user(client, "neighbour@leaflings.pt")
        await own(client, neighbour, neighbour.id, basil["id"])

        response = await client.get(f"/api/userplants/plant/{basil['id']}", headers=user.headers)

        assert [owner["userId"] for owner in response.json()] == [user.id, neighbour.id]

    async def test_list_user_plants(self, client, admin, user_plant):
        response = await client.get("/api/userplants", headers=admin.headers)

        assert response.json() == {"data": [user_plant], "total": 1}

    async def test_remove_plant_drops_its_diary(self, client, user, basil, diary):
        response = await client.delete(f"/api/userplants/{user.id}/{basil['id']}", headers=user.headers)
        assert response.status_code == 204

        assert (await client.get(f"/api/diary/{diary['id']}", headers=user.headers)).status_code == 404
        again = await client.delete(f"/api/userplants/{user.id}/{basil['id']}", headers=user.headers)
        assert again.status_code == 404


class TestDiaries:

    async def test_create_diary(self, client, user, user_plant, diary):
        assert diary["userPlantId"] == user_plant["id"]
        assert diary["title"] == "Basil on the sill"
        assert diary["creationDate"]

    async def test_one_diary_per_owned_plant(self, client, user, user_plant, diary):
        response = await client.post("/api/diary", json={"userPlantId": user_plant["id"], "title": "Again"},
                                     headers=user.headers)

        assert response.status_code == 409
        assert response.json()["error"]["message"] == "A diary entry already exists for this UserPlant."

    async def test_diary_needs_an_owned_plant(self, client, user):
        response = await client.post("/api/diary", json={"userPlantId": 999, "title": "Nothing"},
                                     headers=user.headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "This plant does not exist."

    async def test_diary_for_user_plant(self, client, user, user_plant, diary):
        response = await client.get(f"/api/diary/userPlant/{user_plant['id']}", headers=user.headers)

        assert response.status_code == 200
        assert response.json()["id"] == diary["id"]

    async def test_owned_plant_without_diary(self, client, user, user_plant):
        response = await client.get(f"/api/diary/userPlant/{user_plant['id']}", headers=user.headers)
        assert response.status_code == 404

    async def test_rename_and_delete(self, client, user, diary):
        renamed = await client.put(f"/api/diary/{diary['id']}", json={"title": "Windowsill basil"},
                                   headers=user.headers)
        assert renamed.json()["title"] == "Windowsill basil"

        assert (await client.delete(f"/api/diary/{diary['id']}", headers=user.headers)).status_code == 204
        assert (await client.delete(f"/api/diary/{diary['id']}", headers=user.headers)).status_code == 404

    async def test_title_length(self, client, user, user_plant):
        response = await client.post("/api/diary", json={"userPlantId": user_plant["id"], "title": "t" * 65},
                                     headers=user.headers)
        assert response.status_code == 422


class TestLogs:

    async def write(self, client, user, diary_id, text):
        return await client.post("/api/log", json={"diaryId": diary_id, "logDescription": text},
                                 headers=user.headers)

    async def test_write_entry(self, client, user, diary):
        response = await self.write(client, user, diary["id"], "First leaves!")

        assert response.status_code == 201
        assert response.json()["logDescription"] == "First leaves!"
        assert response.json()["logDate"]

    async def test_entry_needs_diary(self, client, user):
        response = await self.write(client, user, 999, "Lost note")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Diary not found, unable to create log"

    async def test_entries_of_diary_in_order(self, client, user, diary):
        for text in ("Sowed", "Sprouted", "Repotted"):
            await self.write(client, user, diary["id"], text)

        response = await client.get(f"/api/log/diary/{diary['id']}", headers=user.headers)

        assert [entry["logDescription"] for entry in response.json()] == ["Sowed", "Sprouted", "Repotted"]

    async def test_empty_diary_has_no_entries(self, client, user, diary):
        response = await client.get(f"/api/log/diary/{diary['id']}", headers=user.headers)
        assert response.status_code == 404

    async def test_edit_and_delete_entry(self, client, user, diary):
        entry = (await self.write(client, user, diary["id"], "Sowd")).json()

        edited = await client.put(f"/api/log/{entry['id']}", json={"logDescription": "Sowed"},
                                  headers=user.headers)
        assert edited.json()["logDescription"] == "Sowed"
        assert edited.json()["logDate"] == entry["logDate"]

        assert (await client.delete(f"/api/log/{entry['id']}", headers=user.headers)).status_code == 204
        assert (await client.get(f"/api/log/{entry['id']}", headers=user.headers)).status_code == 404

    async def test_deleting_diary_removes_entries(self, client, user, diary):
        entry = (await self.write(client, user, diary["id"], "Sowed")).json()

        await client.delete(f"/api/diary/{diary['id']}", headers=user.headers)

        assert (await client.get(f"/api/log/{entry['id']}", headers=user.headers)).status_code == 404


class TestWarnings:

    def reminder(self, user_id, when="2024-06-01T09:00:00", message="Water the basil"):
        return {"userId": user_id, "location": "Kitchen", "message": message, "reminderDate": when}

    async def test_schedule_reminder(self, client, user):
        response = await client.post("/api/warning", json=self.reminder(user.id), headers=user.headers)

        assert response.status_code == 201
        assert response.json()["location"] == "Kitchen"
        assert response.json()["reminderDate"].startswith("2024-06-01T09:00:00")

    async def test_reminder_needs_user(self, client, user):
        response = await client.post("/api/warning", json=self.reminder(999), headers=user.headers)
        assert response.status_code == 404

    async def test_reminders_ordered_by_date(self, client, user):
        await client.post("/api/warning", json=self.reminder(user.id, "2024-06-03T09:00:00", "Later"),
                          headers=user.headers)
        await client.post("/api/warning", json=self.reminder(user.id, "2024-06-01T09:00:00", "Sooner"),
                          headers=user.headers)

        response = await client.get(f"/api/warning/{user.id}", headers=user.headers)

        assert response.json()["total"] == 2
        assert [warning["message"] for warning in response.json()["data"]] == ["Sooner", "Later"]

    async def test_no_reminders(self, client, user):
        response = await client.get(f"/api/warning/{user.id}", headers=user.headers)
        assert response.status_code == 204

    async def test_update_and_delete(self, client, user):
        warning = (await client.post("/api/warning", json=self.reminder(user.id), headers=user.headers)).json()

        updated = await client.put(f"/api/warning/{warning['id']}",
                                   json=self.reminder(user.id, message="Mist the fern"), headers=user.headers)
        assert updated.json()["message"] == "Mist the fern"

        assert (await client.delete(f"/api/warning/{warning['id']}", headers=user.headers)).status_code == 204
        assert (await client.delete(f"/api/warning/{warning['id']}", headers=user.headers)).status_code == 404
