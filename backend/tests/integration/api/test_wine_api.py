"""End-to-end tests for user and wine routes over HTTP."""

from datetime import datetime, timedelta, timezone

import pytest


async def register(client, email="ana@example.com"):
    response = await client.post("/api/users", json={"email": email})
    assert response.status_code == 201
    return response.json()


def wine_payload(user_id, **overrides):
    payload = {
        "user_id": user_id,
        "name": "Vega Sicilia Único",
        "vintage": 2005,
        "coupage": "Tinto Fino, Cabernet Sauvignon",
        "type": "red",
        "cellar_entry_date": "2020-01-01T00:00:00Z",
        "quantity": 3,
        "alcohol_content": 14.0,
        "denomination": "DO Ribera del Duero",
        "winery": "Vega Sicilia",
    }
    payload.update(overrides)
    return payload


async def add_wine(client, user_id, **overrides):
    response = await client.post("/api/wines", json=wine_payload(user_id, **overrides))
    assert response.status_code == 201
    return response.json()


class TestUserRoutes:
    @pytest.mark.asyncio
    async def test_register_and_fetch(self, client):
        user = await register(client)

        response = await client.get(f"/api/users/{user['id']}")

        assert response.status_code == 200
        assert response.json()["email"] == "ana@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_422(self, client):
        await register(client)

        response = await client.post("/api/users", json={"email": "ana@example.com"})

        assert response.status_code == 422
        assert response.json()["error"] == "INVALID_DATA"

    @pytest.mark.asyncio
    async def test_missing_user_is_404(self, client):
        response = await client.get("/api/users/ghost")

        assert response.status_code == 404
        assert response.json() == {
            "error": "NOT_FOUND",
            "detail": "User with id ghost not found",
        }


class TestWineRoutes:
    @pytest.mark.asyncio
    async def test_create_old_red_suggests_entry_date(self, client):
        user = await register(client)

        wine = await add_wine(client, user["id"])

        assert wine["type"] == "red"
        assert wine["quantity"] == 3
        assert wine["suggested_consumption_date"].startswith("2020-01-01T00:00:00")

    @pytest.mark.asyncio
    async def test_create_for_unknown_user_is_404(self, client):
        response = await client.post("/api/wines", json=wine_payload("ghost"))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_with_unknown_type_is_422(self, client):
        user = await register(client)

        response = await client.post(
            "/api/wines", json=wine_payload(user["id"], type="orange")
        )

        assert response.status_code == 422
        assert response.json()["error"] == "INVALID_DATA"

    @pytest.mark.asyncio
    async def test_list_and_get(self, client):
        user = await register(client)
        wine = await add_wine(client, user["id"])

        listed = await client.get("/api/wines", params={"user_id": user["id"]})
        fetched = await client.get(f"/api/wines/{wine['id']}")

        assert [w["id"] for w in listed.json()] == [wine["id"]]
        assert fetched.json()["name"] == "Vega Sicilia Único"

    @pytest.mark.asyncio
    async def test_stock_changes(self, client):
        user = await register(client)
        wine = await add_wine(client, user["id"])
        base = f"/api/wines/{wine['id']}"

        added = await client.post(f"{base}/bottles/add", json={"amount": 2})
        removed = await client.post(f"{base}/bottles/remove", json={"amount": 5})
        too_many = await client.post(f"{base}/bottles/remove", json={"amount": 1})
        zero = await client.post(f"{base}/bottles/add", json={"amount": 0})
        negative = await client.put(f"{base}/quantity", json={"quantity": -1})
        restocked = await client.put(f"{base}/quantity", json={"quantity": 12})

        assert added.json()["quantity"] == 5
        assert removed.json()["quantity"] == 0
        assert too_many.status_code == 409
        assert too_many.json() == {
            "error": "INSUFFICIENT_STOCK",
            "detail": "Not enough bottles in cellar",
        }
        assert zero.status_code == 400
        assert zero.json()["error"] == "INVALID_AMOUNT"
        assert negative.status_code == 400
        assert negative.json()["error"] == "INVALID_QUANTITY"
        assert restocked.json()["quantity"] == 12

    @pytest.mark.asyncio
    async def test_update_notes(self, client):
        user = await register(client)
        wine = await add_wine(client, user["id"])

        response = await client.patch(
            f"/api/wines/{wine['id']}/notes", json={"notes": "Cedar and tobacco"}
        )

        assert response.json()["notes"] == "Cedar and tobacco"

    @pytest.mark.asyncio
    async def test_delete(self, client):
        user = await register(client)
        wine = await add_wine(client, user["id"])

        deleted = await client.delete(f"/api/wines/{wine['id']}")
        missing = await client.get(f"/api/wines/{wine['id']}")
        again = await client.delete(f"/api/wines/{wine['id']}")

        assert deleted.status_code == 204
        assert missing.status_code == 404
        assert again.status_code == 404


class TestConsumptionRoutes:
    @pytest.mark.asyncio
    async def test_consumption_status_approaching(self, client):
        user = await register(client)
        soon = (datetime.now(timezone.utc) + timedelta(days=30)).isoformat()
        wine = await add_wine(client, user["id"], suggested_consumption_date=soon)

        response = await client.get(f"/api/wines/{wine['id']}/consumption")

        body = response.json()
        assert body["status"] == "approaching"
        assert body["is_optimal"] is False
        assert body["days_until_optimal"] == 30

    @pytest.mark.asyncio
    async def test_refresh_suggested_date(self, client):
        user = await register(client)
        far = "2040-01-01T00:00:00+00:00"
        wine = await add_wine(client, user["id"], suggested_consumption_date=far)

        response = await client.post(f"/api/wines/{wine['id']}/suggested-consumption-date")

        assert response.status_code == 200
        assert response.json()["suggested_consumption_date"].startswith("2020-01-01")

    @pytest.mark.asyncio
    async def test_ready_to_drink(self, client):
        user = await register(client)
        ready = await add_wine(client, user["id"])
        await add_wine(
            client,
            user["id"],
            name="Young Rioja",
            suggested_consumption_date="2099-01-01T00:00:00+00:00",
        )

        response = await client.get(f"/api/users/{user['id']}/wines/ready")

        assert [w["id"] for w in response.json()] == [ready["id"]]
