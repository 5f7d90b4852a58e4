"""Integration tests for services, barbers and working hours."""

import pytest

from tests.conftest import MONDAY


class TestServices:
    def test_lists_active_services_by_name(self, client, db):
        db.execute("UPDATE services SET is_active = 0 WHERE name = 'service_kids'")

        rows = client.get("/api/services").json()

        names = [r["name"] for r in rows]
        assert names == sorted(names)
        assert "service_kids" not in names
        assert len(rows) == 5
        assert all(r["is_active"] is True for r in rows)

    def test_create_requires_admin(self, client, client_headers):
        response = client.post(
            "/api/services",
            json={"name": "Hot towel", "price": 5, "duration": 10},
            headers=client_headers,
        )
        assert response.status_code == 403

    def test_create(self, client, db, admin_headers):
        response = client.post(
            "/api/services",
            json={"name": "Hot towel", "description": "relax", "price": 5.5, "duration": 10},
            headers=admin_headers,
        )

        assert response.status_code == 201
        service_id = response.json()["serviceId"]
        row = db.fetch_one("SELECT * FROM services WHERE id = ?", [service_id])
        assert row["name"] == "Hot towel"
        assert row["price"] == 5.5
        assert row["duration"] == 10
        assert row["is_active"] == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"price": 5, "duration": 10},
            {"name": "x", "duration": 10},
            {"name": "x", "price": 0, "duration": 10},
            {"name": "x", "price": 5, "duration": 0},
        ],
    )
    def test_create_validation(self, client, admin_headers, payload):
        response = client.post("/api/services", json=payload, headers=admin_headers)
        assert response.status_code == 400

    def test_update(self, client, db, admin_headers):
        response = client.patch(
            "/api/services/1",
            json={"price": 17, "isActive": False},
            headers=admin_headers,
        )

        assert response.status_code == 200
        row = db.fetch_one("SELECT price, is_active, name FROM services WHERE id = 1")
        assert row == {"price": 17.0, "is_active": 0, "name": "service_classic"}

    def test_update_nothing_is_400(self, client, admin_headers):
        response = client.patch("/api/services/1", json={}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "No updates provided"

    def test_update_missing_is_404(self, client, admin_headers):
        response = client.patch("/api/services/999", json={"price": 3}, headers=admin_headers)
        assert response.status_code == 404

    def test_null_name_is_rejected(self, client, admin_headers):
        response = client.patch("/api/services/1", json={"name": None}, headers=admin_headers)
        assert response.status_code == 400


class TestBarbers:
    def test_lists_active_barbers(self, client):
        rows = client.get("/api/barbers").json()
        assert [r["name"] for r in rows] == ["Amine Chaachoue", "Heni Njeh"]
        assert rows[0]["image_url"]

    def test_create(self, client, db, admin_headers):
        response = client.post(
            "/api/barbers",
            json={"name": "Sam", "bio": "new", "imageUrl": "/assets/sam.png", "specialty": "beards"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        row = db.fetch_one("SELECT * FROM barbers WHERE id = ?", [response.json()["barberId"]])
        assert row["image_url"] == "/assets/sam.png"
        assert row["specialty"] == "beards"

    def test_create_requires_name(self, client, admin_headers):
        response = client.post("/api/barbers", json={"bio": "no name"}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_requires_admin(self, client, client_headers):
        response = client.post("/api/barbers", json={"name": "Sam"}, headers=client_headers)
        assert response.status_code == 403

    def test_deactivate_hides_and_shrinks_pool(self, client, admin_headers, book):
        response = client.patch("/api/barbers/2", json={"isActive": False}, headers=admin_headers)
        assert response.status_code == 200

        assert [r["id"] for r in client.get("/api/barbers").json()] == [1]

        book("09:00")
        slots = client.get("/api/available-slots", params={"date": MONDAY.isoformat()}).json()
        assert "09:00" not in slots

    def test_update_touches_only_supplied_columns(self, client, db, admin_headers):
        response = client.patch("/api/barbers/1", json={"bio": "twenty years", "imageUrl": None}, headers=admin_headers)

        assert response.status_code == 200
        row = db.fetch_one("SELECT name, bio, image_url, specialty FROM barbers WHERE id = 1")
        assert row == {
            "name": "Heni Njeh",
            "bio": "twenty years",
            "image_url": None,
            "specialty": "barber_heni_specialty",
        }

    def test_update_nothing_is_400(self, client, admin_headers):
        assert client.patch("/api/barbers/1", json={}, headers=admin_headers).status_code == 400

    def test_update_missing_is_404(self, client, admin_headers):
        response = client.patch("/api/barbers/999", json={"bio": "x"}, headers=admin_headers)
        assert response.status_code == 404


class TestWorkingHours:
    def test_list_is_public_and_ordered(self, client):
        rows = client.get("/api/working-hours").json()
        assert [r["day_of_week"] for r in rows] == [1, 2, 3, 4, 5, 6]
        assert rows[0]["start_time"] == "09:00"
        assert rows[0]["is_active"] is True

    def test_update_changes_slots(self, client, admin_headers):
        monday = client.get("/api/working-hours").json()[0]
        response = client.patch(
            f"/api/working-hours/{monday['id']}",
            json={"startTime": "10:00", "endTime": "12:00"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        slots = client.get("/api/available-slots", params={"date": MONDAY.isoformat()}).json()
        assert slots == ["10:00", "10:30", "11:00", "11:30"]

    def test_deactivate_closes_day(self, client, admin_headers):
        monday = client.get("/api/working-hours").json()[0]
        client.patch(f"/api/working-hours/{monday['id']}", json={"isActive": False}, headers=admin_headers)
        assert client.get("/api/available-slots", params={"date": MONDAY.isoformat()}).json() == []

    def test_start_after_end_is_400(self, client, admin_headers):
        monday = client.get("/api/working-hours").json()[0]
        response = client.patch(
            f"/api/working-hours/{monday['id']}",
            json={"startTime": "20:00"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_bad_time_format_is_400(self, client, admin_headers):
        response = client.patch("/api/working-hours/1", json={"endTime": "7pm"}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_nothing_is_400(self, client, admin_headers):
        assert client.patch("/api/working-hours/1", json={}, headers=admin_headers).status_code == 400

    def test_update_missing_is_404(self, client, admin_headers):
        response = client.patch("/api/working-hours/999", json={"isActive": False}, headers=admin_headers)
        assert response.status_code == 404

    def test_update_requires_admin(self, client, client_headers):
        response = client.patch("/api/working-hours/1", json={"isActive": False}, headers=client_headers)
        assert response.status_code == 403
