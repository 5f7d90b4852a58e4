"""
Test configuration and fixtures.

Every test gets its own seeded SQLite file under tmp_path: two active
barbers (ids 1 and 2), six services, working hours Monday-Saturday
09:00-19:00 and the default admin.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from barbershop.auth import token_for_user
from barbershop.db import SQLiteDatabase, get_db, init_db
from barbershop.main import app

MONDAY = date(2026, 10, 19)
SUNDAY = date(2026, 10, 18)


@pytest.fixture
def db(tmp_path):
    database = SQLiteDatabase(str(tmp_path / "barbershop-test.db"))
    init_db(database)
    yield database
    database.close()


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return db.fetch_one("SELECT id, email, role FROM users WHERE role = 'admin'")


@pytest.fixture
def admin_headers(admin):
    token = token_for_user(admin["id"], admin["email"], "admin")
    return {"Authorization": f"Bearer {token}"}


def _insert_client(db, email):
    # password is never checked in these fixtures, skip the bcrypt cost
    result = db.execute(
        "INSERT INTO users (email, password, full_name, phone, role) VALUES (?, ?, ?, ?, 'client')",
        [email, "not-a-hash", "Test Client", "555-0100"],
    )
    return {"id": result.lastrowid, "email": email, "role": "client"}


@pytest.fixture
def client_user(db):
    return _insert_client(db, "client@example.com")


@pytest.fixture
def other_client_user(db):
    return _insert_client(db, "other@example.com")


def headers_for(user):
    token = token_for_user(user["id"], user["email"], user["role"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client_headers(client_user):
    return headers_for(client_user)


@pytest.fixture
def book(db, client_user):
    """Insert an appointment row directly, bypassing the slot check."""

    def _book(appointment_time, barber_id=None, status="pending", day=MONDAY, client_id=None):
        result = db.execute(
            """
            INSERT INTO appointments (client_id, service_id, barber_id, appointment_date, appointment_time, status)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            [client_id or client_user["id"], 1, barber_id, day.isoformat(), appointment_time, status],
        )
        return result.lastrowid

    return _book
