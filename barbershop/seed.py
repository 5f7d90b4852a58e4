# barbershop/seed.py

import logging

from barbershop.auth import hash_password

logger = logging.getLogger(__name__)

DEFAULT_ADMIN = {
    "email": "admin@barbershop.com",
    "password": "admin123",
    "full_name": "Administrator",
}

# names and descriptions are translation keys resolved by the client UI
DEFAULT_SERVICES = [
    ("service_classic", "service_classic_desc", 15.0, 30),
    ("service_beard", "service_beard_desc", 10.0, 20),
    ("service_combo", "service_combo_desc", 20.0, 45),
    ("service_shave", "service_shave_desc", 12.0, 30),
    ("service_kids", "service_kids_desc", 8.0, 25),
    ("service_color", "service_color_desc", 25.0, 60),
]

DEFAULT_BARBERS = [
    ("Heni Njeh", "barber_heni_bio", "barber_heni_specialty", "/assets/heni.png"),
    ("Amine Chaachoue", "barber_amine_bio", "barber_amine_specialty", "/assets/amine.png"),
]

# Monday (1) to Saturday (6), Sunday closed
DEFAULT_OPEN_DAYS = range(1, 7)
DEFAULT_OPEN_TIME = "09:00"
DEFAULT_CLOSE_TIME = "19:00"


def _count(db, table: str) -> int:
    return db.fetch_one(f"SELECT COUNT(*) AS count FROM {table}")["count"]


def seed_defaults(db) -> None:
    """Insert default rows into tables that are still empty. Safe to re-run."""
    admin = db.fetch_one("SELECT id FROM users WHERE email = ?", [DEFAULT_ADMIN["email"]])
    if admin is None:
        db.execute(
            "INSERT INTO users (email, password, full_name, role) VALUES (?, ?, ?, ?)",
            [
                DEFAULT_ADMIN["email"],
                hash_password(DEFAULT_ADMIN["password"]),
                DEFAULT_ADMIN["full_name"],
                "admin",
            ],
        )
        logger.info("Created default admin user")

    if _count(db, "services") == 0:
        for name, description, price, duration in DEFAULT_SERVICES:
            db.execute(
                "INSERT INTO services (name, description, price, duration) VALUES (?, ?, ?, ?)",
                [name, description, price, duration],
            )
        logger.info(f"Seeded {len(DEFAULT_SERVICES)} services")

    if _count(db, "barbers") == 0:
        for name, bio, specialty, image_url in DEFAULT_BARBERS:
            db.execute(
                "INSERT INTO barbers (name, bio, specialty, image_url) VALUES (?, ?, ?, ?)",
                [name, bio, specialty, image_url],
            )
        logger.info(f"Seeded {len(DEFAULT_BARBERS)} barbers")

    if _count(db, "working_hours") == 0:
        for day in DEFAULT_OPEN_DAYS:
            db.execute(
                "INSERT INTO working_hours (day_of_week, start_time, end_time) VALUES (?, ?, ?)",
                [day, DEFAULT_OPEN_TIME, DEFAULT_CLOSE_TIME],
            )
        logger.info("Seeded working hours")
