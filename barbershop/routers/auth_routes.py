# barbershop/routers/auth_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError

from barbershop.auth import get_current_user, hash_password, token_for_user, verify_password
from barbershop.db import Database, get_db
from barbershop.schemas import AuthResponse, LoginRequest, RegisterRequest, TokenUser, UserRole

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    payload: RegisterRequest,
    db: Database = Depends(get_db),
):
    # 1) Check if email already exists
    existing = db.fetch_one("SELECT id FROM users WHERE email = ?", [payload.email])
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    # 2) Create user; self-registration is always a client
    role = UserRole.client.value
    try:
        result = db.execute(
            """
            INSERT INTO users (email, password, full_name, phone, role)
            VALUES (?, ?, ?, ?, ?)
            """,
            [payload.email, hash_password(payload.password), payload.full_name, payload.phone, role],
        )
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Email already registered")

    user_id = result.lastrowid
    logger.info("Registered new client", extra={"user_id": user_id})

    return {
        "message": "Account created successfully",
        "token": token_for_user(user_id, payload.email, role),
        "user": {
            "id": user_id,
            "email": payload.email,
            "full_name": payload.full_name,
            "phone": payload.phone,
            "role": role,
        },
    }


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Database = Depends(get_db),
):
    user = db.fetch_one("SELECT * FROM users WHERE email = ?", [payload.email])

    if user is None or not verify_password(payload.password, user["password"]):
        logger.info("Rejected login attempt")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return {
        "message": "Login successful",
        "token": token_for_user(user["id"], user["email"], user["role"]),
        "user": {
            "id": user["id"],
            "email": user["email"],
            "full_name": user["full_name"],
            "phone": user["phone"],
            "role": user["role"],
        },
    }


@router.get("/me", response_model=TokenUser)
def me(current_user: dict = Depends(get_current_user)):
    return current_user
