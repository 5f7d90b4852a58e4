# barbershop/auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext

from barbershop.config import get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def create_access_token(data: dict, expires_days: Optional[int] = None) -> str:
    settings = get_settings()
    if expires_days is None:
        expires_days = settings.ACCESS_TOKEN_EXPIRE_DAYS
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(days=expires_days)
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def token_for_user(user_id: int, email: str, role: str) -> str:
    return create_access_token({"sub": email, "id": user_id, "email": email, "role": role})


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def _invalid_token() -> HTTPException:
    return HTTPException(
        status_code=401,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(token: str = Depends(oauth2_scheme)) -> dict:
    """Identity of the caller, read from the signed token claims alone."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise _invalid_token()

    if payload.get("id") is None or payload.get("role") is None:
        raise _invalid_token()

    return {
        "id": payload["id"],
        "email": payload.get("email"),
        "role": payload["role"],
    }
