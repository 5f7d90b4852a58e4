# barbershop/deps.py

from fastapi import Depends, HTTPException

from barbershop.auth import get_current_user
from barbershop.schemas import UserRole


def require_role(user: dict, role: UserRole):
    if user["role"] != role.value:
        raise HTTPException(status_code=403, detail="Forbidden")


def require_admin(current_user: dict = Depends(get_current_user)) -> dict:
    require_role(current_user, UserRole.admin)
    return current_user
