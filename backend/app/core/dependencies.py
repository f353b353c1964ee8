from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from app.models.auth import SessionUser
from app.services.employee_manager import EmployeeManager


def get_manager(request: Request) -> EmployeeManager:
    return request.app.state.manager


async def get_current_user(manager: EmployeeManager = Depends(get_manager)) -> SessionUser:  # noqa: B008
    if manager.current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return manager.current_user
