from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from app.core.dependencies import get_current_user, get_manager
from app.models.auth import LoginRequest, RegisterRequest, SessionUser
from app.services.employee_manager import EmployeeManager

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=SessionUser, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
):
    user = manager.register(request.full_name, request.email, request.password, request.role)
    return user.to_session()


@router.post("/login", response_model=SessionUser)
async def login(
    request: LoginRequest,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
):
    return manager.login(request.email, request.password)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    manager.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=SessionUser)
async def me(user: SessionUser = Depends(get_current_user)):  # noqa: B008
    return user
