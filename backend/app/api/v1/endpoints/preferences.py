from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_manager
from app.models.auth import Preferences
from app.services.employee_manager import EmployeeManager

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=Preferences)
async def get_preferences(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    return Preferences(dark_mode=manager.dark_mode)


@router.post("/theme", response_model=Preferences)
async def toggle_theme(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    return Preferences(dark_mode=manager.toggle_theme())
