from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_manager
from app.services.employee_manager import EmployeeManager

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(manager: EmployeeManager = Depends(get_manager)):  # noqa: B008
    return {
        "status": "healthy",
        "version": manager.settings.APP_VERSION,
        "storage": type(manager.storage).__name__,
        "employees": manager.employee_count(),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
