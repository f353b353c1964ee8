from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, WebSocket, WebSocketDisconnect, status

from app.core.debounce import SearchDebouncer
from app.core.dependencies import get_current_user, get_manager
from app.models.auth import SessionUser
from app.models.employee import (
    Employee,
    EmployeeCount,
    EmployeeFilter,
    EmployeeInput,
    EmployeeUpdate,
    LiveSearchResult,
)
from app.services.employee_manager import EmployeeManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees(
    id: str | None = None,
    name: str | None = None,
    contact: str | None = None,
    email: str | None = None,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
    user: SessionUser = Depends(get_current_user),  # noqa: B008
):
    criteria = EmployeeFilter(id=id, name=name, contact=contact, email=email)
    return manager.filter_employees(criteria)


@router.get("/search", response_model=list[Employee])
async def search_employees(
    q: str = "",
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
    user: SessionUser = Depends(get_current_user),  # noqa: B008
):
    return manager.quick_search(q)


@router.get("/count", response_model=EmployeeCount)
async def count_employees(
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
    user: SessionUser = Depends(get_current_user),  # noqa: B008
):
    return EmployeeCount(count=manager.employee_count())


@router.websocket("/live-search")
async def live_search(websocket: WebSocket):
    manager: EmployeeManager = websocket.app.state.manager
    await websocket.accept()

    if manager.current_user is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason="Not authenticated")
        return

    async def push(criteria: EmployeeFilter) -> None:
        employees = manager.filter_employees(criteria)
        result = LiveSearchResult(criteria=criteria, employees=employees, count=len(employees))
        await websocket.send_json(result.model_dump())

    debouncer = SearchDebouncer(manager.settings.SEARCH_DEBOUNCE_MS / 1000, push)
    try:
        while True:
            try:
                message = json.loads(await websocket.receive_text())
            except ValueError:
                await websocket.send_json({"error": "Expected a JSON object"})
                continue
            if not isinstance(message, dict):
                await websocket.send_json({"error": "Expected an object with 'field' and 'value'"})
                continue
            try:
                debouncer.update(str(message.get("field", "")), str(message.get("value") or ""))
            except ValueError as err:
                await websocket.send_json({"error": str(err)})
    except WebSocketDisconnect:
        logger.debug("Live search client disconnected")
    finally:
        debouncer.cancel()


@router.get("/by-id/{employee_id:path}", response_model=Employee)
async def get_employee(
    employee_id: str,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
    user: SessionUser = Depends(get_current_user),  # noqa: B008
):
    return manager.get_employee(employee_id)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeInput,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
    user: SessionUser = Depends(get_current_user),  # noqa: B008
):
    return manager.add_employee(payload.id, payload.name, payload.contact, payload.email)


@router.put("/{employee_id:path}", response_model=Employee)
async def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
    user: SessionUser = Depends(get_current_user),  # noqa: B008
):
    return manager.update_employee(employee_id, payload.name, payload.contact, payload.email)


@router.delete("/{employee_id:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    confirm: bool = False,
    manager: EmployeeManager = Depends(get_manager),  # noqa: B008
    user: SessionUser = Depends(get_current_user),  # noqa: B008
):
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deletion must be confirmed with confirm=true",
        )
    manager.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
