"""Trailing debounce for the four live-search fields.

One pending run is shared by all fields: every change restarts the quiet
period, and only the values present when it finally elapses are searched.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from app.models.employee import EmployeeFilter

logger = logging.getLogger(__name__)

SEARCH_FIELDS: frozenset[str] = frozenset({"id", "name", "contact", "email"})


class SearchDebouncer:
    def __init__(
        self,
        delay: float,
        callback: Callable[[EmployeeFilter], Awaitable[None]],
    ) -> None:
        self.delay = delay
        self._callback = callback
        self._values: dict[str, str] = {}
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None

    @property
    def criteria(self) -> EmployeeFilter:
        return EmployeeFilter(**self._values)

    def update(self, field: str, value: str) -> None:
        if field not in SEARCH_FIELDS:
            raise ValueError(f"Unknown search field: {field}")
        self._values[field] = value
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire_later())

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def flush(self) -> None:
        self.cancel()
        await self._callback(self.criteria)

    async def _fire_later(self) -> None:
        await asyncio.sleep(self.delay)
        # Detach before running so a later update cannot cancel a search in progress
        self._task = None
        try:
            await self._callback(self.criteria)
        except Exception:
            logger.exception("Debounced search callback failed")
