from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.v1.router import api_router
from app.core.config import Settings, settings
from app.services.employee_manager import EmployeeManager

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(application: FastAPI) -> AsyncIterator[None]:
        application.state.manager = EmployeeManager.from_settings(app_settings)
        yield
        application.state.manager = None

    application = FastAPI(
        title="Employee Records API",
        description="Employee CRUD with a local login gate",
        version=app_settings.APP_VERSION,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(api_router)

    @application.get("/")
    async def root():
        return {"message": "Employee Records API"}

    return application


app = create_app()
