from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

import trainertracker.models  # noqa: F401  register all models with Base.metadata
from trainertracker.api.routes.availability import router as availability_router
from trainertracker.api.routes.clients import router as clients_router
from trainertracker.api.routes.programs import router as programs_router
from trainertracker.api.routes.sessions import router as sessions_router
from trainertracker.api.routes.trainers import router as trainers_router
from trainertracker.config import get_settings
from trainertracker.database import create_tables, engine
from trainertracker.logging_config import setup_logging
from trainertracker.schemas.system import StatusResponse


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging(get_settings().log_level)
    await create_tables()
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Trainer Tracker",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(trainers_router)
    app.include_router(clients_router)
    app.include_router(availability_router)
    app.include_router(sessions_router)
    app.include_router(programs_router)

    @app.get("/api/system/status", response_model=StatusResponse)
    async def system_status() -> StatusResponse:
        return StatusResponse(status="ok", environment=settings.env)

    return app


app = create_app()
