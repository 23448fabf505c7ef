from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from errors import StudentServiceError
from log import logger, setup_logging
from store import StudentStore
from routers.health import router as health_router
from routers.student import router as student_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Student service started with %d student(s) in store", len(app.state.store))
    try:
        yield
    finally:
        logger.info("Student service stopped")


async def handle_service_error(request: Request, exc: StudentServiceError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(store: Optional[StudentStore] = None) -> FastAPI:
    """Build the API around ``store``; a fresh empty store is used when omitted."""
    setup_logging()
    app = FastAPI(title="Student Service", lifespan=lifespan)
    app.state.store = store if store is not None else StudentStore()

    app.add_exception_handler(StudentServiceError, handle_service_error)

    app.include_router(health_router)
    app.include_router(student_router)

    return app
