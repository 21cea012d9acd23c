from fastapi import FastAPI

from .auth import router as auth_router
from .edits import router as edits_router
from .files import router as files_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(files_router)
    app.include_router(edits_router)
    app.include_router(notifications_router)
