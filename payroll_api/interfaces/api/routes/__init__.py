from fastapi import FastAPI

from .salaries import router as salaries_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(salaries_router)
