from fastapi import FastAPI
from contextlib import asynccontextmanager

from payroll_api.interfaces.api.routes import register_routes
from payroll_api.infrastructure.database import initialize_database, engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release pooled connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Payroll API",
        description="Compares per-row and set-based salary updates through the ORM.",
        lifespan=lifespan,
    )
    register_routes(app)
    return app


app = create_app()
