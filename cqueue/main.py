import time
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from cqueue.config.logging import setup_logging
from cqueue.config.settings import settings
from cqueue.v1.core.exceptions import (
    CQueueException,
    RequestContextMiddleware,
    cqueue_exception_handler,
    general_exception_handler,
    http_exception_handler,
)
from cqueue.v1.healthz import router as health_router
from cqueue.v1.jobs.repository import InMemoryJobRepository
from cqueue.v1.jobs.routes import router as jobs_router


def create_app(repository: InMemoryJobRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory job queue",
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Queue state lives for the lifetime of the app instance
    app.state.job_repository = repository or InMemoryJobRepository()
    app.state.started_at = time.monotonic()
    app.state.started_at_wall = datetime.now(UTC)

    app.add_middleware(RequestContextMiddleware)

    if settings.debug:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(CQueueException, cqueue_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(jobs_router)
    app.include_router(health_router, tags=["health"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cqueue.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
