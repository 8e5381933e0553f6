"""Main module for the finance tracker API."""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_tracker import __version__
from finance_tracker.container import Container
from finance_tracker.db.sessions import init_db
from finance_tracker.exception_handlers import register_exception_handlers
from finance_tracker.routers import (auth_router, categories_router,
                                     earnings_router, expenses_router,
                                     savings_router, types_router)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Build singletons at startup so missing secrets fail the process; dispose the engine on shutdown."""
    container: Container = fastapi_app.state.container
    settings = container.settings()
    logging.getLogger("finance_tracker").setLevel(settings.log_level)

    container.token_codec()
    container.identity_bridge()
    engine = container.engine()
    init_db(engine)
    logger.info("Finance tracker API started (env=%s)", settings.app_env)

    yield

    try:
        engine.dispose()
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Error disposing database engine: %s", exc)


def create_app(container: Container | None = None) -> FastAPI:
    """Create the FastAPI app around a DI container (a fresh one by default)."""
    container = container or Container()
    settings = container.settings()

    fastapi_app = FastAPI(
        title="Finance Tracker API",
        description="Expenses, earnings and savings tracking behind Firebase login",
        version=__version__,
        lifespan=lifespan,
    )
    fastapi_app.state.container = container

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(fastapi_app)

    for router in (
        auth_router,
        expenses_router,
        categories_router,
        types_router,
        savings_router,
        earnings_router,
    ):
        fastapi_app.include_router(router, prefix=settings.api_prefix)

    @fastapi_app.get("/health")
    def health():
        """Return health check status."""
        return {"status": "OK", "message": "Server is running"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for `poetry run start`."""
    settings = app.state.container.settings()
    uvicorn.run(
        "finance_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
