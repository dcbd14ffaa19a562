import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contracts_api.errors import add_exception_handlers
from contracts_api.routes import blueprint
from contracts_api.routes import contract
from contracts_core.config import get_settings
from contracts_core.db import dispose_db, init_db
from contracts_core.log_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info(f"{app.title} started")
    yield
    await dispose_db()


def create_app(settings=None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    #Routes Inclusions
    app.include_router(blueprint.router)
    app.include_router(contract.router)

    add_exception_handlers(app)

    # Health check route
    @app.get("/health")
    async def health_check():
        return {
            "status": "OK",
            "app": settings.APP_NAME,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "contracts_api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    run()
