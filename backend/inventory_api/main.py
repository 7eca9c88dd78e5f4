import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from inventory_api import __version__
from inventory_api.api import brands_router, cars_router, models_router
from inventory_api.api.errors import register_exception_handlers
from inventory_api.core.config import SETTINGS, Settings
from inventory_api.db.init_db import init_db
from inventory_api.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings = SETTINGS, engine: Engine | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    engine = engine if engine is not None else build_engine(settings.database_url)

    app = FastAPI(
        title="Vehicle Inventory API",
        description="Brands, models and cars with filtering, sorting and pagination.",
        version=__version__,
        docs_url="/docs",
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=86400,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    register_exception_handlers(app)
    app.include_router(brands_router)
    app.include_router(models_router)
    app.include_router(cars_router)

    @app.on_event("startup")
    def on_startup() -> None:
        init_db(
            app.state.engine,
            app.state.session_factory,
            create_tables=settings.db_auto_create,
            seed=settings.seed_demo_data,
        )

    @app.get("/healthcheck", tags=["health"])
    def healthcheck() -> dict[str, str]:
        return {"healthcheck": "server is alive"}

    return app


app = create_app()


def run() -> None:
    logger.info("Starting API on %s:%s (%s)", SETTINGS.api_host, SETTINGS.api_port, SETTINGS.app_env)
    uvicorn.run("inventory_api.main:app", host=SETTINGS.api_host, port=SETTINGS.api_port)


if __name__ == "__main__":
    run()
