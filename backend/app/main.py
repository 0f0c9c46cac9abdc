import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.app.api.routes import calculator, cost_basis, presets, prints
from backend.app.core.config import settings
from backend.app.core.database import init_db
from backend.app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("%s started (currency=%s, locale=%s)", settings.app_name, settings.currency, settings.locale)
    yield


def create_app() -> FastAPI:
    setup_logging("DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(cost_basis.router, prefix=settings.api_prefix)
    app.include_router(calculator.router, prefix=settings.api_prefix)
    app.include_router(prints.router, prefix=settings.api_prefix)
    app.include_router(presets.router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
