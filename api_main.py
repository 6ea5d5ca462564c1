import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from productivepro.api import router
from productivepro.config import Settings, settings
from productivepro.crud import seed_demo_habits_if_empty
from productivepro.db import SessionLocal, engine
from productivepro.logging_setup import setup_logging
from productivepro.models import Base

logger = logging.getLogger(__name__)


def _prepare_database(config: Settings) -> None:
    if config.AUTO_CREATE_SCHEMA:
        Base.metadata.create_all(bind=engine)
        logger.info("Database schema ensured")

    if config.SEED_DEMO_HABITS:
        with SessionLocal() as db:
            seed_demo_habits_if_empty(db)


def create_app(config: Settings = settings) -> FastAPI:
    setup_logging(config.LOG_LEVEL, config.LOG_FILE or None)

    app = FastAPI(title="ProductivePro API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    @app.get("/health/live")
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/health/ready")
    def health_ready() -> dict[str, str]:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready", "timezone": config.APP_TIMEZONE}

    @app.on_event("startup")
    def on_startup() -> None:
        _prepare_database(config)

    return app


app = create_app()
