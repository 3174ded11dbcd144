from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from axion.core.config import settings
from axion.core.logging import configure_logging, logger
from axion.api.router import api_router
from axion.db.session import engine
from axion.db.base import Base
from axion.db import models  # noqa: F401
from axion.services.seed import seed_demo

def create_app() -> FastAPI:
    configure_logging(settings.ENV)
    app = FastAPI(title="Axion ERP", version="0.1.0")

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup():
        Path(settings.EXPORT_DIR).mkdir(parents=True, exist_ok=True)
        # dev creates tables itself; test and prod run alembic
        if settings.ENV == "dev":
            Base.metadata.create_all(bind=engine)
            if settings.SEED_DEMO:
                seed_demo()

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV, tz=settings.TZ)
    return app

app = create_app()
