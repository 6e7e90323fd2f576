from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging, logger, request_context
from app.api.router import api_router
from app.db.session import engine
from app.db.base import Base
from app.db import models  # noqa: F401  registers every table on Base.metadata
from app.services.seed import seed_demo

def create_app() -> FastAPI:
    configure_logging(settings.ENV)
    app = FastAPI(title="Freelance Marketplace API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.middleware("http")(request_context)
    register_error_handlers(app)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "env": settings.ENV}

    @app.on_event("startup")
    def _startup():
        Path(settings.EXPORT_DIR).mkdir(parents=True, exist_ok=True)
        # create_all is a dev shortcut; other environments run the alembic migrations
        if settings.ENV == "dev":
            Base.metadata.create_all(bind=engine)
            if settings.SEED_DEMO:
                seed_demo()

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV, routes=len(app.routes))
    return app

app = create_app()
