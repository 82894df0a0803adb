# backend/mechcare/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mechcare.core.api import ok, install_error_envelope, UTF8JSONResponse
from mechcare.core.config import Settings, get_settings
from mechcare.core.logging_config import setup_logging
from mechcare.core.store import JsonFileStore
from mechcare.services.repository import Repository

# --- Router importları ---
from mechcare.routers.machines import router as machines_router
from mechcare.routers.logs import router as logs_router
from mechcare.routers.data import router as data_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, default_response_class=UTF8JSONResponse)
    app.state.settings = settings
    app.state.repository = Repository(JsonFileStore(settings.data_file))
    logger.info("Dataset file: %s", settings.data_file)

    # -----------------------------
    # Global hata zarfı
    # -----------------------------
    install_error_envelope(app)

    # -----------------------------
    # CORS yapılandırması (.env)
    # -----------------------------
    logger.info("CORS allow_origins = %s", settings.cors_allow_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---- Sağlık ucu ----
    @app.get("/health")
    def health():
        return ok({"service": settings.project_name, "dataFile": settings.data_file})

    # =========================
    # Router kayıtları
    # =========================
    app.include_router(machines_router)   # /machines
    app.include_router(logs_router)       # /logs
    app.include_router(data_router)       # /data
    logger.info("Routes registered: /machines, /logs, /data")

    return app


app = create_app()
