# =======================================================================================
# card_access/main.py - FastAPI Application Entry Point
# =======================================================================================
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import Config, config
from .api.routes.request import router as request_router
from .api.routes.auth import router as auth_router
from .api.routes.dashboard import router as dashboard_router
from .models.schemas import HealthResponse
from .services.container import AccessServices
from .utils.exceptions import LoginRequired, UnsupportedMediaType

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config) -> None:
    level = logging.DEBUG if cfg.API_DEBUG else getattr(logging, cfg.LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(cfg: Optional[Config] = None) -> FastAPI:
    cfg = cfg or config
    configure_logging(cfg)
    services = AccessServices(cfg)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        services.start()
        logger.info("Card access API started")
        try:
            yield
        finally:
            services.shutdown()

    app = FastAPI(
        title="Card Access API",
        version="1.0.0",
        description="Door reader verification, key issuance and card provisioning",
        debug=cfg.API_DEBUG,
        lifespan=lifespan,
    )
    app.state.services = services

    # Routers
    app.include_router(request_router, prefix="/api", tags=["reader"])
    app.include_router(auth_router, prefix="/admin", tags=["auth"])
    app.include_router(dashboard_router, prefix="/admin", tags=["admin"])

    @app.exception_handler(UnsupportedMediaType)
    async def unsupported_media_type(request: Request, exc: UnsupportedMediaType):
        return Response(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    @app.exception_handler(LoginRequired)
    async def login_required(request: Request, exc: LoginRequired):
        return RedirectResponse(cfg.LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)

    @app.get("/api/health", response_model=HealthResponse, tags=["health"])
    def api_health():
        try:
            services.db.fetch_one("SELECT 1")
            return HealthResponse(status="ok", dataAvailable=True, message=None)
        except SQLAlchemyError:
            logger.exception("Health check failed")
            return HealthResponse(
                status="error", dataAvailable=False, message="database unavailable"
            )

    return app


app = create_app()
