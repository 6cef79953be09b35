# =======================================================================================
# card_access/api/dependencies.py - FastAPI Dependencies
# =======================================================================================
import logging
from typing import Iterator, Optional, Type, TypeVar
from fastapi import Depends, HTTPException, Request, Response, status
from pydantic import BaseModel, ValidationError
from sqlalchemy.engine import Connection
from ..config import Config
from ..models.records import AdminSession
from ..services.container import AccessServices
from ..utils.exceptions import LoginRequired, UnsupportedMediaType

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_services(request: Request) -> AccessServices:
    """Dependency returning the application's service container."""
    return request.app.state.services


def get_db_connection(services: AccessServices = Depends(get_services)) -> Iterator[Connection]:
    """Dependency to get database connection."""
    try:
        with services.db.get_connection() as conn:
            yield conn
    except HTTPException:
        raise
    except Exception:
        logger.exception("Database connection error")
        raise HTTPException(status_code=500, detail="Database connection error")


# ----------------------------------------------------------------------
# Reader requests
# ----------------------------------------------------------------------
async def read_json_body(request: Request) -> bytes:
    """Raw body of a reader request; anything but application/json is refused."""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise UnsupportedMediaType(content_type)
    return await request.body()


def parse_payload(model: Type[ModelT], body: bytes) -> Optional[ModelT]:
    """Validate a JSON body; None means the payload is malformed."""
    try:
        return model.model_validate_json(body)
    except ValidationError:
        return None


# ----------------------------------------------------------------------
# Admin gate
# ----------------------------------------------------------------------
def set_session_cookie(response: Response, token: str, cfg: Config) -> None:
    response.set_cookie(
        key=cfg.SESSION_COOKIE_NAME,
        value=token,
        max_age=cfg.SESSION_TTL_SECONDS,
        path="/",
        httponly=True,
        secure=True,
        samesite="strict",
    )


def clear_session_cookie(response: Response, cfg: Config) -> None:
    response.delete_cookie(
        key=cfg.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=True,
        samesite="strict",
    )


class AdminGate:
    """
    Dependency authorizing console requests from the session cookie.

    Missing or invalid sessions raise LoginRequired (redirect to login);
    adminTab-only routes answer 403 for sessions without that flag.
    """

    def __init__(self, require_admin_tab: bool = False):
        self.require_admin_tab = require_admin_tab

    def __call__(
        self,
        request: Request,
        response: Response,
        services: AccessServices = Depends(get_services),
    ) -> AdminSession:
        cfg = services.config
        token = request.cookies.get(cfg.SESSION_COOKIE_NAME)
        session = services.sessions.validate(token or "")
        if session is None:
            raise LoginRequired()

        if self.require_admin_tab and not session.admin_tab:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access Denied")

        set_session_cookie(response, token, cfg)
        return session


require_admin = AdminGate()
require_admin_tab = AdminGate(require_admin_tab=True)
