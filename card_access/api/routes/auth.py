# =======================================================================================
# card_access/api/routes/auth.py - Admin Console Login / Logout
# =======================================================================================


from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.engine import Connection
from ...models.schemas import AdminAuthRequest, AdminAuthResponse, AdminInfo
from ...services.container import AccessServices
from ..dependencies import clear_session_cookie, get_db_connection, get_services, set_session_cookie

router = APIRouter()


@router.get("/login", response_model=AdminAuthResponse)
def login_form():
    # the console UI renders its own form; this is where the gate redirects to
    return AdminAuthResponse(message="POST username and password to log in")


@router.post("/login", response_model=AdminAuthResponse)
def login_admin(
    request: AdminAuthRequest,
    response: Response,
    conn: Connection = Depends(get_db_connection),
    services: AccessServices = Depends(get_services),
):
    admin = services.auth.authenticate_admin(conn, request.username, request.password)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    token = services.sessions.issue(admin["username"], admin["admin_tab"])
    set_session_cookie(response, token, services.config)
    return AdminAuthResponse(
        token=token,
        message="Login successful",
        admin=AdminInfo(username=admin["username"], adminTab=admin["admin_tab"]),
    )


@router.post("/logout")
def logout_admin(request: Request, services: AccessServices = Depends(get_services)):
    cfg = services.config
    token = request.cookies.get(cfg.SESSION_COOKIE_NAME)
    if token:
        services.sessions.revoke(token)

    response = RedirectResponse(cfg.LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    clear_session_cookie(response, cfg)
    return response
