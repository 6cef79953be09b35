# =======================================================================================
# card_access/api/routes/dashboard.py - Admin Console Listings
# =======================================================================================

from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.engine import Connection

from ...models.records import AdminSession
from ...models.schemas import AdminInfo, CardItem, LogsResponse, PersonItem, ReaderItem
from ...services.container import AccessServices
from ..dependencies import get_db_connection, get_services, require_admin, require_admin_tab

router = APIRouter()


@router.get("", response_model=AdminInfo)
def whoami(session: AdminSession = Depends(require_admin)):
    return AdminInfo(username=session.username, adminTab=session.admin_tab)


@router.get("/cards", response_model=List[CardItem])
def list_cards(
    session: AdminSession = Depends(require_admin),
    conn: Connection = Depends(get_db_connection),
    services: AccessServices = Depends(get_services),
):
    return services.dashboard.list_cards(conn)


@router.get("/people", response_model=List[PersonItem])
def list_people(
    session: AdminSession = Depends(require_admin),
    conn: Connection = Depends(get_db_connection),
    services: AccessServices = Depends(get_services),
):
    return services.dashboard.list_people(conn)


@router.get("/readers", response_model=List[ReaderItem])
def list_readers(
    session: AdminSession = Depends(require_admin_tab),
    conn: Connection = Depends(get_db_connection),
    services: AccessServices = Depends(get_services),
):
    return services.dashboard.list_readers(conn)


@router.get("/logs", response_model=LogsResponse)
def get_logs(
    limit: int = Query(1000, ge=1, le=10000),
    session: AdminSession = Depends(require_admin),
    conn: Connection = Depends(get_db_connection),
    services: AccessServices = Depends(get_services),
):
    logs = services.dashboard.get_logs(conn, limit=limit)
    return LogsResponse(logs=logs)
