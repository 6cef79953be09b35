# =======================================================================================
# card_access/services/dashboard_service.py
# =======================================================================================

from typing import List, Dict, Any
from sqlalchemy import DateTime, text
from sqlalchemy.engine import Connection


class DashboardService:
    """Read-only listings for the admin console. Secrets are never selected."""

    def list_cards(self, conn: Connection) -> List[Dict[str, Any]]:
        rows = conn.execute(
            text("SELECT serialNumber, owner FROM cards ORDER BY serialNumber")
        ).mappings().all()
        return [
            {"serialNumber": r["serialNumber"], "owner": r["owner"] or None}
            for r in rows
        ]

    def list_people(self, conn: Connection) -> List[Dict[str, Any]]:
        rows = conn.execute(
            text("SELECT id, name, permission FROM people ORDER BY id")
        ).mappings().all()
        return [dict(r) for r in rows]

    def list_readers(self, conn: Connection) -> List[Dict[str, Any]]:
        rows = conn.execute(
            text("SELECT id, addCard, writeCard FROM reader ORDER BY id")
        ).mappings().all()
        return [
            {"id": r["id"], "addCard": bool(r["addCard"]), "writeCard": bool(r["writeCard"])}
            for r in rows
        ]

    # ---------- logs ----------

    def get_logs(self, conn: Connection, limit: int = 1000) -> List[Dict[str, Any]]:
        rows = conn.execute(
            text(
                """
                SELECT id, card, reader, people, allowed, direction, comment, timestamp
                FROM accessLog
                ORDER BY id DESC
                LIMIT :limit
                """
            ).columns(timestamp=DateTime),
            {"limit": limit},
        ).mappings().all()

        logs: List[Dict[str, Any]] = []
        for row in rows:
            item = dict(row)
            item["allowed"] = bool(row["allowed"])
            logs.append(item)
        return logs
