# =======================================================================================
# card_access/services/audit_logger.py - Append-only Access Log
# =======================================================================================
import logging
from sqlalchemy import text
from sqlalchemy.engine import Connection
from ..models.records import AccessLogEntry

logger = logging.getLogger(__name__)


class AuditLogger:
    """
    Writes one accessLog row per verification, key issuance or provisioning.

    The row is written on the caller's connection, so it commits or rolls
    back together with the request's transaction. A failed insert raises
    and fails the request; nothing is retried or dropped silently.
    """

    def record(self, conn: Connection, entry: AccessLogEntry) -> None:
        conn.execute(
            text("""
                INSERT INTO accessLog (card, reader, people, allowed, direction, comment)
                VALUES (:card, :reader, :people, :allowed, :direction, :comment)
            """),
            {
                "card": entry.card,
                "reader": entry.reader,
                "people": entry.people,
                "allowed": entry.allowed,
                "direction": entry.direction,
                "comment": entry.comment,
            },
        )
        logger.info(
            "access %s card=%s reader=%s people=%s (%s)",
            "granted" if entry.allowed else "denied",
            entry.card, entry.reader, entry.people, entry.comment,
        )
