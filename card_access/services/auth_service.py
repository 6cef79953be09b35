# =======================================================================================
# card_access/services/auth_service.py - Authentication for the admin console
# =======================================================================================

import logging
from typing import Optional, Dict, Any
from sqlalchemy import text
from sqlalchemy.engine import Connection
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class AuthService:
    """Handles admin authentication (username/password)."""

    def hash_password(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            # unrecognised hash format in the admins table
            return False

    def create_admin(
        self, conn: Connection, username: str, password: str, admin_tab: bool = False
    ) -> int:
        result = conn.execute(
            text(
                """
                INSERT INTO admins (username, pwhash, adminTab)
                VALUES (:username, :pwhash, :admin_tab)
                """
            ),
            {
                "username": username,
                "pwhash": self.hash_password(password),
                "admin_tab": admin_tab,
            },
        )
        return result.lastrowid

    def admin_exists(self, conn: Connection, username: str) -> bool:
        row = conn.execute(
            text("SELECT id FROM admins WHERE username = :username"),
            {"username": username},
        ).first()
        return row is not None

    def ensure_admin(self, conn: Connection, username: str, password: str) -> None:
        """Seed the first console admin if it is not there yet."""
        if self.admin_exists(conn, username):
            return
        self.create_admin(conn, username, password, admin_tab=True)
        logger.info("Created admin %s", username)

    def authenticate_admin(
        self, conn: Connection, username: str, password: str
    ) -> Optional[Dict[str, Any]]:
        row = conn.execute(
            text(
                """
                SELECT id, username, pwhash, adminTab
                FROM admins
                WHERE username = :username
                LIMIT 1
                """
            ),
            {"username": username},
        ).mappings().first()

        if not row:
            return None

        if not self.verify_password(password, row["pwhash"]):
            return None

        return {
            "id": row["id"],
            "username": row["username"],
            "admin_tab": bool(row["adminTab"]),
        }
