# =======================================================================================
# card_access/services/credential_store.py - Reader & Card Lookups
# =======================================================================================
from typing import Optional
from sqlalchemy import text
from sqlalchemy.engine import Connection
from ..models.records import CardKeys, CardOwner, Reader


class CredentialStore:
    """Data-access helpers shared by the reader-facing services."""

    @staticmethod
    def find_reader(conn: Connection, api_key: str) -> Optional[Reader]:
        """Resolve a reader by its API key."""
        if not api_key:
            return None
        row = conn.execute(
            text("SELECT id, addCard, writeCard FROM reader WHERE apiKey = :key"),
            {"key": api_key},
        ).mappings().first()

        if not row:
            return None
        return Reader(id=row["id"], add_card=bool(row["addCard"]), write_card=bool(row["writeCard"]))

    @staticmethod
    def find_card_owner(conn: Connection, serial_number: str, authtoken: str) -> Optional[CardOwner]:
        """Authenticate a card and return its owner; unassigned cards never match."""
        row = conn.execute(
            text("""
                SELECT p.id AS person_id, p.name AS name, p.permission AS permission
                FROM cards c
                JOIN people p ON p.id = c.owner
                WHERE c.serialNumber = :serial AND c.authtoken = :token
            """),
            {"serial": serial_number, "token": authtoken},
        ).mappings().first()

        if not row:
            return None
        return CardOwner(person_id=row["person_id"], name=row["name"], permission=row["permission"] or "")

    @staticmethod
    def find_card_keys(conn: Connection, serial_number: str) -> Optional[CardKeys]:
        row = conn.execute(
            text("SELECT serialNumber, writeKey, readKey, owner FROM cards WHERE serialNumber = :serial"),
            {"serial": serial_number},
        ).mappings().first()

        if not row:
            return None
        return CardKeys(
            serial_number=row["serialNumber"],
            write_key=row["writeKey"],
            read_key=row["readKey"],
            owner=row["owner"] or None,
        )

    @staticmethod
    def insert_card(conn: Connection, serial_number: str, authtoken: str,
                    write_key: str, read_key: str) -> None:
        """Insert an unassigned card. Raises IntegrityError on a duplicate serial."""
        conn.execute(
            text("""
                INSERT INTO cards (serialNumber, authtoken, writeKey, readKey, owner)
                VALUES (:serial, :token, :wkey, :rkey, NULL)
            """),
            {"serial": serial_number, "token": authtoken, "wkey": write_key, "rkey": read_key},
        )
