"""
Pytest configuration for card access tests.
Every test gets its own application over a throwaway SQLite file.
"""

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from card_access.config import Config
from card_access.main import create_app


class StoreHelper:
    """Direct row access for arranging and checking test state."""

    def __init__(self, services):
        self.services = services
        self.db = services.db

    def add_reader(self, api_key: str, add_card: bool = False, write_card: bool = False) -> int:
        with self.db.get_connection() as conn:
            result = conn.execute(
                text("INSERT INTO reader (apiKey, addCard, writeCard) VALUES (:k, :a, :w)"),
                {"k": api_key, "a": add_card, "w": write_card},
            )
            return result.lastrowid

    def add_person(self, name: str, permission: str) -> int:
        with self.db.get_connection() as conn:
            result = conn.execute(
                text("INSERT INTO people (name, permission) VALUES (:n, :p)"),
                {"n": name, "p": permission},
            )
            return result.lastrowid

    def add_card(self, serial: str, authtoken: str, write_key: str = "wk-secret",
                 read_key: str = "rk-secret", owner: Optional[int] = None) -> None:
        with self.db.get_connection() as conn:
            conn.execute(
                text("""
                    INSERT INTO cards (serialNumber, authtoken, writeKey, readKey, owner)
                    VALUES (:s, :t, :w, :r, :o)
                """),
                {"s": serial, "t": authtoken, "w": write_key, "r": read_key, "o": owner},
            )

    def assign_card(self, serial: str, owner: int) -> None:
        with self.db.get_connection() as conn:
            conn.execute(
                text("UPDATE cards SET owner = :o WHERE serialNumber = :s"),
                {"o": owner, "s": serial},
            )

    def add_admin(self, username: str, password: str, admin_tab: bool = False) -> int:
        with self.db.get_connection() as conn:
            return self.services.auth.create_admin(conn, username, password, admin_tab)

    def card(self, serial: str) -> Optional[Dict[str, Any]]:
        row = self.db.fetch_one(
            "SELECT serialNumber, authtoken, writeKey, readKey, owner FROM cards WHERE serialNumber = :s",
            {"s": serial},
        )
        return dict(row) if row else None

    def log_rows(self) -> List[Dict[str, Any]]:
        rows = self.db.fetch_all(
            "SELECT card, reader, people, allowed, direction, comment FROM accessLog ORDER BY id"
        )
        out = []
        for r in rows:
            item = dict(r)
            item["allowed"] = bool(item["allowed"])
            out.append(item)
        return out


@pytest.fixture
def test_config(tmp_path) -> Config:
    return Config(
        DB_URL=f"sqlite:///{tmp_path / 'cards.db'}",
        ADMIN_USERNAME=None,
        ADMIN_PASSWORD=None,
        SESSION_SWEEP_INTERVAL=3600,
    )


@pytest.fixture
def app(test_config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    # https so the Secure session cookie is kept by the client's cookie jar
    with TestClient(app, base_url="https://testserver") as c:
        yield c


@pytest.fixture
def services(app, client):
    return app.state.services


@pytest.fixture
def store(services) -> StoreHelper:
    return StoreHelper(services)
