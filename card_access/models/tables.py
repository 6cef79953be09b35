# =======================================================================================
# card_access/models/tables.py - Credential Store Schema
# =======================================================================================
from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)

metadata = MetaData()

readers = Table(
    "reader",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("apiKey", String(128), nullable=False, unique=True),
    Column("addCard", Boolean, nullable=False, default=False),
    Column("writeCard", Boolean, nullable=False, default=False),
)

people = Table(
    "people",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("authtoken", String(64), nullable=True),
    Column("name", String(255), nullable=False),
    Column("permission", String(64), nullable=False, default=""),
)

# owner is NULL until the card is assigned to a person
cards = Table(
    "cards",
    metadata,
    Column("serialNumber", String(64), primary_key=True),
    Column("authtoken", String(64), nullable=False),
    Column("writeKey", String(32), nullable=False),
    Column("readKey", String(32), nullable=False),
    Column("owner", Integer, nullable=True),
)

access_log = Table(
    "accessLog",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("card", String(64), nullable=True),
    Column("reader", Integer, nullable=True),
    Column("people", Integer, nullable=True),
    Column("allowed", Boolean, nullable=False),
    Column("direction", String(16), nullable=True),
    Column("comment", Text, nullable=True),
    Column("timestamp", DateTime, nullable=False, server_default=func.now()),
)

admins = Table(
    "admins",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(64), nullable=False, unique=True),
    Column("pwhash", String(255), nullable=False),
    Column("adminTab", Boolean, nullable=False, default=False),
)
