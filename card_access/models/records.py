# =======================================================================================
# card_access/models/records.py - Typed Rows
# =======================================================================================
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Reader:
    id: int
    add_card: bool
    write_card: bool


@dataclass(frozen=True)
class CardOwner:
    person_id: int
    name: str
    permission: str


@dataclass(frozen=True)
class CardKeys:
    serial_number: str
    write_key: str
    read_key: str
    owner: Optional[int]


@dataclass(frozen=True)
class AccessLogEntry:
    """One audit row. None marks an identity that was never resolved."""
    allowed: bool
    card: Optional[str] = None
    reader: Optional[int] = None
    people: Optional[int] = None
    direction: Optional[str] = None
    comment: Optional[str] = None


@dataclass(frozen=True)
class AdminSession:
    """Request-scoped identity placed by the admin gate."""
    username: str
    admin_tab: bool
