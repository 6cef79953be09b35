# =======================================================================================
# card_access/database.py - Database Management
# =======================================================================================
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.pool import QueuePool, StaticPool

from .config import Config
from .models.tables import metadata
from .utils.exceptions import DuplicateCardError, StorageError

logger = logging.getLogger(__name__)


def _engine_options(cfg: Config) -> Dict[str, Any]:
    if cfg.DB_URL.startswith("sqlite"):
        options: Dict[str, Any] = {
            "connect_args": {"check_same_thread": False},
            "future": True,
        }
        # in-memory databases exist per connection; share a single one
        if ":memory:" in cfg.DB_URL or cfg.DB_URL in ("sqlite://", "sqlite+pysqlite://"):
            options["poolclass"] = StaticPool
        return options

    return {
        "poolclass": QueuePool,
        "pool_size": cfg.DB_POOL_SIZE,
        "max_overflow": cfg.DB_MAX_OVERFLOW,
        "pool_pre_ping": True,
        "isolation_level": "READ COMMITTED",
        "future": True,
    }


class DatabaseManager:
    """Manages database connections and transactions."""

    def __init__(self, cfg: Config):
        self.engine: Engine = create_engine(cfg.DB_URL, **_engine_options(cfg))

    @contextmanager
    def get_connection(self) -> Iterator[Connection]:
        """Get a connection inside a transaction, committed on clean exit."""
        with self.engine.begin() as conn:
            yield conn

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """
        Same as get_connection, but storage errors surface as StorageError.

        Anything raised inside the block rolls the transaction back first.
        """
        try:
            with self.engine.begin() as conn:
                yield conn
        except IntegrityError as e:
            raise DuplicateCardError(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def fetch_one(self, query: str, params: Optional[dict] = None):
        """Fetch a single result."""
        with self.get_connection() as conn:
            result = conn.execute(text(query), params or {})
            return result.mappings().first()

    def fetch_all(self, query: str, params: Optional[dict] = None):
        """Fetch all results."""
        with self.get_connection() as conn:
            result = conn.execute(text(query), params or {})
            return result.mappings().all()

    def ensure_schema(self) -> None:
        """Create any missing tables."""
        metadata.create_all(self.engine)
        logger.info("Credential store schema ready")

    def dispose(self) -> None:
        self.engine.dispose()
