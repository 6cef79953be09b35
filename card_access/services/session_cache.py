# =======================================================================================
# card_access/services/session_cache.py - Admin Session Tokens
# =======================================================================================
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from ..models.records import AdminSession

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600


@dataclass
class _SessionEntry:
    username: str
    admin_tab: bool
    touched_at: float


class SessionCache:
    """
    In-memory set of live admin session tokens with sliding expiry.

    A token is valid while it is stored and younger than ``ttl`` seconds
    since it was issued or last validated. All operations hold one lock
    for their whole read/refresh/write step, so a validate never races a
    sweep over the same entry.
    """

    def __init__(self, ttl: float = DEFAULT_TTL_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, _SessionEntry] = {}
        self._lock = threading.Lock()

    def issue(self, username: str, admin_tab: bool = False) -> str:
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._entries[token] = _SessionEntry(username, admin_tab, self._clock())
        logger.info("Session issued for %s", username)
        return token

    def validate(self, token: str) -> Optional[AdminSession]:
        """Return the session and refresh it, or None if unknown or expired."""
        if not token:
            return None
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            now = self._clock()
            if now - entry.touched_at >= self.ttl:
                return None
            entry.touched_at = now
            return AdminSession(username=entry.username, admin_tab=entry.admin_tab)

    def revoke(self, token: str) -> bool:
        with self._lock:
            return self._entries.pop(token, None) is not None

    def sweep(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [t for t, e in self._entries.items() if now - e.touched_at >= self.ttl]
            for token in expired:
                del self._entries[token]
        if expired:
            logger.debug("Swept %d expired session(s)", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
