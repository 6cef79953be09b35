# =======================================================================================
# card_access/services/container.py - Service Wiring
# =======================================================================================
import logging
from ..config import Config
from ..database import DatabaseManager
from ..workers.session_sweeper import SessionSweeper
from .audit_logger import AuditLogger
from .auth_service import AuthService
from .dashboard_service import DashboardService
from .key_service import KeyProvisioningService
from .session_cache import SessionCache
from .verification_service import VerificationService

logger = logging.getLogger(__name__)


class AccessServices:
    """
    Everything a request handler needs, built once per application.

    Startup: store opened -> schema ensured -> first admin seeded -> sweeper started.
    Shutdown: sweeper stopped -> engine disposed.
    """

    def __init__(self, cfg: Config):
        self.config = cfg
        self.db = DatabaseManager(cfg)
        self.audit = AuditLogger()
        self.verification = VerificationService(self.db, self.audit)
        self.keys = KeyProvisioningService(self.db, self.audit)
        self.auth = AuthService()
        self.dashboard = DashboardService()
        self.sessions = SessionCache(ttl=cfg.SESSION_TTL_SECONDS)
        self.sweeper = SessionSweeper(self.sessions, interval=cfg.SESSION_SWEEP_INTERVAL)

    def start(self) -> None:
        self.db.ensure_schema()
        if self.config.ADMIN_USERNAME and self.config.ADMIN_PASSWORD:
            with self.db.get_connection() as conn:
                self.auth.ensure_admin(conn, self.config.ADMIN_USERNAME, self.config.ADMIN_PASSWORD)
        self.sweeper.start()

    def shutdown(self) -> None:
        self.sweeper.stop()
        self.db.dispose()
        logger.info("Services shut down")
