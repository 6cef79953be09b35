# =======================================================================================
# card_access/services/__init__.py - Services Package
# =======================================================================================
from .audit_logger import AuditLogger
from .verification_service import VerificationService
from .key_service import KeyProvisioningService
from .session_cache import SessionCache
from .auth_service import AuthService
from .dashboard_service import DashboardService
from .container import AccessServices

__all__ = [
    "AuditLogger", "VerificationService", "KeyProvisioningService", "SessionCache",
    "AuthService", "DashboardService", "AccessServices"
]
