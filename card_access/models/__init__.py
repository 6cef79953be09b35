# =======================================================================================
# card_access/models/__init__.py - Models Package
# =======================================================================================
from .schemas import *
from .enums import *
from .records import *

__all__ = [
    "VerifyRequest", "VerifyResponse", "KeyRequest", "KeyResponse",
    "AddCardRequest", "AddCardResponse", "AdminAuthRequest", "AdminAuthResponse",
    "AdminInfo", "HealthResponse", "AuditComment", "Reader", "CardOwner",
    "CardKeys", "AccessLogEntry", "AdminSession"
]
