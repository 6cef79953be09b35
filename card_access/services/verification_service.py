# =======================================================================================
# card_access/services/verification_service.py - Card Verification
# =======================================================================================
import logging
from sqlalchemy.engine import Connection
from ..database import DatabaseManager
from ..models.enums import AuditComment
from ..models.records import AccessLogEntry
from ..models.schemas import VerifyRequest, VerifyResponse
from .audit_logger import AuditLogger
from .credential_store import CredentialStore

logger = logging.getLogger(__name__)


class VerificationService:
    """Decides whether a presented card opens the door."""

    def __init__(self, db: DatabaseManager, audit: AuditLogger):
        self.db = db
        self.audit = audit
        self.store = CredentialStore()

    def verify(self, request: VerifyRequest) -> VerifyResponse:
        """
        Authenticate the reader, then the card, in one transaction.

        Every outcome writes exactly one access log row before returning.
        Raises StorageError if the store fails; nothing is committed then.
        """
        with self.db.transaction() as conn:
            return self._verify(conn, request)

    def _verify(self, conn: Connection, request: VerifyRequest) -> VerifyResponse:
        serial = request.serialNumber

        reader = self.store.find_reader(conn, request.apiKey)
        if reader is None:
            self.audit.record(conn, AccessLogEntry(
                allowed=False, card=serial, comment=AuditComment.BAD_API_KEY.value,
            ))
            return VerifyResponse.denied()

        owner = self.store.find_card_owner(conn, serial, request.authtoken)
        if owner is None:
            self.audit.record(conn, AccessLogEntry(
                allowed=False, card=serial, reader=reader.id,
                comment=AuditComment.UNKNOWN_CARD.value,
            ))
            return VerifyResponse.denied()

        self.audit.record(conn, AccessLogEntry(
            allowed=True, card=serial, reader=reader.id, people=owner.person_id,
            comment=AuditComment.VERIFIED.value,
        ))
        return VerifyResponse(ok=True, name=owner.name, permission=owner.permission)
