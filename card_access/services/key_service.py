# =======================================================================================
# card_access/services/key_service.py - Key Issuance & Card Provisioning
# =======================================================================================
import logging
from typing import Optional
from sqlalchemy.engine import Connection
from ..database import DatabaseManager
from ..models.enums import AuditComment
from ..models.records import AccessLogEntry
from ..models.schemas import AddCardRequest, AddCardResponse, KeyRequest, KeyResponse
from ..utils.crypto import generate_card_secrets
from ..utils.exceptions import DuplicateCardError, SecretGenerationError
from .audit_logger import AuditLogger
from .credential_store import CredentialStore

logger = logging.getLogger(__name__)


class KeyProvisioningService:
    """Hands card keys to authorized readers and mints new cards."""

    def __init__(self, db: DatabaseManager, audit: AuditLogger):
        self.db = db
        self.audit = audit
        self.store = CredentialStore()

    # ------------------------------------------------------------------
    # Key issuance
    # ------------------------------------------------------------------
    def issue_key(self, request: KeyRequest) -> KeyResponse:
        """Return the card's read key, or its write key to readers allowed to write."""
        with self.db.transaction() as conn:
            return self._issue_key(conn, request)

    def _issue_key(self, conn: Connection, request: KeyRequest) -> KeyResponse:
        serial = request.serialNumber

        reader = self.store.find_reader(conn, request.apiKey)
        if reader is None:
            self.audit.record(conn, AccessLogEntry(
                allowed=False, card=serial, comment=AuditComment.BAD_API_KEY.value,
            ))
            return KeyResponse.denied()

        card = self.store.find_card_keys(conn, serial)
        if card is None:
            self.audit.record(conn, AccessLogEntry(
                allowed=False, card=serial, reader=reader.id,
                comment=AuditComment.CARD_NOT_FOUND.value,
            ))
            return KeyResponse.denied()

        if request.write:
            if not reader.write_card:
                response = KeyResponse.denied()
                comment = AuditComment.WRITE_NOT_PERMITTED
            else:
                response = KeyResponse(ok=True, key=card.write_key)
                comment = AuditComment.WRITE_KEY_ISSUED
        else:
            # reading needs no per-reader permission
            response = KeyResponse(ok=True, key=card.read_key)
            comment = AuditComment.READ_KEY_ISSUED

        self.audit.record(conn, AccessLogEntry(
            allowed=response.ok, card=serial, reader=reader.id, people=card.owner,
            comment=comment.value,
        ))
        return response

    # ------------------------------------------------------------------
    # Card provisioning
    # ------------------------------------------------------------------
    def add_card(self, request: AddCardRequest) -> AddCardResponse:
        """
        Mint a new unassigned card under the given serial number.

        The generated authtoken leaves the service only in this response.
        A duplicate serial or a randomness failure rolls the insert back and
        is logged in a separate transaction.
        """
        serial = request.serialNumber
        reader_id: Optional[int] = None

        try:
            with self.db.transaction() as conn:
                reader = self.store.find_reader(conn, request.apiKey)
                if reader is None:
                    self.audit.record(conn, AccessLogEntry(
                        allowed=False, card=serial, comment=AuditComment.BAD_API_KEY.value,
                    ))
                    return AddCardResponse.denied()

                reader_id = reader.id
                if not reader.add_card:
                    self.audit.record(conn, AccessLogEntry(
                        allowed=False, card=serial, reader=reader.id,
                        comment=AuditComment.ADD_NOT_PERMITTED.value,
                    ))
                    return AddCardResponse.denied()

                card_secrets = generate_card_secrets()
                self.store.insert_card(
                    conn, serial, card_secrets.authtoken, card_secrets.write_key, card_secrets.read_key
                )
                self.audit.record(conn, AccessLogEntry(
                    allowed=True, card=serial, reader=reader.id,
                    comment=AuditComment.CARD_PROVISIONED.value,
                ))
        except DuplicateCardError:
            logger.info("Card %s could not be inserted (duplicate serial)", serial)
            self._record_failure(serial, reader_id, AuditComment.CARD_INSERT_FAILED)
            return AddCardResponse.denied()
        except SecretGenerationError:
            logger.exception("Could not generate secrets for card %s", serial)
            self._record_failure(serial, reader_id, AuditComment.SECRET_GENERATION_FAILED)
            return AddCardResponse.denied()

        return AddCardResponse(
            ok=True,
            authtoken=card_secrets.authtoken,
            writeKey=card_secrets.write_key,
            readKey=card_secrets.read_key,
        )

    def _record_failure(self, serial: str, reader_id: Optional[int], comment: AuditComment) -> None:
        with self.db.transaction() as conn:
            self.audit.record(conn, AccessLogEntry(
                allowed=False, card=serial, reader=reader_id, comment=comment.value,
            ))
