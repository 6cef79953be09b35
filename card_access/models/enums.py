# =======================================================================================
# card_access/models/enums.py - Enums and Constants
# =======================================================================================
from enum import Enum

class AuditComment(str, Enum):
    """Comment recorded with each access log row."""
    VERIFIED = "card verified"
    BAD_API_KEY = "bad api key"
    UNKNOWN_CARD = "unknown card or authtoken"
    CARD_NOT_FOUND = "card not found"
    READ_KEY_ISSUED = "read key issued"
    WRITE_KEY_ISSUED = "write key issued"
    WRITE_NOT_PERMITTED = "reader not permitted to write cards"
    ADD_NOT_PERMITTED = "reader not permitted to add cards"
    CARD_PROVISIONED = "card provisioned"
    CARD_INSERT_FAILED = "card insert failed"
    SECRET_GENERATION_FAILED = "secret generation failed"
