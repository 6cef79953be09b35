# =======================================================================================
# card_access/utils/crypto.py - Card Secret Generation
# =======================================================================================
import base64
import secrets
from typing import NamedTuple

from .exceptions import SecretGenerationError

READ_KEY_BYTES = 6
WRITE_KEY_BYTES = 6
AUTHTOKEN_BYTES = 16


class CardSecrets(NamedTuple):
    authtoken: str
    write_key: str
    read_key: str


def encode_secret(raw: bytes) -> str:
    """Unpadded standard base64."""
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def generate_card_secrets() -> CardSecrets:
    """
    Draw three independent secrets for a new card.

    Each one comes from its own call to the OS randomness source, so the
    authtoken shares no bytes with either key.
    """
    try:
        read_raw = secrets.token_bytes(READ_KEY_BYTES)
        write_raw = secrets.token_bytes(WRITE_KEY_BYTES)
        token_raw = secrets.token_bytes(AUTHTOKEN_BYTES)
    except (OSError, NotImplementedError) as e:
        raise SecretGenerationError("randomness source unavailable") from e

    return CardSecrets(
        authtoken=encode_secret(token_raw),
        write_key=encode_secret(write_raw),
        read_key=encode_secret(read_raw),
    )
