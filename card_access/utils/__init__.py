# =======================================================================================
# card_access/utils/__init__.py - Utils Package
# =======================================================================================
from .exceptions import *
from .crypto import *

__all__ = [
    "CardAccessError", "StorageError", "DuplicateCardError", "SecretGenerationError",
    "UnsupportedMediaType", "LoginRequired", "CardSecrets", "generate_card_secrets"
]
