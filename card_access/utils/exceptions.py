# =======================================================================================
# card_access/utils/exceptions.py - Custom Exceptions
# =======================================================================================
class CardAccessError(Exception):
    """Base exception for the card access service."""
    pass

class StorageError(CardAccessError):
    """Raised when the credential store fails during a request."""
    pass

class DuplicateCardError(StorageError):
    """Raised when a card with the same serial number already exists."""
    pass

class SecretGenerationError(CardAccessError):
    """Raised when the system randomness source cannot produce card secrets."""
    pass

class UnsupportedMediaType(CardAccessError):
    """Raised when a reader request is not sent as application/json."""
    pass

class LoginRequired(CardAccessError):
    """Raised when an admin request carries no valid session."""
    pass
