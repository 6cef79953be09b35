# =======================================================================================
# card_access/config.py - Configuration Management
# =======================================================================================
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

def _env_bool(name: str, default: str = "false") -> bool:
    """Helper to parse boolean environment variables."""
    return os.getenv(name, default).lower() == "true"

def _env_str(name: str) -> Optional[str]:
    v = os.getenv(name)
    return v if v else None

class Config:
    # Database
    DB_URL: str = os.getenv("DB_URL", "sqlite:///./database.db")

    # API Settings
    API_DEBUG: bool = _env_bool("API_DEBUG")
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8090"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Database Connection Pool (ignored for SQLite)
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))

    # Admin sessions
    SESSION_TTL_SECONDS: int = int(os.getenv("SESSION_TTL_SECONDS", "3600"))
    SESSION_SWEEP_INTERVAL: float = float(os.getenv("SESSION_SWEEP_INTERVAL", "3600"))
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "AUTH")
    LOGIN_PATH: str = os.getenv("LOGIN_PATH", "/admin/login")

    # First admin, created at startup if missing
    ADMIN_USERNAME: Optional[str] = _env_str("ADMIN_USERNAME")
    ADMIN_PASSWORD: Optional[str] = _env_str("ADMIN_PASSWORD")

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown config key: {name}")
            setattr(self, name, value)

config = Config()
