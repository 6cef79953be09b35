# =======================================================================================
# card_access/workers/__init__.py - Workers Package
# =======================================================================================
from .session_sweeper import SessionSweeper

__all__ = ["SessionSweeper"]
