# =======================================================================================
# card_access/__init__.py - Package Initialization
# =======================================================================================
"""
Card Access Control Service

Central service queried by door card readers: verifies cards, hands out
per-card keys, provisions new cards and keeps an append-only access log,
with a session-gated admin console.
"""

__version__ = "1.0.0"
__author__ = "Card Access Team"
