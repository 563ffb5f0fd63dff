"""
Store Module
"""
from .commands import Command
from .store import BRAND_PALETTE, DashboardStore, JournalEntry

__all__ = [
    "BRAND_PALETTE",
    "Command",
    "DashboardStore",
    "JournalEntry",
]
