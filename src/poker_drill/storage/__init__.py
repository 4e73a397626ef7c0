"""SQLite storage layer."""

from poker_drill.storage.database import Database
from poker_drill.storage.repository import DrillRepository

__all__ = ["Database", "DrillRepository"]
