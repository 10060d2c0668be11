"""Score ledger implementations."""

from .memory import InMemoryScoreLedger
from .sqlite import ScoreRepository, SqliteScoreLedger

__all__ = ["InMemoryScoreLedger", "ScoreRepository", "SqliteScoreLedger"]
