# Area: Ledgers
"""
trivia_engine.ledgers.sqlite — SQLite score ledger
===================================================

Durable per-participant totals in the participant_scores table.
Blocking sqlite calls run in a worker thread so the event loop keeps
serving submissions.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from .._shared.database import BaseRepository, init_database
from ..collaborators import ScoreLedger

logger = logging.getLogger("trivia_engine.ledgers.sqlite")


class ScoreRepository(BaseRepository):
    """
    Repository for participant_scores table.

    Totals never go below zero: the upsert clamps with MAX(0, ...).
    """

    def add_points(self, participant_id: str, display_name: str, points: int) -> None:
        """
        Add points to a participant, creating the row if needed.

        Args:
            participant_id: Stable participant identifier
            display_name: Latest known display name
            points: Points to add (may be negative)
        """
        query = """
            INSERT INTO participant_scores (participant_id, display_name, score)
            VALUES (?, ?, MAX(0, ?))
            ON CONFLICT(participant_id) DO UPDATE SET
                display_name = excluded.display_name,
                score = MAX(0, participant_scores.score + ?),
                updated_at = CURRENT_TIMESTAMP
        """
        self._execute(query, (participant_id, display_name, points, points))

    def get_participant(self, participant_id: str) -> Optional[Dict[str, Any]]:
        """Get a participant row by id, or None."""
        query = "SELECT * FROM participant_scores WHERE participant_id = ?"
        return self._fetch_one(query, (participant_id,))

    def get_all_participants(self) -> List[Dict[str, Any]]:
        """Get all participant rows in insertion order."""
        query = "SELECT * FROM participant_scores ORDER BY rowid"
        return self._fetch_all(query)


class SqliteScoreLedger(ScoreLedger):
    """ScoreLedger backed by a SQLite file."""

    def __init__(self, db_path: str = "trivia_scores.db"):
        init_database(db_path)
        self.repository = ScoreRepository(db_path)

    async def award(self, participant_id: str, display_name: str, points: int) -> None:
        await asyncio.to_thread(self.repository.add_points, participant_id, display_name, points)
        logger.debug("Awarded %d to %s", points, participant_id)

    async def get_score(self, participant_id: str) -> int:
        row = await asyncio.to_thread(self.repository.get_participant, participant_id)
        return row["score"] if row else 0

    async def get_all_scores(self) -> List[Dict[str, Any]]:
        """All participants with their totals, unranked."""
        return await asyncio.to_thread(self.repository.get_all_participants)
