# Area: Ledgers
"""In-memory score ledger, for tests and offline demos."""

from dataclasses import dataclass
from typing import Any, Dict, List

from ..collaborators import ScoreLedger


@dataclass
class ScoreEntry:
    display_name: str
    score: int = 0


class InMemoryScoreLedger(ScoreLedger):
    """Keeps totals in a dict; clamps each total at zero."""

    def __init__(self) -> None:
        self.entries: Dict[str, ScoreEntry] = {}

    async def award(self, participant_id: str, display_name: str, points: int) -> None:
        entry = self.entries.setdefault(participant_id, ScoreEntry(display_name))
        entry.display_name = display_name
        entry.score = max(0, entry.score + points)

    async def get_score(self, participant_id: str) -> int:
        entry = self.entries.get(participant_id)
        return entry.score if entry else 0

    async def get_all_scores(self) -> List[Dict[str, Any]]:
        return [
            {"participant_id": pid, "display_name": e.display_name, "score": e.score}
            for pid, e in self.entries.items()
        ]
