# Area: Round
"""
trivia_engine._round.submission_ledger — Per-round submissions
===============================================================

Keeps the latest choice of every participant for one round, keyed by
participant id. A later submission replaces the earlier one. Once the
round is closed the ledger hands out a frozen snapshot and rejects
further writes with RoundClosed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from ..errors import RoundClosed
from ..models import LABELS, Submission, SubmissionReceipt

logger = logging.getLogger("trivia_engine.submission_ledger")


class SubmissionLedger:
    """
    Upsert-by-participant store for a single round.

    Attributes:
        round_number: Round this ledger belongs to (for logs and errors)
    """

    def __init__(self, round_number: Optional[int] = None) -> None:
        self.round_number = round_number
        self._submissions: Dict[str, Submission] = {}
        self._snapshot: Optional[Tuple[Submission, ...]] = None

    def __len__(self) -> int:
        return len(self._submissions)

    @property
    def is_closed(self) -> bool:
        return self._snapshot is not None

    def record_or_update(
        self,
        participant_id: str,
        display_name: str,
        label: str,
        submitted_at: Optional[datetime] = None,
    ) -> SubmissionReceipt:
        """
        Store or replace the participant's choice.

        A submission stamped earlier than the one already stored is
        ignored, so the stored label follows submission order.
        A naive ``submitted_at`` is interpreted as UTC.

        Raises:
            RoundClosed: If the ledger has been closed
            ValueError: If the label is not one of A–D
        """
        if self.is_closed:
            raise RoundClosed(participant_id, round_number=self.round_number)
        if label not in LABELS:
            raise ValueError(f"Unknown answer label: {label!r}")

        if submitted_at is None:
            submitted_at = datetime.now(timezone.utc)
        elif submitted_at.tzinfo is None:
            # Naive timestamps are taken as UTC so they compare with the default.
            submitted_at = submitted_at.replace(tzinfo=timezone.utc)
        existing = self._submissions.get(participant_id)

        if existing is not None and submitted_at < existing.submitted_at:
            logger.debug(
                "Stale submission from %s (%s < %s), keeping %s",
                participant_id, submitted_at, existing.submitted_at, existing.label,
            )
        else:
            self._submissions[participant_id] = Submission(
                participant_id=participant_id,
                display_name=display_name,
                label=label,
                submitted_at=submitted_at,
            )

        return SubmissionReceipt(
            is_first_submission=existing is None,
            total_distinct_participants=len(self._submissions),
        )

    def close_and_get_all(self) -> Tuple[Submission, ...]:
        """Close the ledger and return its snapshot. Repeat calls return the same snapshot."""
        if self._snapshot is None:
            self._snapshot = tuple(self._submissions.values())
            logger.info(
                "Round %s closed with %d submission(s)",
                self.round_number, len(self._snapshot),
            )
        return self._snapshot
