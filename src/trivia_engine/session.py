# Area: Session
"""
trivia_engine.session — Multi-question trivia session
======================================================

Fetches a batch of questions and plays them one round at a time with a
fixed pause in between, then posts a summary. Collaborator failures are
logged and turned into a single user-visible notice.
"""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import datetime
from typing import Any, Dict, List, Optional

from ._round.orchestrator import RoundOrchestrator
from ._round.render import render_notice, render_summary
from ._shared.logging_config import log_engine_error
from .collaborators import MessageHandle, PresentationSink, QuestionSource, ScoreLedger
from .config import DEFAULT_CONFIG
from .errors import (
    MalformedQuestion,
    PresentationFailure,
    RoundClosed,
    ScoringFailure,
    SourceUnavailable,
    TriviaEngineError,
)
from .models import Question, SessionSummary, SubmissionReceipt

logger = logging.getLogger("trivia_engine.session")


class TriviaSession:
    """
    Plays a sequence of questions in one channel.

    Only one round is active at a time. The platform adapter forwards
    button presses to ``submit``.
    """

    def __init__(
        self,
        source: QuestionSource,
        sink: PresentationSink,
        score_ledger: ScoreLedger,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.source = source
        self.sink = sink
        self.score_ledger = score_ledger
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self._rng = rng
        self._running = False
        self.active_round: Optional[RoundOrchestrator] = None

    @property
    def is_running(self) -> bool:
        return self._running

    async def run(self, count: Optional[int] = None,
                  category: Optional[int] = None) -> SessionSummary:
        """
        Play a full session.

        Args:
            count: Number of questions; defaults to config question_count
            category: Optional source category id; defaults to config category

        Raises:
            TriviaEngineError: If this session is already running
        """
        if self._running:
            raise TriviaEngineError("A trivia session is already running")
        self._running = True
        try:
            return await self._play(
                count if count is not None else int(self.config["question_count"]),
                category if category is not None else self.config.get("category"),
            )
        finally:
            self.active_round = None
            self._running = False

    async def submit(self, participant_id: str, display_name: str, label: str,
                     handle: Optional[MessageHandle] = None,
                     submitted_at: Optional[datetime] = None) -> SubmissionReceipt:
        """
        Forward a submission to the active round.

        Raises:
            RoundClosed: If no round is collecting
        """
        current = self.active_round
        if current is None:
            raise RoundClosed(participant_id)
        return await current.submit(participant_id, display_name, label,
                                    handle=handle, submitted_at=submitted_at)

    async def _play(self, count: int, category: Optional[int]) -> SessionSummary:
        summary = SessionSummary()

        try:
            questions = await self.source.fetch_questions(count, category)
        except SourceUnavailable as e:
            log_engine_error(e)
            summary.aborted, summary.abort_reason = True, "source_unavailable"
            await self._notify("Trivia unavailable",
                               "Could not fetch questions right now. Please try again later.")
            return summary

        if not questions:
            summary.aborted, summary.abort_reason = True, "no_questions"
            await self._notify("Trivia unavailable", "No questions matched this request.")
            return summary

        logger.info("Session started: %d question(s)", len(questions))
        for index, question in enumerate(questions, start=1):
            try:
                outcome = await self._play_round(question, index, len(questions))
            except (MalformedQuestion, ScoringFailure) as e:
                log_engine_error(e)
                summary.rounds_failed += 1
                await self._notify(f"Question {index} skipped", _round_notice(e))
            except PresentationFailure as e:
                log_engine_error(e)
                summary.rounds_failed += 1
                summary.aborted, summary.abort_reason = True, "presentation_failure"
                await self._notify("Trivia stopped", "The game could not be displayed and was stopped.")
                return summary
            else:
                summary.add_outcome(outcome)

            if index < len(questions):
                await asyncio.sleep(float(self.config["pacing_seconds"]))

        await self._send_summary(summary)
        return summary

    async def _play_round(self, question: Question, index: int, total: int):
        round_ = RoundOrchestrator(
            question=question,
            round_number=index,
            sink=self.sink,
            score_ledger=self.score_ledger,
            config=self.config,
            total_rounds=total,
            rng=self._rng,
        )
        self.active_round = round_
        try:
            return await round_.run()
        finally:
            self.active_round = None

    async def _send_summary(self, summary: SessionSummary) -> None:
        try:
            await self.sink.send_followup(render_summary(summary))
        except Exception:
            logger.error("Could not send session summary", exc_info=True)

    async def _notify(self, title: str, description: str) -> None:
        try:
            await self.sink.send_followup(render_notice(title, description))
        except Exception:
            logger.error("Could not send notice '%s'", title, exc_info=True)


def _round_notice(error: TriviaEngineError) -> str:
    if isinstance(error, MalformedQuestion):
        return "This question was malformed and has been skipped."
    return "Scores could not be saved for this question, so it was not counted."


def summary_lines(summary: SessionSummary) -> List[str]:
    """Plain-text summary, used by the CLI."""
    lines = [f"Rounds played: {summary.rounds_played}",
             f"Rounds failed: {summary.rounds_failed}"]
    if summary.aborted:
        lines.append(f"Aborted: {summary.abort_reason}")
    for name, points in summary.points_by_participant.values():
        lines.append(f"  {name}: {points}")
    return lines
