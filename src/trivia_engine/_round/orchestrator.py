# Area: Round
"""Round orchestrator — drives one question from presentation to results."""
import asyncio
import logging
import random
from datetime import datetime
from typing import Any, Dict, Optional, Tuple
from .answer_set import build_answer_set
from .clock import RoundClock
from .enums import RoundEvent, RoundState
from .render import render_closed_question, render_question, render_results
from .scoring import compute_outcome
from .state_machine import RoundStateMachine
from .submission_ledger import SubmissionLedger
from ..collaborators import MessageHandle, PresentationSink, ScoreLedger
from ..config import DEFAULT_CONFIG
from ..errors import MalformedQuestion, PresentationFailure, RoundClosed, ScoringFailure
from ..models import AnswerSet, Question, RoundOutcome, Submission, SubmissionReceipt
from ..types import MessageContent

logger = logging.getLogger("trivia_engine.round")


class RoundOrchestrator:
    """
    Runs a single round: PRESENTING -> COLLECTING -> CLOSED.

    Submissions are recorded synchronously on the event loop and the
    clock callback closes the ledger synchronously, so a submission is
    either in the snapshot or rejected with RoundClosed.
    """

    def __init__(self, question: Question, round_number: int, sink: PresentationSink,
                 score_ledger: ScoreLedger, config: Optional[Dict[str, Any]] = None,
                 total_rounds: Optional[int] = None, rng: Optional[random.Random] = None):
        self.question, self.round_number, self.total_rounds = question, round_number, total_rounds
        self.sink, self.score_ledger = sink, score_ledger
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self.window_seconds = float(self.config["answer_window_seconds"])
        self.state_machine = RoundStateMachine(round_number)
        self.ledger = SubmissionLedger(round_number)
        self.clock = RoundClock(round_number)
        self.answer_set: Optional[AnswerSet] = None
        self.handle: Optional[MessageHandle] = None
        self._rng = rng
        # Serializes edits of the question message; the closing edit is always last.
        self._edit_lock = asyncio.Lock()
        self._submissions: Tuple[Submission, ...] = ()
        self._outcome: Optional[RoundOutcome] = None

    @property
    def state(self) -> RoundState:
        return self.state_machine.current_state

    @property
    def outcome(self) -> Optional[RoundOutcome]:
        return self._outcome

    async def run(self) -> RoundOutcome:
        """Present, collect until the clock fires, score, then show results."""
        q = self.question
        try:
            self.answer_set = build_answer_set(q.correct_answer, q.distractors, self._rng)
        except MalformedQuestion:
            self._abort("malformed_question")
            raise
        content = render_question(q, self.answer_set, self.round_number,
                                  self.window_seconds, self.total_rounds)
        try:
            self.handle = await self.sink.publish(content)
        except PresentationFailure:
            self._abort("publish_failed")
            raise
        except Exception as e:
            self._abort("publish_failed")
            raise PresentationFailure("publish", str(e), round_number=self.round_number) from e

        self.state_machine.transition(RoundEvent.PUBLISHED)
        self.clock.start(self.window_seconds, on_expire=self._on_clock_expired)
        try:
            await self.clock.wait()
        except asyncio.CancelledError:
            self._abort("cancelled")
            raise
        if self._outcome is None:
            self._abort("clock_cancelled")
            raise RuntimeError(f"Round {self.round_number} clock cancelled before expiry")

        outcome = self._outcome
        await self._apply_awards(outcome)
        closed = render_closed_question(q, self.answer_set, self.round_number, self.total_rounds)
        async with self._edit_lock:
            await self._deliver("edit", self.sink.edit, self.handle, closed)
        await self._deliver("send_followup", self.sink.send_followup, render_results(outcome))
        return outcome

    async def submit(self, participant_id: str, display_name: str, label: str,
                     handle: Optional[MessageHandle] = None,
                     submitted_at: Optional[datetime] = None) -> SubmissionReceipt:
        """Record a participant's choice; raises RoundClosed outside the collection window."""
        if self.state != RoundState.COLLECTING:
            logger.info("Round %s: late submission from %s rejected",
                        self.round_number, participant_id)
            raise RoundClosed(participant_id, round_number=self.round_number)
        if handle is not None and handle != self.handle:
            logger.info("Round %s: submission for foreign message %s from %s rejected",
                        self.round_number, handle.message_id, participant_id)
            raise RoundClosed(participant_id, round_number=self.round_number)

        receipt = self.ledger.record_or_update(participant_id, display_name, label, submitted_at)
        logger.debug("Round %s: %s chose %s (%d distinct)", self.round_number,
                     participant_id, label, receipt.total_distinct_participants)
        if receipt.is_first_submission and self.config.get("live_participant_count"):
            await self._show_participant_count()
        return receipt

    def force_close(self) -> None:
        """Administrative early close; goes through the normal expiry path."""
        if self.state != RoundState.COLLECTING:
            logger.warning("Round %s: force close ignored in %s",
                           self.round_number, self.state.value)
            return
        self.clock.expire_now()

    def _on_clock_expired(self) -> None:
        if not self.state_machine.can_transition(RoundEvent.CLOCK_EXPIRED):
            logger.warning("Round %s: close signal ignored in %s",
                           self.round_number, self.state.value)
            return
        self.state_machine.transition(RoundEvent.CLOCK_EXPIRED)
        self._submissions = self.ledger.close_and_get_all()
        self._outcome = compute_outcome(self.round_number, self.answer_set,
                                        self.question.difficulty, self._submissions)

    def _abort(self, reason: str) -> None:
        if self.state_machine.can_transition(RoundEvent.ABORTED):
            logger.warning("Round %s aborted: %s", self.round_number, reason)
            self.state_machine.transition(RoundEvent.ABORTED)
        self.clock.cancel()
        self.ledger.close_and_get_all()

    async def _apply_awards(self, outcome: RoundOutcome) -> None:
        if outcome.nobody_answered:
            logger.info("Round %s: nobody answered", self.round_number)
            return
        for award in outcome.awards:
            try:
                await self.score_ledger.award(award.participant_id, award.display_name, award.points)
            except Exception as e:
                raise ScoringFailure(award.participant_id, award.points, str(e),
                                     round_number=self.round_number) from e
        logger.info("Round %s: %d/%d correct, %d points each", self.round_number,
                    len(outcome.awards), outcome.submissions_count, outcome.score_awarded)

    async def _deliver(self, operation: str, send, *args) -> None:
        try:
            await send(*args)
        except PresentationFailure:
            raise
        except Exception as e:
            raise PresentationFailure(operation, str(e), round_number=self.round_number) from e

    async def _show_participant_count(self) -> None:
        async with self._edit_lock:
            # Re-checked under the lock: the round may have closed while waiting.
            if self.handle is None or self.state != RoundState.COLLECTING:
                return
            content: MessageContent = render_question(
                self.question, self.answer_set, self.round_number, self.window_seconds,
                self.total_rounds, participants=len(self.ledger))
            try:
                await self.sink.edit(self.handle, content)
            except Exception:
                logger.warning("Round %s: participant count update failed",
                               self.round_number, exc_info=True)

