# Area: Shared
"""
trivia_engine.errors — Custom exception classes
================================================

Defines the exception hierarchy raised by the round engine and its
collaborators. Each exception stores its context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class TriviaEngineError(Exception):
    """Base exception for all trivia engine errors."""

    error_type = "TRIVIA_ENGINE_ERROR"

    def context(self) -> Dict[str, Any]:
        return {}

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            message=str(self),
            context=self.context(),
        )


class MalformedQuestion(TriviaEngineError):
    """Raised when question data cannot form a four-option answer set."""

    error_type = "MALFORMED_QUESTION"

    def __init__(self, reason: str, correct_text: Optional[str] = None,
                 distractors: Optional[List[str]] = None):
        self.reason = reason
        self.correct_text = correct_text
        self.distractors = list(distractors) if distractors is not None else None
        super().__init__(f"Malformed question: {reason}")

    def context(self) -> Dict[str, Any]:
        return {"correct_text": self.correct_text, "distractors": self.distractors}


class SourceUnavailable(TriviaEngineError):
    """Raised when the question source cannot deliver questions."""

    error_type = "SOURCE_UNAVAILABLE"

    def __init__(self, source: str, reason: str, status: Optional[int] = None):
        self.source = source
        self.reason = reason
        self.status = status
        super().__init__(f"Question source '{source}' unavailable: {reason}")

    def context(self) -> Dict[str, Any]:
        return {"source": self.source, "status": self.status}


class PresentationFailure(TriviaEngineError):
    """Raised when the presentation sink fails to publish, edit or send."""

    error_type = "PRESENTATION_FAILURE"

    def __init__(self, operation: str, reason: str,
                 round_number: Optional[int] = None):
        self.operation = operation
        self.reason = reason
        self.round_number = round_number
        super().__init__(f"Presentation '{operation}' failed: {reason}")

    def context(self) -> Dict[str, Any]:
        return {"operation": self.operation, "round_number": self.round_number}


class ScoringFailure(TriviaEngineError):
    """Raised when the score ledger rejects an award."""

    error_type = "SCORING_FAILURE"

    def __init__(self, participant_id: str, points: int, reason: str,
                 round_number: Optional[int] = None):
        self.participant_id = participant_id
        self.points = points
        self.reason = reason
        self.round_number = round_number
        super().__init__(
            f"Could not award {points} points to '{participant_id}': {reason}"
        )

    def context(self) -> Dict[str, Any]:
        return {
            "participant_id": self.participant_id,
            "points": self.points,
            "round_number": self.round_number,
        }


class RoundClosed(TriviaEngineError):
    """Raised when a submission arrives for a round that no longer collects."""

    error_type = "ROUND_CLOSED"

    def __init__(self, participant_id: str, round_number: Optional[int] = None):
        self.participant_id = participant_id
        self.round_number = round_number
        super().__init__(
            f"Submission from '{participant_id}' rejected: round is not collecting"
        )

    def context(self) -> Dict[str, Any]:
        return {"participant_id": self.participant_id, "round_number": self.round_number}


def _format_error_block(
    error_type: str,
    message: str,
    context: Dict[str, Any],
) -> str:
    """Format a structured error block for logs."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " TRIVIA ENGINE ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
