"""Question source implementations."""

from .opentdb import OpenTDBQuestionSource, OpenTDBResult
from .static import BUILTIN_QUESTIONS, StaticQuestionSource

__all__ = [
    "OpenTDBQuestionSource",
    "OpenTDBResult",
    "BUILTIN_QUESTIONS",
    "StaticQuestionSource",
]
