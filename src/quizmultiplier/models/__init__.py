# src/quizmultiplier/models/__init__.py
"""Data models for quizmultiplier."""

from quizmultiplier.models.base_fact import BaseFact, Importance
from quizmultiplier.models.question import (
    ALL_DIFFICULTIES,
    AssertionReasoningPayload,
    AssertionRelation,
    CaseStudyPayload,
    DataBasedPayload,
    Difficulty,
    Explanation,
    MapBasedPayload,
    MatchPair,
    MatchTheFollowingPayload,
    MultipleCorrectPayload,
    OddOneOutPayload,
    Question,
    QuestionMetadata,
    QuestionOption,
    QuestionPayload,
    QuestionType,
    SequenceArrangementPayload,
    SingleCorrectPayload,
    Statement,
    StatementBasedPayload,
)
from quizmultiplier.models.validation import GenerationConfig, ValidationResult

__all__ = [
    "ALL_DIFFICULTIES",
    "AssertionReasoningPayload",
    "AssertionRelation",
    "BaseFact",
    "CaseStudyPayload",
    "DataBasedPayload",
    "Difficulty",
    "Explanation",
    "GenerationConfig",
    "Importance",
    "MapBasedPayload",
    "MatchPair",
    "MatchTheFollowingPayload",
    "MultipleCorrectPayload",
    "OddOneOutPayload",
    "Question",
    "QuestionMetadata",
    "QuestionOption",
    "QuestionPayload",
    "QuestionType",
    "SequenceArrangementPayload",
    "SingleCorrectPayload",
    "Statement",
    "StatementBasedPayload",
    "ValidationResult",
]
