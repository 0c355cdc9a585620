# src/quizmultiplier/policy.py
"""Generation policy: the tuning tables behind generation and scoring.

Every weight, ranking and threshold the generators, the engine and the
validator use lives here rather than in code, so a deployment can tune
them from a YAML file (see ``quizmultiplier.config.load_policy``) without
touching logic. Bump ``version`` whenever a table changes meaningfully.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from quizmultiplier.models import Difficulty, QuestionType

QT = QuestionType
D = Difficulty

POLICY_VERSION = "2024.1"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    return math.floor(value + 0.5)


class ValidationDeductions(BaseModel):
    """Points removed from a perfect score of 100 per violated rule."""

    model_config = ConfigDict(extra="forbid")

    short_text: int = 20
    missing_correct_answer: int = 15
    missing_rationale: int = 10
    factual_accuracy: int = 25
    difficulty_mismatch: int = 15
    ambiguity: int = 20


class DifficultyThreshold(BaseModel):
    """Bounds a question must sit within to count as a given difficulty."""

    model_config = ConfigDict(extra="forbid")

    cognitive_levels: tuple[str, ...]
    max_concepts: int | None = None
    min_concepts: int | None = None
    max_time: int | None = None
    min_time_exclusive: int | None = None

    def accepts(self, concept_count: int, cognitive: str, time_to_solve: int) -> bool:
        if self.max_concepts is not None and concept_count > self.max_concepts:
            return False
        if self.min_concepts is not None and concept_count < self.min_concepts:
            return False
        if cognitive not in self.cognitive_levels:
            return False
        if self.max_time is not None and time_to_solve > self.max_time:
            return False
        if self.min_time_exclusive is not None and time_to_solve <= self.min_time_exclusive:
            return False
        return True


def deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merged[key] = deep_merge(base[key], value)
        else:
            merged[key] = value
    return merged


def _default_marks() -> dict[QuestionType, dict[Difficulty, int]]:
    marks = {qt: {D.EASY: 1, D.MEDIUM: 1, D.HARD: 2} for qt in QT}
    marks[QT.CASE_STUDY_BASED] = {D.EASY: 3, D.MEDIUM: 3, D.HARD: 4}
    marks[QT.DATA_BASED] = {D.EASY: 2, D.MEDIUM: 2, D.HARD: 3}
    return marks


class GenerationPolicy(BaseModel):
    """Versioned tables for generation, multiplication and validation."""

    model_config = ConfigDict(extra="forbid")

    version: str = POLICY_VERSION

    # Solve time and marks
    base_time: dict[QuestionType, int] = Field(
        default_factory=lambda: {
            QT.SINGLE_CORRECT_MCQ: 30,
            QT.MULTIPLE_CORRECT_MCQ: 45,
            QT.MATCH_THE_FOLLOWING: 60,
            QT.ASSERTION_REASONING: 45,
            QT.STATEMENT_BASED: 60,
            QT.SEQUENCE_ARRANGEMENT: 90,
            QT.ODD_ONE_OUT: 30,
            QT.CASE_STUDY_BASED: 120,
            QT.MAP_BASED: 45,
            QT.DATA_BASED: 90,
        }
    )
    difficulty_multiplier: dict[Difficulty, float] = Field(
        default_factory=lambda: {D.EASY: 0.8, D.MEDIUM: 1.0, D.HARD: 1.5}
    )
    marks: dict[QuestionType, dict[Difficulty, int]] = Field(default_factory=_default_marks)

    # Multiplication factor
    importance_weight: dict[str, float] = Field(
        default_factory=lambda: {"high": 3.0, "medium": 2.0, "low": 1.5}
    )
    concept_threshold: int = 3
    concept_bonus: float = 1.5
    related_facts_threshold: int = 2
    related_facts_bonus: float = 1.3
    subject_weight: dict[str, float] = Field(
        default_factory=lambda: {
            "Polity": 2.5,
            "History": 2.0,
            "Geography": 2.0,
            "Economy": 2.2,
            "Environment": 1.8,
            "Science & Technology": 1.7,
            "Current Affairs": 1.5,
            "Ethics": 1.6,
            "Art & Culture": 1.4,
            "International Relations": 1.8,
        }
    )
    default_subject_weight: float = 1.5
    min_factor: int = 3
    max_factor: int = 15

    # Main pass
    negatives_above_factor: int = 5
    variations_above_factor: int = 3
    per_type_factor_multiplier: int = 2
    per_type_cap: int = 10
    subject_exclusions: dict[str, list[QuestionType]] = Field(
        default_factory=lambda: {
            "Geography": [QT.ASSERTION_REASONING],
            "History": [QT.MAP_BASED, QT.DATA_BASED],
        }
    )

    # High-impact pass; insertion order breaks ties
    impact_ranking: dict[QuestionType, int] = Field(
        default_factory=lambda: {
            QT.SINGLE_CORRECT_MCQ: 10,
            QT.MULTIPLE_CORRECT_MCQ: 9,
            QT.STATEMENT_BASED: 8,
            QT.ASSERTION_REASONING: 7,
            QT.CASE_STUDY_BASED: 6,
            QT.MATCH_THE_FOLLOWING: 5,
            QT.SEQUENCE_ARRANGEMENT: 4,
            QT.DATA_BASED: 3,
            QT.ODD_ONE_OUT: 2,
            QT.MAP_BASED: 1,
        }
    )
    impact_overrides: dict[str, dict[QuestionType, int]] = Field(
        default_factory=lambda: {
            "Geography": {QT.MAP_BASED: 8, QT.DATA_BASED: 6},
            "Polity": {QT.CASE_STUDY_BASED: 9, QT.ASSERTION_REASONING: 8},
        }
    )
    high_impact_count: int = 5
    temporal_markers: tuple[str, ...] = ("Article", "Amendment")
    temporal_difficulty: Difficulty = D.MEDIUM
    comparative_difficulty: Difficulty = D.HARD
    deep_variation_cap: int = 2

    # Contextual pass
    context_types: dict[str, list[QuestionType]] = Field(
        default_factory=lambda: {
            "current-affairs": [
                QT.SINGLE_CORRECT_MCQ,
                QT.MULTIPLE_CORRECT_MCQ,
                QT.STATEMENT_BASED,
            ],
            "governance": [QT.CASE_STUDY_BASED, QT.ASSERTION_REASONING, QT.STATEMENT_BASED],
            "international": [
                QT.MULTIPLE_CORRECT_MCQ,
                QT.MATCH_THE_FOLLOWING,
                QT.DATA_BASED,
            ],
        }
    )
    context_difficulties: tuple[Difficulty, ...] = (D.MEDIUM, D.HARD)
    context_cap: int = 1

    # Validation
    min_question_text_length: int = 10
    deductions: ValidationDeductions = Field(default_factory=ValidationDeductions)
    difficulty_thresholds: dict[Difficulty, DifficultyThreshold] = Field(
        default_factory=lambda: {
            D.EASY: DifficultyThreshold(cognitive_levels=("recall",), max_concepts=1, max_time=30),
            D.MEDIUM: DifficultyThreshold(
                cognitive_levels=("application", "analysis"), max_concepts=3, max_time=60
            ),
            D.HARD: DifficultyThreshold(
                cognitive_levels=("analysis", "synthesis", "evaluation"),
                min_concepts=3,
                min_time_exclusive=60,
            ),
        }
    )
    hedge_words: tuple[str, ...] = ("some", "many", "often", "usually", "generally", "typically")

    @classmethod
    def default(cls) -> GenerationPolicy:
        """The built-in tables."""
        return cls()

    @classmethod
    def from_mapping(cls, overrides: dict[str, Any]) -> GenerationPolicy:
        """Overlay a (possibly partial) mapping on the built-in tables.

        Nested tables are merged recursively, so an override of a single
        subject weight keeps the remaining subjects. Raises
        ``pydantic.ValidationError`` for unknown keys or bad values.
        """
        return cls.model_validate(deep_merge(cls().model_dump(mode="json"), overrides))

    def solve_time(self, question_type: QuestionType, difficulty: Difficulty) -> int:
        return round_half_up(self.base_time[question_type] * self.difficulty_multiplier[difficulty])

    def marks_for(self, question_type: QuestionType, difficulty: Difficulty) -> int:
        return self.marks[question_type][difficulty]
