# src/quizmultiplier/models/validation.py
"""Validation and generation request models."""

from pydantic import BaseModel, Field

from quizmultiplier.models.base_fact import BaseFact
from quizmultiplier.models.question import ALL_DIFFICULTIES, Difficulty, QuestionType


class ValidationResult(BaseModel):
    """Outcome of validating one question.

    ``is_valid`` is true only when no issue was recorded. A failing
    question is still returned to the caller for editorial review.
    """

    is_valid: bool
    quality_score: int = Field(ge=0, le=100)
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    factual_accuracy: bool = True
    difficulty_appropriate: bool = True
    ambiguity_free: bool = True


class GenerationConfig(BaseModel):
    """A request to one type generator."""

    model_config = {"frozen": True}

    base_fact: BaseFact
    question_types: tuple[QuestionType, ...]
    difficulties: tuple[Difficulty, ...] = ALL_DIFFICULTIES
    generate_negatives: bool = False
    include_variations: bool = False
    max_questions_per_type: int = Field(default=10, ge=1)
