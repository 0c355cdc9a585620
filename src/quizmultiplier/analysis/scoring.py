# src/quizmultiplier/analysis/scoring.py
"""Attach validation and pattern scores to generated questions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from quizmultiplier.analysis.difficulty import DifficultyCalculator
from quizmultiplier.analysis.patterns import PatternAnalyzer
from quizmultiplier.generators.registry import create_generators
from quizmultiplier.models import Question, ValidationResult
from quizmultiplier.policy import GenerationPolicy

logger = logging.getLogger(__name__)


def validate_questions(
    questions: Sequence[Question], policy: GenerationPolicy | None = None
) -> list[ValidationResult]:
    """Validate each question with the generator for its type."""
    generators = create_generators(policy)
    return [generators[question.type].validate_question(question) for question in questions]


def score_questions(
    questions: Sequence[Question], policy: GenerationPolicy | None = None
) -> list[Question]:
    """Return copies of ``questions`` with scored metadata.

    Each copy carries the validation quality score, the PYQ similarity and
    whether the inferred difficulty matches the assigned one. The input
    questions are not modified.
    """
    analyzer = PatternAnalyzer()
    calculator = DifficultyCalculator()
    results = validate_questions(questions, policy)

    scored = []
    for question, result in zip(questions, results, strict=True):
        metadata = question.metadata.model_copy(
            update={
                "quality_score": result.quality_score,
                "pyq_similarity": analyzer.pyq_similarity(question),
                "difficulty_validated": calculator.validate_difficulty(question),
            }
        )
        scored.append(question.model_copy(update={"metadata": metadata}))

    invalid = sum(1 for result in results if not result.is_valid)
    logger.debug("Scored %d questions (%d with validation issues)", len(scored), invalid)
    return scored
