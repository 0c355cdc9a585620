# src/quizmultiplier/commands/validate.py
"""Validate command - run type validation, and optionally a quality review, over a question set."""

from __future__ import annotations

from pathlib import Path

from quizmultiplier.analysis import QualityValidator, validate_questions
from quizmultiplier.commands.base import QuestionValidation, ValidateResult
from quizmultiplier.commands.files import InputFileError, load_questions
from quizmultiplier.config import build_settings, load_config, load_policy
from quizmultiplier.generators.exceptions import ConfigurationError
from quizmultiplier.models import ValidationResult


def validate(
    questions_path: str | Path,
    config_path: str | Path | None = None,
    quality: bool = False,
) -> ValidateResult:
    """Validate every question in ``questions_path``.

    Invalid questions are reported, never dropped.

    Args:
        questions_path: JSON file holding a list of questions
        config_path: Override config file path
        quality: Add the editorial quality review to the type validation

    Returns:
        ValidateResult with one entry per question
    """
    try:
        questions = load_questions(questions_path)
    except InputFileError as e:
        return ValidateResult(success=False, error=str(e))

    config = load_config(config_path)
    try:
        settings = build_settings(config)
        policy = load_policy(settings.policy_path, config.get("policy"))
    except (ConfigurationError, ValueError) as e:
        return ValidateResult(success=False, error=str(e))

    outcomes = validate_questions(questions, policy)
    if quality:
        reviews = QualityValidator(policy).validate_questions(questions)
        outcomes = [
            merge_results(own, review) for own, review in zip(outcomes, reviews, strict=True)
        ]

    result = ValidateResult(success=True)
    for question, outcome in zip(questions, outcomes, strict=True):
        result.validations.append(
            QuestionValidation(
                question_id=question.id,
                question_type=question.type,
                is_valid=outcome.is_valid,
                quality_score=outcome.quality_score,
                issues=list(outcome.issues),
                suggestions=list(outcome.suggestions),
            )
        )
    return result


def merge_results(own: ValidationResult, review: ValidationResult) -> ValidationResult:
    """Combine a type validation with a quality review; the lower score wins."""
    issues = list(dict.fromkeys([*own.issues, *review.issues]))
    return ValidationResult(
        is_valid=not issues,
        quality_score=min(own.quality_score, review.quality_score),
        issues=issues,
        suggestions=list(dict.fromkeys([*own.suggestions, *review.suggestions])),
        factual_accuracy=own.factual_accuracy and review.factual_accuracy,
        difficulty_appropriate=own.difficulty_appropriate and review.difficulty_appropriate,
        ambiguity_free=own.ambiguity_free and review.ambiguity_free,
    )
