# src/quizmultiplier/generators/exceptions.py
"""Exceptions for question generation."""

from __future__ import annotations

from dataclasses import dataclass

from quizmultiplier.models import QuestionType


class QuizMultiplierError(Exception):
    """Base class for all quizmultiplier errors."""


class GenerationError(QuizMultiplierError):
    """Raised when a single generator call cannot produce questions.

    Attributes:
        question_type: The type the failing call was asked for.
        context: Which pass or context requested it (e.g. "main", "governance").
    """

    def __init__(
        self,
        message: str,
        question_type: QuestionType | None = None,
        context: str | None = None,
    ) -> None:
        super().__init__(message)
        self.question_type = question_type
        self.context = context


class ConfigurationError(QuizMultiplierError):
    """Raised when a generator is configured for something it cannot do."""


class UnsupportedQuestionTypeError(ConfigurationError):
    """Raised when a generator is asked for a type it does not support."""

    def __init__(self, generator_name: str, question_type: QuestionType) -> None:
        super().__init__(f"{generator_name} does not support {question_type.value} questions")
        self.generator_name = generator_name
        self.question_type = question_type


class PolicyError(ConfigurationError):
    """Raised when a generation policy file cannot be loaded."""


@dataclass(frozen=True)
class GenerationFailure:
    """Record of a generator call that yielded no questions.

    Attributes:
        question_type: Type the call was made for.
        context: Pass or context label ("main", "temporal", "governance", ...).
        error: The exception raised, including timeouts.
    """

    question_type: QuestionType
    context: str
    error: BaseException

    def describe(self) -> str:
        reason = str(self.error) or type(self.error).__name__
        return f"{self.question_type.value} [{self.context}]: {reason}"
