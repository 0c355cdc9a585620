# src/quizmultiplier/generators/base.py
"""QuestionGenerator abstract base class.

Every type generator shares the generation loop (one main question per
difficulty, then optional negatives and variations under a per-type cap)
and the common validation and scoring rules. Subclasses supply the
templates and the type-specific structural checks.
"""

from __future__ import annotations

import asyncio
import logging
import random
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import ClassVar

from quizmultiplier.generators.exceptions import UnsupportedQuestionTypeError
from quizmultiplier.generators.explanations import build_tags
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    Explanation,
    GenerationConfig,
    Question,
    QuestionMetadata,
    QuestionOption,
    QuestionPayload,
    QuestionType,
    ValidationResult,
)
from quizmultiplier.policy import GenerationPolicy

logger = logging.getLogger(__name__)

# (text, is_correct, explanation)
OptionSpec = tuple[str, bool, str]

# Checked in order; the first matching level wins
COGNITIVE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("analysis", ("analyze", "compare", "examine")),
    ("application", ("apply", "how", "implement")),
    ("evaluation", ("evaluate", "critically", "assess")),
    ("synthesis", ("create", "design", "propose")),
)


def determine_cognitive_level(question_text: str) -> str:
    """Classify a stem as recall, application, analysis, synthesis or evaluation."""
    text = question_text.lower()
    for level, keywords in COGNITIVE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return level
    return "recall"


def build_options(
    specs: Sequence[OptionSpec], rng: random.Random | None = None
) -> tuple[QuestionOption, ...]:
    """Turn option specs into options, shuffling first when ``rng`` is given.

    Ids are positional ("opt-1" .. "opt-N") after shuffling.
    """
    ordered = list(specs)
    if rng is not None:
        rng.shuffle(ordered)
    return tuple(
        QuestionOption(id=f"opt-{i}", text=text, is_correct=is_correct, explanation=explanation)
        for i, (text, is_correct, explanation) in enumerate(ordered, start=1)
    )


_ARTICLE_NUMBER = re.compile(r"Article\s+(\d+)", re.IGNORECASE)


def similar_source(source: str) -> str | None:
    """The next article number after ``source``, if it cites one."""
    match = _ARTICLE_NUMBER.search(source)
    if match is None:
        return None
    return f"Article {int(match.group(1)) + 1}"


def has_duplicates(values: Iterable[str]) -> bool:
    normalized = [value.strip().lower() for value in values]
    return len(normalized) != len(set(normalized))


class QuestionGenerator(ABC):
    """Abstract base class for the ten type generators.

    Attributes:
        question_type: The single archetype this generator produces.
        name: Human-readable generator name used in errors and logs.
    """

    question_type: ClassVar[QuestionType]
    name: ClassVar[str]

    def __init__(
        self,
        policy: GenerationPolicy | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.policy = policy or GenerationPolicy.default()
        self.rng = rng or random.Random()

    def get_supported_types(self) -> list[QuestionType]:
        return [self.question_type]

    # Generation

    def generate(
        self, config: GenerationConfig, rng: random.Random | None = None
    ) -> list[Question]:
        """Generate questions for one base fact.

        Produces one main question per requested difficulty. Negatives and
        variations, when requested, follow the main question of their
        difficulty and share a budget of
        ``max_questions_per_type - len(difficulties)``; main questions are
        never dropped.

        Args:
            config: The generation request.
            rng: Random source for template sampling (defaults to the
                generator's own).

        Returns:
            Generated questions, in difficulty order.

        Raises:
            UnsupportedQuestionTypeError: If the config asks for another type.
        """
        for question_type in config.question_types:
            if question_type != self.question_type:
                raise UnsupportedQuestionTypeError(self.name, question_type)

        rng = rng or self.rng
        fact = config.base_fact
        budget = max(config.max_questions_per_type - len(config.difficulties), 0)
        questions: list[Question] = []
        for difficulty in config.difficulties:
            questions.append(self.build_question(fact, difficulty, rng))
            extras: list[Question] = []
            if config.generate_negatives:
                extras.extend(self.build_negatives(fact, difficulty, rng))
            if config.include_variations:
                extras.extend(self.build_variations(fact, difficulty, rng))
            kept = extras[:budget]
            budget -= len(kept)
            questions.extend(kept)
        logger.debug("%s produced %d questions for %s", self.name, len(questions), fact.id)
        return questions

    async def agenerate(
        self, config: GenerationConfig, rng: random.Random | None = None
    ) -> list[Question]:
        """Generate questions (async).

        Default implementation runs sync generate() in a worker thread, so the
        event loop stays free and per-call timeouts take effect.
        Override in subclasses for true async behavior.
        """
        return await asyncio.to_thread(self.generate, config, rng)

    @abstractmethod
    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        """Build the main question for one difficulty."""
        ...

    def build_negatives(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        """Type-native negative questions. None by default."""
        return []

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        """Alternate-scenario questions. None by default."""
        return []

    def assemble(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        question_text: str,
        payload: QuestionPayload,
        explanation: Explanation,
        concepts_tested: Sequence[str] | None = None,
    ) -> Question:
        """Wrap a payload into a Question with the shared fields filled in."""
        return Question(
            type=self.question_type,
            question_text=question_text,
            payload=payload,
            difficulty=difficulty,
            subject=fact.subject,
            topic=fact.topic,
            base_fact_id=fact.id,
            time_to_solve=self.policy.solve_time(self.question_type, difficulty),
            marks=self.policy.marks_for(self.question_type, difficulty),
            concepts_tested=(
                tuple(concepts_tested)
                if concepts_tested is not None
                else (fact.content, *fact.concepts)
            ),
            explanation=explanation,
            metadata=QuestionMetadata(high_yield_topic=fact.importance == "high"),
            tags=build_tags(fact, self.question_type, difficulty),
        )

    # Validation

    def validate_question(self, question: Question) -> ValidationResult:
        """Validate a question and score it.

        Scoring starts at 100 and loses a fixed number of points per
        violated rule (see ``ValidationDeductions``), floored at 0. The
        question is valid only when no issue was recorded.
        """
        issues: list[str] = []
        suggestions: list[str] = []
        deductions = self.policy.deductions
        score = 100

        if len(question.question_text or "") < self.policy.min_question_text_length:
            issues.append("Question text too short")
            score -= deductions.short_text

        if not question.explanation.correct_answer:
            issues.append("Missing correct answer explanation")
            score -= deductions.missing_correct_answer

        if not question.explanation.why_others_wrong:
            issues.append("Missing explanations for incorrect options")
            score -= deductions.missing_rationale

        if question.type != self.question_type:
            issues.append("Question type mismatch")
        else:
            self.validate_by_type(question, issues, suggestions)

        factual_accuracy = self.check_factual_accuracy(question)
        difficulty_appropriate = self.validate_difficulty_level(question)
        ambiguity_free = self.check_ambiguity(question)

        if not factual_accuracy:
            issues.append("Factual accuracy concerns detected")
            score -= deductions.factual_accuracy

        if not difficulty_appropriate:
            issues.append("Difficulty level inappropriate for content")
            score -= deductions.difficulty_mismatch

        if not ambiguity_free:
            issues.append("Question contains ambiguous elements")
            score -= deductions.ambiguity

        return ValidationResult(
            is_valid=not issues,
            quality_score=min(max(score, 0), 100),
            issues=issues,
            suggestions=suggestions,
            factual_accuracy=factual_accuracy,
            difficulty_appropriate=difficulty_appropriate,
            ambiguity_free=ambiguity_free,
        )

    @abstractmethod
    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        """Append type-specific structural issues and suggestions."""
        ...

    def check_factual_accuracy(self, question: Question) -> bool:
        return bool(question.base_fact_id and question.subject and question.topic)

    def validate_difficulty_level(self, question: Question) -> bool:
        threshold = self.policy.difficulty_thresholds.get(question.difficulty)
        if threshold is None:
            return False
        return threshold.accepts(
            len(question.concepts_tested),
            determine_cognitive_level(question.question_text),
            question.time_to_solve,
        )

    def check_ambiguity(self, question: Question) -> bool:
        """True when the question reads unambiguously."""
        text = question.question_text.lower()
        for word in self.policy.hedge_words:
            if re.search(rf"\b{re.escape(word)}\b", text):
                return False
        return not self.has_multiple_valid_answers(question)

    def has_multiple_valid_answers(self, question: Question) -> bool:
        """Type-specific check for answers that could be read as equally correct."""
        return False
