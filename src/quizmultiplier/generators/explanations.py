# src/quizmultiplier/generators/explanations.py
"""Shared builders for the explanation bundle and tags."""

from __future__ import annotations

from collections.abc import Iterable

from quizmultiplier.models import BaseFact, Difficulty, Explanation, QuestionType

COMMON_MISTAKES: dict[str, tuple[str, ...]] = {
    "fundamental rights": (
        "Confusing Fundamental Rights with Directive Principles",
        "Missing the reasonable restrictions clause",
        "Incorrect article number references",
    ),
    "constitutional articles": (
        "Mixing up article numbers",
        "Confusing Part numbers in Constitution",
        "Incorrect constitutional provisions",
    ),
    "amendments": (
        "Wrong amendment numbers",
        "Incorrect year of amendment",
        "Confusing amended and original provisions",
    ),
}
GENERIC_MISTAKES = (
    "Superficial reading of the question",
    "Not considering all options carefully",
)

MEMORY_TRICKS: dict[str, str] = {
    "article 14": "Remember: 14 = Equality (1+4=5 senses, all equal)",
    "article 19": "Remember: 19 = Teen age, freedom age (6 freedoms)",
    "article 21": "Remember: 21 = Legal age, life begins",
    "article 25": "Remember: 25 = Christmas day, religious freedom",
    "article 32": "Remember: 32 = Heart age, heart of constitution",
}
GENERIC_MEMORY_TRICK = "Create association with numbers or events"


def common_mistakes(concept: str) -> tuple[str, ...]:
    """Typical mistakes for a concept, matched by keyword."""
    lowered = concept.lower()
    for key, mistakes in COMMON_MISTAKES.items():
        if key in lowered:
            return mistakes
    return GENERIC_MISTAKES


def memory_trick(concept: str) -> str:
    return MEMORY_TRICKS.get(concept.lower().strip(), GENERIC_MEMORY_TRICK)


def related_pyqs(concept: str) -> tuple[str, ...]:
    """Previous-year question references for a concept."""
    return (
        f"2023 Prelims - Question on {concept}",
        f"2022 Mains - {concept} in governance context",
        f"2021 Prelims - Application of {concept}",
    )


def build_tags(
    fact: BaseFact, question_type: QuestionType, difficulty: Difficulty
) -> tuple[str, ...]:
    return (
        fact.subject,
        fact.topic,
        question_type.value,
        difficulty.value,
        *fact.tags,
        *fact.concepts,
    )


def build_explanation(
    fact: BaseFact,
    correct_answer: str,
    why_correct: str,
    why_others_wrong: Iterable[str],
    concept_clarity: str,
    trick: str | None = None,
    mistakes: Iterable[str] | None = None,
) -> Explanation:
    """Assemble an Explanation, filling the shared parts from the fact.

    Args:
        fact: The base fact the question was generated from.
        correct_answer: Text of the correct answer.
        why_correct: Rationale for the correct answer.
        why_others_wrong: One rationale per wrong option.
        concept_clarity: A short restatement of the underlying concept.
        trick: Type-specific memory trick; defaults to a lookup on the source.
        mistakes: Type-specific common mistakes; defaults to a lookup on the content.

    Returns:
        The explanation bundle.
    """
    return Explanation(
        correct_answer=correct_answer,
        why_correct=why_correct,
        why_others_wrong=tuple(why_others_wrong),
        concept_clarity=concept_clarity,
        memory_trick=trick if trick is not None else memory_trick(fact.source),
        common_mistakes=tuple(mistakes) if mistakes is not None else common_mistakes(fact.content),
        related_pyqs=related_pyqs(fact.content.lower()),
    )
