# src/quizmultiplier/engine/dedup.py
"""Deduplication of generated questions."""

from __future__ import annotations

from collections.abc import Iterable

from quizmultiplier.models import Question

KEY_STEM_LENGTH = 50


def question_key(question: Question) -> str:
    """Identity of a question for deduplication: type, difficulty and stem prefix."""
    return (
        f"{question.type.value}-{question.difficulty.value}-"
        f"{question.question_text[:KEY_STEM_LENGTH]}"
    )


def deduplicate(questions: Iterable[Question]) -> list[Question]:
    """Keep the first question for each key, preserving order."""
    seen: set[str] = set()
    unique: list[Question] = []
    for question in questions:
        key = question_key(question)
        if key in seen:
            continue
        seen.add(key)
        unique.append(question)
    return unique
