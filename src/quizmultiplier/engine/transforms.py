# src/quizmultiplier/engine/transforms.py
"""Post-processing transforms over generated questions.

Every transform is pure: it returns a new Question with a new id and
never touches the source question or its payload. Stem rewriting is
driven by the ``RewriteRule`` tables below and is best-effort. A
negative rewrite that does not match is logged and the transform yields
nothing; difficulty rewrites that do not match keep the stem as is.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from quizmultiplier.generators.statement_based import (
    answer_option,
    rationale_for_others,
    replace_choices,
)
from quizmultiplier.models import (
    ALL_DIFFICULTIES,
    Difficulty,
    Explanation,
    MultipleCorrectPayload,
    Question,
    QuestionOption,
    QuestionType,
    SingleCorrectPayload,
    StatementBasedPayload,
)

logger = logging.getLogger(__name__)

MIN_SHIFTED_TIME = 30
MAX_SHIFTED_TIME = 180
TIME_SHIFT = 30
EASY_CONCEPT_LIMIT = 2
HARD_EXTRA_CONCEPTS = ("advanced application", "critical analysis")


@dataclass(frozen=True)
class RewriteRule:
    """A named regex substitution over a question stem.

    Attributes:
        name: Label used in log messages.
        pattern: Compiled pattern to search for.
        replacement: Replacement text (``re.sub`` syntax).
        count: Maximum substitutions; 0 replaces every match.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str
    count: int = 0

    def apply(self, text: str) -> str | None:
        """Rewritten text, or None when the pattern does not occur."""
        rewritten, n = self.pattern.subn(self.replacement, text, count=self.count)
        return rewritten if n else None


def _rule(name: str, pattern: str, replacement: str, count: int = 0) -> RewriteRule:
    return RewriteRule(name, re.compile(pattern), replacement, count)


SIMPLIFY_RULES: tuple[RewriteRule, ...] = (
    _rule("simplify-critically-analyze", r"Critically analyze", "What is"),
    _rule("simplify-evaluate", r"Evaluate", "Identify"),
    _rule("simplify-examine", r"Examine", "Which"),
    _rule("simplify-context-clause", r"in the context of.*?,", ""),
)

COMPLEXIFY_RULES: tuple[RewriteRule, ...] = (
    _rule("complexify-what", r"^What", "Critically evaluate what", 1),
    _rule("complexify-which", r"^Which", "Analyze which", 1),
    _rule("complexify-identify", r"^Identify", "Examine and identify", 1),
)

NOT_RULE = _rule("not-version", r"Which.*?(?=\?)", "Which of the following is NOT", 1)
EXCEPT_RULE = _rule(
    "except-version", r"Which.*?(?=\?)", "All of the following are correct EXCEPT", 1
)
FALSE_STATEMENT_RULE = _rule("false-statement-version", r"\bcorrect\b", "incorrect")

HISTORICAL_CLAUSE = "from a historical constitutional development perspective"
CONTEMPORARY_CLAUSE = "in the context of contemporary governance challenges"
PRACTICAL_CLAUSE = "in practical administrative implementation"


def apply_rules(text: str, rules: Sequence[RewriteRule]) -> str:
    """Apply every rule in order; rules that do not match are skipped."""
    matched = []
    for rule in rules:
        rewritten = rule.apply(text)
        if rewritten is not None:
            text = rewritten
            matched.append(rule.name)
    if not matched:
        logger.debug("No rewrite rule matched stem %r", text[:50])
    return text


def add_perspective(text: str, clause: str) -> str:
    """Insert ``clause`` before the final question mark, or append it as a sentence."""
    index = text.rfind("?")
    if index == -1:
        return f"{text} Consider this {clause}."
    return f"{text[:index].rstrip()} {clause}{text[index:]}"


# Difficulty and perspective shifts


def difficulty_variation(question: Question, target: Difficulty) -> Question:
    """Re-pitch ``question`` at ``target`` difficulty."""
    update: dict[str, Any] = {"id": f"{question.id}-{target.value}", "difficulty": target}
    if target == Difficulty.EASY:
        update["question_text"] = apply_rules(question.question_text, SIMPLIFY_RULES)
        update["time_to_solve"] = max(question.time_to_solve - TIME_SHIFT, MIN_SHIFTED_TIME)
        update["concepts_tested"] = question.concepts_tested[:EASY_CONCEPT_LIMIT]
    elif target == Difficulty.HARD:
        update["question_text"] = apply_rules(question.question_text, COMPLEXIFY_RULES)
        update["time_to_solve"] = min(question.time_to_solve + TIME_SHIFT, MAX_SHIFTED_TIME)
        update["concepts_tested"] = (*question.concepts_tested, *HARD_EXTRA_CONCEPTS)
    return question.model_copy(update=update)


def perspective_variations(question: Question) -> list[Question]:
    return [
        question.model_copy(
            update={
                "id": f"{question.id}-{suffix}",
                "question_text": add_perspective(question.question_text, clause),
            }
        )
        for suffix, clause in (
            ("historical", HISTORICAL_CLAUSE),
            ("contemporary", CONTEMPORARY_CLAUSE),
        )
    ]


def application_variations(question: Question) -> list[Question]:
    return [
        question.model_copy(
            update={
                "id": f"{question.id}-practical",
                "question_text": add_perspective(question.question_text, PRACTICAL_CLAUSE),
            }
        )
    ]


def generate_variations(question: Question) -> list[Question]:
    """Difficulty shifts to the other two tiers, then perspective and application shifts."""
    variations = [
        difficulty_variation(question, difficulty)
        for difficulty in ALL_DIFFICULTIES
        if difficulty != question.difficulty
    ]
    variations.extend(perspective_variations(question))
    variations.extend(application_variations(question))
    return variations


# Negative versions


def _option_explanation(explanation: Explanation, options: Sequence[QuestionOption]) -> Explanation:
    correct = [option for option in options if option.is_correct]
    return explanation.model_copy(
        update={
            "correct_answer": "; ".join(option.text for option in correct),
            "why_correct": " ".join(option.explanation for option in correct),
            "why_others_wrong": tuple(
                option.explanation for option in options if not option.is_correct
            ),
        }
    )


def not_version(question: Question) -> Question | None:
    """Invert every option of an MCQ and ask for the NOT answer.

    The inverted question is retyped by its new correct count: one correct
    option makes a SingleCorrectMCQ, two or three a MultipleCorrectMCQ.
    Other types, other counts and stems without a "Which ...?" clause
    yield None.
    """
    payload = question.payload
    if not isinstance(payload, (SingleCorrectPayload, MultipleCorrectPayload)):
        return None

    stem = NOT_RULE.apply(question.question_text)
    if stem is None:
        logger.warning("Rewrite rule %s did not match question %s", NOT_RULE.name, question.id)
        return None

    options = tuple(
        option.model_copy(update={"is_correct": not option.is_correct})
        for option in payload.options
    )
    correct_count = sum(1 for option in options if option.is_correct)
    new_payload: SingleCorrectPayload | MultipleCorrectPayload
    if correct_count == 1:
        question_type = QuestionType.SINGLE_CORRECT_MCQ
        new_payload = SingleCorrectPayload(options=options)
    elif correct_count in (2, 3):
        question_type = QuestionType.MULTIPLE_CORRECT_MCQ
        new_payload = MultipleCorrectPayload(options=options, correct_count=correct_count)
    else:
        logger.warning(
            "NOT version of question %s would have %d correct options; skipped",
            question.id,
            correct_count,
        )
        return None

    return question.model_copy(
        update={
            "id": f"{question.id}-not",
            "type": question_type,
            "question_text": stem,
            "payload": new_payload,
            "explanation": _option_explanation(question.explanation, options),
        }
    )


def except_version(question: Question) -> Question | None:
    """Rewrite the "Which ...?" clause as "All of the following are correct EXCEPT"."""
    stem = EXCEPT_RULE.apply(question.question_text)
    if stem is None:
        logger.warning(
            "Rewrite rule %s did not match question %s", EXCEPT_RULE.name, question.id
        )
        return None
    return question.model_copy(update={"id": f"{question.id}-except", "question_text": stem})


def false_statement_version(question: Question) -> Question | None:
    """Ask for the incorrect statements of a StatementBased question.

    The answer becomes the complement of the correct combination; a
    question whose statements are all correct has no FALSE version.
    """
    payload = question.payload
    if not isinstance(payload, StatementBasedPayload):
        return None

    chosen = set(payload.correct_combination)
    complement = tuple(s.number for s in payload.statements if s.number not in chosen)
    if not complement:
        return None

    stem = FALSE_STATEMENT_RULE.apply(question.question_text)
    if stem is None:
        logger.warning(
            "Rewrite rule %s did not match question %s", FALSE_STATEMENT_RULE.name, question.id
        )
        return None

    # The complement may be missing from the original choice list
    count = len(payload.statements)
    stem = replace_choices(stem, complement, count)
    if stem is None:
        logger.warning(
            "No choice list offers statements %s for question %s", complement, question.id
        )
        return None

    explanation = question.explanation.model_copy(
        update={
            "correct_answer": answer_option(complement, count),
            "why_correct": " ".join(
                s.explanation for s in payload.statements if s.number not in chosen
            ),
            "why_others_wrong": tuple(rationale_for_others(payload.statements, complement)),
        }
    )
    return question.model_copy(
        update={
            "id": f"{question.id}-false",
            "question_text": stem,
            "payload": payload.model_copy(update={"correct_combination": complement}),
            "explanation": explanation,
        }
    )


def create_negative_versions(question: Question) -> list[Question]:
    """NOT, EXCEPT and FALSE-statement versions, skipping those that do not apply."""
    versions = (not_version(question), except_version(question), false_statement_version(question))
    return [version for version in versions if version is not None]
