# src/quizmultiplier/generators/assertion_reasoning.py
"""Assertion (A) and Reason (R) questions."""

from __future__ import annotations

import random
from typing import get_args

from quizmultiplier.generators.base import QuestionGenerator
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    AssertionReasoningPayload,
    AssertionRelation,
    BaseFact,
    Difficulty,
    Question,
    QuestionType,
)

VALID_RELATIONS: tuple[str, ...] = get_args(AssertionRelation)

RELATION_OPTIONS: dict[str, str] = {
    "both-true-reason-correct": "(a) Both A and R are true and R is the correct explanation of A",
    "both-true-reason-incorrect": (
        "(b) Both A and R are true but R is not the correct explanation of A"
    ),
    "assertion-true-reason-false": "(c) A is true but R is false",
    "assertion-false-reason-true": "(d) A is false but R is true",
    "both-false": "(e) Both A and R are false",
}

RELATION_EXPLANATIONS: dict[str, str] = {
    "both-true-reason-correct": (
        "Both the assertion and reason are true, and the reason correctly explains the assertion."
    ),
    "both-true-reason-incorrect": (
        "Both the assertion and reason are true, but the reason does not correctly explain "
        "the assertion."
    ),
    "assertion-true-reason-false": "The assertion is true but the reason is false.",
    "assertion-false-reason-true": "The assertion is false but the reason is true.",
    "both-false": "Both the assertion and reason are false.",
}

AR_MEMORY_TRICK = (
    "Always evaluate assertion and reason separately first, then check if the reason "
    "explains the assertion"
)
AR_MISTAKES = (
    "Not reading the assertion and reason carefully",
    "Confusing truth value with explanatory relationship",
    "Assuming true statements always explain each other",
)

# (assertion, reason, relation)
Scenario = tuple[str, str, AssertionRelation]


def scenarios(fact: BaseFact, difficulty: Difficulty) -> list[Scenario]:
    content, source = fact.content, fact.source
    if difficulty == Difficulty.EASY:
        return [
            (
                f"{source} provides for {content}",
                f"The Constitution establishes {content} as a fundamental provision",
                "both-true-reason-correct",
            ),
            (
                f"{content} is guaranteed under {source}",
                f"{source} specifically mentions {content}",
                "both-true-reason-correct",
            ),
        ]
    if difficulty == Difficulty.MEDIUM:
        return [
            (
                f"{content} can be subject to reasonable restrictions",
                "Constitutional provisions must balance individual rights with public interest",
                "both-true-reason-correct",
            ),
            (
                f"{content} has evolved through judicial interpretation",
                "The Supreme Court has the power of judicial review",
                "both-true-reason-incorrect",
            ),
            (
                f"{source} establishes {content}",
                "All constitutional articles are directly enforceable",
                "assertion-true-reason-false",
            ),
        ]
    return [
        (
            f"{content} reflects the constitutional philosophy of social justice",
            "The Constitution aims to establish a welfare state through various provisions",
            "both-true-reason-correct",
        ),
        (
            f"Contemporary interpretation of {content} must consider technological advancement",
            "Constitutional provisions are static and cannot adapt to changing circumstances",
            "assertion-true-reason-false",
        ),
        (
            f"{content} can never be amended",
            "Certain constitutional provisions form part of the basic structure",
            "assertion-false-reason-true",
        ),
    ]


def format_stem(assertion: str, reason: str) -> str:
    return (
        "Consider the following Assertion (A) and Reason (R):\n"
        f"Assertion (A): {assertion}\n"
        f"Reason (R): {reason}\n"
        "Choose the correct option:\n" + "\n".join(RELATION_OPTIONS.values())
    )


class AssertionReasoningGenerator(QuestionGenerator):
    """Five-way assertion/reason judgement. No negative form."""

    question_type = QuestionType.ASSERTION_REASONING
    name = "AssertionReasoningGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        return self._from_scenario(fact, difficulty, rng.choice(scenarios(fact, difficulty)))

    def _from_scenario(
        self, fact: BaseFact, difficulty: Difficulty, scenario: Scenario
    ) -> Question:
        assertion, reason, relation = scenario
        explanation = build_explanation(
            fact,
            correct_answer=RELATION_OPTIONS[relation],
            why_correct=RELATION_EXPLANATIONS[relation],
            why_others_wrong=[
                "Other options incorrectly assess the truth value of either the assertion "
                "or reason",
                "Other options incorrectly identify the relationship between assertion "
                "and reason",
            ],
            concept_clarity=(
                f"This question tests understanding of {fact.content} and its constitutional "
                "context. Both factual knowledge and logical reasoning are required."
            ),
            trick=AR_MEMORY_TRICK,
            mistakes=AR_MISTAKES,
        )
        payload = AssertionReasoningPayload(
            assertion=assertion, reason=reason, correct_relation=relation
        )
        return self.assemble(fact, difficulty, format_stem(assertion, reason), payload, explanation)

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        # Both true, but the reason does not explain the assertion
        scenario: Scenario = (
            f"{fact.content} is an important constitutional provision",
            "India follows a federal system of government",
            "both-true-reason-incorrect",
        )
        return [self._from_scenario(fact, difficulty, scenario)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, AssertionReasoningPayload):
            issues.append("Missing assertion reasoning data")
            return

        if len(payload.assertion) < 10:
            issues.append("Assertion is too short or missing")
            suggestions.append("Provide a meaningful assertion statement")

        if len(payload.reason) < 10:
            issues.append("Reason is too short or missing")
            suggestions.append("Provide a meaningful reason statement")

        if payload.correct_relation not in VALID_RELATIONS:
            issues.append("Invalid assertion-reason relationship")
            suggestions.append("Use one of the five standard assertion-reasoning relationships")

        if "false" in payload.assertion.lower() and "true" in payload.reason.lower():
            issues.append("Potential logical inconsistency in assertion-reason formulation")

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, AssertionReasoningPayload) and (
            payload.assertion.strip().lower() == payload.reason.strip().lower()
        )
