# src/quizmultiplier/generators/multiple_correct.py
"""Multiple-correct multiple choice questions (two or three correct options)."""

from __future__ import annotations

import random

from quizmultiplier.generators.base import (
    OptionSpec,
    QuestionGenerator,
    build_options,
    has_duplicates,
    similar_source,
)
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    Explanation,
    MultipleCorrectPayload,
    Question,
    QuestionOption,
    QuestionType,
)

OPTION_COUNT = 4
CORRECT_COUNT = {Difficulty.EASY: 2, Difficulty.MEDIUM: 3, Difficulty.HARD: 2}


def stem_patterns(fact: BaseFact, difficulty: Difficulty) -> list[str]:
    content, source = fact.content, fact.source
    if difficulty == Difficulty.EASY:
        return [
            f'Which of the following statements about "{content}" are correct? '
            "(Select all that apply)",
            f'Select the correct statements regarding "{content}" under {source}:',
            f'Which of the following are true about the constitutional provision "{content}"?',
            f"Identify the correct statements about {content}:",
        ]
    if difficulty == Difficulty.MEDIUM:
        concept = fact.concepts[0] if fact.concepts else "governance"
        return [
            f'In the context of {concept}, which statements about "{content}" ({source}) '
            "are accurate?",
            f'Analyze the following statements about "{content}" under {source}. '
            "Which are correct?",
            f"Consider the constitutional framework of {concept}. "
            f'Which statements about "{content}" hold true?',
            f'With reference to {source}, identify the correct statements about "{content}":',
        ]
    related = fact.related_facts[0] if fact.related_facts else "constitutional framework"
    concept = fact.concepts[0] if fact.concepts else "constitutional law"
    return [
        f'In the complex interplay between "{content}" ({source}) and {related}, '
        "which statements are constitutionally sound?",
        f'Evaluate these statements about "{content}" in the contemporary context of {concept}:',
        f'From a comparative constitutional perspective, which statements about "{content}" '
        f"({source}) are accurate?",
        "Critical analysis: Which statements correctly describe the evolution and "
        f'implementation of "{content}" under {source}?',
    ]


def correct_specs(fact: BaseFact, difficulty: Difficulty) -> list[OptionSpec]:
    if difficulty == Difficulty.EASY:
        return [
            (
                f"{fact.source} establishes {fact.content}",
                True,
                f"Correct. {fact.source} specifically provides for {fact.content}.",
            ),
            (
                f"{fact.content} is a constitutional provision",
                True,
                f"Correct. This is enshrined in the Constitution under {fact.source}.",
            ),
            (
                f"The provision relates to {fact.topic}",
                True,
                f"Correct. This falls under the constitutional framework of {fact.topic}.",
            ),
        ]
    if difficulty == Difficulty.MEDIUM:
        return [
            (
                f"{fact.source} ensures {fact.content} with appropriate constitutional safeguards",
                True,
                "Correct. The constitutional provision includes necessary safeguards and "
                "limitations.",
            ),
            (
                f"Implementation of {fact.content} requires legislative framework",
                True,
                "Correct. Most constitutional provisions require enabling legislation for "
                "effective implementation.",
            ),
            (
                f"{fact.content} has evolved through judicial interpretation",
                True,
                "Correct. Constitutional provisions develop meaning through judicial precedents "
                "and interpretations.",
            ),
            (
                "The provision balances individual rights with state obligations",
                True,
                "Correct. Constitutional law maintains equilibrium between rights and "
                "responsibilities.",
            ),
        ]
    return [
        (
            f"{fact.content} represents a synthesis of liberal and social democratic principles",
            True,
            "Correct. The Indian Constitution balances individual freedoms with social welfare "
            "objectives.",
        ),
        (
            f"Contemporary challenges have necessitated reinterpretation of {fact.content}",
            True,
            "Correct. Constitutional provisions must adapt to changing social and technological "
            "contexts.",
        ),
        (
            "The provision reflects influence of comparative constitutional law",
            True,
            "Correct. Indian constitutional framers drew from various constitutional traditions "
            "globally.",
        ),
    ]


def incorrect_specs(fact: BaseFact) -> list[OptionSpec]:
    confusing = similar_source(fact.source)
    if confusing is not None:
        confusing_spec: OptionSpec = (
            f"{confusing} is the primary source for {fact.content}",
            False,
            f"Incorrect. {fact.source}, not {confusing}, deals with {fact.content}.",
        )
    else:
        confusing_spec = (
            f"{fact.content} is derived from an ordinary statute rather than {fact.source}",
            False,
            f"Incorrect. {fact.source} is the source that deals with {fact.content}.",
        )
    return [
        confusing_spec,
        (
            f"{fact.content} is not recognized by the Indian Constitution",
            False,
            f"Incorrect. {fact.content} is explicitly provided for in {fact.source}.",
        ),
        (
            f"{fact.content} applies only to Indian citizens, not to foreigners",
            False,
            "Incorrect. Several constitutional provisions apply to all persons within Indian "
            "territory, not just citizens.",
        ),
    ]


def option_specs(fact: BaseFact, difficulty: Difficulty, correct_count: int) -> list[OptionSpec]:
    correct = correct_specs(fact, difficulty)[:correct_count]
    incorrect = incorrect_specs(fact)[: OPTION_COUNT - len(correct)]
    return [*correct, *incorrect]


def explain_options(fact: BaseFact, options: tuple[QuestionOption, ...]) -> Explanation:
    correct = [option for option in options if option.is_correct]
    return build_explanation(
        fact,
        correct_answer="; ".join(option.text for option in correct),
        why_correct=" ".join(option.explanation for option in correct),
        why_others_wrong=[option.explanation for option in options if not option.is_correct],
        concept_clarity=(
            f"{fact.content} under {fact.source} involves multiple dimensions that require "
            "careful analysis. Understanding each aspect helps in comprehensive preparation."
        ),
    )


class MultipleCorrectMCQGenerator(QuestionGenerator):
    """Four options with two or three correct."""

    question_type = QuestionType.MULTIPLE_CORRECT_MCQ
    name = "MultipleCorrectMCQGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        return self._with_stem(fact, difficulty, rng.choice(stem_patterns(fact, difficulty)), rng)

    def _with_stem(
        self, fact: BaseFact, difficulty: Difficulty, stem: str, rng: random.Random
    ) -> Question:
        options = build_options(option_specs(fact, difficulty, CORRECT_COUNT[difficulty]), rng)
        return self._assemble_options(fact, difficulty, stem, options)

    def _assemble_options(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        stem: str,
        options: tuple[QuestionOption, ...],
    ) -> Question:
        payload = MultipleCorrectPayload(
            options=options,
            correct_count=sum(1 for option in options if option.is_correct),
        )
        return self.assemble(fact, difficulty, stem, payload, explain_options(fact, options))

    def build_negatives(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        # Start from two correct statements so the inverted set still has two
        specs = [
            (text, not is_correct, explanation)
            for text, is_correct, explanation in option_specs(fact, difficulty, 2)
        ]
        options = build_options(specs, rng)
        stem = f"Which of the following statements about {fact.content} are INCORRECT?"
        return [self._assemble_options(fact, difficulty, stem, options)]

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        stem = f"Which statements about the implementation of {fact.content} are accurate?"
        return [self._with_stem(fact, difficulty, stem, rng)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, MultipleCorrectPayload):
            issues.append("Missing multiple correct MCQ data")
            return

        if len(payload.options) != OPTION_COUNT:
            issues.append("Multiple correct MCQ must have exactly 4 options")
            suggestions.append("Adjust to exactly 4 options")

        correct = sum(1 for option in payload.options if option.is_correct)
        if correct < 2 or correct > 3:
            issues.append("Multiple correct MCQ should have 2-3 correct options")
            suggestions.append("Ensure 2-3 options are marked as correct")

        if payload.correct_count != correct:
            issues.append("Correct count mismatch with actual correct options")
            suggestions.append("Update correctCount to match actual correct options")

        for index, option in enumerate(payload.options, start=1):
            if len(option.text) < 5:
                issues.append(f"Option {index} is too short")
            if not option.explanation:
                issues.append(f"Option {index} missing explanation")

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, MultipleCorrectPayload) and has_duplicates(
            option.text for option in payload.options
        )
