# src/quizmultiplier/generators/single_correct.py
"""Single-correct multiple choice questions."""

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
    Question,
    QuestionOption,
    QuestionType,
    SingleCorrectPayload,
)

RELATED_CONCEPTS = {
    "Right to Equality": "Right to Freedom",
    "Right to Life": "Right to Privacy",
    "Freedom of Religion": "Freedom of Speech",
    "Constitutional Remedies": "Judicial Review",
}


def stem_patterns(fact: BaseFact, difficulty: Difficulty) -> list[str]:
    content, source = fact.content, fact.source
    if difficulty == Difficulty.EASY:
        return [
            f'Which {source} of the Indian Constitution deals with "{content}"?',
            f'"{content}" is provided under which constitutional provision?',
            f'The constitutional provision "{content}" is found in:',
            f"Which of the following is correct about {content}?",
        ]
    if difficulty == Difficulty.MEDIUM:
        concept = fact.concepts[0] if fact.concepts else "governance"
        return [
            f'In the context of {concept}, "{content}" as mentioned in {source}:',
            f'Consider the following about "{content}" under {source}. '
            "Which statement is most accurate?",
            f'The provision "{content}" ({source}) is significant because it:',
            f'How does "{content}" under {source} relate to the broader framework of {concept}?',
        ]
    related = fact.related_facts[0] if fact.related_facts else "constitutional framework"
    concept = fact.concepts[0] if fact.concepts else "constitutional law"
    return [
        f'Analyze the relationship between "{content}" ({source}) and {related} in the context '
        f"of {concept}. Which of the following best describes this relationship?",
        f'Critically examine: "{content}" as enshrined in {source} has evolved through judicial '
        "interpretation. Which statement most accurately reflects this evolution?",
        "In a comparative analysis of constitutional provisions, "
        f'"{content}" ({source}) differs from similar provisions in other democracies '
        "primarily because:",
        f'The implementation of "{content}" ({source}) faces challenges in contemporary India. '
        "Which factor is most significant?",
    ]


def correct_option(fact: BaseFact, difficulty: Difficulty) -> OptionSpec:
    if difficulty == Difficulty.EASY:
        text = f"{fact.source} - {fact.content}"
    elif difficulty == Difficulty.MEDIUM:
        text = (
            f"{fact.source} ensures {fact.content} with reasonable restrictions "
            "as per constitutional mandate"
        )
    else:
        text = (
            f"{fact.source} establishes {fact.content} as part of the constitutional framework, "
            "balanced with state obligations and individual responsibilities"
        )
    return (
        text,
        True,
        f"This is correct because {fact.source} specifically provides for {fact.content}. "
        "This provision is fundamental to the constitutional framework.",
    )


def distractors(fact: BaseFact) -> list[OptionSpec]:
    similar = similar_source(fact.source)
    if similar is not None:
        similar_text = f"{similar} - Similar but different provision"
        similar_why = (
            f"This is incorrect. {similar} deals with a different aspect and should not be "
            f"confused with {fact.source}."
        )
    else:
        similar_text = f"A neighbouring provision to {fact.source} on a different subject"
        similar_why = (
            "This is incorrect. Neighbouring provisions deal with different aspects and should "
            f"not be confused with {fact.source}."
        )
    related = RELATED_CONCEPTS.get(fact.content, "Related constitutional provision")
    return [
        (similar_text, False, similar_why),
        (
            f"Constitutional provision for {related}",
            False,
            f"This is incorrect. While {related} is constitutionally important, it is distinct "
            f"from {fact.content}.",
        ),
        (
            "This provision does not exist in the Indian Constitution",
            False,
            f"This is incorrect. {fact.source} clearly establishes {fact.content} as a "
            "constitutional provision.",
        ),
    ]


def explain_options(fact: BaseFact, options: tuple[QuestionOption, ...]) -> Explanation:
    correct = next(option for option in options if option.is_correct)
    return build_explanation(
        fact,
        correct_answer=correct.text,
        why_correct=correct.explanation,
        why_others_wrong=[option.explanation for option in options if not option.is_correct],
        concept_clarity=(
            f"{fact.content} is enshrined in {fact.source} of the Indian Constitution. "
            f"This provision is part of {fact.topic} and plays a crucial role in the "
            "constitutional framework."
        ),
    )


class SingleCorrectMCQGenerator(QuestionGenerator):
    """Four options, exactly one correct."""

    question_type = QuestionType.SINGLE_CORRECT_MCQ
    name = "SingleCorrectMCQGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        return self._with_stem(fact, difficulty, rng.choice(stem_patterns(fact, difficulty)), rng)

    def _with_stem(
        self, fact: BaseFact, difficulty: Difficulty, stem: str, rng: random.Random
    ) -> Question:
        options = build_options([correct_option(fact, difficulty), *distractors(fact)], rng)
        return self.assemble(
            fact,
            difficulty,
            stem,
            SingleCorrectPayload(options=options),
            explain_options(fact, options),
        )

    def build_negatives(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        # Three statements that do relate to the fact and one that does not;
        # the unrelated one is the answer.
        concept = fact.primary_concept()
        specs: list[OptionSpec] = [
            (
                f"{fact.source} provides for {fact.content}",
                False,
                f"This is related: {fact.source} is the source of {fact.content}.",
            ),
            (
                f"{fact.content} forms part of {fact.topic}",
                False,
                f"This is related: {fact.content} is studied under {fact.topic}.",
            ),
            (
                f"{fact.content} is connected with {concept}",
                False,
                f"This is related: {concept} is a concept tested with {fact.content}.",
            ),
            (
                f"{fact.content} was repealed and no longer has any constitutional basis",
                True,
                f"This is the answer: {fact.content} remains in force under {fact.source}, "
                "so this statement is not related to the provision as it stands.",
            ),
        ]
        options = build_options(specs, rng)
        question = self.assemble(
            fact,
            difficulty,
            f"Which of the following is NOT related to {fact.content}?",
            SingleCorrectPayload(options=options),
            explain_options(fact, options),
        )
        return [question]

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        return [
            self._with_stem(
                fact,
                difficulty,
                f"In which of the following scenarios would {fact.content} be most applicable?",
                rng,
            ),
            self._with_stem(
                fact,
                difficulty,
                f"The constitutional significance of {fact.content} ({fact.source}) "
                "lies primarily in:",
                rng,
            ),
        ]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, SingleCorrectPayload):
            issues.append("Missing single correct MCQ data")
            return

        if len(payload.options) != 4:
            issues.append("Single correct MCQ must have exactly 4 options")
            suggestions.append("Add or remove options to make exactly 4")

        if sum(1 for option in payload.options if option.is_correct) != 1:
            issues.append("Single correct MCQ must have exactly 1 correct option")
            suggestions.append("Ensure only one option is marked as correct")

        for index, option in enumerate(payload.options, start=1):
            if len(option.text) < 5:
                issues.append(f"Option {index} is too short")
            if not option.explanation:
                issues.append(f"Option {index} missing explanation")

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, SingleCorrectPayload) and has_duplicates(
            option.text for option in payload.options
        )
