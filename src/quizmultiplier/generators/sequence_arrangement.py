# src/quizmultiplier/generators/sequence_arrangement.py
"""Sequence arrangement questions: put shuffled items into the right order."""

from __future__ import annotations

import random
from collections.abc import Sequence

from quizmultiplier.generators.base import QuestionGenerator, has_duplicates
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    Question,
    QuestionType,
    SequenceArrangementPayload,
)

MIN_ITEMS = 3
MAX_ITEMS = 6
REVERSE_PREFIX = "reverse "

# (criterion, items in their correct order)
SequenceSet = tuple[str, tuple[str, ...]]

SEQUENCE_SETS: dict[Difficulty, tuple[SequenceSet, ...]] = {
    Difficulty.EASY: (
        (
            "chronological",
            (
                "Government of India Act 1935",
                "Indian Independence Act 1947",
                "Constitution of India 1950",
                "First Constitutional Amendment 1951",
            ),
        ),
        (
            "constitutional order",
            (
                "Fundamental Rights",
                "Directive Principles",
                "Fundamental Duties",
                "Emergency Provisions",
            ),
        ),
        (
            "hierarchical",
            ("Local Government", "State Government", "Central Government", "International Bodies"),
        ),
    ),
    Difficulty.MEDIUM: (
        (
            "procedural",
            (
                "Constitutional proposal in Constituent Assembly",
                "Committee examination and deliberation",
                "Assembly debate and voting",
                "President's assent and implementation",
            ),
        ),
        (
            "logical",
            (
                "Identification of constitutional issue",
                "Judicial interpretation development",
                "Legislative response and amendment",
                "Constitutional equilibrium restoration",
            ),
        ),
        (
            "functional",
            (
                "Individual Rights Protection",
                "State Obligation Implementation",
                "Judicial Review and Oversight",
                "Democratic Accountability Mechanism",
            ),
        ),
    ),
    Difficulty.HARD: (
        (
            "evolutionary",
            (
                "Pre-constitutional philosophical foundation",
                "Constitutional assembly deliberative process",
                "Post-adoption judicial interpretation evolution",
                "Contemporary constitutional adaptation challenges",
            ),
        ),
        (
            "implementation",
            (
                "Abstract constitutional principle identification",
                "Concrete legal framework development",
                "Administrative implementation mechanism",
                "Empirical outcome evaluation and refinement",
            ),
        ),
        (
            "jurisprudential",
            (
                "Comparative constitutional analysis",
                "Indigenous contextual adaptation",
                "Judicial precedent establishment",
                "Dynamic constitutional jurisprudence",
            ),
        ),
    ),
}

CRITERION_EXPLANATIONS: dict[str, str] = {
    "chronological": "This sequence follows the historical timeline of constitutional development.",
    "constitutional order": "This arrangement follows the structural order in the Constitution.",
    "hierarchical": "This sequence represents the hierarchy from local to international level.",
    "procedural": "This order reflects the standard constitutional procedure.",
    "logical": "This sequence follows the logical flow of constitutional processes.",
    "functional": "This arrangement represents the functional relationship between elements.",
    "evolutionary": "This sequence shows the evolutionary development of constitutional concepts.",
    "implementation": "This order reflects the implementation process from concept to practice.",
    "jurisprudential": "This sequence represents the development of constitutional jurisprudence.",
}

CRITERION_TRICKS: dict[str, str] = {
    "chronological": "Remember: Time flows forward - use years and historical events as anchors",
    "constitutional order": "Follow the Constitution's structure - Parts I, II, III, IV...",
    "hierarchical": "Think pyramid: Local → State → National → International",
    "procedural": (
        "Follow the standard process: Proposal → Examination → Decision → Implementation"
    ),
    "logical": "Use cause and effect: Problem → Analysis → Solution → Result",
    "functional": "Think of working relationships and dependencies",
    "evolutionary": "Historical development: Past → Present → Future",
    "implementation": "Theory to practice: Concept → Framework → Action → Evaluation",
    "jurisprudential": "Legal evolution: Principle → Precedent → Practice → Refinement",
}

VALID_CRITERIA = frozenset(CRITERION_EXPLANATIONS)

SEQUENCE_MISTAKES = (
    "Confusing chronological with logical order",
    "Not understanding hierarchical relationships",
    "Missing procedural sequence steps",
)


def base_criterion(criterion: str) -> str:
    """Criterion with any "reverse " prefix removed."""
    return criterion[len(REVERSE_PREFIX) :] if criterion.startswith(REVERSE_PREFIX) else criterion


def format_sequence(sequence: Sequence[int]) -> str:
    return "-".join(str(number) for number in sequence)


def answer_choices(correct: tuple[int, ...], rng: random.Random) -> list[str]:
    """Four lettered sequence choices, one of them correct."""
    candidates = {correct[::-1]} - {correct}
    numbers = list(correct)
    # Bounded: n >= 3 items always have at least 5 other permutations
    while len(candidates) < 3:
        rng.shuffle(numbers)
        permutation = tuple(numbers)
        if permutation != correct:
            candidates.add(permutation)
    choices = [correct, *sorted(candidates)[:3]]
    rng.shuffle(choices)
    letters = "abcd"
    return [f"({letters[i]}) {format_sequence(choice)}" for i, choice in enumerate(choices)]


class SequenceArrangementGenerator(QuestionGenerator):
    """Three to six items displayed shuffled; the answer is their correct order."""

    question_type = QuestionType.SEQUENCE_ARRANGEMENT
    name = "SequenceArrangementGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        criterion, ordered = rng.choice(SEQUENCE_SETS[difficulty])
        return self._from_set(fact, difficulty, criterion, ordered, rng)

    def _from_set(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        criterion: str,
        ordered: tuple[str, ...],
        rng: random.Random,
        reverse: bool = False,
    ) -> Question:
        displayed = list(ordered)
        rng.shuffle(displayed)
        # Display numbers of the items, taken in their correct order
        sequence = tuple(displayed.index(item) + 1 for item in ordered)
        if reverse:
            sequence = sequence[::-1]
            criterion = REVERSE_PREFIX + criterion

        choices = answer_choices(sequence, rng)
        correct_choice = next(c for c in choices if c.endswith(" " + format_sequence(sequence)))
        stem = "\n".join(
            [
                f"Arrange the following in the {'' if reverse else 'correct '}{criterion} order:",
                *(f"{i}. {item}" for i, item in enumerate(displayed, start=1)),
                "Choose the correct sequence:",
                *choices,
            ]
        )
        base = base_criterion(criterion)
        chain = " → ".join(f"{number}. {displayed[number - 1]}" for number in sequence)
        explanation = build_explanation(
            fact,
            correct_answer=f"{correct_choice} Correct sequence: {chain}",
            why_correct=CRITERION_EXPLANATIONS.get(
                base, "This sequence follows the logical constitutional order."
            ),
            why_others_wrong=[
                f"Other sequences do not follow the {criterion} order",
                "Alternative arrangements would disrupt the constitutional framework",
                "Incorrect sequences show misunderstanding of constitutional development",
            ],
            concept_clarity=(
                f"Understanding {criterion} arrangement helps in grasping the systematic nature "
                "of constitutional provisions and their interconnections."
            ),
            trick=CRITERION_TRICKS.get(
                base, "Create logical connections between sequential elements"
            ),
            mistakes=SEQUENCE_MISTAKES,
        )
        payload = SequenceArrangementPayload(
            items=tuple(displayed), correct_sequence=sequence, criterion=criterion
        )
        return self.assemble(fact, difficulty, stem, payload, explanation)

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        criterion, ordered = rng.choice(SEQUENCE_SETS[difficulty])
        return [self._from_set(fact, difficulty, criterion, ordered, rng, reverse=True)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, SequenceArrangementPayload):
            issues.append("Missing sequence arrangement data")
            return

        items = payload.items
        if len(items) < MIN_ITEMS:
            issues.append("Must have at least 3 items to sequence")
            suggestions.append("Provide at least 3-4 items for sequencing")

        if len(items) > MAX_ITEMS:
            issues.append("Too many items (maximum 6 recommended)")
            suggestions.append("Limit to 4-5 items for better complexity management")

        if len(payload.correct_sequence) != len(items):
            issues.append("Correct sequence length must match items length")
            suggestions.append("Provide sequence numbers for all items")

        if not payload.criterion:
            issues.append("Missing sequencing criterion")
            suggestions.append("Specify the basis for sequencing (chronological, logical, etc.)")

        if sorted(payload.correct_sequence) != list(range(1, len(items) + 1)):
            issues.append("Sequence numbers must be consecutive integers starting from 1")
            suggestions.append("Use numbers 1, 2, 3... matching the number of items")

        for index, item in enumerate(items, start=1):
            if len(item) < 5:
                issues.append(f"Item {index} is too short")

        if payload.criterion and base_criterion(payload.criterion) not in VALID_CRITERIA:
            issues.append("Invalid sequencing criterion")
            suggestions.append("Use standard criteria: chronological, logical, hierarchical, etc.")

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, SequenceArrangementPayload) and has_duplicates(payload.items)
