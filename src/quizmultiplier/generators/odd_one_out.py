# src/quizmultiplier/generators/odd_one_out.py
"""Odd-one-out questions: four options, one outside the shared category."""

from __future__ import annotations

import random

from quizmultiplier.generators.base import QuestionGenerator, has_duplicates
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    OddOneOutPayload,
    Question,
    QuestionType,
)

OPTION_COUNT = 4

# (category, options, index of the odd option)
OddSet = tuple[str, tuple[str, ...], int]

ODD_ONE_OUT_SETS: dict[Difficulty, tuple[OddSet, ...]] = {
    Difficulty.EASY: (
        (
            "constitutional classification",
            (
                "Article 14 - Right to Equality",
                "Article 19 - Right to Freedom",
                "Article 21 - Right to Life",
                "Article 39 - Directive Principles",
            ),
            3,
        ),
        (
            "constitutional parts",
            (
                "Fundamental Rights",
                "Directive Principles",
                "Fundamental Duties",
                "Parliamentary Procedures",
            ),
            3,
        ),
        (
            "executive positions",
            ("President", "Prime Minister", "Chief Justice", "Governor"),
            2,
        ),
    ),
    Difficulty.MEDIUM: (
        ("writs", ("Habeas Corpus", "Mandamus", "Certiorari", "Judicial Review"), 3),
        (
            "major constitutional amendments",
            (
                "42nd Amendment - Mini Constitution",
                "44th Amendment - Emergency Provisions",
                "73rd Amendment - Panchayati Raj",
                "86th Amendment - Right to Education",
            ),
            1,
        ),
        (
            "Indian constitutional features",
            (
                "Parliamentary Sovereignty",
                "Judicial Independence",
                "Federal Structure",
                "Rule of Law",
            ),
            0,
        ),
    ),
    Difficulty.HARD: (
        (
            "constitutional interpretation cases",
            (
                "Kesavananda Bharati Case - Basic Structure",
                "Maneka Gandhi Case - Procedure Established by Law",
                "Minerva Mills Case - Balance Theory",
                "Shah Bano Case - Personal Laws",
            ),
            3,
        ),
        (
            "borrowed constitutional features",
            (
                "Separation of Powers (Montesquieu)",
                "Judicial Review (Marbury vs Madison)",
                "Parliamentary System (Westminster)",
                "Directive Principles (Irish Constitution)",
            ),
            1,
        ),
        (
            "constitutional philosophy concepts",
            (
                "Living Constitution Doctrine",
                "Constitutionalism Principle",
                "Constitutional Morality",
                "Administrative Law",
            ),
            3,
        ),
    ),
}

PUBLIC_LAW_SET: OddSet = (
    "public law branches",
    ("Constitutional Law", "Administrative Law", "Criminal Law", "International Law"),
    2,
)

CATEGORY_EXPLANATIONS: dict[str, str] = {
    "constitutional classification": (
        "This classification is based on the constitutional parts and their enforceability."
    ),
    "constitutional parts": (
        "This categorization follows the structural organization of the Constitution."
    ),
    "executive positions": (
        "This grouping is based on the nature of executive authority and appointment."
    ),
    "writs": "This classification is based on types of constitutional remedies.",
    "major constitutional amendments": (
        "This grouping is based on the significance and scope of amendments."
    ),
    "Indian constitutional features": (
        "This categorization is based on features actually adopted in Indian Constitution."
    ),
    "constitutional interpretation cases": (
        "This classification is based on landmark cases that shaped constitutional law."
    ),
    "borrowed constitutional features": (
        "This grouping is based on features borrowed from other constitutions."
    ),
    "constitutional philosophy concepts": (
        "This categorization is based on fundamental constitutional principles."
    ),
    "public law branches": "This grouping is based on the branches of public law.",
}

CATEGORY_TRICKS: dict[str, str] = {
    "constitutional classification": (
        "Remember: FR = Justiciable, DP = Non-justiciable, FD = Moral obligation"
    ),
    "constitutional parts": "Use Constitution structure: I-Union, II-Citizenship, III-FR, IV-DP",
    "executive positions": (
        "Think of appointment: President-elected, PM-appointed, CJ-appointed, Governor-appointed"
    ),
    "writs": (
        "Remember: 5 writs - Habeas Corpus, Mandamus, Prohibition, Certiorari, Quo-warranto"
    ),
    "major constitutional amendments": (
        "Major amendments change structure: 42nd-Mini, 73rd-Panchayat, 74th-Municipality"
    ),
    "Indian constitutional features": (
        "Remember what India adopted vs what it rejected from other systems"
    ),
    "constitutional interpretation cases": (
        "Landmark cases create new doctrines: Basic Structure, Procedure, Balance"
    ),
    "borrowed constitutional features": (
        "Remember sources: UK-Parliamentary, US-Judicial Review, Ireland-DP"
    ),
    "constitutional philosophy concepts": "Group by philosophical vs practical concepts",
}

VALID_CATEGORIES = frozenset(CATEGORY_EXPLANATIONS)

ODD_ONE_OUT_MISTAKES = (
    "Confusing similar constitutional concepts",
    "Not understanding constitutional classifications",
    "Missing subtle but important distinctions",
)


def stem_patterns(category: str) -> list[str]:
    return [
        f"Which of the following is the odd one out in terms of {category}?",
        f"Identify the option that does not belong to the same {category} as others:",
        f"Find the exception among the following based on {category}:",
        f"Which one is different from the others in {category}?",
    ]


class OddOneOutGenerator(QuestionGenerator):
    """Four options sharing a category, except one."""

    question_type = QuestionType.ODD_ONE_OUT
    name = "OddOneOutGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        category, options, odd_index = rng.choice(ODD_ONE_OUT_SETS[difficulty])
        stem = rng.choice(stem_patterns(category))
        return self._from_set(fact, difficulty, stem, category, options, odd_index, rng)

    def _from_set(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        stem: str,
        category: str,
        options: tuple[str, ...],
        odd_index: int,
        rng: random.Random,
    ) -> Question:
        odd_option = options[odd_index]
        shuffled = list(options)
        rng.shuffle(shuffled)
        odd_index = shuffled.index(odd_option)
        similar = [option for option in shuffled if option != odd_option]

        explanation = build_explanation(
            fact,
            correct_answer=f"{odd_option} is the odd one out",
            why_correct=(
                f"{odd_option} belongs to a different {category} compared to the other options. "
                + CATEGORY_EXPLANATIONS.get(category, "This represents a different category.")
            ),
            why_others_wrong=[
                f"The other options ({', '.join(similar)}) belong to the same {category}.",
                "These options share common constitutional characteristics.",
            ],
            concept_clarity=(
                f"Understanding {category} helps in systematic study of constitutional "
                "provisions and their relationships."
            ),
            trick=CATEGORY_TRICKS.get(
                category, "Group items by their essential characteristics and find the exception"
            ),
            mistakes=ODD_ONE_OUT_MISTAKES,
        )
        payload = OddOneOutPayload(
            options=tuple(shuffled), odd_one_index=odd_index, category=category
        )
        return self.assemble(fact, difficulty, stem, payload, explanation)

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        category, options, odd_index = PUBLIC_LAW_SET
        stem = stem_patterns(category)[0]
        return [self._from_set(fact, difficulty, stem, category, options, odd_index, rng)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, OddOneOutPayload):
            issues.append("Missing odd one out data")
            return

        if len(payload.options) != OPTION_COUNT:
            issues.append("Odd one out must have exactly 4 options")
            suggestions.append("Provide exactly 4 options for comparison")

        if not 0 <= payload.odd_one_index < len(payload.options):
            issues.append("Odd one index is out of range")
            suggestions.append("Ensure odd one index is between 0 and 3")

        if not payload.category:
            issues.append("Missing category for comparison")
            suggestions.append(
                "Specify the category/criterion for identifying the odd one out"
            )

        for index, option in enumerate(payload.options, start=1):
            if len(option) < 3:
                issues.append(f"Option {index} is too short")

        if len(set(payload.options)) != len(payload.options):
            issues.append("Options must be unique")
            suggestions.append("Ensure all options are different")

        if payload.category not in VALID_CATEGORIES:
            issues.append("Use standard categorization for better clarity")
            suggestions.append("Consider using established constitutional categories")

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, OddOneOutPayload) and has_duplicates(payload.options)
