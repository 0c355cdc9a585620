# src/quizmultiplier/generators/map_based.py
"""Map based questions: a described map and four candidate locations."""

from __future__ import annotations

import random

from quizmultiplier.generators.base import QuestionGenerator, has_duplicates
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    MapBasedPayload,
    Question,
    QuestionType,
)

LOCATION_COUNT = 4
MIN_DESCRIPTION_CHARS = 50
GOVERNANCE_KEYWORDS = (
    "constitutional",
    "court",
    "assembly",
    "tribunal",
    "governance",
    "federal",
    "administrative",
)

# (map type, description, locations, correct location)
MapSet = tuple[str, str, tuple[str, ...], str]

MAP_SETS: dict[Difficulty, tuple[MapSet, ...]] = {
    Difficulty.EASY: (
        (
            "political map",
            "A political map of India showing constitutional bodies and their headquarters. "
            "The map shows four major cities marked as A, B, C, and D. Location B is marked in "
            "the national capital region and represents the seat of the Supreme Court of India.",
            ("Mumbai", "New Delhi", "Chennai", "Kolkata"),
            "New Delhi",
        ),
        (
            "administrative map",
            "An administrative map showing the location of High Courts in different states. The "
            "map highlights a major commercial city in western India marked as location C, which "
            "houses a High Court with jurisdiction over multiple states.",
            ("Bangalore", "Hyderabad", "Mumbai", "Pune"),
            "Mumbai",
        ),
        (
            "constitutional map",
            "A constitutional map showing the distribution of legislative assemblies. Location A "
            "is marked in a northern state known for its legislative assembly building designed "
            "by renowned architects and housing the largest state legislature.",
            ("Lucknow", "Chandigarh", "Jaipur", "Dehradun"),
            "Lucknow",
        ),
    ),
    Difficulty.MEDIUM: (
        (
            "thematic map",
            "A thematic map showing the distribution of constitutional amendments' "
            "implementation across Indian states. The map highlights regions where the 73rd "
            "Amendment (Panchayati Raj) was first successfully implemented. Location X marks a "
            "state that became a model for other states in implementing three-tier Panchayati "
            "Raj system.",
            ("Karnataka", "Rajasthan", "West Bengal", "Andhra Pradesh"),
            "Karnataka",
        ),
        (
            "governance map",
            "A governance map showing the distribution of tribunal headquarters across India. "
            "Location Y represents a city that houses multiple quasi-judicial bodies including "
            "the Central Administrative Tribunal and is strategically located for administrative "
            "efficiency.",
            ("New Delhi", "Mumbai", "Chennai", "Kolkata"),
            "New Delhi",
        ),
        (
            "federal structure map",
            "A federal structure map showing the seat of a state that has its own High Court but "
            "shares jurisdiction with neighboring union territories. Location Z marks a state "
            "capital that exemplifies the complexity of federal judicial administration.",
            ("Chandigarh", "Guwahati", "Port Blair", "Gangtok"),
            "Chandigarh",
        ),
    ),
    Difficulty.HARD: (
        (
            "constitutional geography map",
            "A complex constitutional geography map showing the intersection of Article 370 "
            "implementation and its geographical implications. The map displays a region marked "
            "as P which was uniquely governed under special constitutional provisions until "
            "2019, representing a distinctive federal arrangement.",
            ("Ladakh", "Jammu and Kashmir", "Himachal Pradesh", "Uttarakhand"),
            "Jammu and Kashmir",
        ),
        (
            "institutional distribution map",
            "An institutional distribution map showing the strategic placement of constitutional "
            "bodies for optimal federal governance. Location Q marks a city chosen for housing "
            "important constitutional institutions due to its central location and "
            "administrative infrastructure, representing the principle of geographical balance "
            "in institutional distribution.",
            ("Bhopal", "Nagpur", "Allahabad", "Indore"),
            "Allahabad",
        ),
        (
            "constitutional evolution map",
            "A constitutional evolution map tracking the implementation of language provisions "
            "under the Eighth Schedule. Location R represents a linguistic region that played a "
            "crucial role in the linguistic reorganization of states and demonstrates the "
            "constitutional accommodation of linguistic diversity.",
            (
                "Tamil Nadu (Chennai)",
                "Andhra Pradesh (Hyderabad)",
                "Kerala (Thiruvananthapuram)",
                "Karnataka (Bangalore)",
            ),
            "Andhra Pradesh (Hyderabad)",
        ),
    ),
}

HISTORICAL_MAP_SET: MapSet = (
    "historical constitutional map",
    "A historical constitutional map showing the evolution of democratic institutions in "
    "India. The map marks location H as the birthplace of an important constitutional "
    "convention that influenced the framing of the Indian Constitution.",
    ("Lahore", "Karachi", "Calcutta", "Bombay"),
    "Calcutta",
)

LOCATION_TRICKS: dict[str, str] = {
    "New Delhi": "Capital city = Supreme Court, Parliament, President",
    "Mumbai": "Commercial capital = Bombay High Court (first HC)",
    "Lucknow": "UP capital = Largest state assembly",
    "Karnataka": "First to implement Panchayati Raj successfully",
    "Chandigarh": "Shared capital of Punjab and Haryana",
    "Jammu and Kashmir": "Special status under Article 370 (until 2019)",
    "Allahabad": "Historical legal center with High Court since 1866",
    "Andhra Pradesh (Hyderabad)": "First linguistic state formation",
}

MAP_MISTAKES = (
    "Not reading the map description carefully",
    "Confusing similar constitutional institutions",
    "Missing geographical clues in the description",
)


def stem_patterns(map_type: str) -> list[str]:
    return [
        f"Study the {map_type} and identify the marked location:",
        f"Based on the {map_type} provided, which location is correctly marked?",
        f"Analyze the {map_type} and select the appropriate location:",
        f"With reference to the {map_type}, identify the highlighted area:",
    ]


def location_trick(location: str) -> str:
    """Memory trick for a location, falling back to its name before any "(...)"."""
    trick = LOCATION_TRICKS.get(location) or LOCATION_TRICKS.get(location.split(" (")[0])
    return trick or "Use geographical and institutional context clues"


class MapBasedGenerator(QuestionGenerator):
    """Identify the marked location on a described map."""

    question_type = QuestionType.MAP_BASED
    name = "MapBasedGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        map_set = rng.choice(MAP_SETS[difficulty])
        stem = rng.choice(stem_patterns(map_set[0]))
        return self._from_set(fact, difficulty, stem, map_set, rng)

    def _from_set(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        stem: str,
        map_set: MapSet,
        rng: random.Random,
    ) -> Question:
        _, description, locations, correct = map_set
        shuffled = list(locations)
        rng.shuffle(shuffled)

        explanation = build_explanation(
            fact,
            correct_answer=correct,
            why_correct=(
                f"{correct} is the correct answer based on the geographical and constitutional "
                "context provided in the map description."
            ),
            why_others_wrong=[
                f"{location} does not match the geographical or institutional criteria "
                "described in the map."
                for location in shuffled
                if location != correct
            ],
            concept_clarity=(
                "Map-based questions test the understanding of geographical distribution of "
                "constitutional institutions and their strategic placement for effective "
                "governance."
            ),
            trick=location_trick(correct),
            mistakes=MAP_MISTAKES,
        )
        payload = MapBasedPayload(
            map_description=description, locations=tuple(shuffled), correct_location=correct
        )
        return self.assemble(fact, difficulty, stem, payload, explanation)

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        stem = stem_patterns(HISTORICAL_MAP_SET[0])[0]
        return [self._from_set(fact, difficulty, stem, HISTORICAL_MAP_SET, rng)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, MapBasedPayload):
            issues.append("Missing map based data")
            return

        description = payload.map_description
        if len(description) < MIN_DESCRIPTION_CHARS:
            issues.append("Map description too short")
            suggestions.append("Provide detailed map description (minimum 50 characters)")

        if len(payload.locations) != LOCATION_COUNT:
            issues.append("Must have exactly 4 location options")
            suggestions.append("Provide exactly 4 location choices")

        if not payload.correct_location:
            issues.append("Missing correct location")
            suggestions.append("Specify the correct location")

        if payload.correct_location not in payload.locations:
            issues.append("Correct location must be among the options")
            suggestions.append("Ensure correct location is included in the options list")

        if "map" not in description.lower():
            issues.append("Description should clearly indicate it's a map-based question")
            suggestions.append("Include explicit map references in the description")

        for index, location in enumerate(payload.locations, start=1):
            if len(location) < 3:
                issues.append(f"Location {index} is too short")

        if len(set(payload.locations)) != len(payload.locations):
            issues.append("All locations must be unique")
            suggestions.append("Ensure no duplicate locations in options")

        if not any(keyword in description.lower() for keyword in GOVERNANCE_KEYWORDS):
            issues.append("Map should have constitutional/governance context")
            suggestions.append(
                "Include constitutional institutions or governance aspects in map description"
            )

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, MapBasedPayload) and has_duplicates(payload.locations)
