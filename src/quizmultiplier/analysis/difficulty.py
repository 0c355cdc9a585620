# src/quizmultiplier/analysis/difficulty.py
"""Difficulty calculation from observable question features.

The calculator scores eight factors on a 0-100 scale and combines them with
fixed weights. The weighted score maps onto a difficulty tier, which can be
compared against the tier a generator assigned.
"""

from __future__ import annotations

import re

from quizmultiplier.models import (
    Difficulty,
    MultipleCorrectPayload,
    Question,
    QuestionType,
)
from quizmultiplier.policy import round_half_up

QT = QuestionType

EASY_CEILING = 35
MEDIUM_CEILING = 70

FACTOR_WEIGHTS: dict[str, float] = {
    "concept_count": 0.15,
    "cognitive_level": 0.20,
    "type_complexity": 0.15,
    "time_requirement": 0.10,
    "subject_integration": 0.10,
    "vocabulary": 0.10,
    "pattern_alignment": 0.10,
    "cross_references": 0.10,
}

FACTOR_NAMES = [
    "Concept Count",
    "Cognitive Level",
    "Question Type Complexity",
    "Time Requirement",
    "Subject Integration",
    "Vocabulary Complexity",
    "UPSC Pattern Alignment",
    "Cross-Reference Requirement",
]

BREAKDOWN_LABELS: dict[str, str] = {
    "concept_count": "Concept Count",
    "cognitive_level": "Cognitive Level",
    "type_complexity": "Question Type",
    "time_requirement": "Time Requirement",
    "subject_integration": "Subject Integration",
    "vocabulary": "Vocabulary",
    "pattern_alignment": "UPSC Pattern",
    "cross_references": "Cross References",
}

# Bloom's taxonomy, lowest level first; the first level with a keyword hit wins
BLOOM_LEVELS: tuple[tuple[str, int, tuple[str, ...]], ...] = (
    ("remember", 15, ("what", "when", "where", "who", "list", "identify", "define", "recall")),
    ("understand", 30, ("explain", "describe", "summarize", "interpret", "classify")),
    ("apply", 45, ("apply", "implement", "use", "demonstrate", "solve", "show")),
    ("analyze", 65, ("analyze", "examine", "compare", "contrast", "distinguish", "differentiate")),
    ("evaluate", 80, ("evaluate", "assess", "judge", "critique", "justify", "defend")),
    ("create", 95, ("create", "design", "construct", "develop", "formulate", "synthesize")),
)
DEFAULT_BLOOM_SCORE = 30

TYPE_COMPLEXITY_SCORES: dict[QuestionType, int] = {
    QT.SINGLE_CORRECT_MCQ: 25,
    QT.MULTIPLE_CORRECT_MCQ: 40,
    QT.ODD_ONE_OUT: 35,
    QT.STATEMENT_BASED: 50,
    QT.ASSERTION_REASONING: 60,
    QT.MATCH_THE_FOLLOWING: 55,
    QT.SEQUENCE_ARRANGEMENT: 65,
    QT.MAP_BASED: 45,
    QT.DATA_BASED: 70,
    QT.CASE_STUDY_BASED: 85,
}

SUBJECT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "polity": (
        "constitution",
        "parliament",
        "judicial",
        "president",
        "article",
        "amendment",
        "fundamental rights",
    ),
    "history": ("ancient", "medieval", "modern", "independence", "colonial", "dynasty", "empire"),
    "geography": ("climate", "soil", "river", "mountain", "plateau", "coastal", "monsoon"),
    "economy": ("gdp", "inflation", "monetary", "fiscal", "budget", "trade", "industrial"),
    "environment": ("ecosystem", "biodiversity", "pollution", "conservation", "climate change"),
    "science": ("technology", "biotechnology", "space", "nuclear", "renewable", "innovation"),
}

LEGAL_TERMS = frozenset(
    {
        "constitutional",
        "judicial",
        "legislature",
        "jurisdiction",
        "adjudication",
        "jurisprudence",
        "precedent",
        "sovereignty",
        "federalism",
        "amendment",
    }
)

ACADEMIC_TERMS = frozenset(
    {
        "administration",
        "implementation",
        "comprehensive",
        "contemporary",
        "fundamental",
        "institutional",
        "systematic",
        "philosophical",
        "theoretical",
    }
)

CURRENT_AFFAIRS_KEYWORDS = (
    "contemporary",
    "current",
    "recent",
    "modern",
    "2020",
    "2021",
    "2022",
    "2023",
    "2024",
)
APPLICATION_KEYWORDS = ("implement", "apply", "practice", "real-world", "scenario", "case")
ETHICAL_KEYWORDS = ("ethical", "moral", "values", "integrity", "justice", "fairness")
GOVERNANCE_KEYWORDS = (
    "governance",
    "administration",
    "policy",
    "public",
    "government",
    "bureaucracy",
    "civil service",
    "implementation",
)
CASE_KEYWORDS = ("case", "vs", "judgment", "ruling", "decision")
ACT_KEYWORDS = ("act", "statute", "law", "code", "ordinance")

MAX_ARTICLE_REFERENCES = 5
_ARTICLE_REFERENCE = re.compile(r"article\s+\d+", re.IGNORECASE)
_NON_LETTERS = re.compile(r"[^a-z]")


def _question_and_clarity(question: Question) -> str:
    return f"{question.question_text} {question.explanation.concept_clarity}"


def identify_subjects(concepts: tuple[str, ...] | list[str]) -> set[str]:
    """Subjects touched by ``concepts``; each concept counts toward at most one."""
    subjects: set[str] = set()
    for concept in concepts:
        lowered = concept.lower()
        for subject, keywords in SUBJECT_KEYWORDS.items():
            if any(keyword in lowered for keyword in keywords):
                subjects.add(subject)
                break
    return subjects


class DifficultyCalculator:
    """Infer a question's difficulty tier from eight weighted factors.

    Example:
        calculator = DifficultyCalculator()
        calculator.calculate(question)             # Difficulty.MEDIUM
        calculator.difficulty_breakdown(question)  # {"Concept Count": 50, ...}
    """

    def calculate(self, question: Question) -> Difficulty:
        score = self.difficulty_score(question)
        if score <= EASY_CEILING:
            return Difficulty.EASY
        if score <= MEDIUM_CEILING:
            return Difficulty.MEDIUM
        return Difficulty.HARD

    def validate_difficulty(self, question: Question, expected: Difficulty | None = None) -> bool:
        """True when the inferred tier equals ``expected`` (the question's own by default)."""
        return self.calculate(question) == (expected or question.difficulty)

    def difficulty_factors(self) -> list[str]:
        return list(FACTOR_NAMES)

    def difficulty_breakdown(self, question: Question) -> dict[str, int]:
        """Per-factor scores keyed by display label."""
        factors = self.analyze_factors(question)
        return {label: factors[key] for key, label in BREAKDOWN_LABELS.items()}

    def difficulty_score(self, question: Question) -> int:
        factors = self.analyze_factors(question)
        return round_half_up(
            sum(factors[key] * weight for key, weight in FACTOR_WEIGHTS.items())
        )

    def analyze_factors(self, question: Question) -> dict[str, int]:
        return {
            "concept_count": self.concept_count_score(question),
            "cognitive_level": self.cognitive_level_score(question),
            "type_complexity": TYPE_COMPLEXITY_SCORES.get(question.type, 50),
            "time_requirement": self.time_score(question),
            "subject_integration": self.integration_score(question),
            "vocabulary": self.vocabulary_score(question),
            "pattern_alignment": self.pattern_alignment_score(question),
            "cross_references": self.cross_reference_score(question),
        }

    # Individual factors

    def concept_count_score(self, question: Question) -> int:
        count = len(question.concepts_tested)
        if count <= 1:
            return 20
        if count <= 3:
            return 50
        if count <= 5:
            return 75
        return 90

    def cognitive_level_score(self, question: Question) -> int:
        text = question.question_text.lower()
        clarity = question.explanation.concept_clarity.lower()
        for _, score, keywords in BLOOM_LEVELS:
            if any(keyword in text or keyword in clarity for keyword in keywords):
                return score
        return DEFAULT_BLOOM_SCORE

    def time_score(self, question: Question) -> int:
        seconds = question.time_to_solve
        if seconds <= 30:
            return 20
        if seconds <= 60:
            return 40
        if seconds <= 90:
            return 60
        if seconds <= 120:
            return 80
        return 90

    def integration_score(self, question: Question) -> int:
        count = len(identify_subjects(question.concepts_tested))
        if count <= 1:
            return 20
        if count == 2:
            return 50
        return 75

    def vocabulary_score(self, question: Question) -> int:
        words = _question_and_clarity(question).split()
        if not words:
            return 20
        complex_words = 0
        for word in words:
            clean = _NON_LETTERS.sub("", word.lower())
            if len(clean) > 8 or clean in LEGAL_TERMS or clean in ACADEMIC_TERMS:
                complex_words += 1
        ratio = complex_words / len(words)
        if ratio < 0.1:
            return 20
        if ratio < 0.2:
            return 40
        if ratio < 0.3:
            return 60
        return 80

    def pattern_alignment_score(self, question: Question) -> int:
        """Base 20 plus 15 per exam characteristic present, up to 95."""
        text = question.question_text.lower()
        combined = _question_and_clarity(question).lower()
        payload = question.payload
        characteristics = [
            any(keyword in text for keyword in CURRENT_AFFAIRS_KEYWORDS),
            question.type in (QT.CASE_STUDY_BASED, QT.ASSERTION_REASONING)
            or (isinstance(payload, MultipleCorrectPayload) and payload.correct_count > 1),
            any(keyword in text for keyword in APPLICATION_KEYWORDS),
            any(keyword in combined for keyword in ETHICAL_KEYWORDS),
            any(keyword in text for keyword in GOVERNANCE_KEYWORDS),
        ]
        return 20 + 15 * sum(characteristics)

    def cross_reference_score(self, question: Question) -> int:
        text = _question_and_clarity(question)
        lowered = text.lower()
        articles = min(len(_ARTICLE_REFERENCE.findall(text)), MAX_ARTICLE_REFERENCES)
        cases = sum(1 for keyword in CASE_KEYWORDS if keyword in lowered)
        acts = sum(1 for keyword in ACT_KEYWORDS if keyword in lowered)
        total = articles + cases + acts
        if total == 0:
            return 20
        if total <= 2:
            return 40
        if total <= 4:
            return 60
        return 80
