# src/quizmultiplier/analysis/quality.py
"""Editorial quality review that is independent of the generators.

Generators validate their own output structurally. ``QualityValidator``
looks at a finished question the way an exam editor would: basic field
ranges, explanation completeness, syllabus fit, type shape, factual
red flags, ambiguous wording and whether the assigned difficulty is
plausible. Each failed check costs points from a starting score of 100.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from quizmultiplier.models import (
    Difficulty,
    MultipleCorrectPayload,
    Question,
    QuestionType,
    SingleCorrectPayload,
    StatementBasedPayload,
    ValidationResult,
)
from quizmultiplier.policy import GenerationPolicy

logger = logging.getLogger(__name__)

QT = QuestionType

MIN_TEXT_LENGTH = 10
MAX_TEXT_LENGTH = 500
MIN_SOLVE_TIME = 15
MAX_SOLVE_TIME = 300
MIN_MARKS = 1
MAX_MARKS = 10

FACTUAL_PENALTY = 25
AMBIGUITY_PENALTY = 15
DIFFICULTY_PENALTY = 10
DIFFICULTY_TOLERANCE = 0.2

# Added to the policy's hedge words
EXTRA_HEDGE_WORDS = ("probably", "possibly", "might", "could", "sometimes")
UNCLEAR_REFERENCES = ("it", "this", "that", "these", "those")
MAX_UNCLEAR_REFERENCES = 2
OPEN_ENDED_STEMS = ("which is better", "which is more important", "what should be done")

SYLLABUS_SUBJECTS = frozenset(
    {
        "History",
        "Geography",
        "Polity",
        "Economy",
        "Environment",
        "Science & Technology",
        "Current Affairs",
        "Ethics",
        "Art & Culture",
        "International Relations",
    }
)
SUBJECT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "polity": ("constitution", "parliament", "court", "president", "article"),
    "history": ("ancient", "medieval", "modern", "independence", "colonial"),
    "geography": ("climate", "river", "mountain", "plateau", "monsoon"),
    "economy": ("gdp", "inflation", "budget", "trade", "industrial"),
    "environment": ("ecosystem", "pollution", "conservation", "biodiversity"),
}
EXAM_STEM_PATTERNS = (
    re.compile(r"^which of the following"),
    re.compile(r"^consider the following"),
    re.compile(r"^with reference to"),
    re.compile(r"select.*correct"),
    re.compile(r"identify.*correct"),
)
TOPICAL_SUBJECTS = frozenset({"Current Affairs", "Environment", "Science & Technology"})
TOPICAL_KEYWORDS = ("recent", "current", "contemporary", "2020", "2021", "2022", "2023", "2024")

MAX_ARTICLE = 395
MAX_AMENDMENT = 110
INDEPENDENCE_YEAR = 1947
_ARTICLE = re.compile(r"article\s+(\d+)")
_AMENDMENT = re.compile(r"(\d+)(?:st|nd|rd|th)\s+amendment")
_YEAR = re.compile(r"\b(?:19|20)\d{2}\b")
# (phrases that must all appear, issue)
INSTITUTIONAL_ERRORS = (
    (("president", "dissolve parliament"), "President cannot dissolve Parliament directly"),
    (
        ("prime minister", "constitutional head"),
        "Prime Minister is not the constitutional head of state",
    ),
)

EXPECTED_DIFFICULTY_SCORE = {Difficulty.EASY: 35, Difficulty.MEDIUM: 55, Difficulty.HARD: 80}
TYPE_DIFFICULTY_SCORES: dict[QuestionType, int] = {
    QT.SINGLE_CORRECT_MCQ: 15,
    QT.MULTIPLE_CORRECT_MCQ: 25,
    QT.STATEMENT_BASED: 30,
    QT.ASSERTION_REASONING: 35,
    QT.CASE_STUDY_BASED: 45,
    QT.DATA_BASED: 40,
}
DEFAULT_TYPE_DIFFICULTY_SCORE = 25


@dataclass
class Findings:
    """Issues, suggestions and the points they cost."""

    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    penalty: int = 0

    def add(self, issue: str, suggestion: str | None, penalty: int) -> None:
        self.issues.append(issue)
        if suggestion:
            self.suggestions.append(suggestion)
        self.penalty += penalty

    def extend(self, other: Findings) -> None:
        self.issues.extend(other.issues)
        self.suggestions.extend(other.suggestions)
        self.penalty += other.penalty


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


class QualityValidator:
    """Score finished questions against editorial rules."""

    def __init__(self, policy: GenerationPolicy | None = None):
        self.policy = policy or GenerationPolicy.default()
        self.hedge_words = tuple(dict.fromkeys((*self.policy.hedge_words, *EXTRA_HEDGE_WORDS)))

    def validate_question(self, question: Question) -> ValidationResult:
        findings = Findings()
        findings.extend(self.basic_checks(question))
        findings.extend(self.content_checks(question))
        findings.extend(self.syllabus_checks(question))
        findings.extend(self.type_checks(question))

        accurate, accuracy_issues = self.check_factual_accuracy(question)
        if not accurate:
            findings.issues.extend(accuracy_issues)
            findings.penalty += FACTUAL_PENALTY

        ambiguities = self.detect_ambiguity(question)
        if ambiguities:
            findings.issues.extend(ambiguities)
            findings.penalty += AMBIGUITY_PENALTY

        difficulty_ok = self.verify_difficulty(question)
        if not difficulty_ok:
            findings.add(
                "Difficulty level inappropriate for question complexity", None, DIFFICULTY_PENALTY
            )

        issues = _dedupe(findings.issues)
        if issues:
            logger.debug("Question %s has %d quality issues", question.id, len(issues))
        return ValidationResult(
            is_valid=not issues,
            quality_score=max(0, 100 - findings.penalty),
            issues=issues,
            suggestions=_dedupe(findings.suggestions),
            factual_accuracy=accurate,
            difficulty_appropriate=difficulty_ok,
            ambiguity_free=not ambiguities,
        )

    def validate_questions(self, questions: Sequence[Question]) -> list[ValidationResult]:
        return [self.validate_question(question) for question in questions]

    def calculate_quality_score(self, question: Question) -> int:
        return self.validate_question(question).quality_score

    # Rule groups

    def basic_checks(self, question: Question) -> Findings:
        findings = Findings()
        text = question.question_text
        if len(text) < MIN_TEXT_LENGTH:
            findings.add(
                "Question text too short",
                "Provide meaningful question text (minimum 10 characters)",
                20,
            )
        if len(text) > MAX_TEXT_LENGTH:
            findings.add(
                "Question text too long",
                "Keep question text concise (maximum 500 characters)",
                10,
            )
        if not question.id:
            findings.add("Missing question ID", "Provide unique question identifier", 5)
        if not MIN_SOLVE_TIME <= question.time_to_solve <= MAX_SOLVE_TIME:
            findings.add(
                "Invalid time to solve", "Set realistic time between 15-300 seconds", 5
            )
        if not MIN_MARKS <= question.marks <= MAX_MARKS:
            findings.add("Invalid marks allocation", "Set appropriate marks between 1-10", 5)
        return findings

    def content_checks(self, question: Question) -> Findings:
        findings = Findings()
        explanation = question.explanation
        if not explanation.correct_answer:
            findings.add("Missing correct answer in explanation", "Specify the correct answer", 10)
        if not explanation.why_correct:
            findings.add(
                "Missing explanation for correct answer", "Explain why the answer is correct", 10
            )
        if not explanation.concept_clarity:
            findings.add(
                "Missing concept clarity explanation", "Provide clear concept explanation", 5
            )
        if not question.concepts_tested:
            findings.add("No concepts tested specified", "List the concepts being tested", 10)
        if not question.tags:
            findings.add("No tags specified", "Add relevant tags for categorization", 5)
        return findings

    def syllabus_checks(self, question: Question) -> Findings:
        findings = Findings()
        text = question.question_text.lower()

        if question.subject not in SYLLABUS_SUBJECTS:
            findings.add(
                "Question not relevant to UPSC syllabus",
                "Ensure question aligns with UPSC syllabus and pattern",
                15,
            )

        keywords = SUBJECT_KEYWORDS.get(question.subject.lower(), ())
        if not any(keyword in text for keyword in keywords):
            findings.add(
                "Content not appropriate for specified subject",
                "Review subject classification and content alignment",
                10,
            )

        if not any(pattern.search(text) for pattern in EXAM_STEM_PATTERNS):
            findings.add(
                "Does not follow UPSC question patterns",
                "Adapt question to standard UPSC formats and language",
                10,
            )

        if question.subject in TOPICAL_SUBJECTS and not any(
            keyword in text for keyword in TOPICAL_KEYWORDS
        ):
            findings.add(
                "Missing contemporary relevance",
                "Add current affairs or contemporary application angle",
                5,
            )
        return findings

    def type_checks(self, question: Question) -> Findings:
        findings = Findings()
        payload = question.payload
        if isinstance(payload, SingleCorrectPayload):
            if len(payload.options) != 4:
                findings.add(
                    "Must have exactly 4 options", "Provide exactly 4 multiple choice options", 15
                )
            if sum(1 for option in payload.options if option.is_correct) != 1:
                findings.add(
                    "Must have exactly 1 correct option", "Mark exactly one option as correct", 20
                )
        elif isinstance(payload, MultipleCorrectPayload):
            correct = sum(1 for option in payload.options if option.is_correct)
            if not 2 <= correct <= 3:
                findings.add(
                    "Must have 2-3 correct options",
                    "Mark 2-3 options as correct for multiple correct MCQ",
                    15,
                )
        elif isinstance(payload, StatementBasedPayload):
            if len(payload.statements) < 2:
                findings.add(
                    "Must have at least 2 statements",
                    "Provide at least 2 statements for evaluation",
                    15,
                )
        return findings

    # Factual red flags

    def check_factual_accuracy(self, question: Question) -> tuple[bool, list[str]]:
        """Return (accurate, issues) from constitutional, historical and institutional checks."""
        issues: list[str] = []
        if not (question.base_fact_id and question.subject and question.topic):
            issues.append("Missing basic factual information (baseFact, subject, or topic)")
        issues.extend(self.constitutional_issues(question))
        issues.extend(self.historical_issues(question))
        issues.extend(self.institutional_issues(question))
        return not issues, issues

    def constitutional_issues(self, question: Question) -> list[str]:
        text = f"{question.question_text} {question.explanation.concept_clarity}".lower()
        issues = []
        for match in _ARTICLE.finditer(text):
            number = int(match.group(1))
            if not 1 <= number <= MAX_ARTICLE:
                issues.append(f"Invalid article number: {number}")
        for match in _AMENDMENT.finditer(text):
            number = int(match.group(1))
            if not 1 <= number <= MAX_AMENDMENT:
                issues.append(f"Invalid amendment number: {number}")
        return issues

    def historical_issues(self, question: Question) -> list[str]:
        text = question.question_text.lower()
        if "constitution" not in text:
            return []
        return [
            f"Constitutional reference with pre-1950 date: {year}"
            for year in _YEAR.findall(text)
            if int(year) < INDEPENDENCE_YEAR
        ]

    def institutional_issues(self, question: Question) -> list[str]:
        text = question.question_text.lower()
        return [
            issue
            for phrases, issue in INSTITUTIONAL_ERRORS
            if all(phrase in text for phrase in phrases)
        ]

    # Wording

    def detect_ambiguity(self, question: Question) -> list[str]:
        text = question.question_text.lower()
        ambiguities = [
            f'Ambiguous language detected: "{word}"'
            for word in self.hedge_words
            if re.search(rf"\b{re.escape(word)}\b", text)
        ]
        for reference in UNCLEAR_REFERENCES:
            if len(re.findall(rf"\b{reference}\b", text)) > MAX_UNCLEAR_REFERENCES:
                ambiguities.append(f'Excessive use of unclear reference: "{reference}"')
        if any(stem in text for stem in OPEN_ENDED_STEMS):
            ambiguities.append("Question allows multiple valid interpretations")
        if "above" in text and "statement" not in text and "passage" not in text:
            ambiguities.append("Question lacks sufficient information for definitive answer")
        return ambiguities

    # Difficulty

    def difficulty_estimate(self, question: Question) -> float:
        """Rough 0-100 difficulty from concepts, time, type and long words."""
        words = question.question_text.split()
        long_words = sum(1 for word in words if len(word) > 8)
        vocabulary = long_words / len(words) * 100 if words else 0.0

        score = min(len(question.concepts_tested) * 8, 30)
        score += min(question.time_to_solve / 3, 30)
        score += TYPE_DIFFICULTY_SCORES.get(question.type, DEFAULT_TYPE_DIFFICULTY_SCORE)
        score += vocabulary * 0.3
        return min(score, 100)

    def verify_difficulty(self, question: Question) -> bool:
        """Whether the estimate lies within 20% of the assigned tier's expected score."""
        expected = EXPECTED_DIFFICULTY_SCORE[question.difficulty]
        return abs(self.difficulty_estimate(question) - expected) <= expected * DIFFICULTY_TOLERANCE
