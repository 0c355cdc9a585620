# src/quizmultiplier/analysis/patterns.py
"""Pattern analysis against the previous-year question (PYQ) style.

``PatternAnalyzer`` scores how closely a question reads like a past exam
question, ranks high-yield topics across a question set and summarizes
trends (popular topics, difficulty mix, type mix, emerging patterns).
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from quizmultiplier.models import Difficulty, Question, QuestionType
from quizmultiplier.policy import round_half_up

QT = QuestionType

SIMILARITY_WEIGHTS = {
    "structure": 0.25,
    "content": 0.25,
    "difficulty": 0.20,
    "vocabulary": 0.15,
    "exam_specific": 0.15,
}

OPENING_STRUCTURES = tuple(
    re.compile(pattern)
    for pattern in (
        r"^which of the following",
        r"^consider the following",
        r"^with reference to",
        r"^in the context of",
        r"^which.*?statement.*?correct",
        r"^arrange.*?chronological.*?order",
        r"^match.*?following",
    )
)
OPENING_POINTS = 15

ENDING_STRUCTURES = tuple(
    re.compile(pattern)
    for pattern in (
        r"select.*?correct.*?option",
        r"choose.*?appropriate",
        r"identify.*?correct",
        r"which.*?above.*?correct",
    )
)
ENDING_POINTS = 10

CONTENT_INDICATORS: tuple[tuple[re.Pattern[str], int], ...] = tuple(
    (re.compile(pattern), points)
    for pattern, points in (
        (r"article\s+\d+", 20),
        (r"constitutional\s+(provision|amendment)", 15),
        (r"fundamental\s+(right|duty)", 18),
        (r"(supreme court|high court|parliament)", 15),
        (r"(president|prime minister|governor)", 12),
        (r"(governance|administration|policy)", 10),
        (r"(contemporary|current|recent)", 8),
        (r"(implementation|application)", 8),
        (r"(judicial review|writ|jurisdiction)", 12),
        (r"(precedent|landmark case)", 10),
        (r"(economic|social|environmental)\s+implication", 8),
    )
)

EXAM_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = tuple(
    (re.compile(pattern), points)
    for pattern, points in (
        (r"statement.*?1.*?statement.*?2", 20),
        (r"assertion.*?reason", 25),
        (r"(recent|current|contemporary|2020|2021|2022|2023|2024)", 15),
        (r"(scenario|case|situation|context)", 15),
        (r"(sustainable development|good governance|digital india)", 10),
        (r"(ethical|moral|values|integrity)", 10),
        (r"(international|global|comparative)", 8),
    )
)

EXAM_VOCABULARY = (
    "constitutional",
    "judicial",
    "legislative",
    "executive",
    "administrative",
    "governance",
    "implementation",
    "framework",
    "provision",
    "jurisdiction",
    "precedent",
    "interpretation",
    "contemporary",
    "comprehensive",
    "significant",
    "fundamental",
    "essential",
    "crucial",
    "relevant",
    "appropriate",
    "implications",
    "consequences",
    "ramifications",
    "effectiveness",
    "efficiency",
)

# (time range in seconds, concept count range) expected per tier
DIFFICULTY_RANGES: dict[Difficulty, tuple[tuple[int, int], tuple[int, int]]] = {
    Difficulty.EASY: ((30, 60), (1, 2)),
    Difficulty.MEDIUM: ((45, 90), (2, 4)),
    Difficulty.HARD: ((75, 120), (3, 6)),
}

DIFFICULTY_RANK: dict[Difficulty, int] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}

TYPE_COMPLEXITY: dict[QuestionType, int] = {
    QT.SINGLE_CORRECT_MCQ: 1,
    QT.ODD_ONE_OUT: 1,
    QT.MULTIPLE_CORRECT_MCQ: 2,
    QT.STATEMENT_BASED: 2,
    QT.MATCH_THE_FOLLOWING: 2,
    QT.ASSERTION_REASONING: 2,
    QT.SEQUENCE_ARRANGEMENT: 3,
    QT.MAP_BASED: 2,
    QT.DATA_BASED: 3,
    QT.CASE_STUDY_BASED: 3,
}

TOPIC_TYPE_MULTIPLIER: dict[QuestionType, float] = {
    QT.SINGLE_CORRECT_MCQ: 1.2,
    QT.MULTIPLE_CORRECT_MCQ: 1.5,
    QT.STATEMENT_BASED: 1.4,
    QT.ASSERTION_REASONING: 1.3,
    QT.CASE_STUDY_BASED: 1.6,
    QT.MATCH_THE_FOLLOWING: 1.1,
    QT.SEQUENCE_ARRANGEMENT: 1.0,
    QT.ODD_ONE_OUT: 0.9,
    QT.MAP_BASED: 1.0,
    QT.DATA_BASED: 1.2,
}
HIGH_YIELD_BOOST = 1.5

HIGH_YIELD_LIMIT = 20
POPULAR_TOPIC_LIMIT = 10
REPORT_TOPIC_LIMIT = 10
RECENT_WINDOW = timedelta(days=30)


@dataclass
class TrendAnalysis:
    """Summary of a question set.

    Attributes:
        popular_topics: (topic, question count), most frequent first.
        difficulty_distribution: Question count per difficulty tier.
        type_preference: Question count per question type.
        emerging_patterns: Human-readable trend statements.
    """

    popular_topics: list[tuple[str, int]] = field(default_factory=list)
    difficulty_distribution: dict[Difficulty, int] = field(default_factory=dict)
    type_preference: dict[QuestionType, int] = field(default_factory=dict)
    emerging_patterns: list[str] = field(default_factory=list)


def _as_utc(moment: datetime) -> datetime:
    # Timestamps loaded from JSON may be naive; those are taken as UTC
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def _text_with_clarity(question: Question) -> str:
    return f"{question.question_text} {question.explanation.concept_clarity}".lower()


class PatternAnalyzer:
    """Score questions and question sets against past exam patterns."""

    def pyq_similarity(self, question: Question) -> int:
        """Similarity to past exam questions on a 0-100 scale."""
        scores = {
            "structure": self.structure_score(question),
            "content": self.content_score(question),
            "difficulty": self.difficulty_score(question),
            "vocabulary": self.vocabulary_score(question),
            "exam_specific": self.exam_specific_score(question),
        }
        similarity = sum(scores[key] * weight for key, weight in SIMILARITY_WEIGHTS.items())
        return min(round_half_up(similarity), 100)

    def high_yield_topics(self, questions: Sequence[Question]) -> list[str]:
        """Topics ranked by frequency x0.4 + summed importance x0.6, top 20."""
        frequency: Counter[str] = Counter()
        importance: dict[str, float] = {}
        for question in questions:
            frequency[question.topic] += 1
            importance[question.topic] = importance.get(question.topic, 0.0) + (
                self.topic_importance(question)
            )
        scores = {
            topic: count * 0.4 + importance[topic] * 0.6 for topic, count in frequency.items()
        }
        ranked = sorted(scores, key=lambda topic: scores[topic], reverse=True)
        return ranked[:HIGH_YIELD_LIMIT]

    def track_trends(
        self, questions: Sequence[Question], now: datetime | None = None
    ) -> TrendAnalysis:
        difficulty_distribution = {difficulty: 0 for difficulty in Difficulty}
        type_preference: Counter[QuestionType] = Counter()
        for question in questions:
            difficulty_distribution[question.difficulty] += 1
            type_preference[question.type] += 1

        topics = Counter(question.topic for question in questions)
        return TrendAnalysis(
            popular_topics=topics.most_common(POPULAR_TOPIC_LIMIT),
            difficulty_distribution=difficulty_distribution,
            type_preference=dict(type_preference),
            emerging_patterns=self.emerging_patterns(questions, now),
        )

    def emerging_patterns(
        self, questions: Sequence[Question], now: datetime | None = None
    ) -> list[str]:
        """Trend statements over questions created in the last 30 days."""
        cutoff = (now or datetime.now(timezone.utc)) - RECENT_WINDOW
        recent = [q for q in questions if _as_utc(q.metadata.created_at) > cutoff]
        if not recent:
            return []

        total = len(recent)
        patterns = []

        complexity = sum(TYPE_COMPLEXITY.get(q.type, 2) for q in recent) / total
        if complexity > 2:
            patterns.append("Increasing question complexity trend")

        interdisciplinary = sum(1 for q in recent if len(q.concepts_tested) > 3)
        if interdisciplinary / total > 0.3:
            patterns.append("Growing emphasis on interdisciplinary questions")

        application = sum(
            1
            for q in recent
            if "application" in q.question_text.lower()
            or "implementation" in q.question_text.lower()
            or q.type == QT.CASE_STUDY_BASED
        )
        if application / total > 0.25:
            patterns.append("Shift towards application and implementation focused questions")

        current = sum(
            1
            for q in recent
            if any(
                word in q.question_text.lower() for word in ("recent", "current", "contemporary")
            )
        )
        if current / total > 0.2:
            patterns.append("Increased integration of current affairs with core topics")

        return patterns

    def pattern_report(self, questions: Sequence[Question], now: datetime | None = None) -> str:
        """Plain text report of trends and high-yield topics."""
        trends = self.track_trends(questions, now)
        high_yield = self.high_yield_topics(questions)
        distribution = trends.difficulty_distribution
        preferences = sorted(trends.type_preference.items(), key=lambda item: -item[1])

        lines = [
            "UPSC Question Pattern Analysis Report",
            "=====================================",
            "",
            "Popular Topics:",
            *(f"- {topic}: {count} questions" for topic, count in trends.popular_topics),
            "",
            "Difficulty Distribution:",
            f"- Easy: {distribution[Difficulty.EASY]}",
            f"- Medium: {distribution[Difficulty.MEDIUM]}",
            f"- Hard: {distribution[Difficulty.HARD]}",
            "",
            "Question Type Preferences:",
            *(f"- {question_type.value}: {count}" for question_type, count in preferences),
            "",
            "High-Yield Topics:",
            *(
                f"{rank}. {topic}"
                for rank, topic in enumerate(high_yield[:REPORT_TOPIC_LIMIT], start=1)
            ),
            "",
            "Emerging Patterns:",
            *(f"- {pattern}" for pattern in trends.emerging_patterns),
        ]
        return "\n".join(lines).strip()

    # Similarity components

    def structure_score(self, question: Question) -> int:
        text = question.question_text.lower()
        score = sum(OPENING_POINTS for pattern in OPENING_STRUCTURES if pattern.search(text))
        score += sum(ENDING_POINTS for pattern in ENDING_STRUCTURES if pattern.search(text))
        return min(score, 100)

    def content_score(self, question: Question) -> int:
        text = _text_with_clarity(question)
        score = sum(points for pattern, points in CONTENT_INDICATORS if pattern.search(text))
        return min(score, 100)

    def difficulty_score(self, question: Question) -> int:
        """How well time, concepts, marks and type fit the assigned tier."""
        (min_time, max_time), (min_concepts, max_concepts) = DIFFICULTY_RANGES[question.difficulty]
        rank = DIFFICULTY_RANK[question.difficulty]
        score = 0
        if min_time <= question.time_to_solve <= max_time:
            score += 30
        if min_concepts <= len(question.concepts_tested) <= max_concepts:
            score += 30
        if question.marks == rank:
            score += 20
        if abs(TYPE_COMPLEXITY.get(question.type, 2) - rank) <= 1:
            score += 20
        return score

    def vocabulary_score(self, question: Question) -> int:
        words = _text_with_clarity(question).split()
        if not words:
            return 50
        matches = sum(1 for word in words if any(vocab in word for vocab in EXAM_VOCABULARY))
        ratio = matches / len(words)
        if 0.1 <= ratio <= 0.2:
            return 100
        if 0.05 <= ratio <= 0.3:
            return 75
        return 50

    def exam_specific_score(self, question: Question) -> int:
        text = question.question_text.lower()
        score = sum(points for pattern, points in EXAM_PATTERNS if pattern.search(text))
        return min(score, 100)

    def topic_importance(self, question: Question) -> float:
        importance = DIFFICULTY_RANK[question.difficulty] * TOPIC_TYPE_MULTIPLIER.get(
            question.type, 1.0
        )
        if question.metadata.high_yield_topic:
            importance *= HIGH_YIELD_BOOST
        return importance * question.metadata.quality_score / 100
