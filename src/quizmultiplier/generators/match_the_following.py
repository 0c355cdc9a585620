# src/quizmultiplier/generators/match_the_following.py
"""Match-the-following questions: five left items paired with five right items."""

from __future__ import annotations

import random
import re

from quizmultiplier.generators.base import QuestionGenerator, has_duplicates
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    MatchPair,
    MatchTheFollowingPayload,
    Question,
    QuestionType,
)

PAIR_COUNT = 5

MATCH_MISTAKES = (
    "Confusing similar constitutional provisions",
    "Mismatching articles with their subjects",
    "Incorrect understanding of constitutional relationships",
)

TIMELINE_PAIRS = (
    MatchPair(
        left="Pre-independence discussions",
        right="1930s-1940s",
        explanation="Constitutional discussions began during the independence movement.",
    ),
    MatchPair(
        left="Constituent Assembly",
        right="1946-1950",
        explanation="The Constituent Assembly drafted the Constitution between 1946-1950.",
    ),
    MatchPair(
        left="Constitution adoption",
        right="26 January 1950",
        explanation="The Constitution came into effect on 26 January 1950.",
    ),
    MatchPair(
        left="First amendment",
        right="1951",
        explanation="The first constitutional amendment was passed in 1951.",
    ),
    MatchPair(
        left="Basic structure doctrine",
        right="1973 (Kesavananda Bharati)",
        explanation="The basic structure doctrine was established in 1973.",
    ),
)

_ARTICLE_NUMBER = re.compile(r"Article\s+(\d+)", re.IGNORECASE)


def stem_patterns(fact: BaseFact, difficulty: Difficulty) -> list[str]:
    if difficulty == Difficulty.EASY:
        return [
            "Match the following constitutional provisions with their descriptions:",
            "Match List I with List II:",
            "Match the following articles with their subject matter:",
            "Correctly match the constitutional provisions:",
        ]
    if difficulty == Difficulty.MEDIUM:
        concept = fact.concepts[0] if fact.concepts else "governance"
        return [
            f"In the context of {concept}, match the following provisions with their "
            "implications:",
            "Match the constitutional articles with their practical applications:",
            "Connect the following constitutional concepts with their real-world examples:",
            "Match the provisions with their contemporary relevance:",
        ]
    return [
        "Analyze and match the constitutional provisions with their judicial interpretations:",
        "Match the following constitutional concepts with their evolution through "
        "landmark cases:",
        "Connect the provisions with their comparative constitutional parallels:",
        "Match the constitutional framework elements with their philosophical foundations:",
    ]


def _neighbouring_articles(source: str) -> tuple[str, str]:
    match = _ARTICLE_NUMBER.search(source)
    if match is None:
        return (f"Provision following {source}", f"Provision preceding {source}")
    number = int(match.group(1))
    return (f"Article {number + 1}", f"Article {number - 1}")


def matching_pairs(fact: BaseFact, difficulty: Difficulty) -> tuple[MatchPair, ...]:
    if difficulty == Difficulty.EASY:
        following, preceding = _neighbouring_articles(fact.source)
        return (
            MatchPair(
                left=fact.source,
                right=fact.content,
                explanation=f"{fact.source} specifically deals with {fact.content}.",
            ),
            MatchPair(
                left=following,
                right="Related constitutional provision",
                explanation=f"{following} covers a different but related constitutional matter.",
            ),
            MatchPair(
                left=preceding,
                right="Preceding constitutional clause",
                explanation=f"{preceding} precedes and contextualizes the main provision.",
            ),
            MatchPair(
                left="Constitutional Part",
                right=fact.topic,
                explanation=(
                    "This provision falls under the constitutional part dealing with "
                    f"{fact.topic}."
                ),
            ),
            MatchPair(
                left="Legal Status",
                right="Enforceable/Non-enforceable",
                explanation="Constitutional provisions have different legal enforceability status.",
            ),
        )
    if difficulty == Difficulty.MEDIUM:
        return (
            MatchPair(
                left=fact.content,
                right="Legislative implementation required",
                explanation=(
                    f"{fact.content} requires enabling legislation for effective implementation."
                ),
            ),
            MatchPair(
                left="Reasonable restrictions",
                right="Balancing individual and state interests",
                explanation=(
                    "Constitutional rights are subject to reasonable restrictions to balance "
                    "competing interests."
                ),
            ),
            MatchPair(
                left="Judicial review",
                right="Constitutional interpretation mechanism",
                explanation=(
                    "Courts interpret and evolve constitutional provisions through judicial review."
                ),
            ),
            MatchPair(
                left="Amendment procedure",
                right="Constitutional modification process",
                explanation="Specific procedures exist for amending constitutional provisions.",
            ),
            MatchPair(
                left="Federal structure",
                right="Distribution of powers",
                explanation=(
                    "Constitutional provisions operate within the federal structure of governance."
                ),
            ),
        )
    return (
        MatchPair(
            left="Constituent Assembly debates",
            right="Original constitutional intent",
            explanation=(
                "Understanding original framers' intent through constituent assembly discussions."
            ),
        ),
        MatchPair(
            left="Comparative constitutional law",
            right="International best practices",
            explanation=(
                "Indian constitutional provisions draw from and compare with global "
                "constitutional traditions."
            ),
        ),
        MatchPair(
            left="Evolving jurisprudence",
            right="Dynamic constitutional interpretation",
            explanation=(
                "Constitutional meaning evolves through continuous judicial interpretation and "
                "societal changes."
            ),
        ),
        MatchPair(
            left="Constitutional philosophy",
            right="Underlying normative framework",
            explanation=(
                "Constitutional provisions reflect deeper philosophical commitments about justice "
                "and governance."
            ),
        ),
        MatchPair(
            left="Contemporary challenges",
            right="Adaptive constitutional response",
            explanation=(
                "Modern constitutional interpretation addresses contemporary social and "
                "technological challenges."
            ),
        ),
    )


class MatchTheFollowingGenerator(QuestionGenerator):
    """Two five-item columns with a shuffled right column. No negative form."""

    question_type = QuestionType.MATCH_THE_FOLLOWING
    name = "MatchTheFollowingGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        stem = rng.choice(stem_patterns(fact, difficulty))
        return self._from_pairs(fact, difficulty, stem, matching_pairs(fact, difficulty), rng)

    def _from_pairs(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        stem: str,
        pairs: tuple[MatchPair, ...],
        rng: random.Random,
    ) -> Question:
        right_column = [pair.right for pair in pairs]
        rng.shuffle(right_column)
        payload = MatchTheFollowingPayload(
            left_column=tuple(pair.left for pair in pairs),
            right_column=tuple(right_column),
            correct_pairs=pairs,
        )
        explanation = build_explanation(
            fact,
            correct_answer="; ".join(f"{pair.left} → {pair.right}" for pair in pairs),
            why_correct=" ".join(pair.explanation for pair in pairs),
            why_others_wrong=[
                "Incorrect matches would show misunderstanding of constitutional relationships "
                "and provisions."
            ],
            concept_clarity=(
                f"Understanding {fact.content} requires recognizing its relationships with other "
                "constitutional elements and their practical implications."
            ),
            mistakes=MATCH_MISTAKES,
        )
        return self.assemble(fact, difficulty, stem, payload, explanation)

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        stem = "Match the following constitutional developments with their chronological periods:"
        return [self._from_pairs(fact, difficulty, stem, TIMELINE_PAIRS, rng)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, MatchTheFollowingPayload):
            issues.append("Missing match the following data")
            return

        if len(payload.left_column) != PAIR_COUNT or len(payload.right_column) != PAIR_COUNT:
            issues.append("Match the following must have exactly 5 items in each column")
            suggestions.append("Ensure both columns have exactly 5 items")

        if len(payload.correct_pairs) != PAIR_COUNT:
            issues.append("Must have exactly 5 correct pairs")
            suggestions.append("Provide exactly 5 matching pairs")

        left_in_pairs = {pair.left for pair in payload.correct_pairs}
        if any(item not in left_in_pairs for item in payload.left_column):
            issues.append("Some left column items have no matching pairs")
            suggestions.append("Ensure all left column items have corresponding pairs")

        right_in_column = set(payload.right_column)
        if any(pair.right not in right_in_column for pair in payload.correct_pairs):
            issues.append("Some pairs reference items missing from the right column")
            suggestions.append("Ensure every pair's right item appears in the right column")

        for index, pair in enumerate(payload.correct_pairs, start=1):
            if not pair.left or not pair.right:
                issues.append(f"Pair {index} has missing items")
            if not pair.explanation:
                issues.append(f"Pair {index} missing explanation")

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, MatchTheFollowingPayload) and (
            has_duplicates(payload.left_column) or has_duplicates(payload.right_column)
        )
