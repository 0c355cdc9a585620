# src/quizmultiplier/generators/statement_based.py
"""Statement-based questions: judge numbered statements, pick the right combination."""

from __future__ import annotations

import random
from collections.abc import Sequence

from quizmultiplier.generators.base import QuestionGenerator, has_duplicates
from quizmultiplier.generators.exceptions import GenerationError
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    Explanation,
    Question,
    QuestionType,
    Statement,
    StatementBasedPayload,
)

MIN_STATEMENTS = 2
MAX_STATEMENTS = 4

_TWO_STATEMENT_ANSWERS = {
    (1,): "(a) 1 only",
    (2,): "(b) 2 only",
    (1, 2): "(c) Both 1 and 2",
    (): "(d) Neither 1 nor 2",
}
_THREE_STATEMENT_ANSWERS = {
    (1, 2): "(a) 1 and 2 only",
    (2, 3): "(b) 2 and 3 only",
    (1, 3): "(c) 1 and 3 only",
    (1, 2, 3): "(d) All of the above",
}
_THREE_STATEMENT_SINGLE_ANSWERS = {
    (1,): "(a) 1 only",
    (2,): "(b) 2 only",
    (3,): "(c) 3 only",
    (): "(d) None of the above",
}

# Choice lists per statement count, tried in order
_CHOICE_TABLES: dict[int, tuple[dict[tuple[int, ...], str], ...]] = {
    2: (_TWO_STATEMENT_ANSWERS,),
    3: (_THREE_STATEMENT_ANSWERS, _THREE_STATEMENT_SINGLE_ANSWERS),
}

TWO_STATEMENT_CHOICES = "\n".join(_TWO_STATEMENT_ANSWERS.values())
THREE_STATEMENT_CHOICES = "\n".join(_THREE_STATEMENT_ANSWERS.values())
THREE_STATEMENT_SINGLE_CHOICES = "\n".join(_THREE_STATEMENT_SINGLE_ANSWERS.values())
KNOWN_CHOICE_BLOCKS = (
    TWO_STATEMENT_CHOICES,
    THREE_STATEMENT_CHOICES,
    THREE_STATEMENT_SINGLE_CHOICES,
)

STATEMENT_MEMORY_TRICK = (
    "Read each statement independently and verify against constitutional provisions"
)
STATEMENT_MISTAKES = (
    "Not reading statements carefully",
    "Confusing similar constitutional provisions",
    "Making assumptions about constitutional implementation",
)

# (statements, correct combination)
StatementSet = tuple[tuple[Statement, ...], tuple[int, ...]]


def answer_prompt(polarity: str = "correct") -> str:
    return f"Which of the above statements is/are {polarity}?"


def _choice_table(
    combination: Sequence[int], statement_count: int
) -> dict[tuple[int, ...], str]:
    key = tuple(sorted(combination))
    for table in _CHOICE_TABLES.get(statement_count, ()):
        if key in table:
            return table
    raise GenerationError(
        f"No answer choices list statements {key} out of {statement_count}",
        question_type=QuestionType.STATEMENT_BASED,
    )


def answer_option(combination: Sequence[int], statement_count: int) -> str:
    """The lettered answer choice matching a combination.

    Raises:
        GenerationError: No choice list for ``statement_count`` statements
            offers the combination.
    """
    return _choice_table(combination, statement_count)[tuple(sorted(combination))]


def choice_block(combination: Sequence[int], statement_count: int) -> str:
    """The lettered choice lines that include the answer for ``combination``."""
    return "\n".join(_choice_table(combination, statement_count).values())


def stem_patterns(fact: BaseFact, difficulty: Difficulty) -> list[str]:
    content = fact.content
    if difficulty == Difficulty.EASY:
        return [
            f'Consider the following statements about "{content}":',
            f'With reference to "{content}", consider the following:',
            f'Examine the following statements about "{content}":',
            f'Read the following statements regarding "{content}":',
        ]
    if difficulty == Difficulty.MEDIUM:
        concept = fact.concepts[0] if fact.concepts else "governance"
        return [
            f'In the context of {concept}, consider the following statements about "{content}":',
            f'Analyze the following statements regarding "{content}" and its implications:',
            f'With reference to constitutional provisions on "{content}", examine the following:',
            f'Consider the following statements about the implementation of "{content}":',
        ]
    return [
        f'Critically analyze the following statements about "{content}" in contemporary India:',
        f'Consider the evolution of "{content}" through the following statements:',
        f'Evaluate the following statements about "{content}" from a comparative '
        "constitutional perspective:",
        f'Examine the following statements regarding the judicial interpretation of "{content}":',
    ]


def compose_stem(
    pattern: str,
    statement_count: int,
    combination: Sequence[int],
    polarity: str = "correct",
) -> str:
    choices = choice_block(combination, statement_count)
    return f"{pattern}\n{answer_prompt(polarity)}\n{choices}"


def replace_choices(stem: str, combination: Sequence[int], statement_count: int) -> str | None:
    """Swap the trailing choice lines of ``stem`` for ones that offer ``combination``.

    Returns None when the stem does not end in a known choice list, or
    when no choice list offers the combination.
    """
    for block in KNOWN_CHOICE_BLOCKS:
        if stem.endswith(block):
            try:
                choices = choice_block(combination, statement_count)
            except GenerationError:
                return None
            return stem[: -len(block)] + choices
    return None


def _statement(number: int, text: str, is_correct: bool, explanation: str) -> Statement:
    return Statement(number=number, text=text, is_correct=is_correct, explanation=explanation)


def statement_sets(fact: BaseFact, difficulty: Difficulty) -> list[StatementSet]:
    content, source, topic = fact.content, fact.source, fact.topic
    if difficulty == Difficulty.EASY:
        return [
            (
                (
                    _statement(
                        1,
                        f"{source} provides for {content}",
                        True,
                        f"This is correct. {source} specifically establishes {content}.",
                    ),
                    _statement(
                        2,
                        f"{content} is not mentioned in the Indian Constitution",
                        False,
                        f"This is incorrect. {content} is explicitly provided for in {source}.",
                    ),
                ),
                (1,),
            ),
            (
                (
                    _statement(
                        1,
                        f"{content} falls under {topic}",
                        True,
                        f"This is correct. {content} is categorized under {topic}.",
                    ),
                    _statement(
                        2,
                        f"{source} deals with {content}",
                        True,
                        f"This is correct. {source} specifically addresses {content}.",
                    ),
                ),
                (1, 2),
            ),
        ]
    if difficulty == Difficulty.MEDIUM:
        return [
            (
                (
                    _statement(
                        1,
                        f"{content} requires enabling legislation for effective implementation",
                        True,
                        "Most constitutional provisions require legislative framework for "
                        "practical implementation.",
                    ),
                    _statement(
                        2,
                        f"{content} can be enforced directly without any legislation",
                        False,
                        "Constitutional provisions require enabling legislation and cannot be "
                        "directly enforced in all cases.",
                    ),
                ),
                (1,),
            ),
            (
                (
                    _statement(
                        1,
                        f"The scope of {content} has evolved through judicial interpretation",
                        True,
                        "Constitutional provisions evolve through continuous judicial "
                        "interpretation and precedents.",
                    ),
                    _statement(
                        2,
                        f"{content} must be balanced with reasonable restrictions in public "
                        "interest",
                        True,
                        "Constitutional rights and provisions are subject to reasonable "
                        "restrictions for public welfare.",
                    ),
                ),
                (1, 2),
            ),
        ]
    return [
        (
            (
                _statement(
                    1,
                    f"Contemporary interpretation of {content} must consider technological and "
                    "social changes",
                    True,
                    "Constitutional interpretation must adapt to contemporary realities while "
                    "maintaining core principles.",
                ),
                _statement(
                    2,
                    f"{content} represents a synthesis of liberal democratic and social welfare "
                    "principles",
                    True,
                    "Indian constitutional provisions reflect a balance between individual "
                    "freedoms and collective welfare.",
                ),
            ),
            (1, 2),
        ),
        (
            (
                _statement(
                    1,
                    f"The constitutional framers intended {content} to be static and unchanging",
                    False,
                    "The Constitution was designed to be a living document capable of evolution "
                    "and adaptation.",
                ),
                _statement(
                    2,
                    f"{content} reflects influence from comparative constitutional law and "
                    "international best practices",
                    True,
                    "Indian constitutional provisions draw from various global constitutional "
                    "traditions and experiences.",
                ),
            ),
            (2,),
        ),
    ]


def rationale_for_others(
    statements: Sequence[Statement], combination: Sequence[int]
) -> list[str]:
    """Explanations of the statements outside ``combination``.

    When every statement is in ``combination`` a single summary line is
    returned instead.
    """
    chosen = set(combination)
    others = [s.explanation for s in statements if s.number not in chosen]
    if others:
        return others
    return [
        f"All {len(statements)} statements hold, so every choice that leaves one out is wrong."
    ]


def explain_statements(
    fact: BaseFact,
    statements: Sequence[Statement],
    combination: Sequence[int],
) -> Explanation:
    """Explanation for a statement set, where ``combination`` lists the answer statements."""
    chosen = set(combination)
    return build_explanation(
        fact,
        correct_answer=answer_option(combination, len(statements)),
        why_correct=" ".join(s.explanation for s in statements if s.number in chosen),
        why_others_wrong=rationale_for_others(statements, combination),
        concept_clarity=(
            f"Understanding {fact.content} requires careful analysis of its various dimensions "
            "and constitutional context."
        ),
        trick=STATEMENT_MEMORY_TRICK,
        mistakes=STATEMENT_MISTAKES,
    )


class StatementBasedGenerator(QuestionGenerator):
    """Two to four numbered statements with a correct combination."""

    question_type = QuestionType.STATEMENT_BASED
    name = "StatementBasedGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        pattern = rng.choice(stem_patterns(fact, difficulty))
        statements, combination = rng.choice(statement_sets(fact, difficulty))
        return self._from_set(fact, difficulty, pattern, statements, combination)

    def _from_set(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        pattern: str,
        statements: tuple[Statement, ...],
        combination: tuple[int, ...],
        polarity: str = "correct",
    ) -> Question:
        payload = StatementBasedPayload(statements=statements, correct_combination=combination)
        return self.assemble(
            fact,
            difficulty,
            compose_stem(pattern, len(statements), combination, polarity),
            payload,
            explain_statements(fact, statements, combination),
        )

    def build_negatives(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        pattern = rng.choice(stem_patterns(fact, difficulty))
        # Only sets that contain a false statement can be asked in the negative
        candidates = [
            (statements, combination)
            for statements, combination in statement_sets(fact, difficulty)
            if len(combination) < len(statements)
        ]
        if not candidates:
            return []
        statements, combination = rng.choice(candidates)
        incorrect = tuple(s.number for s in statements if s.number not in combination)
        return [self._from_set(fact, difficulty, pattern, statements, incorrect, "incorrect")]

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        pattern = rng.choice(stem_patterns(fact, difficulty))
        statements, combination = rng.choice(statement_sets(fact, difficulty))
        third = _statement(
            3,
            f"{fact.content} can be amended through the constitutional amendment process",
            True,
            "Constitutional provisions can be amended following the procedures laid down in "
            "the Constitution.",
        )
        return [
            self._from_set(
                fact, difficulty, pattern, (*statements, third), (*combination, third.number)
            )
        ]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, StatementBasedPayload):
            issues.append("Missing statement based data")
            return

        statements = payload.statements
        if len(statements) < MIN_STATEMENTS:
            issues.append("Must have at least 2 statements")
            suggestions.append("Provide at least 2 statements for evaluation")

        if len(statements) > MAX_STATEMENTS:
            issues.append("Too many statements (maximum 4 recommended)")
            suggestions.append("Limit to 4 statements for better readability")

        if not payload.correct_combination:
            issues.append("No correct combination specified")
            suggestions.append("Specify which statements are correct")

        expected = list(range(1, len(statements) + 1))
        if sorted(s.number for s in statements) != expected:
            issues.append("Statement numbering is incorrect")
            suggestions.append("Number statements sequentially starting from 1")

        for index, statement in enumerate(statements, start=1):
            if len(statement.text) < 10:
                issues.append(f"Statement {index} is too short")
            if not statement.explanation:
                issues.append(f"Statement {index} missing explanation")

        numbers = {s.number for s in statements}
        if any(number not in numbers for number in payload.correct_combination):
            issues.append("Correct combination references non-existent statements")
            suggestions.append(
                "Ensure correct combination only references existing statement numbers"
            )

    def has_multiple_valid_answers(self, question: Question) -> bool:
        payload = question.payload
        return isinstance(payload, StatementBasedPayload) and has_duplicates(
            s.text for s in payload.statements
        )
