# src/quizmultiplier/generators/case_study.py
"""Case study questions: a passage followed by one to three sub-questions.

Sub-questions are complete ``Question`` objects of other types, authored
with the passage, so they carry their own payload, explanation, timing and
curated quality metadata.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from quizmultiplier.generators.assertion_reasoning import RELATION_OPTIONS, format_stem
from quizmultiplier.generators.base import OptionSpec, QuestionGenerator, build_options
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    AssertionReasoningPayload,
    BaseFact,
    CaseStudyPayload,
    Difficulty,
    Explanation,
    MultipleCorrectPayload,
    Question,
    QuestionMetadata,
    QuestionPayload,
    QuestionType,
    SingleCorrectPayload,
)

MIN_PASSAGE_CHARS = 100
MIN_PASSAGE_WORDS = 50
MAX_SUB_QUESTIONS = 3
LEGAL_KEYWORDS = ("constitutional", "legal", "court")

CASE_STUDY_MISTAKES = (
    "Not reading the case study carefully",
    "Missing interconnections between different constitutional provisions",
    "Applying theoretical knowledge without considering practical context",
)

ADMIN_PASSAGE = (
    "A government officer was dismissed from service without following proper procedures. "
    "The dismissal order cited misconduct but did not provide specific charges or an "
    "opportunity for hearing. The officer challenges the dismissal on grounds of violation "
    "of natural justice principles enshrined in constitutional law.\n"
    "The department contends that the misconduct was evident on the record and that a "
    "hearing would have served no purpose. The officer asks the court to set aside the "
    "order and direct reinstatement with back wages."
)


def sub_question(
    fact: BaseFact,
    question_type: QuestionType,
    difficulty: Difficulty,
    question_text: str,
    payload: QuestionPayload,
    time_to_solve: int,
    marks: int,
    concepts: Sequence[str],
    explanation: Explanation,
    tags: Sequence[str],
    quality: tuple[int, int],
    topic: str | None = None,
) -> Question:
    """A curated sub-question tied to ``fact``.

    ``quality`` is the editorial (quality_score, pyq_similarity) pair.
    """
    quality_score, pyq_similarity = quality
    return Question(
        type=question_type,
        question_text=question_text,
        payload=payload,
        difficulty=difficulty,
        subject=fact.subject,
        topic=topic or fact.topic,
        base_fact_id=fact.id,
        time_to_solve=time_to_solve,
        marks=marks,
        concepts_tested=tuple(concepts),
        explanation=explanation,
        metadata=QuestionMetadata(
            quality_score=quality_score,
            pyq_similarity=pyq_similarity,
            high_yield_topic=True,
            difficulty_validated=True,
        ),
        tags=tuple(tags),
    )


def _single(specs: Sequence[OptionSpec]) -> SingleCorrectPayload:
    return SingleCorrectPayload(options=build_options(specs))


def _easy_case(fact: BaseFact) -> tuple[str, list[Question]]:
    passage = (
        "Ram, a citizen of India, was denied admission to a government medical college despite "
        "scoring higher marks than some students who were admitted. The college authorities "
        "cited a reservation policy that allocated seats based on social categories. Ram argues "
        f"that this violates his right to equality under {fact.source}.\n"
        "The college maintains that the reservation policy is constitutionally valid and serves "
        "the constitutional goal of social justice. Ram approaches the court seeking admission "
        "and challenging the reservation policy."
    )
    question = sub_question(
        fact,
        QuestionType.SINGLE_CORRECT_MCQ,
        Difficulty.EASY,
        "Which constitutional right is primarily involved in this case?",
        _single(
            [
                ("Right to Equality", True, "This case involves Article 14 - Right to Equality"),
                (
                    "Right to Education",
                    False,
                    "While education is involved, the primary issue is equality",
                ),
                ("Right to Life", False, "This is not about life and liberty"),
                ("Right to Freedom", False, "The issue is not about freedom but equality"),
            ]
        ),
        time_to_solve=60,
        marks=2,
        concepts=("Right to Equality", "Reservation Policy"),
        explanation=Explanation(
            correct_answer="Right to Equality",
            why_correct=(
                "The case involves discrimination in admission based on social categories, "
                "which is primarily a matter of Article 14"
            ),
            why_others_wrong=("Other rights are not the primary issue in this case",),
            concept_clarity=(
                "Understanding the application of equality principle in reservation policies"
            ),
            memory_trick="Equal treatment cases always involve Article 14",
            common_mistakes=("Confusing with Right to Education",),
            related_pyqs=("2022 Prelims - Reservation in promotion",),
        ),
        tags=("constitutional law", "case study", "equality"),
        quality=(85, 75),
    )
    return passage, [question]


def _medium_case(fact: BaseFact) -> tuple[str, list[Question]]:
    passage = (
        "A state government passed a law requiring all private schools to reserve 25% seats for "
        "economically weaker sections and provide free education to these students. Several "
        "private school associations challenged this law in court arguing that it violates their "
        "constitutional right to manage educational institutions.\n"
        "The government defended the law stating that education is a public function and such "
        "regulation is necessary for achieving the directive principle of free and compulsory "
        "education. The schools argue that forcing them to provide free education amounts to "
        "taking of property without compensation.\n"
        f"The matter involves interpretation of {fact.source} and its relationship with property "
        "rights and educational rights."
    )
    question = sub_question(
        fact,
        QuestionType.MULTIPLE_CORRECT_MCQ,
        Difficulty.MEDIUM,
        "Which constitutional provisions are relevant to this case?",
        MultipleCorrectPayload(
            options=build_options(
                [
                    (
                        "Article 19(1)(g) - Right to practice profession",
                        True,
                        "Running schools is a profession/business",
                    ),
                    (
                        "Article 21A - Right to Education",
                        True,
                        "The case involves educational rights",
                    ),
                    (
                        "Article 300A - Right to Property",
                        True,
                        "Schools claim property rights violation",
                    ),
                    (
                        "Article 32 - Constitutional Remedies",
                        False,
                        "This is the remedy provision, not the substantive right",
                    ),
                ]
            ),
            correct_count=3,
        ),
        time_to_solve=90,
        marks=3,
        concepts=("Educational Rights", "Property Rights", "Professional Freedom"),
        explanation=Explanation(
            correct_answer="Articles 19(1)(g), 21A, and 300A",
            why_correct="All three provisions are directly relevant to the case",
            why_others_wrong=("Article 32 is procedural, not substantive",),
            concept_clarity="Understanding intersection of multiple constitutional rights",
            memory_trick="Education cases involve multiple rights: profession, education, property",
            common_mistakes=("Confusing procedural with substantive rights",),
            related_pyqs=("2021 Mains - Private school regulation",),
        ),
        tags=("constitutional law", "education", "multiple rights"),
        quality=(88, 80),
    )
    return passage, [question]


def _hard_case(fact: BaseFact) -> tuple[str, list[Question]]:
    passage = (
        "In a landmark constitutional case, the Supreme Court was faced with determining whether "
        "certain traditional practices of a religious community could be regulated by the state "
        "when they allegedly violated principles of gender equality and human dignity.\n"
        "The religious community argued that Article 25 protects their right to practice "
        "religion according to their beliefs and that state interference would violate "
        "religious autonomy. Women's rights groups contended that these practices violated "
        "Articles 14, 15, and 21, and that religious freedom cannot override fundamental "
        "rights.\n"
        "The state government supported regulation, citing its duty under Article 15(3) to make "
        "special provisions for women and children. The case required the court to balance "
        "religious freedom with gender equality, considering the relationship between "
        f"{fact.source} and other constitutional provisions.\n"
        "The court also had to consider whether the practices were essential to religion, the "
        "scope of state intervention in religious matters, and the evolution of constitutional "
        "interpretation in light of changing social values."
    )
    assertion = "Religious practices that violate gender equality can be regulated by the state"
    reason = (
        "Fundamental rights are hierarchical with equality rights taking precedence over "
        "religious freedom"
    )
    question = sub_question(
        fact,
        QuestionType.ASSERTION_REASONING,
        Difficulty.HARD,
        format_stem(assertion, reason),
        AssertionReasoningPayload(
            assertion=assertion,
            reason=reason,
            correct_relation="assertion-true-reason-false",
        ),
        time_to_solve=120,
        marks=4,
        concepts=("Religious Freedom", "Gender Equality", "Constitutional Balance"),
        explanation=Explanation(
            correct_answer=RELATION_OPTIONS["assertion-true-reason-false"],
            why_correct=(
                "The assertion is true as the state can regulate discriminatory practices, but "
                "the reason is false as fundamental rights are not hierarchical"
            ),
            why_others_wrong=("Rights are not hierarchical but require balancing",),
            concept_clarity=(
                "Understanding the non-hierarchical nature of fundamental rights and need for "
                "balancing"
            ),
            memory_trick="Rights require balancing, not hierarchy",
            common_mistakes=("Assuming hierarchy among fundamental rights",),
            related_pyqs=("2018 Mains - Religious freedom vs equality",),
        ),
        tags=("constitutional law", "religious freedom", "gender equality", "balancing"),
        quality=(92, 85),
    )
    return passage, [question]


def _admin_case(fact: BaseFact) -> tuple[str, list[Question]]:
    question = sub_question(
        fact,
        QuestionType.SINGLE_CORRECT_MCQ,
        Difficulty.MEDIUM,
        "Which principle of natural justice is primarily violated?",
        _single(
            [
                (
                    "Audi alteram partem (Right to be heard)",
                    True,
                    "No opportunity for hearing was provided",
                ),
                ("Nemo judex in causa sua", False, "This relates to bias, not hearing"),
                (
                    "Due process",
                    False,
                    "While related, the specific violation is right to hearing",
                ),
                (
                    "Reasoned decision",
                    False,
                    "The primary issue is lack of hearing opportunity",
                ),
            ]
        ),
        time_to_solve=60,
        marks=2,
        concepts=("Natural Justice", "Administrative Action"),
        explanation=Explanation(
            correct_answer="Audi alteram partem (Right to be heard)",
            why_correct="The officer was not given opportunity to defend against charges",
            why_others_wrong=("Other principles not directly violated in this case",),
            concept_clarity="Understanding natural justice principles in administrative action",
            memory_trick="Audi alteram partem = hear the other side",
            common_mistakes=("Confusing different principles of natural justice",),
            related_pyqs=("2020 Mains - Natural justice in administration",),
        ),
        tags=("administrative law", "natural justice", "case study"),
        quality=(87, 78),
        topic="Administrative Law",
    )
    return ADMIN_PASSAGE, [question]


CASE_BUILDERS = {
    Difficulty.EASY: (_easy_case,),
    Difficulty.MEDIUM: (_medium_case,),
    Difficulty.HARD: (_hard_case,),
}


class CaseStudyBasedGenerator(QuestionGenerator):
    """A realistic legal scenario with embedded sub-questions."""

    question_type = QuestionType.CASE_STUDY_BASED
    name = "CaseStudyBasedGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        passage, questions = rng.choice(CASE_BUILDERS[difficulty])(fact)
        return self._from_case(fact, difficulty, passage, questions)

    def _from_case(
        self,
        fact: BaseFact,
        difficulty: Difficulty,
        passage: str,
        questions: Sequence[Question],
    ) -> Question:
        stem = (
            f"Read the following case study on {fact.topic} carefully and answer the "
            "questions that follow:"
        )
        explanation = build_explanation(
            fact,
            correct_answer="See individual sub-question answers",
            why_correct=(
                "Case study approach tests practical application of constitutional principles"
            ),
            why_others_wrong=["Alternative approaches may miss practical complexities"],
            concept_clarity=(
                f"This case study illustrates the practical application of {fact.content} in "
                "real-world scenarios, showing how constitutional principles interact with "
                "social issues."
            ),
            trick=(
                "Case studies require identifying key constitutional provisions and their "
                "interactions"
            ),
            mistakes=CASE_STUDY_MISTAKES,
        )
        payload = CaseStudyPayload(passage=passage, questions=tuple(questions))
        return self.assemble(fact, difficulty, stem, payload, explanation)

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        passage, questions = _admin_case(fact)
        return [self._from_case(fact, difficulty, passage, questions)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, CaseStudyPayload):
            issues.append("Missing case study data")
            return

        if len(payload.passage) < MIN_PASSAGE_CHARS:
            issues.append("Case study passage too short")
            suggestions.append("Provide a detailed case study passage (minimum 100 characters)")

        if not payload.questions:
            issues.append("No sub-questions provided")
            suggestions.append("Include at least 1-2 sub-questions based on the case study")

        if len(payload.questions) > MAX_SUB_QUESTIONS:
            issues.append("Too many sub-questions")
            suggestions.append("Limit to 2-3 sub-questions for better focus")

        for index, sub in enumerate(payload.questions, start=1):
            if not sub.question_text:
                issues.append(f"Sub-question {index} missing question text")
            if not sub.explanation.correct_answer:
                issues.append(f"Sub-question {index} missing explanation")

        if len(payload.passage.split()) < MIN_PASSAGE_WORDS:
            issues.append("Case study passage should be more detailed")
            suggestions.append("Expand the case study to provide sufficient context")

        if not any(keyword in payload.passage for keyword in LEGAL_KEYWORDS):
            issues.append("Case study should be legally realistic")
            suggestions.append("Ensure the case study reflects realistic legal scenarios")
