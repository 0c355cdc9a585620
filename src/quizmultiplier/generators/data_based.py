# src/quizmultiplier/generators/data_based.py
"""Data interpretation questions over a tabular data source."""

from __future__ import annotations

import random
import re

from quizmultiplier.generators.base import OptionSpec, QuestionGenerator, build_options
from quizmultiplier.generators.explanations import build_explanation
from quizmultiplier.models import (
    BaseFact,
    DataBasedPayload,
    Difficulty,
    Explanation,
    Question,
    QuestionOption,
    QuestionType,
)

OPTION_COUNT = 4
MIN_SOURCE_CHARS = 100
MIN_OPTION_CHARS = 10
STEM = "Study the following data and answer the question:"

_DIGITS = re.compile(r"\d+")
DATA_INDICATORS = ("table", "chart", "graph", "data", "statistics", "figures", "%", "year", "trend")
CONSTITUTIONAL_KEYWORDS = (
    "constitutional",
    "court",
    "rights",
    "amendment",
    "judicial",
    "governance",
    "legal",
    "article",
)

DATA_MISTAKES = (
    "Misreading data values or trends",
    "Confusing correlation with causation",
    "Ignoring contextual factors affecting data",
    "Not considering temporal changes in constitutional practice",
)

# (data source, interpretation question, options)
DataSet = tuple[str, str, tuple[OptionSpec, ...]]

DATA_SETS: dict[Difficulty, tuple[DataSet, ...]] = {
    Difficulty.EASY: (
        (
            "Constitutional Amendment Frequency (1950-2020)\n"
            "Table: amendments passed per decade\n"
            "Decade | Number of Amendments\n"
            "1950-60 | 3\n"
            "1960-70 | 8\n"
            "1970-80 | 14\n"
            "1980-90 | 7\n"
            "1990-00 | 6\n"
            "2000-10 | 5\n"
            "2010-20 | 4\n"
            "Total Amendments: 47 (till 2020)",
            "Based on the data above, which decade saw the highest constitutional amendment "
            "activity?",
            (
                (
                    "The decade 1970-80",
                    True,
                    "The 1970-80 decade had 14 amendments, the highest among all decades shown.",
                ),
                (
                    "The decade 1960-70",
                    False,
                    "This decade had 8 amendments, which is high but not the highest.",
                ),
                (
                    "The decade 1980-90",
                    False,
                    "This decade had 7 amendments, fewer than the 1970s.",
                ),
                (
                    "The decade 1950-60",
                    False,
                    "This decade had only 3 amendments, the lowest in the early decades.",
                ),
            ),
        ),
    ),
    Difficulty.MEDIUM: (
        (
            "Supreme Court Case Load Analysis (2015-2020)\n"
            "Year | Cases Filed | Cases Disposed | Pendency Rate (%)\n"
            "2015 | 65,543 | 62,847 | 15.2\n"
            "2016 | 68,291 | 64,156 | 18.7\n"
            "2017 | 71,875 | 67,234 | 22.1\n"
            "2018 | 74,562 | 69,845 | 25.8\n"
            "2019 | 77,156 | 71,923 | 28.4\n"
            "2020 | 58,743 | 64,187 | 24.9\n"
            "Note: 2020 figures affected by COVID-19 restrictions",
            "Which inference can be drawn from the Supreme Court data trends (2015-2019)?",
            (
                (
                    "Case filing increased while disposal efficiency decreased",
                    True,
                    "Cases filed increased from 65,543 to 77,156, but pendency rate increased "
                    "from 15.2% to 28.4%.",
                ),
                (
                    "Both case filing and disposal rates remained constant",
                    False,
                    "The data shows clear increasing trends in both filing and pendency.",
                ),
                (
                    "Case disposal improved significantly over the period",
                    False,
                    "While disposal numbers increased, the pendency rate also increased.",
                ),
                (
                    "The Supreme Court reduced its case load effectively",
                    False,
                    "The increasing pendency rate indicates the opposite trend.",
                ),
            ),
        ),
    ),
    Difficulty.HARD: (
        (
            "Constitutional Rights Litigation Patterns (2010-2020)\n"
            "Right Category | Cases (2010) | Cases (2020) | Change (%) | Success Rate (2020)\n"
            "Equality | 1,247 | 2,156 | +72.9 | 34.2%\n"
            "Freedom | 856 | 1,923 | +124.6 | 28.7%\n"
            "Life & Liberty | 2,134 | 4,567 | +114.0 | 45.6%\n"
            "Religion | 234 | 445 | +90.2 | 22.1%\n"
            "Education | 345 | 1,234 | +257.7 | 67.8%\n"
            "Property | 567 | 423 | -25.4 | 18.9%\n"
            'Judicial Observation: "Digital age has transformed the nature and volume of '
            "rights-based litigation, with educational rights showing unprecedented growth due "
            'to technological barriers during pandemic."',
            "What does the comprehensive data analysis reveal about constitutional rights "
            "litigation evolution?",
            (
                (
                    "Educational rights litigation growth reflects societal transformation and "
                    "has highest success rate",
                    True,
                    "Education shows 257.7% growth (highest) and 67.8% success rate (highest), "
                    "reflecting digital divide issues.",
                ),
                (
                    "Property rights litigation increased due to economic development",
                    False,
                    "Property rights litigation actually decreased by 25.4%.",
                ),
                (
                    "All constitutional rights show uniform litigation growth patterns",
                    False,
                    "Growth rates vary significantly, from -25.4% to +257.7%.",
                ),
                (
                    "Religious freedom cases have the highest success rate",
                    False,
                    "Religious freedom has 22.1% success rate, while education has 67.8%.",
                ),
            ),
        ),
    ),
}

COMPARATIVE_DATA_SET: DataSet = (
    "Comparative Constitutional Court Performance (Annual Averages 2018-2020)\n"
    "Country | Cases Filed (000s) | Disposal Rate (%) | Average Hearing Time (months)\n"
    "India (SC) | 71.2 | 74.3 | 8.4\n"
    "USA (SCOTUS) | 0.07 | 98.2 | 12.1\n"
    "UK (UKSC) | 0.09 | 96.7 | 9.2\n"
    "Germany (BCC) | 6.2 | 89.4 | 14.6\n"
    "Canada (SCC) | 0.08 | 95.1 | 11.3\n"
    "Note: Indian figures reflect higher case load due to broader jurisdiction",
    "What does the comparative analysis reveal about the Indian Supreme Court?",
    (
        (
            "Handles significantly higher case volume but with lower disposal efficiency",
            True,
            "India handles 71,200 cases vs others handling less than 6,200, but has 74.3% "
            "disposal rate compared to 89-98% for others.",
        ),
        (
            "Has the most efficient case disposal system globally",
            False,
            "India has the lowest disposal rate at 74.3% among the countries listed.",
        ),
        (
            "Takes the longest time for case hearings",
            False,
            "India takes 8.4 months, which is actually the shortest among all countries.",
        ),
        (
            "Operates with similar case loads as other supreme courts",
            False,
            "India's case load is dramatically higher than other supreme courts.",
        ),
    ),
)


def has_numerical_data(data_source: str) -> bool:
    return bool(_DIGITS.search(data_source))


class DataBasedGenerator(QuestionGenerator):
    """Interpret a data table; exactly one of four inferences holds."""

    question_type = QuestionType.DATA_BASED
    name = "DataBasedGenerator"

    def build_question(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> Question:
        return self._from_set(fact, difficulty, rng.choice(DATA_SETS[difficulty]), rng)

    def _from_set(
        self, fact: BaseFact, difficulty: Difficulty, data_set: DataSet, rng: random.Random
    ) -> Question:
        data_source, interpretation, specs = data_set
        options = build_options(specs, rng)
        stem = f"{STEM}\n{interpretation}"
        payload = DataBasedPayload(
            data_source=data_source, interpretation_question=interpretation, options=options
        )
        return self.assemble(fact, difficulty, stem, payload, self._explain(fact, options))

    @staticmethod
    def _explain(fact: BaseFact, options: tuple[QuestionOption, ...]) -> Explanation:
        correct = next(option for option in options if option.is_correct)
        return build_explanation(
            fact,
            correct_answer=correct.text,
            why_correct=correct.explanation,
            why_others_wrong=[option.explanation for option in options if not option.is_correct],
            concept_clarity=(
                "Data interpretation in constitutional studies requires careful analysis of "
                "trends, patterns, and their underlying causes. Understanding quantitative "
                "aspects helps in evidence-based constitutional analysis."
            ),
            trick="Always look for trends, patterns, and exceptions in constitutional data",
            mistakes=DATA_MISTAKES,
        )

    def build_variations(
        self, fact: BaseFact, difficulty: Difficulty, rng: random.Random
    ) -> list[Question]:
        return [self._from_set(fact, difficulty, COMPARATIVE_DATA_SET, rng)]

    def validate_by_type(
        self, question: Question, issues: list[str], suggestions: list[str]
    ) -> None:
        payload = question.payload
        if not isinstance(payload, DataBasedPayload):
            issues.append("Missing data based question data")
            return

        source = payload.data_source
        if len(source) < MIN_SOURCE_CHARS:
            issues.append("Data source too brief")
            suggestions.append(
                "Provide comprehensive data with tables, charts, or detailed statistics"
            )

        if not payload.interpretation_question:
            issues.append("Missing interpretation question")
            suggestions.append("Include a specific question asking for data interpretation")

        if len(payload.options) != OPTION_COUNT:
            issues.append("Must have exactly 4 interpretation options")
            suggestions.append("Provide 4 different interpretation choices")

        if not has_numerical_data(source):
            issues.append("Data source should contain numerical data")
            suggestions.append("Include tables, statistics, or quantitative information")

        lowered = source.lower()
        if not any(indicator in lowered for indicator in DATA_INDICATORS):
            issues.append("Data source should clearly present structured data")
            suggestions.append("Format data as tables or clearly structured information")

        if sum(1 for option in payload.options if option.is_correct) != 1:
            issues.append("Must have exactly one correct interpretation")
            suggestions.append("Ensure only one option is marked as correct")

        for index, option in enumerate(payload.options, start=1):
            if len(option.text) < MIN_OPTION_CHARS:
                issues.append(f"Option {index} is too short")
            if not option.explanation:
                issues.append(f"Option {index} missing explanation")

        question_lowered = payload.interpretation_question.lower()
        if not any(
            keyword in lowered or keyword in question_lowered
            for keyword in CONSTITUTIONAL_KEYWORDS
        ):
            issues.append("Data should be constitutionally relevant")
            suggestions.append(
                "Ensure data relates to constitutional institutions, rights, or governance"
            )
