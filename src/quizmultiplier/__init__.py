"""quizmultiplier - rule-based question multiplication.

One authored base fact in, a deduplicated set of exam questions across ten
question archetypes out.

Quick Start:
    from quizmultiplier import BaseFact, generate_questions

    fact = BaseFact(
        id="fr-21",
        subject="Polity",
        topic="Fundamental Rights",
        content="Article 21 guarantees the protection of life and personal liberty",
        source="Article 21",
        importance="high",
        concepts=("Article 21", "right to life"),
    )
    questions = generate_questions(fact)

Reproducible runs and failure reports:
    from quizmultiplier import MultiplicationEngine, Settings

    engine = MultiplicationEngine(settings=Settings(seed=42))
    result = engine.multiply_with_report(fact)
    result.questions, result.failures
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("quizmultiplier")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except Exception:
        __version__ = "unknown"

from quizmultiplier.analysis import DifficultyCalculator, PatternAnalyzer, score_questions
from quizmultiplier.config import create_engine, load_policy
from quizmultiplier.engine import MultiplicationEngine, MultiplicationResult, deduplicate
from quizmultiplier.generators import (
    ConfigurationError,
    GenerationError,
    GenerationFailure,
    PolicyError,
    QuestionGenerator,
    QuizMultiplierError,
    UnsupportedQuestionTypeError,
    create_generators,
    get_generator,
)
from quizmultiplier.log import setup_logging
from quizmultiplier.models import (
    BaseFact,
    Difficulty,
    Explanation,
    GenerationConfig,
    Question,
    QuestionMetadata,
    QuestionType,
    ValidationResult,
)
from quizmultiplier.policy import GenerationPolicy
from quizmultiplier.settings import Settings


def generate_questions(
    fact: BaseFact,
    settings: Settings | None = None,
    policy: GenerationPolicy | None = None,
) -> list[Question]:
    """Multiply ``fact`` into its full question set with a default engine."""
    return MultiplicationEngine(policy=policy, settings=settings).multiply_from_base_fact(fact)


def validate_question(
    question: Question, policy: GenerationPolicy | None = None
) -> ValidationResult:
    """Validate ``question`` with the generator for its type."""
    return get_generator(question.type, policy).validate_question(question)


__all__ = [
    "__version__",
    # Entry points
    "generate_questions",
    "validate_question",
    "MultiplicationEngine",
    "MultiplicationResult",
    "create_engine",
    "deduplicate",
    # Models
    "BaseFact",
    "Question",
    "QuestionType",
    "Difficulty",
    "Explanation",
    "QuestionMetadata",
    "GenerationConfig",
    "ValidationResult",
    # Generators
    "QuestionGenerator",
    "create_generators",
    "get_generator",
    # Configuration
    "GenerationPolicy",
    "Settings",
    "load_policy",
    "setup_logging",
    # Analysis
    "DifficultyCalculator",
    "PatternAnalyzer",
    "score_questions",
    # Errors
    "QuizMultiplierError",
    "GenerationError",
    "ConfigurationError",
    "UnsupportedQuestionTypeError",
    "PolicyError",
    "GenerationFailure",
]
