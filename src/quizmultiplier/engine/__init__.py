# src/quizmultiplier/engine/__init__.py
"""Multiplication engine: orchestration, transforms and deduplication."""

from quizmultiplier.engine.dedup import deduplicate, question_key
from quizmultiplier.engine.multiplication import (
    GenerationJob,
    MultiplicationEngine,
    MultiplicationResult,
)
from quizmultiplier.engine.transforms import (
    RewriteRule,
    create_negative_versions,
    except_version,
    false_statement_version,
    generate_variations,
    not_version,
)

__all__ = [
    "MultiplicationEngine",
    "MultiplicationResult",
    "GenerationJob",
    "deduplicate",
    "question_key",
    "RewriteRule",
    "generate_variations",
    "create_negative_versions",
    "not_version",
    "except_version",
    "false_statement_version",
]
