# src/quizmultiplier/commands/files.py
"""Reading base facts and question sets from disk, and writing them back."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import TypeAdapter, ValidationError

from quizmultiplier.models import BaseFact, Question

_QUESTION_LIST = TypeAdapter(list[Question])


class InputFileError(Exception):
    """Raised when an input file is missing, unreadable or malformed."""


def _read_structured(path: Path) -> Any:
    if not path.exists():
        raise InputFileError(f"File not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputFileError(f"Cannot read {path}: {e}") from e
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        # YAML is a superset of JSON, so anything else goes through the YAML parser
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputFileError(f"Cannot parse {path}: {e}") from e


def load_fact(path: str | Path) -> BaseFact:
    """Load a single BaseFact from a YAML or JSON file.

    Keys may be camelCase (``relatedFacts``) or snake_case (``related_facts``).

    Raises:
        InputFileError: If the file is missing, unparseable or not a valid fact
    """
    path = Path(path)
    data = _read_structured(path)
    if not isinstance(data, dict):
        raise InputFileError(f"{path} must contain a single base fact mapping")
    try:
        return BaseFact.model_validate(data)
    except ValidationError as e:
        raise InputFileError(f"Invalid base fact in {path}: {e}") from e


def load_questions(path: str | Path) -> list[Question]:
    """Load a JSON (or YAML) list of questions.

    Raises:
        InputFileError: If the file is missing, unparseable or holds invalid questions
    """
    path = Path(path)
    data = _read_structured(path)
    if not isinstance(data, list):
        raise InputFileError(f"{path} must contain a list of questions")
    try:
        return _QUESTION_LIST.validate_python(data)
    except ValidationError as e:
        raise InputFileError(f"Invalid questions in {path}: {e}") from e


def dump_questions(questions: Sequence[Question]) -> str:
    """Serialize questions to a camelCase JSON array."""
    return _QUESTION_LIST.dump_json(list(questions), by_alias=True, indent=2).decode("utf-8")


def write_questions(questions: Sequence[Question], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_questions(questions) + "\n", encoding="utf-8")
    return path
