# tests/commands/conftest.py
"""Fixtures for command tests: input files in an isolated working directory."""

import os

import pytest
import yaml

from quizmultiplier.commands import generate


def _write_yaml(path, data):
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return path


@pytest.fixture
def write_yaml():
    """Write a mapping to a YAML file and return its path."""
    return _write_yaml


@pytest.fixture(autouse=True)
def isolated(monkeypatch, temp_dir, clean_env):
    """Run every command test from an empty directory with no QUIZMULT_* variables."""
    monkeypatch.chdir(temp_dir)


@pytest.fixture
def fact_file(temp_dir):
    return _write_yaml(
        os.path.join(temp_dir, "fact.yaml"),
        {
            "id": "fr-21",
            "subject": "Polity",
            "topic": "Fundamental Rights",
            "content": "Right to Life",
            "source": "Article 21",
            "importance": "high",
            "concepts": [
                "fundamental rights",
                "personal liberty",
                "due process",
                "judicial review",
            ],
            "relatedFacts": ["Article 14", "Article 19", "Article 32"],
        },
    )


@pytest.fixture
def geography_fact_file(temp_dir):
    return _write_yaml(
        os.path.join(temp_dir, "geo.yaml"),
        {
            "id": "geo-1",
            "subject": "Geography",
            "topic": "Indian Rivers",
            "content": "The Ganga basin is the largest river basin in India",
            "source": "NCERT Geography",
        },
    )


@pytest.fixture
def questions_file(temp_dir, fact_file):
    path = os.path.join(temp_dir, "out", "questions.json")
    result = generate.generate(fact_file, seed=1, output_path=path)
    assert result.success
    return path
