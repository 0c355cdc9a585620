# tests/conftest.py
"""Shared pytest fixtures."""

import os
import random
import tempfile

import pytest

from quizmultiplier.models import ALL_DIFFICULTIES, BaseFact, GenerationConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for input and output files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def clean_env(monkeypatch):
    """Remove QUIZMULT_* variables so tests see only what they set."""
    for key in list(os.environ):
        if key.startswith("QUIZMULT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def polity_fact() -> BaseFact:
    """A high-importance Polity fact with 4 concepts and 3 related facts."""
    return BaseFact(
        id="fr-21",
        subject="Polity",
        topic="Fundamental Rights",
        content="Right to Life",
        source="Article 21",
        importance="high",
        concepts=("fundamental rights", "personal liberty", "due process", "judicial review"),
        related_facts=("Article 14", "Article 19", "Article 32"),
        tags=("prelims",),
    )


@pytest.fixture
def geography_fact() -> BaseFact:
    return BaseFact(
        id="geo-1",
        subject="Geography",
        topic="Indian Rivers",
        content="The Ganga basin is the largest river basin in India",
        source="NCERT Geography",
        importance="medium",
        concepts=("river systems",),
    )


@pytest.fixture
def history_fact() -> BaseFact:
    return BaseFact(
        id="hist-1",
        subject="History",
        topic="Constitutional History",
        content="The Constituent Assembly adopted the Constitution in 1949",
        source="Constituent Assembly Debates",
        importance="low",
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible template sampling."""
    return random.Random(1234)


@pytest.fixture
def make_config(polity_fact):
    """Build a GenerationConfig for one question type."""

    def _make(question_type, fact=None, **kwargs):
        kwargs.setdefault("difficulties", ALL_DIFFICULTIES)
        return GenerationConfig(
            base_fact=fact or polity_fact,
            question_types=(question_type,),
            **kwargs,
        )

    return _make
