# src/quizmultiplier/models/base_fact.py
"""BaseFact data model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Importance = Literal["low", "medium", "high"]


class BaseFact(BaseModel):
    """An authored factual statement that questions are generated from.

    Base facts are read-only input supplied by an editorial pipeline. The
    engine never mutates one; contextual reframings are new instances
    built with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    subject: str
    topic: str
    content: str
    source: str  # Citation, e.g. "Article 21"
    importance: Importance = "medium"
    concepts: tuple[str, ...] = Field(default_factory=tuple)
    related_facts: tuple[str, ...] = Field(default_factory=tuple)
    tags: tuple[str, ...] = Field(default_factory=tuple)

    def primary_concept(self) -> str:
        """First listed concept, falling back to the topic."""
        return self.concepts[0] if self.concepts else self.topic
