# tests/generators/test_registry.py
"""Tests for the generator registry."""

import random

from quizmultiplier.generators import GENERATOR_CLASSES, create_generators, get_generator
from quizmultiplier.models import QuestionType
from quizmultiplier.policy import GenerationPolicy


class TestRegistry:
    def test_every_type_registered(self):
        assert set(GENERATOR_CLASSES) == set(QuestionType)

    def test_registered_class_generates_its_type(self):
        for question_type, cls in GENERATOR_CLASSES.items():
            assert cls.question_type == question_type

    def test_get_generator_passes_policy_and_rng(self):
        policy = GenerationPolicy(max_factor=12)
        rng = random.Random(1)
        generator = get_generator(QuestionType.ODD_ONE_OUT, policy, rng)

        assert generator.get_supported_types() == [QuestionType.ODD_ONE_OUT]
        assert generator.policy is policy
        assert generator.rng is rng

    def test_create_generators_shares_policy(self):
        policy = GenerationPolicy()
        generators = create_generators(policy)

        assert list(generators) == list(QuestionType)
        assert all(generator.policy is policy for generator in generators.values())
