#!/usr/bin/env python3
"""
Unit tests for the default response picker
"""

import random
from collections import Counter

import pytest

from responder.picker import DefaultResponsePicker


class ScriptedRandom:
    """Deterministic random source returning preset indices."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.indices.pop(0)


class TestDefaultResponsePicker:
    """Test uniform selection over default responses."""

    def test_uses_injected_source(self):
        rng = ScriptedRandom([2, 0, 1])
        picker = DefaultResponsePicker(["a", "b", "c"], rng)

        assert [picker.pick() for _ in range(3)] == ["c", "a", "b"]
        assert rng.stops == [3, 3, 3]

    def test_always_returns_member(self):
        responses = ["one\n", "two\n", "three\n"]
        picker = DefaultResponsePicker(responses, random.Random(7))

        for _ in range(1000):
            assert picker.pick() in responses

    def test_uniform_distribution(self):
        responses = ["a", "b", "c", "d"]
        picker = DefaultResponsePicker(responses, random.Random(1234))

        counts = Counter(picker.pick() for _ in range(10000))

        assert set(counts) == set(responses)
        for value in responses:
            assert 2200 < counts[value] < 2800

    def test_single_response(self):
        picker = DefaultResponsePicker(["only"])

        assert picker.pick() == "only"

    def test_empty_list_rejected(self):
        with pytest.raises(ValueError):
            DefaultResponsePicker([])

    def test_responses_snapshot_is_immutable(self):
        source = ["a"]
        picker = DefaultResponsePicker(source)
        source.append("b")

        assert picker.responses == ("a",)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
