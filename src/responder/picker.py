"""Uniform random choice over default responses."""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence, Tuple


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


class DefaultResponsePicker:
    def __init__(self, responses: Sequence[str], rng: Optional[RandomSource] = None) -> None:
        if not responses:
            raise ValueError("default response list must not be empty")
        self._responses: Tuple[str, ...] = tuple(responses)
        self._rng = rng if rng is not None else random.Random()

    @property
    def responses(self) -> Tuple[str, ...]:
        return self._responses

    def pick(self) -> str:
        index = self._rng.randrange(len(self._responses))
        return self._responses[index]
