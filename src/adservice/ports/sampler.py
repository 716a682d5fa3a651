"""Port: sampling strategy for the random fallback."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class AdSampler(Protocol):
    """Pick ``count`` distinct items from ``population`` without replacement."""

    def sample(self, population: Sequence[T], count: int) -> list[T]: ...


# ---------------------------------------------------------------------------
# Default implementation (pure stdlib, no infra deps)
# ---------------------------------------------------------------------------


class RandomAdSampler:
    """Uses ``random.Random.sample``; pass a seed for reproducible output."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def sample(self, population: Sequence[T], count: int) -> list[T]:
        count = max(0, min(count, len(population)))
        return self._rng.sample(list(population), count)
