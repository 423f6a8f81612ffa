"""Random source shared by every component that needs a draw.

Only two things in the simulation are random: which event template is picked
and whether a new event fires after a day advance.  Both go through an object
exposing ``random()`` so tests can hand in a scripted sequence instead of a
seeded :class:`random.Random`.
"""

from __future__ import annotations

from hashlib import sha256
import random
from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:
        ...


def _seed_int(*parts: object) -> int:
    blob = ":".join(str(part) for part in parts)
    return int(sha256(blob.encode("utf-8")).hexdigest(), 16) % (2**32)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a :class:`random.Random`, seeded when ``seed`` is given."""

    return random.Random(seed)


def derived_rng(*parts: object) -> random.Random:
    """Return a generator whose seed is a stable hash of ``parts``."""

    return random.Random(_seed_int(*parts))


def pick_uniform(rng: RandomSource, items: Sequence[T]) -> T:
    """Pick one element of ``items`` with a single uniform draw."""

    if not items:
        raise ValueError("cannot pick from an empty sequence")
    index = int(rng.random() * len(items))
    # guards against a source returning exactly 1.0
    return items[min(index, len(items) - 1)]


class SequenceRandom:
    """Replays a fixed list of draws, cycling when exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values: List[float] = [float(v) for v in values]
        if not self.values:
            raise ValueError("SequenceRandom needs at least one value")
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


__all__ = ["RandomSource", "SequenceRandom", "derived_rng", "make_rng", "pick_uniform"]
