"""Pluggable sources of uniform randomness for shuffles, draws and spins."""

from abc import ABC, abstractmethod
from random import Random
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """
    Uniform random draws used by every game.

    Engines receive a single source at construction, so a seeded source
    makes whole rounds reproducible.
    """

    @abstractmethod
    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a new list holding a uniform permutation of ``items``."""
        ...

    @abstractmethod
    def draw_uniform(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""
        ...

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly."""
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.draw_uniform(len(items))]


class PseudoRandomSource(RandomSource):
    """Random source backed by :class:`random.Random` (not cryptographic)."""

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng or Random()

    def shuffle(self, items: Sequence[T]) -> list[T]:
        shuffled = list(items)
        self._rng.shuffle(shuffled)
        return shuffled

    def draw_uniform(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be positive")
        return self._rng.randrange(n)


class SeededRandomSource(PseudoRandomSource):
    """Deterministic source for tests and replays."""

    def __init__(self, seed: int | str = 42) -> None:
        self.seed = seed
        super().__init__(Random(seed))
