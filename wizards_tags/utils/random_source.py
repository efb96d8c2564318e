"""Injectable source of randomness.

Shuffling, dealer selection and every probability-gated bot decision draw
from one ``RandomSource``. ``random.Random`` satisfies the protocol, so a
seeded instance makes a whole game reproducible.
"""

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Source of random values used by the engine and the bots."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...

    def sample(self, population: Sequence[T], k: int, **kwargs: Any) -> list[T]: ...

    def shuffle(self, x: list[Any]) -> None: ...
