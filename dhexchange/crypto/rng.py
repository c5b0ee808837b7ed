"""
Randomness sources for exponent sampling.

Anything with randrange(stop) works. Callers hand one in explicitly;
nothing here keeps a module-level generator.
"""
import random
import secrets
from typing import Protocol


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


def system_random() -> RandomSource:
    """OS entropy (secrets.SystemRandom). Default for real exchanges."""
    return secrets.SystemRandom()


def seeded_random(seed: int) -> RandomSource:
    """Deterministic source for tests and demos. Not for real keys."""
    return random.Random(seed)
