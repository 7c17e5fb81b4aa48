"""Reproducible pseudo-random stream used for blip placement."""

from __future__ import annotations

import math

DEFAULT_SEED = 42


class DeterministicSampler:
    """Sine-scrambled counter generator.

    The stream is not statistically strong; its only job is to make two
    layouts of the same input identical. Each layout owns its sampler, so
    independent layouts never share a counter.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.initial_seed = seed
        self._counter = seed
        self.draws = 0

    def reset(self) -> None:
        self._counter = self.initial_seed
        self.draws = 0

    def random(self) -> float:
        """Return the next value in ``[0, 1)``."""

        x = math.sin(self._counter) * 10000.0
        self._counter += 1
        self.draws += 1
        return x - math.floor(x)

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.random() * (hi - lo)

    def triangular(self, lo: float, hi: float) -> float:
        """Average of two uniform draws, peaked at the middle of the interval."""

        return lo + (self.random() + self.random()) * 0.5 * (hi - lo)

    def jiggle(self, scale: float = 1e-6) -> float:
        value = (self.random() - 0.5) * scale
        # a zero offset would leave coincident discs stuck together
        return value if value != 0.0 else scale * 0.5

    def __repr__(self) -> str:
        return f"DeterministicSampler(seed={self.initial_seed!r}, draws={self.draws!r})"


__all__ = ["DEFAULT_SEED", "DeterministicSampler"]
