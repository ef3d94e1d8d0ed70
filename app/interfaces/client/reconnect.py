"""Delay policies applied between live stream reconnection attempts."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Protocol


class ReconnectPolicy(Protocol):
    def next_delay(self, attempt: int) -> float:
        """Seconds to wait before reconnection ``attempt`` (1-based)."""


class FixedDelay:
    """Wait the same number of seconds before every attempt, forever."""

    def __init__(self, seconds: float = 3.0) -> None:
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        self.seconds = seconds

    def next_delay(self, attempt: int) -> float:
        return self.seconds


class ExponentialBackoff:
    """Capped exponential delay with proportional jitter.

    Attempt ``n`` waits ``min(cap, base * 2 ** (n - 1))`` reduced by up to
    ``jitter`` of itself, so clients dropped together do not return together.
    Opt-in: it changes reconnect timing compared to :class:`FixedDelay`.
    """

    def __init__(
        self,
        base: float = 1.0,
        cap: float = 30.0,
        jitter: float = 0.5,
        *,
        rng: Callable[[], float] = random.random,
    ) -> None:
        if base <= 0 or cap <= 0:
            raise ValueError("base and cap must be positive")
        if not 0 <= jitter <= 1:
            raise ValueError("jitter must be between 0 and 1")
        self.base = base
        self.cap = cap
        self.jitter = jitter
        self._rng = rng

    def next_delay(self, attempt: int) -> float:
        exponent = max(attempt, 1) - 1
        delay = min(self.cap, self.base * (2 ** min(exponent, 32)))
        return delay - delay * self.jitter * self._rng()
