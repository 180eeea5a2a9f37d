from __future__ import annotations

import secrets
from hashlib import shake_256

from .errors import RandomnessError
from .interfaces import RandomSource

__all__ = ["RandomSource", "SeededRandom", "draw", "system_random"]

system_random: RandomSource = secrets.token_bytes


def draw(rng: RandomSource, n: int) -> bytes:
    """Read exactly n bytes from rng. Errors raised by rng propagate as-is."""
    out = rng(n)
    if not isinstance(out, (bytes, bytearray)) or len(out) != n:
        raise RandomnessError(n, out if not isinstance(out, (bytes, bytearray)) else len(out))
    return bytes(out)


class SeededRandom:
    """Deterministic stand-in for a random source: SHAKE-256(seed || counter).

    For reproducible tests and benchmarks only. Instances are stateful and
    must not be shared between threads.
    """

    def __init__(self, seed: bytes):
        self._seed = bytes(seed)
        self._counter = 0

    def __call__(self, n: int) -> bytes:
        block = shake_256(self._seed + self._counter.to_bytes(8, "big")).digest(n)
        self._counter += 1
        return block

    def __repr__(self) -> str:
        return f"SeededRandom(counter={self._counter})"
