"""Interface definitions for the group provider and randomness source."""

from __future__ import annotations

from typing import Optional, Protocol, TypeVar

P = TypeVar("P")


class GroupOps(Protocol[P]):
    """Prime-order group operations, scalar action, and fixed-length encodings.

    Scalars cross this boundary as plain ints in [0, order). Points are
    whatever the backing library uses; only the ops object interprets them.
    """

    name: str
    order: int
    element_len: int
    scalar_len: int

    def identity(self) -> P:
        ...

    def generator(self) -> P:
        ...

    def add(self, left: P, right: P) -> P:
        ...

    def neg(self, value: P) -> P:
        ...

    def scalar_mul(self, k: int, value: P) -> P:
        ...

    def base_mul(self, k: int) -> P:
        """k * G, through the backend's precomputed generator table."""
        ...

    def eq(self, left: P, right: P) -> bool:
        ...

    def encode(self, value: P) -> bytes:
        ...

    def decode(self, data: bytes) -> Optional[P]:
        """Return the point, or None if `data` is not a canonical group element."""
        ...

    def encode_scalar(self, k: int) -> bytes:
        ...

    def decode_scalar(self, data: bytes) -> Optional[int]:
        ...


class RandomSource(Protocol):
    """Cryptographically secure byte source: rng(n) -> n uniform bytes."""

    def __call__(self, n: int) -> bytes:
        ...
