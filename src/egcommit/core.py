"""Exponential ElGamal over a prime-order group.

    keygen:   x <-$ Z_q;  y := x*G
    encrypt:  r <-$ Z_q;  (C1, C2) := (r*G, M + r*y)
    decrypt:  M := C2 - x*C1

Ciphertexts under one key form a group under component-wise addition, and
that group law tracks addition of plaintexts:

    (r1*G, M1 + r1*y) + (r2*G, M2 + r2*y) = ((r1+r2)*G, (M1+M2) + (r1+r2)*y)

Nothing here authenticates which key produced a ciphertext. Decrypting under
the wrong key yields a valid-looking but meaningless element.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, TypeVar

from .group import Group, GroupElement, Scalar, ScalarLike
from .interfaces import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Homomorphic")


class Homomorphic:
    """Component-wise +, -, unary -, and scalar * over a fixed tuple of parts.

    Subclasses say what their parts are and how to rebuild from new parts;
    every operator is then defined once here.
    """

    __slots__ = ()

    def _parts(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    def _rebuild(self: T, parts: Tuple[Any, ...]) -> T:
        raise NotImplementedError

    def _check_operand(self: T, other: T) -> None:
        """Hook for refusing operands that are the right type but incompatible."""

    def __add__(self: T, other: Any) -> T:
        if type(other) is not type(self):
            return NotImplemented
        self._check_operand(other)
        return self._rebuild(tuple(a + b for a, b in zip(self._parts(), other._parts())))

    def __sub__(self: T, other: Any) -> T:
        if type(other) is not type(self):
            return NotImplemented
        self._check_operand(other)
        return self._rebuild(tuple(a - b for a, b in zip(self._parts(), other._parts())))

    def __neg__(self: T) -> T:
        return self._rebuild(tuple(-a for a in self._parts()))

    def __mul__(self: T, k: Any) -> T:
        if not isinstance(k, (Scalar, int)):
            return NotImplemented
        return self._rebuild(tuple(a * k for a in self._parts()))

    __rmul__ = __mul__


@dataclass(frozen=True)
class Ciphertext(Homomorphic):
    """ElGamal ciphertext (C1, C2) = (r*G, M + r*y). Carries no key."""

    c1: GroupElement
    c2: GroupElement

    def _parts(self) -> Tuple[GroupElement, GroupElement]:
        return (self.c1, self.c2)

    def _rebuild(self, parts: Tuple[Any, ...]) -> "Ciphertext":
        return Ciphertext(*parts)

    @property
    def group(self) -> Group:
        return self.c1.group

    def inner(self) -> Tuple[GroupElement, GroupElement]:
        return (self.c1, self.c2)

    def __repr__(self) -> str:
        return f"Ciphertext({self.c1.to_bytes().hex()}, {self.c2.to_bytes().hex()})"


@dataclass(frozen=True)
class EncryptionKey:
    """Public key y = x*G. Any group element will do for commitment-only use."""

    element: GroupElement

    @property
    def group(self) -> Group:
        return self.element.group

    def encrypt(self, message: GroupElement, rng: RandomSource) -> Ciphertext:
        return self.encrypt_with(message, self.group.random_scalar(rng))

    def encrypt_with(self, message: GroupElement, r: ScalarLike) -> Ciphertext:
        """Deterministic encryption under randomness r.

        Never reuse r for two different messages under the same key: the
        difference of the two C2 components would equal the difference of the
        plaintexts.
        """
        r = self.group.scalar(r)
        return Ciphertext(self.group.base_mul(r), message + self.element * r)

    def rerandomise(self, ciphertext: Ciphertext, rng: RandomSource) -> Ciphertext:
        """Fresh, unlinkable ciphertext for the same plaintext."""
        return self.rerandomise_with(ciphertext, self.group.random_scalar(rng))

    def rerandomise_with(self, ciphertext: Ciphertext, r: ScalarLike) -> Ciphertext:
        return ciphertext + self.encrypt_with(self.group.identity, r)

    def __repr__(self) -> str:
        return f"EncryptionKey({self.element.to_bytes().hex()})"


class DecryptionKey:
    """Secret x with y = x*G. Immutable; cannot be copied, pickled or printed."""

    __slots__ = ("_secret", "_encryption_key")

    def __init__(self, secret: Scalar):
        object.__setattr__(self, "_secret", secret)
        object.__setattr__(self, "_encryption_key", None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("DecryptionKey is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("DecryptionKey is immutable")

    @classmethod
    def new(cls, rng: RandomSource, group: Optional[Group] = None) -> "DecryptionKey":
        if group is None:
            from .defaults import DEFAULT_GROUP

            group = DEFAULT_GROUP
        key = cls(group.random_scalar(rng))
        logger.debug("generated decryption key in group %s", group.name)
        return key

    @classmethod
    def from_scalar(cls, secret: ScalarLike, group: Optional[Group] = None) -> "DecryptionKey":
        """Wrap an existing secret. A plain int is taken in `group` (default group if omitted)."""
        if group is None:
            if isinstance(secret, Scalar):
                group = secret.group
            else:
                from .defaults import DEFAULT_GROUP

                group = DEFAULT_GROUP
        return cls(group.scalar(secret))

    @property
    def group(self) -> Group:
        return self._secret.group

    @property
    def secret(self) -> Scalar:
        return self._secret

    def encryption_key(self) -> EncryptionKey:
        if self._encryption_key is None:
            # the cache is filled once and never changes afterwards
            object.__setattr__(
                self, "_encryption_key", EncryptionKey(self.group.base_mul(self._secret))
            )
        return self._encryption_key

    def decrypt(self, ciphertext: Ciphertext) -> GroupElement:
        return ciphertext.c2 - ciphertext.c1 * self._secret

    def __repr__(self) -> str:
        return f"DecryptionKey(<redacted>, group={self.group.name})"

    def __reduce__(self):
        raise TypeError("DecryptionKey cannot be copied or serialized")
