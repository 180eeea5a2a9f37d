"""ElGamal commitments: the encryption algebra with a scalar message m lifted to m*G.

    commit:  (open, commitment) = ((r, m), (y, (r*G, m*G + r*y)))
    verify:  recompute (r*G, m*G + r*y) from the open and compare

Verification is a recomputation, so m never has to be recovered from m*G.
The base y of a commitment is fixed at construction; arithmetic only touches
the ciphertext, and combining commitments under different bases raises
KeyMismatchError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Tuple

from .core import Ciphertext, EncryptionKey, Homomorphic
from .errors import KeyMismatchError
from .group import Group, GroupElement, Scalar, ScalarLike
from .interfaces import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Open(Homomorphic):
    """The secret witness (r, m) of a commitment: blinding factor and message."""

    r: Scalar
    message: Scalar

    @classmethod
    def zero(cls, group: Group) -> "Open":
        return cls(group.zero, group.zero)

    @property
    def group(self) -> Group:
        return self.r.group

    def _parts(self) -> Tuple[Scalar, Scalar]:
        return (self.r, self.message)

    def _rebuild(self, parts: Tuple[Any, ...]) -> "Open":
        return Open(*parts)

    def __repr__(self) -> str:
        return f"Open({self.r.value:#x}, {self.message.value:#x})"


@dataclass
class Commitment(Homomorphic):
    """Commitment (y, C) with C = (r*G, m*G + r*y)."""

    base: GroupElement
    ciphertext: Ciphertext

    @property
    def group(self) -> Group:
        return self.base.group

    def encryption_key(self) -> EncryptionKey:
        return EncryptionKey(self.base)

    @classmethod
    def commit(cls, m: ScalarLike, rng: RandomSource) -> Tuple[Open, "Commitment"]:
        """Commit to m under a fresh random base y.

        Only a random element is needed for y, so one is sampled directly;
        no decryption key is ever created. A plain int is committed in the
        default group.
        """
        if isinstance(m, Scalar):
            group = m.group
        else:
            from .defaults import DEFAULT_GROUP

            group = DEFAULT_GROUP
        m = group.scalar(m)
        key = EncryptionKey(group.random_element(rng))
        r = group.random_scalar(rng)
        return cls.commit_with(m, r, key)

    @classmethod
    def commit_with(
        cls, m: ScalarLike, r: ScalarLike, key: EncryptionKey
    ) -> Tuple[Open, "Commitment"]:
        """Commit to m with blinding r under an agreed base `key`."""
        group = key.group
        m = group.scalar(m)
        r = group.scalar(r)
        ciphertext = key.encrypt_with(group.base_mul(m), r)
        return Open(r, m), cls(key.element, ciphertext)

    def verify(self, opening: Open) -> bool:
        if opening.r.group is not self.group or opening.message.group is not self.group:
            return False
        expected = self.encryption_key().encrypt_with(
            self.group.base_mul(opening.message), opening.r
        )
        return expected == self.ciphertext

    def rerandomise(self, opening: Open, rng: RandomSource) -> Open:
        """Add a fresh random commitment in place; returns the matching open.

        Both the blinding factor and the message move. Use `reblind` to keep
        the committed message fixed.
        """
        group = self.group
        return self.rerandomise_with(opening, group.random_scalar(rng), group.random_scalar(rng))

    def rerandomise_with(self, opening: Open, r1: ScalarLike, r2: ScalarLike) -> Open:
        """C1 += r1*G, C2 += r1*y + r2*G; returns Open(r + r1, m + r2)."""
        group = self.group
        r1 = group.scalar(r1)
        r2 = group.scalar(r2)
        c1, c2 = self.ciphertext.inner()
        self.ciphertext = Ciphertext(
            c1 + group.base_mul(r1),
            c2 + self.base * r1 + group.base_mul(r2),
        )
        return Open(opening.r + r1, opening.message + r2)

    def reblind(self, opening: Open, rng: RandomSource) -> Open:
        """Re-blind in place without changing the committed message."""
        return self.reblind_with(opening, self.group.random_scalar(rng))

    def reblind_with(self, opening: Open, r1: ScalarLike) -> Open:
        return self.rerandomise_with(opening, r1, self.group.zero)

    def _parts(self) -> Tuple[Ciphertext]:
        return (self.ciphertext,)

    def _rebuild(self, parts: Tuple[Any, ...]) -> "Commitment":
        return Commitment(self.base, parts[0])

    def _check_operand(self, other: "Commitment") -> None:
        self.group.check(other.group)
        if other.base != self.base:
            logger.debug("refused to combine commitments with different bases")
            raise KeyMismatchError(
                "commitments under different bases cannot be combined"
            )

    def __repr__(self) -> str:
        return f"Commitment({self.base.to_bytes().hex()}, {self.ciphertext!r})"
