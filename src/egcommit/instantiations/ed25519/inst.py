# src/egcommit/instantiations/ed25519/inst.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from egcommit.group import Group

# Pure-Python edwards25519 ops via `ecdsa`
try:
    from ecdsa.curves import Ed25519
    from ecdsa.ellipticcurve import INFINITY, PointEdwards
    from ecdsa.errors import MalformedPointError
except Exception as e:  # pragma: no cover
    raise ImportError(
        "Ed25519 instantiation requires the 'ecdsa' package. Install via: pip install ecdsa"
    ) from e

logger = logging.getLogger(__name__)


# ----------------------------
# Prime-order subgroup of edwards25519 (order l = 2^252 + ...).
# Elements are ecdsa PointEdwards, with ecdsa's INFINITY as the identity.
# Note: ecdsa returns INFINITY for *any* result with x == 0, which also
# covers the order-2 point (0, -1). Only subgroup elements are ever built
# here, so inside the group that shortcut is exact.
# ----------------------------

_CURVE = Ed25519.curve
_GEN = Ed25519.generator  # generator=True: multiplies through a precomputed table
_L = Ed25519.order
_P = _CURVE.p()

_ELEMENT_LEN = 32
_SCALAR_LEN = 32

# RFC 8032 encoding of the neutral element (0, 1)
_IDENTITY_ENCODING = b"\x01" + bytes(_ELEMENT_LEN - 1)


@dataclass(frozen=True)
class Ed25519Ops:
    name = "ed25519"
    order = _L
    element_len = _ELEMENT_LEN
    scalar_len = _SCALAR_LEN

    def identity(self):
        return INFINITY

    def generator(self):
        return _GEN

    def add(self, A, B):
        if A is INFINITY:
            return B
        if B is INFINITY:
            return A
        return A + B

    def neg(self, A):
        if A is INFINITY:
            return INFINITY
        x, y = A.x(), A.y()
        return PointEdwards(_CURVE, (-x) % _P, y, 1, (-x * y) % _P, _L)

    def scalar_mul(self, k: int, A):
        k = int(k) % _L
        if A is INFINITY or k == 0:
            return INFINITY
        return A * k

    def base_mul(self, k: int):
        k = int(k) % _L
        if k == 0:
            return INFINITY
        return _GEN * k

    def eq(self, A, B) -> bool:
        return self.encode(A) == self.encode(B)

    def encode(self, A) -> bytes:
        if A is INFINITY:
            return _IDENTITY_ENCODING
        return bytes(A.to_bytes())

    def decode(self, data: bytes) -> Optional[PointEdwards]:
        data = bytes(data)
        if len(data) != _ELEMENT_LEN:
            return None
        if data == _IDENTITY_ENCODING:
            return INFINITY
        # y must be a canonical field element; ecdsa does not reduce it
        if int.from_bytes(data, "little") & ((1 << 255) - 1) >= _P:
            return None
        try:
            A = PointEdwards.from_bytes(_CURVE, data, order=_L)
        except MalformedPointError:
            return None
        if bytes(A.to_bytes()) != data:
            return None
        if not _in_prime_subgroup(A):
            logger.debug("rejected ed25519 point with a torsion component")
            return None
        return A

    def encode_scalar(self, k: int) -> bytes:
        return (int(k) % _L).to_bytes(_SCALAR_LEN, "little")

    def decode_scalar(self, data: bytes) -> Optional[int]:
        if len(data) != _SCALAR_LEN:
            return None
        k = int.from_bytes(data, "little")
        if k >= _L:
            return None
        return k


def _in_prime_subgroup(A: PointEdwards) -> bool:
    # l*A == 0 cannot be tested directly: ecdsa reports l*A == (0, -1) as
    # INFINITY as well. (l - 1)*A == -A holds exactly when A has no torsion.
    ops = Ed25519Ops()
    return ops.encode(ops.scalar_mul(_L - 1, A)) == ops.encode(ops.neg(A))


def make_ed25519_group() -> Group:
    """Return the default group: 32-byte elements, 32-byte little-endian scalars."""
    return Group(Ed25519Ops())
