# src/egcommit/instantiations/p256/inst.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from egcommit.group import Group

# Pure-Python P-256 ops via `ecdsa`
try:
    from ecdsa.curves import NIST256p
    from ecdsa.ellipticcurve import INFINITY, PointJacobi
    from ecdsa.errors import MalformedPointError
except Exception as e:  # pragma: no cover
    raise ImportError(
        "P-256 instantiation requires the 'ecdsa' package. Install via: pip install ecdsa"
    ) from e


# ----------------------------
# P-256 has cofactor 1, so every point on the curve is in the group.
# Elements are ecdsa PointJacobi, with ecdsa's INFINITY as the identity.
# ----------------------------

_ELEMENT_LEN = 33  # SEC1 compressed
_SCALAR_LEN = 32

# SEC1 encodes infinity as a single 0x00; pad it to the fixed element width
_IDENTITY_ENCODING = bytes(_ELEMENT_LEN)


@dataclass(frozen=True)
class P256Ops:
    curve = NIST256p.curve
    gen = NIST256p.generator  # generator=True: precomputed table
    q = NIST256p.order
    p = NIST256p.curve.p()

    name = "p256"
    order = q
    element_len = _ELEMENT_LEN
    scalar_len = _SCALAR_LEN

    def identity(self):
        return INFINITY

    def generator(self):
        return self.gen

    def add(self, A, B):
        if A is INFINITY:
            return B
        if B is INFINITY:
            return A
        return A + B

    def neg(self, A):
        if A is INFINITY:
            return INFINITY
        return -A

    def scalar_mul(self, k: int, A):
        k = int(k) % self.q
        if A is INFINITY or k == 0:
            return INFINITY
        return A * k

    def base_mul(self, k: int):
        k = int(k) % self.q
        if k == 0:
            return INFINITY
        return self.gen * k

    def eq(self, A, B) -> bool:
        if A is INFINITY or B is INFINITY:
            return (A is INFINITY or A == INFINITY) and (B is INFINITY or B == INFINITY)
        return A == B

    def encode(self, A) -> bytes:
        if A is INFINITY or A == INFINITY:
            return _IDENTITY_ENCODING
        return bytes(A.to_bytes("compressed"))

    def decode(self, data: bytes) -> Optional[PointJacobi]:
        data = bytes(data)
        if len(data) != _ELEMENT_LEN:
            return None
        if data == _IDENTITY_ENCODING:
            return INFINITY
        if data[0] not in (0x02, 0x03):
            return None
        if int.from_bytes(data[1:], "big") >= self.p:
            return None
        try:
            return PointJacobi.from_bytes(
                self.curve, data, valid_encodings=("compressed",), order=self.q
            )
        except MalformedPointError:
            return None

    def encode_scalar(self, k: int) -> bytes:
        return (int(k) % self.q).to_bytes(_SCALAR_LEN, "big")

    def decode_scalar(self, data: bytes) -> Optional[int]:
        if len(data) != _SCALAR_LEN:
            return None
        k = int.from_bytes(data, "big")
        if k >= self.q:
            return None
        return k


def make_p256_group() -> Group:
    return Group(P256Ops())
