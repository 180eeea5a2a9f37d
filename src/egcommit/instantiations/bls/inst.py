# src/egcommit/instantiations/bls/inst.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from egcommit.group import Group

# py_ecc for BLS12-381 G1 group ops + point compression (no pairing).
# Install: pip install py-ecc
try:
    from py_ecc.optimized_bls12_381 import (
        G1,
        Z1,
        add,
        curve_order,
        eq,
        is_inf,
        multiply,
        neg,
    )
    from py_ecc.bls.point_compression import compress_G1, decompress_G1
except Exception as e:  # pragma: no cover
    raise ImportError(
        "BLS12-381 instantiation requires 'py-ecc'. Install via: pip install py-ecc"
    ) from e

logger = logging.getLogger(__name__)


# ----------------------------
# Point representation note:
# py_ecc optimized arithmetic works on Jacobian points (x, y, z); Z1 is the
# point at infinity. Points stay Jacobian throughout and equality goes through
# py_ecc's cross-multiplied `eq`, so no affine canonicalisation is needed.
# ----------------------------

_ELEMENT_LEN = 48  # BLS12-381 G1 compressed size
_SCALAR_LEN = 32


def _int_to_fixed_bytes(x: int, length: int) -> bytes:
    return x.to_bytes(length, "big")


def _int_from_fixed_bytes(bts: bytes) -> int:
    return int.from_bytes(bts, "big")


def _g1_to_bytes_compressed(P) -> bytes:
    return _int_to_fixed_bytes(int(compress_G1(P)), _ELEMENT_LEN)


def _g1_from_bytes_compressed(buf: bytes):
    if len(buf) != _ELEMENT_LEN:
        return None
    c = _int_from_fixed_bytes(buf)
    try:
        P = decompress_G1(c)  # checks flags and that the point is on the curve
    except ValueError:
        return None
    # G1 has a cofactor; points off the order-r subgroup are rejected
    if not is_inf(multiply(P, curve_order)):
        logger.debug("rejected BLS12-381 point outside the G1 subgroup")
        return None
    return P


# ----------------------------
# G1 as an additive group. multiply() expects 0 <= k; reduce mod r first.
# ----------------------------

@dataclass(frozen=True)
class G1Ops:
    name = "bls12_381"
    order = curve_order
    element_len = _ELEMENT_LEN
    scalar_len = _SCALAR_LEN

    def identity(self):
        return Z1

    def generator(self):
        return G1

    def add(self, A, B):
        return add(A, B)

    def neg(self, A):
        return neg(A)

    def scalar_mul(self, k: int, A):
        return multiply(A, int(k) % curve_order)

    def base_mul(self, k: int):
        # py_ecc has no fixed-base table; plain double-and-add from G1
        return multiply(G1, int(k) % curve_order)

    def eq(self, A, B) -> bool:
        return eq(A, B)

    def encode(self, A) -> bytes:
        return _g1_to_bytes_compressed(A)

    def decode(self, data: bytes) -> Optional[tuple]:
        return _g1_from_bytes_compressed(bytes(data))

    def encode_scalar(self, k: int) -> bytes:
        return _int_to_fixed_bytes(int(k) % curve_order, _SCALAR_LEN)

    def decode_scalar(self, data: bytes) -> Optional[int]:
        if len(data) != _SCALAR_LEN:
            return None
        k = _int_from_fixed_bytes(data)
        if k >= curve_order:
            return None
        return k


def make_bls_group() -> Group:
    """
    Return the BLS12-381 G1 group (no pairing).

    - scalars: Z_r, 32-byte big-endian
    - elements: compressed G1 (48 bytes)
    """
    return Group(G1Ops())
