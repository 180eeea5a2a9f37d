"""Fixed-length wire encodings.

    element     := group encoding (32 bytes for ed25519)
    scalar      := group scalar encoding (32 bytes for ed25519)
    ciphertext  := C1 || C2
    commitment  := y || C1 || C2          (96 bytes for ed25519)
    open        := r || m                 (64 bytes for ed25519)

Every decode_* returns None as ⊥ on malformed input: wrong length,
non-canonical scalars, or bytes that are not an element of the group.
Decryption keys have no encoding.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .commitment import Commitment, Open
from .core import Ciphertext, EncryptionKey
from .group import Group, GroupElement, Scalar

logger = logging.getLogger(__name__)


def _group(group: Optional[Group]) -> Group:
    if group is None:
        from .defaults import DEFAULT_GROUP

        return DEFAULT_GROUP
    return group


def ciphertext_len(group: Optional[Group] = None) -> int:
    return 2 * _group(group).element_len


def commitment_len(group: Optional[Group] = None) -> int:
    return 3 * _group(group).element_len


def open_len(group: Optional[Group] = None) -> int:
    return 2 * _group(group).scalar_len


def encode_scalar(s: Scalar) -> bytes:
    return s.to_bytes()


def decode_scalar(data: bytes, group: Optional[Group] = None) -> Optional[Scalar]:
    group = _group(group)
    k = group.ops.decode_scalar(bytes(data))
    if k is None:
        logger.debug("rejected %s scalar encoding (%d bytes)", group.name, len(data))
        return None
    return Scalar(k, group)


def encode_element(e: GroupElement) -> bytes:
    return e.to_bytes()


def decode_element(data: bytes, group: Optional[Group] = None) -> Optional[GroupElement]:
    group = _group(group)
    point = group.ops.decode(bytes(data))
    if point is None:
        logger.debug("rejected %s element encoding (%d bytes)", group.name, len(data))
        return None
    return GroupElement(point, group)


def _decode_elements(data: bytes, count: int, group: Group) -> Optional[List[GroupElement]]:
    width = group.element_len
    if len(data) != count * width:
        return None
    out = []
    for i in range(count):
        e = decode_element(data[i * width:(i + 1) * width], group)
        if e is None:
            return None
        out.append(e)
    return out


def encode_ciphertext(ct: Ciphertext) -> bytes:
    return ct.c1.to_bytes() + ct.c2.to_bytes()


def decode_ciphertext(data: bytes, group: Optional[Group] = None) -> Optional[Ciphertext]:
    elems = _decode_elements(bytes(data), 2, _group(group))
    if elems is None:
        return None
    return Ciphertext(*elems)


def encode_encryption_key(key: EncryptionKey) -> bytes:
    return key.element.to_bytes()


def decode_encryption_key(data: bytes, group: Optional[Group] = None) -> Optional[EncryptionKey]:
    e = decode_element(data, group)
    if e is None:
        return None
    return EncryptionKey(e)


def encode_commitment(c: Commitment) -> bytes:
    return c.base.to_bytes() + encode_ciphertext(c.ciphertext)


def decode_commitment(data: bytes, group: Optional[Group] = None) -> Optional[Commitment]:
    elems = _decode_elements(bytes(data), 3, _group(group))
    if elems is None:
        return None
    y, c1, c2 = elems
    return Commitment(y, Ciphertext(c1, c2))


def encode_open(o: Open) -> bytes:
    return o.r.to_bytes() + o.message.to_bytes()


def decode_open(data: bytes, group: Optional[Group] = None) -> Optional[Open]:
    group = _group(group)
    data = bytes(data)
    width = group.scalar_len
    if len(data) != 2 * width:
        return None
    r = decode_scalar(data[:width], group)
    m = decode_scalar(data[width:], group)
    if r is None or m is None:
        return None
    return Open(r, m)
