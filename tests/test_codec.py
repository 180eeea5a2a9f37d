from __future__ import annotations

import pytest
from ecdsa.curves import Ed25519

from egcommit import Commitment, DecryptionKey, SeededRandom, scalar
from egcommit.codec import (
    ciphertext_len,
    commitment_len,
    decode_ciphertext,
    decode_commitment,
    decode_element,
    decode_encryption_key,
    decode_open,
    decode_scalar,
    encode_ciphertext,
    encode_commitment,
    encode_element,
    encode_encryption_key,
    encode_open,
    encode_scalar,
    open_len,
)

_P = Ed25519.curve.p()
_L = Ed25519.order


def _edwards_bytes(x: int, y: int) -> bytes:
    data = bytearray(y.to_bytes(32, "little"))
    if x & 1:
        data[-1] |= 0x80
    return bytes(data)


def _fixed_example():
    y = DecryptionKey.new(SeededRandom(b"fixed example")).encryption_key()
    return Commitment.commit_with(scalar(7), scalar(8), y)


def test_fixed_example_sizes():
    opening, commitment = _fixed_example()

    encoded = encode_commitment(commitment)
    assert len(encoded) == 96  # 32 bytes for the base and 64 for the ciphertext
    assert len(encode_open(opening)) == 64

    assert decode_commitment(encoded) == commitment
    assert decode_open(encode_open(opening)) == opening


def test_fixed_example_is_reproducible():
    open1, commitment1 = _fixed_example()
    open2, commitment2 = _fixed_example()
    assert encode_commitment(commitment1) == encode_commitment(commitment2)
    assert encode_open(open1) == encode_open(open2)


def test_default_lengths():
    assert ciphertext_len() == 64
    assert commitment_len() == 96
    assert open_len() == 64


def test_decoded_commitment_still_verifies(rng):
    opening, commitment = Commitment.commit(scalar(99), rng)
    decoded = decode_commitment(encode_commitment(commitment))
    assert decoded.verify(decode_open(encode_open(opening)))


def test_ciphertext_and_key_encodings(ek, rng, group):
    ct = ek.encrypt(group.random_element(rng), rng)
    assert len(encode_ciphertext(ct)) == 64
    assert decode_ciphertext(encode_ciphertext(ct)) == ct
    assert decode_encryption_key(encode_encryption_key(ek)) == ek


def test_scalar_encoding_is_little_endian():
    assert encode_scalar(scalar(1)) == b"\x01" + bytes(31)
    assert decode_scalar(b"\x07" + bytes(31)) == scalar(7)


def test_identity_round_trips(group):
    data = encode_element(group.identity)
    assert data == b"\x01" + bytes(31)
    assert decode_element(data).is_identity()


def test_generator_encoding(group):
    g = Ed25519.generator
    assert encode_element(group.generator) == _edwards_bytes(g.x(), g.y())


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_wrong_lengths_are_rejected(length):
    data = bytes(length)
    assert decode_element(data) is None
    assert decode_scalar(data) is None


@pytest.mark.parametrize("length", [0, 63, 65, 95, 97])
def test_wrong_compound_lengths_are_rejected(length):
    data = bytes(length)
    assert decode_open(data) is None
    assert decode_ciphertext(data) is None
    assert decode_commitment(data) is None


def test_non_canonical_scalar_is_rejected():
    assert decode_scalar(_L.to_bytes(32, "little")) is None
    assert decode_scalar((_L - 1).to_bytes(32, "little")) == scalar(-1)
    assert decode_open(_L.to_bytes(32, "little") + bytes(32)) is None


def test_non_canonical_y_is_rejected():
    # y = p + 1 encodes the same point as y = 1, but is not canonical
    assert decode_element((_P + 1).to_bytes(32, "little")) is None


def test_not_on_curve_is_rejected():
    rejected = 0
    for y in range(2, 40):
        if decode_element(y.to_bytes(32, "little")) is None:
            rejected += 1
    assert rejected > 0


def test_torsion_points_are_rejected(group):
    # (0, -1) has order 2
    assert decode_element(_edwards_bytes(0, _P - 1)) is None

    # G + (0, -1) = (-x, -y) is on the curve but outside the prime-order subgroup
    g = Ed25519.generator
    x, y = g.x(), g.y()
    assert decode_element(_edwards_bytes(x, y)) == group.generator
    assert decode_element(_edwards_bytes((-x) % _P, (-y) % _P)) is None


def test_commitment_with_bad_element_is_rejected(rng):
    _, commitment = Commitment.commit(scalar(1), rng)
    data = bytearray(encode_commitment(commitment))
    data[32:64] = _edwards_bytes(0, _P - 1)
    assert decode_commitment(bytes(data)) is None
