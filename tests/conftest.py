from __future__ import annotations

import pytest

from egcommit import DEFAULT_GROUP, DecryptionKey, SeededRandom


@pytest.fixture
def group():
    return DEFAULT_GROUP


@pytest.fixture
def rng():
    # Deterministic per test, so failures reproduce.
    return SeededRandom(b"egcommit-tests")


@pytest.fixture
def dk(rng):
    return DecryptionKey.new(rng)


@pytest.fixture
def ek(dk):
    return dk.encryption_key()
