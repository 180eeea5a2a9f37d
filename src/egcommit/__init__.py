"""Additively homomorphic ElGamal encryption and ElGamal commitments."""

import logging

from .commitment import Commitment, Open
from .core import Ciphertext, DecryptionKey, EncryptionKey, Homomorphic
from .defaults import DEFAULT_GROUP, GENERATOR, random_element, random_scalar, scalar
from .errors import (
    EGCommitError,
    GroupMismatchError,
    KeyMismatchError,
    RandomnessError,
    UnknownGroupError,
)
from .group import Group, GroupElement, Scalar
from .instantiations import available_groups, make_group
from .interfaces import GroupOps, RandomSource
from .rng import SeededRandom, system_random

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ciphertext",
    "Commitment",
    "DEFAULT_GROUP",
    "DecryptionKey",
    "EGCommitError",
    "EncryptionKey",
    "GENERATOR",
    "Group",
    "GroupElement",
    "GroupMismatchError",
    "GroupOps",
    "Homomorphic",
    "KeyMismatchError",
    "Open",
    "RandomSource",
    "RandomnessError",
    "Scalar",
    "SeededRandom",
    "UnknownGroupError",
    "available_groups",
    "make_group",
    "random_element",
    "random_scalar",
    "scalar",
    "system_random",
]
