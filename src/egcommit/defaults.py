"""Process-wide default group and shortcuts bound to it.

The default is the prime-order subgroup of edwards25519: 32-byte elements and
32-byte scalars, which gives 96-byte commitments and 64-byte opens on the wire.
"""

from __future__ import annotations

from typing import Optional

from .group import Group, GroupElement, Scalar
from .instantiations import make_group
from .interfaces import RandomSource

DEFAULT_GROUP: Group = make_group("ed25519")

# The generator as a single element. To multiply it by a scalar use
# DEFAULT_GROUP.base_mul, which goes through the precomputed table.
GENERATOR: GroupElement = DEFAULT_GROUP.generator


def scalar(value: int, group: Optional[Group] = None) -> Scalar:
    return (group or DEFAULT_GROUP).scalar(value)


def random_scalar(rng: RandomSource, group: Optional[Group] = None) -> Scalar:
    return (group or DEFAULT_GROUP).random_scalar(rng)


def random_element(rng: RandomSource, group: Optional[Group] = None) -> GroupElement:
    return (group or DEFAULT_GROUP).random_element(rng)
