"""Value types over a `GroupOps` backend: Group, Scalar, GroupElement.

The backend works on raw ints and library points. This module wraps them so
that the protocol layer can be written with ordinary Python operators, and so
that mixing values from two different groups is caught instead of producing
garbage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, Union

from .errors import GroupMismatchError
from .interfaces import GroupOps, RandomSource
from .rng import draw

logger = logging.getLogger(__name__)

P = TypeVar("P")

ScalarLike = Union["Scalar", int]


class Group(Generic[P]):
    """A prime-order group together with its scalar field Z_order."""

    def __init__(self, ops: GroupOps[P]):
        self.ops = ops
        self.name = ops.name
        self.order = ops.order
        self.element_len = ops.element_len
        self.scalar_len = ops.scalar_len
        self.generator = GroupElement(ops.generator(), self)
        self.identity = GroupElement(ops.identity(), self)
        self.zero = Scalar(0, self)
        self.one = Scalar(1, self)
        logger.debug(
            "initialised group %s (element_len=%d, scalar_len=%d)",
            self.name,
            self.element_len,
            self.scalar_len,
        )

    def __repr__(self) -> str:
        return f"Group({self.name})"

    def scalar(self, value: ScalarLike) -> "Scalar":
        if isinstance(value, Scalar):
            self.check(value.group)
            return value
        if not isinstance(value, int):
            raise TypeError(f"expected an int or Scalar, got {type(value).__name__}")
        return Scalar(value, self)

    def element(self, point: P) -> "GroupElement":
        return GroupElement(point, self)

    def base_mul(self, k: ScalarLike) -> "GroupElement":
        """k * G using the generator's precomputed table."""
        return GroupElement(self.ops.base_mul(self.scalar(k).value), self)

    def random_scalar(self, rng: RandomSource) -> "Scalar":
        # wide reduction: 2 * scalar_len bytes keeps the modulo bias negligible
        wide = draw(rng, 2 * self.scalar_len)
        return Scalar(int.from_bytes(wide, "little"), self)

    def random_element(self, rng: RandomSource) -> "GroupElement":
        return self.base_mul(self.random_scalar(rng))

    def check(self, other: "Group") -> None:
        if other is not self:
            raise GroupMismatchError(f"operands belong to {other!r} and {self!r}")


@dataclass(frozen=True)
class Scalar:
    """Element of Z_order, always stored reduced."""

    value: int
    group: Group = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % self.group.order)

    def _coerce(self, other: Any) -> Optional["Scalar"]:
        if isinstance(other, Scalar):
            self.group.check(other.group)
            return other
        if isinstance(other, int):
            return Scalar(other, self.group)
        return None

    def __add__(self, other: Any) -> "Scalar":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Scalar(self.value + o.value, self.group)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Scalar":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Scalar(self.value - o.value, self.group)

    def __rsub__(self, other: Any) -> "Scalar":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Scalar(o.value - self.value, self.group)

    def __neg__(self) -> "Scalar":
        return Scalar(-self.value, self.group)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, GroupElement):
            return other * self
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Scalar(self.value * o.value, self.group)

    def __rmul__(self, other: Any) -> "Scalar":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Scalar(o.value * self.value, self.group)

    def __int__(self) -> int:
        return self.value

    def is_zero(self) -> bool:
        return self.value == 0

    def to_bytes(self) -> bytes:
        return self.group.ops.encode_scalar(self.value)


@dataclass(frozen=True, eq=False)
class GroupElement:
    """Element of a prime-order group; compares by group equality, not identity."""

    point: Any
    group: Group = field(repr=False)

    def _peer(self, other: Any) -> Optional["GroupElement"]:
        if not isinstance(other, GroupElement):
            return None
        self.group.check(other.group)
        return other

    def __add__(self, other: Any) -> "GroupElement":
        o = self._peer(other)
        if o is None:
            return NotImplemented
        return GroupElement(self.group.ops.add(self.point, o.point), self.group)

    def __sub__(self, other: Any) -> "GroupElement":
        o = self._peer(other)
        if o is None:
            return NotImplemented
        ops = self.group.ops
        return GroupElement(ops.add(self.point, ops.neg(o.point)), self.group)

    def __neg__(self) -> "GroupElement":
        return GroupElement(self.group.ops.neg(self.point), self.group)

    def __mul__(self, k: Any) -> "GroupElement":
        if isinstance(k, Scalar):
            self.group.check(k.group)
            k = k.value
        elif isinstance(k, int):
            k = k % self.group.order
        else:
            return NotImplemented
        return GroupElement(self.group.ops.scalar_mul(k, self.point), self.group)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupElement):
            return NotImplemented
        return other.group is self.group and self.group.ops.eq(self.point, other.point)

    def __hash__(self) -> int:
        return hash((self.group.name, self.to_bytes()))

    def __repr__(self) -> str:
        return f"GroupElement({self.to_bytes().hex()})"

    def is_identity(self) -> bool:
        return self == self.group.identity

    def to_bytes(self) -> bytes:
        return self.group.ops.encode(self.point)
