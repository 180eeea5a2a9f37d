from __future__ import annotations

from egcommit import Open, scalar


def _open(r: int, m: int) -> Open:
    return Open(scalar(r), scalar(m))


def test_open_algebra_is_component_wise(group):
    a = _open(3, 10)
    b = _open(5, 20)

    assert a + b == _open(8, 30)
    assert b - a == _open(2, 10)
    assert -a == _open(-3, -10)
    assert a * scalar(4) == _open(12, 40)
    assert 4 * a == _open(12, 40)
    assert a - a == Open.zero(group)


def test_open_arithmetic_wraps_modulo_order(group):
    top = _open(group.order - 1, group.order - 1)
    assert top + _open(1, 2) == _open(0, 1)
    assert -Open.zero(group) == Open.zero(group)


def test_open_fields(group):
    o = _open(1, 2)
    assert o.r == scalar(1)
    assert o.message == scalar(2)
    assert o.group is group
    assert o == _open(1, 2)
    assert hash(o) == hash(_open(1, 2))
