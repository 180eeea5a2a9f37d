"""Concrete prime-order groups, looked up by name.

Each instantiation lives in its own subpackage and is imported only when first
requested, so that e.g. py_ecc is not loaded for programs that never touch
BLS12-381.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import import_module
from typing import Tuple

from egcommit.errors import UnknownGroupError
from egcommit.group import Group

logger = logging.getLogger(__name__)

# name -> (subpackage, factory)
_REGISTRY = {
    "ed25519": ("ed25519", "make_ed25519_group"),
    "p256": ("p256", "make_p256_group"),
    "bls12_381": ("bls", "make_bls_group"),
}


def available_groups() -> Tuple[str, ...]:
    return tuple(_REGISTRY)


def make_group(name: str = "ed25519") -> Group:
    """Return the process-wide Group registered under `name`."""
    return _load(name)


@lru_cache(maxsize=None)
def _load(name: str) -> Group:
    try:
        subpackage, factory = _REGISTRY[name]
    except KeyError:
        raise UnknownGroupError(
            f"Unsupported group={name!r}. Supported: {', '.join(_REGISTRY)}."
        ) from None
    module = import_module(f"{__name__}.{subpackage}")
    logger.debug("loading group %s from %s", name, module.__name__)
    return getattr(module, factory)()


__all__ = ["available_groups", "make_group"]
