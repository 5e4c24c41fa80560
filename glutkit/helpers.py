"""Small general-purpose helpers shared across the package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["contains", "ptr_validity_check", "bit"]

_VALIDITY = {True: "valid", False: "invalid"}


def contains(mapping: Mapping[Any, Any], key: Any) -> bool:
    """Return True if *key* is present in *mapping*."""
    return key in mapping


def ptr_validity_check(obj: Any) -> str:
    """Return ``"valid"`` if *obj* is not None, otherwise ``"invalid"``."""
    is_valid = obj is not None
    return _VALIDITY[is_valid]


def bit(x: int) -> int:
    """Return an integer with only bit *x* set."""
    if x < 0:
        raise ValueError(f"bit index must be non-negative, got {x}")
    return 1 << x