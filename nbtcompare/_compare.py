"""Structural equality between two NBT documents."""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from ._constants import LAST_UPDATE
from ._core import RawCompound, RawTag, load_nbt_raw
from ._errors import SIDE_LEFT, SIDE_RIGHT, NbtError

logger = logging.getLogger(__name__)


def _load_side(data: Any, side: str) -> RawCompound:
    try:
        return load_nbt_raw(data)
    except NbtError as exc:
        raise exc.with_side(side)


def raw_equal(a: RawTag, b: RawTag) -> bool:
    """Deep structural equality over decoded trees.

    Spans are equal when their bytes are.  Mappings are equal when they
    hold the same names with equal values, in any order.  Sequences are
    equal element by element, in order.  Different shapes never match.

    Built-in equality already has exactly these semantics for
    memoryview, dict and list, and runs it in C.
    """
    return a == b


def compare(left: Any, right: Any,
            exclude_field: Optional[Union[str, bytes]] = None) -> bool:
    """Return True if two uncompressed NBT documents are structurally equal.

    `exclude_field` names a top-level member to drop from both roots before
    comparing, e.g. "LastUpdate".  It is not an error for it to be absent.

    Both documents are fully decoded before anything is compared.  A decode
    failure raises NbtError with `.side` set to "left" or "right".
    """
    left_root = _load_side(left, SIDE_LEFT)
    right_root = _load_side(right, SIDE_RIGHT)

    if exclude_field is not None:
        key = exclude_field.encode("utf-8") if isinstance(exclude_field, str) else bytes(exclude_field)
        left_root.pop(key, None)
        right_root.pop(key, None)
        logger.debug("excluded top-level field %r", key)

    result = raw_equal(left_root, right_root)
    logger.debug("compare result: %s", result)
    return result


def compare_nbt(left: Any, right: Any, exclude_last_update: bool = False) -> bool:
    """Compare two NBT documents, optionally ignoring the LastUpdate field."""
    return compare(left, right, LAST_UPDATE if exclude_last_update else None)
