"""nbtcompare: fast structural comparison of NBT documents.

Decode two uncompressed NBT (Named Binary Tag) documents without copying
or interpreting their payloads, then check whether they are equal.

Quick start:
    >>> from nbtcompare import compare
    >>> empty = b"\\x0a\\x00\\x00\\x00"
    >>> compare(empty, empty)
    True

Volatile timestamps can be ignored by naming the top-level field:
    >>> old = b"\\x0a\\x00\\x00\\x01\\x00\\x01t\\x01\\x00"
    >>> new = b"\\x0a\\x00\\x00\\x01\\x00\\x01t\\x02\\x00"
    >>> compare(old, new)
    False
    >>> compare(old, new, exclude_field="t")
    True
"""

from __future__ import annotations

from ._compare import compare, compare_nbt, raw_equal
from ._constants import LAST_UPDATE, MAX_DEPTH
from ._core import RawCompound, RawTag, load_nbt_raw
from ._errors import (
    ERR_ARITHMETIC_OVERFLOW,
    ERR_INVALID_ROOT,
    ERR_LIMIT_DEPTH,
    ERR_UNEXPECTED_EOF,
    ERR_UNKNOWN_TAG,
    NbtError,
)

__version__ = "0.1.0"

__all__ = [
    # Public API functions
    "compare",
    "compare_nbt",
    "load_nbt_raw",
    "raw_equal",
    # Types
    "RawTag",
    "RawCompound",
    # Exception
    "NbtError",
    # Error codes
    "ERR_INVALID_ROOT",
    "ERR_UNEXPECTED_EOF",
    "ERR_UNKNOWN_TAG",
    "ERR_ARITHMETIC_OVERFLOW",
    "ERR_LIMIT_DEPTH",
    # Constants
    "LAST_UPDATE",
    "MAX_DEPTH",
]
