"""NBT core: recursive descent decoder and root loader.

The decoder builds a comparison-ready tree out of three shapes:

    span     memoryview    numeric tags, arrays, strings, numeric lists
    mapping  dict          compounds, keyed by member name (bytes)
    sequence list          lists of strings, lists, compounds, arrays

No payload is interpreted.  Numbers stay as their big-endian bytes and
strings stay as Modified-UTF-8 bytes, so two values are equal exactly
when their encodings are.  The type of a span's tag is not kept: an Int
and a Float with the same four bytes compare equal, and every empty list
whose element type is End or numeric is the same empty span.

Spans alias the caller's buffer.  Member names are the one thing copied,
into bytes, since dict keys must be hashable and a view over a mutable
buffer is not.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ._constants import (
    BYTE_ARRAY_WIDTH,
    INT_ARRAY_WIDTH,
    LONG_ARRAY_WIDTH,
    MAX_DEPTH,
    MAX_SPAN_BYTES,
    TAG_COMPOUND,
    TAG_END,
    TAG_SIZE_LUT,
)
from ._cursor import Cursor, as_byte_view
from ._errors import (
    ERR_ARITHMETIC_OVERFLOW,
    ERR_INVALID_ROOT,
    ERR_LIMIT_DEPTH,
    ERR_UNKNOWN_TAG,
    NbtError,
)

logger = logging.getLogger(__name__)

RawTag = Union[memoryview, Dict[bytes, "RawTag"], List["RawTag"]]
RawCompound = Dict[bytes, RawTag]
_DecodeFunc = Callable[[Cursor, int], RawTag]


def _span_len(count: int, width: int, what: str) -> int:
    """count × width, refusing results larger than MAX_SPAN_BYTES."""
    n = count * width
    if n > MAX_SPAN_BYTES:
        raise NbtError(
            ERR_ARITHMETIC_OVERFLOW,
            "{} of {} × {} bytes exceeds addressable size".format(what, count, width),
        )
    return n


# ── Leaf decoders ─────────────────────────────────────────────
# The depth argument is unused here but keeps every entry of the
# dispatch table callable the same way.

def _decode_numeric(width: int, cur: Cursor, depth: int) -> memoryview:
    return cur.take(width)


def _decode_array(width: int, cur: Cursor, depth: int) -> memoryview:
    count = cur.read_u32()
    return cur.take(_span_len(count, width, "array"))


def _decode_string(cur: Cursor, depth: int) -> memoryview:
    return cur.take(cur.read_u16())


# ── Containers ────────────────────────────────────────────────

def _decode_list(cur: Cursor, depth: int) -> Union[memoryview, List[RawTag]]:
    """Decode a TAG_List payload.

    Numeric element types come back as one span covering every element.
    End is the element type writers use for empty lists; it has no width,
    so such a list is an empty span.

    The declared count is trusted: a count larger than the input only
    fails once the elements actually run out.
    """
    if depth + 1 > MAX_DEPTH:
        raise NbtError(ERR_LIMIT_DEPTH, "nesting exceeds MAX_DEPTH")
    elem_id = cur.read_u8()
    count = cur.read_u32()

    if TAG_END < elem_id < len(TAG_SIZE_LUT):
        return cur.take(_span_len(count, TAG_SIZE_LUT[elem_id], "list"))

    if elem_id == TAG_END:
        if count == 0:
            return cur.take(0)
        raise NbtError(ERR_UNKNOWN_TAG, "list of End tags with count {}".format(count))

    decode = _lookup(elem_id)
    items: List[RawTag] = []
    for _ in range(count):
        items.append(decode(cur, depth + 1))
    return items


def _decode_compound(cur: Cursor, depth: int) -> RawCompound:
    """Decode compound members up to and including the closing End tag."""
    if depth + 1 > MAX_DEPTH:
        raise NbtError(ERR_LIMIT_DEPTH, "nesting exceeds MAX_DEPTH")
    members: RawCompound = {}
    while True:
        tag_id = cur.read_u8()
        if tag_id == TAG_END:
            return members
        decode = _lookup(tag_id)
        name = bytes(cur.take(cur.read_u16()))
        # Later duplicates overwrite earlier ones.
        members[name] = decode(cur, depth + 1)


# ── Dispatch table ────────────────────────────────────────────
# Indexed by tag id.  The tag set is closed, so this is a tuple.

_DECODERS: Tuple[Optional[_DecodeFunc], ...] = (
    None,                                                 # End
    functools.partial(_decode_numeric, TAG_SIZE_LUT[1]),  # Byte
    functools.partial(_decode_numeric, TAG_SIZE_LUT[2]),  # Short
    functools.partial(_decode_numeric, TAG_SIZE_LUT[3]),  # Int
    functools.partial(_decode_numeric, TAG_SIZE_LUT[4]),  # Long
    functools.partial(_decode_numeric, TAG_SIZE_LUT[5]),  # Float
    functools.partial(_decode_numeric, TAG_SIZE_LUT[6]),  # Double
    functools.partial(_decode_array, BYTE_ARRAY_WIDTH),   # Byte_Array
    _decode_string,                                       # String
    _decode_list,                                         # List
    _decode_compound,                                     # Compound
    functools.partial(_decode_array, INT_ARRAY_WIDTH),    # Int_Array
    functools.partial(_decode_array, LONG_ARRAY_WIDTH),   # Long_Array
)


def _lookup(tag_id: int) -> _DecodeFunc:
    """Decoder for a value tag.  End and ids past Long_Array are unknown."""
    decode = _DECODERS[tag_id] if tag_id < len(_DECODERS) else None
    if decode is None:
        raise NbtError(ERR_UNKNOWN_TAG, "unknown tag id {}".format(tag_id))
    return decode


# ── Root loader ───────────────────────────────────────────────

def load_nbt_raw(data: Any) -> RawCompound:
    """Decode an uncompressed NBT document into its root mapping.

    The root must be a named Compound.  Its name is skipped, though the
    bytes for it must be present.  Anything after the root's End tag is
    ignored.  The returned tree borrows from `data` and must not outlive it.

    Raises:
        NbtError: on any malformed input.
        TypeError: if `data` does not support the buffer protocol.
    """
    view = as_byte_view(data)
    cur = Cursor(view)
    root_id = cur.read_u8()
    if root_id != TAG_COMPOUND:
        raise NbtError(ERR_INVALID_ROOT, "root tag is {}, not Compound".format(root_id))
    cur.skip(cur.read_u16())
    root = _decode_compound(cur, 0)
    logger.debug("decoded %d-byte document: %d root members, %d trailing bytes",
                 len(view), len(root), cur.remaining)
    return root
