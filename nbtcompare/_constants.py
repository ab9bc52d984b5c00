"""NBT tag ids, payload widths, and decoder limits.

Tag ids are fixed by the NBT format.  Ids 1-6 are the numeric tags; they
are the only ones with an entry in TAG_SIZE_LUT, which lets lists of
numbers be sliced out as a single span instead of element by element.
"""

from __future__ import annotations

import sys
from typing import Tuple

# ── Tag ids (single byte each) ───────────────────────────────
TAG_END: int = 0
TAG_BYTE: int = 1
TAG_SHORT: int = 2
TAG_INT: int = 3
TAG_LONG: int = 4
TAG_FLOAT: int = 5
TAG_DOUBLE: int = 6
TAG_BYTE_ARRAY: int = 7
TAG_STRING: int = 8
TAG_LIST: int = 9
TAG_COMPOUND: int = 10
TAG_INT_ARRAY: int = 11
TAG_LONG_ARRAY: int = 12

# Payload width in bytes of each numeric tag, indexed by tag id.
# Index 0 (End) has no payload and is never looked up.
TAG_SIZE_LUT: Tuple[int, ...] = (0, 1, 2, 4, 8, 4, 8)

# Element width of the three array tags.
BYTE_ARRAY_WIDTH: int = 1
INT_ARRAY_WIDTH: int = 4
LONG_ARRAY_WIDTH: int = 8

# ── Limits ───────────────────────────────────────────────────
# Largest span the decoder will compute.  A count × width product above
# this is reported as ERR_ARITHMETIC_OVERFLOW rather than attempted.
MAX_SPAN_BYTES: int = sys.maxsize

# Compound/list nesting limit.  512 matches the limit Minecraft itself
# applies when reading NBT.
MAX_DEPTH: int = 512

# Top-level timestamp field that save files rewrite on every save.
LAST_UPDATE: bytes = b"LastUpdate"
