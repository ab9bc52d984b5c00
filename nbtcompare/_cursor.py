"""Copy-free, bounds-checked reads from the front of a byte buffer.

Every value handed out is a memoryview slice of the caller's buffer, so
decoded spans alias the input instead of duplicating it.  All integers in
NBT are big-endian.
"""

from __future__ import annotations

import struct
from typing import Any

from ._errors import ERR_UNEXPECTED_EOF, NbtError

_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")


def as_byte_view(data: Any) -> memoryview:
    """View any bytes-like object as read-only, 1-D unsigned bytes.

    The view, and every slice taken from it, still refers to `data` itself;
    nothing is copied.
    """
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()


class Cursor:
    """A shrinking window over a read-only byte view."""

    __slots__ = ("_view", "_off", "_end")

    def __init__(self, view: memoryview) -> None:
        self._view = view
        self._off = 0
        self._end = len(view)

    @property
    def offset(self) -> int:
        return self._off

    @property
    def remaining(self) -> int:
        return self._end - self._off

    def take(self, n: int) -> memoryview:
        """Remove and return the next n bytes."""
        off = self._off
        end = off + n
        if end > self._end:
            raise NbtError(
                ERR_UNEXPECTED_EOF,
                "needed {} bytes at offset {}, {} left".format(n, off, self._end - off),
            )
        self._off = end
        return self._view[off:end]

    def skip(self, n: int) -> None:
        self.take(n)

    def read_u8(self) -> int:
        off = self._off
        if off >= self._end:
            raise NbtError(ERR_UNEXPECTED_EOF, "needed 1 byte at offset {}".format(off))
        self._off = off + 1
        return self._view[off]

    def read_u16(self) -> int:
        return _U16.unpack(self.take(2))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.take(4))[0]
