"""Error codes and the exception raised by the NBT decoder.

Every failure is terminal for the decode attempt.  The comparator never
changes a code; it only records which input (left or right) failed.
"""

from __future__ import annotations

from typing import Optional

# ── Error codes ──────────────────────────────────────────────

ERR_INVALID_ROOT: str = "ERR_INVALID_ROOT"                # root tag is not Compound
ERR_UNEXPECTED_EOF: str = "ERR_UNEXPECTED_EOF"            # input ended mid-value
ERR_UNKNOWN_TAG: str = "ERR_UNKNOWN_TAG"                  # tag id outside 0-12, or End list
ERR_ARITHMETIC_OVERFLOW: str = "ERR_ARITHMETIC_OVERFLOW"  # count × width too large
ERR_LIMIT_DEPTH: str = "ERR_LIMIT_DEPTH"                  # nesting exceeds MAX_DEPTH

SIDE_LEFT: str = "left"
SIDE_RIGHT: str = "right"


class NbtError(Exception):
    """Exception for NBT decoding errors.

    `.code` is one of the ERR_* strings above.  `.side` is None while the
    error travels through the decoder and is set to "left" or "right" by
    the comparator.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code
        self.side: Optional[str] = None

    def with_side(self, side: str) -> "NbtError":
        """Record which input failed and attach a note saying so."""
        self.side = side
        self.add_note("Occurred while parsing {}".format(side))
        return self
