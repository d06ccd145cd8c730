from __future__ import annotations

import logging
import math
from fractions import Fraction


logger = logging.getLogger("pathcodec")

_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]
_BASE = 1024


def _hundredths(value: Fraction) -> int:
    # half rounds up, not to even
    return math.floor(value * 100 + Fraction(1, 2))


def _shortest(hundredths: int) -> str:
    whole, cents = divmod(hundredths, 100)
    if cents == 0:
        return str(whole)
    if cents % 10 == 0:
        return f"{whole}.{cents // 10}"
    return f"{whole}.{cents:02d}"


def _unsupported(size_bytes: int | float) -> bool:
    if isinstance(size_bytes, float) and not math.isfinite(size_bytes):
        return True
    return size_bytes < 0


def format_file_size(size_bytes: int | float) -> str:
    """Format a byte count for display: 1536 -> "1.5 KB", 1048576 -> "1 MB".

    Sizes of 1024**5 and above stay in TB. Negative or non-finite input is
    not supported and renders as "0 Bytes".
    """
    if size_bytes == 0:
        return "0 Bytes"
    if _unsupported(size_bytes):
        logger.warning("format_file_size got unsupported value %r", size_bytes)
        return "0 Bytes"

    # exact integer comparison; ints of any size never go through float
    index = 0
    while index < len(_UNITS) - 1 and size_bytes >= _BASE ** (index + 1):
        index += 1
    scaled = Fraction(size_bytes) / _BASE**index
    return f"{_shortest(_hundredths(scaled))} {_UNITS[index]}"
