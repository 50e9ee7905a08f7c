"""
Decoder for Base1.
Maps a Base1 length back to the unique byte sequence that encodes to it.
"""

import logging
from typing import Any, List, Tuple

from base1.shared.config import BYTE_BASE
from base1.shared.errors import InvalidLength

logger = logging.getLogger(__name__)

def block_width(number: int) -> Tuple[int, int]:
    """
    Find which block a Base1 length falls into.
    Block k holds exactly 256^k integers, one per k-byte sequence.
    - Walk the blocks in order, subtracting each block size while it still fits.
    - Returns (width, residual) with 0 <= residual < 256^width.
    """
    remainder = number
    block_size = 1
    width = 0

    # Each pass consumes one whole block and widens the next by a factor of 256
    while remainder >= block_size:
        remainder -= block_size
        block_size *= BYTE_BASE
        width += 1

    return width, remainder

def decode_from_integer(number: Any) -> bytes:
    """
    Decode a Base1 length into bytes.
    - 0 decodes to b"".
    - Raises InvalidLength for negative values and for anything that is not an int.
    """
    # bool is an int subclass but never a meaningful length
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise InvalidLength(number)

    if number == 0: return b""

    width, residual = block_width(number)
    logger.debug("decoding length into %d bytes", width)

    # Peel off base-256 digits least significant first, then reverse
    digits: List[int] = []
    for _ in range(width):
        residual, digit = divmod(residual, BYTE_BASE)
        digits.append(digit)
    digits.reverse()

    return bytes(digits)
