"""
Unary projection for Base1.
A Base1 string is the marker character repeated Base1-length times.
"""

import logging
import sys
from typing import Any, Optional

from base1.codec.decoder import decode_from_integer
from base1.codec.encoder import ByteLike, encode_to_integer
from base1.shared.config import CEILING_32BIT, CEILING_64BIT, DEFAULT_CEILING, MARKER
from base1.shared.errors import InvalidEncoding, TooLarge

logger = logging.getLogger(__name__)

def platform_ceiling() -> int:
    """Return the largest unary length this interpreter could ever address."""
    if sys.maxsize <= 2**32:
        return CEILING_32BIT
    return CEILING_64BIT

def default_ceiling() -> int:
    """Ceiling used when the caller gives none: DEFAULT_CEILING, capped by the platform."""
    return min(DEFAULT_CEILING, platform_ceiling())

def encode_to_unary(data: ByteLike, ceiling: Optional[int] = None) -> str:
    """
    Encode bytes as a Base1 string.
    - The length is computed and checked against the ceiling before anything is allocated.
    - Raises TooLarge (with the required length) when length >= ceiling.
    - Without a ceiling, default_ceiling() applies.
    """
    length = encode_to_integer(data)
    if length == 0: return ""

    limit = default_ceiling() if ceiling is None else ceiling
    if length >= limit:
        logger.debug("refusing unary string of %d characters (ceiling %d)", length, limit)
        raise TooLarge(length, limit)

    return MARKER * length

def unary_length(text: Any) -> int:
    """
    Count the markers in a Base1 string.
    Every character is checked, so a string of the right length with the
    wrong content is still rejected.
    """
    if not isinstance(text, str):
        raise InvalidEncoding()

    length = 0
    for position, char in enumerate(text):
        if char != MARKER:
            raise InvalidEncoding(position)
        length += 1

    return length

def decode_from_unary(text: Any) -> bytes:
    """
    Decode a Base1 string into bytes.
    Raises InvalidEncoding on the first character that is not the marker.
    """
    return decode_from_integer(unary_length(text))
