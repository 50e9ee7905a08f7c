"""
Encoder for Base1.
Maps a byte sequence to its bijective base-256 integer (the Base1 length).
"""

import logging
from typing import Union

from base1.shared.config import BYTE_BASE
from base1.shared.utils import block_offset

logger = logging.getLogger(__name__)

ByteLike = Union[bytes, bytearray, memoryview]

def encode_to_integer(data: ByteLike) -> int:
    """
    Encode a byte sequence as a non-negative integer.
    - Empty input encodes to 0.
    - Otherwise: offset(L) + the L bytes read as a big-endian unsigned integer,
      where offset(L) counts every sequence shorter than L bytes.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, got {type(data).__name__}")

    data = bytes(data)
    if not data: return 0

    # Accumulate digits most significant first (value = value * 256 + byte)
    value = 0
    for byte in data:
        value = value * BYTE_BASE + byte

    offset = block_offset(len(data))
    logger.debug("encoded %d bytes (block offset has %d bits)", len(data), offset.bit_length())
    return offset + value
