"""
Decimal string wrappers around the Base1 length.
Interfaces that expect text on both sides can use these instead of ints.
"""

from decimal import Decimal
from re import fullmatch
from typing import Any

from base1.codec.decoder import decode_from_integer
from base1.codec.encoder import ByteLike, encode_to_integer
from base1.shared.errors import InvalidLength

def encode_length_text(data: ByteLike) -> str:
    """
    Encode bytes as the decimal string of their Base1 length.
    - Goes through Decimal: str(int) refuses very long values on Python >= 3.11.
    """
    return str(Decimal(encode_to_integer(data)))

def decode_length_text(text: Any) -> bytes:
    """
    Decode a decimal Base1 length string into bytes.
    - Accepts an optional sign followed by ASCII digits, nothing else.
    - Raises InvalidLength for malformed or negative lengths.
    """
    if not isinstance(text, str) or not fullmatch(r"[+-]?[0-9]+", text):
        raise InvalidLength(text)

    # int(str) has the same digit cap as str(int), Decimal does not
    return decode_from_integer(int(Decimal(text)))
