"""
Shared integer helpers.
Python ints are unbounded, so every value here is exact regardless of size.
"""
from base1.shared.config import BYTE_BASE

def int_pow(base: int, exponent: int) -> int:
    """
    Raise base to a non-negative integer exponent.
    - Repeated multiplication, never touches floats (math.pow would round).
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    result = 1
    for _ in range(exponent):
        result *= base
    return result

def block_offset(length: int) -> int:
    """
    Count of all byte sequences strictly shorter than length.
    offset(L) = 256^0 + 256^1 + ... + 256^(L-1), offset(0) = 0.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    # Geometric series: (256^L - 1) / 255, exact in integer division
    return (int_pow(BYTE_BASE, length) - 1) // (BYTE_BASE - 1)
