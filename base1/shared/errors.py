"""
Error types raised by the Base1 codec.
All of them derive from ValueError so callers can catch either.
"""

from typing import Any, Optional


class Base1Error(ValueError):
    """Base class for every codec failure."""


class InvalidLength(Base1Error):
    """A Base1 length was negative or not an integer."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Base1 lengths are non-negative integers, got {value!r}")


class TooLarge(Base1Error):
    """The unary string for this input would exceed the allocation ceiling."""

    def __init__(self, required_length: int, ceiling: int):
        self.required_length = required_length
        self.ceiling = ceiling
        super().__init__(
            f"Data is too large to encode as a Base1 string: {required_length} characters are required "
            f"(ceiling {ceiling}). Use encode_to_integer and decode_from_integer instead."
        )


class InvalidEncoding(Base1Error):
    """The input is not a string of repeated marker characters."""

    def __init__(self, position: Optional[int] = None):
        self.position = position
        if position is None:
            message = "Input is not a valid Base1 string."
        else:
            message = f"Input is not a valid Base1 string (unexpected character at position {position})."
        super().__init__(message)
