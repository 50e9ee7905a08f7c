"""
Result-style adapters.
The codec functions raise; these twins return a Result instead, for callers
that prefer checking a flag over catching exceptions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from base1.codec.decoder import decode_from_integer
from base1.codec.encoder import ByteLike, encode_to_integer
from base1.codec.unary import decode_from_unary, encode_to_unary
from base1.shared.errors import Base1Error
from base1.wrappers.text import decode_length_text, encode_length_text


@dataclass(frozen=True)
class Result:
    """Outcome of one codec call: either a value or the error that stopped it."""
    ok: bool
    value: Any = None
    error: Optional[Exception] = None

    def unwrap(self) -> Any:
        """Return the value, or raise the stored error."""
        if not self.ok:
            raise self.error
        return self.value


def as_result(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Result:
    """
    Run a raising codec function and capture its outcome.
    Only codec errors (and TypeError for non-bytes input) are captured.
    """
    try:
        return Result(ok=True, value=func(*args, **kwargs))
    except (Base1Error, TypeError) as e:
        return Result(ok=False, error=e)


def try_encode_to_integer(data: ByteLike) -> Result:
    return as_result(encode_to_integer, data)

def try_decode_from_integer(number: Any) -> Result:
    return as_result(decode_from_integer, number)

def try_encode_to_unary(data: ByteLike, ceiling: Optional[int] = None) -> Result:
    return as_result(encode_to_unary, data, ceiling)

def try_decode_from_unary(text: Any) -> Result:
    return as_result(decode_from_unary, text)

def try_encode_length_text(data: ByteLike) -> Result:
    return as_result(encode_length_text, data)

def try_decode_length_text(text: Any) -> Result:
    return as_result(decode_length_text, text)
