# decimal string wrapper tests
import pytest

from base1.codec.encoder import encode_to_integer
from base1.shared.errors import InvalidLength
from base1.wrappers.text import decode_length_text, encode_length_text


@pytest.mark.parametrize("data, text", [
    (b"", "0"),
    (b"\x00", "1"),
    (b"\x01", "2"),
    (b"hi", "26986"),
    (b"\x03\xc0", "1217"),
])
def test_encode_length_text(data: bytes, text: str) -> None:
    assert encode_length_text(data) == text


@pytest.mark.parametrize("text, data", [
    ("0", b""),
    ("1", b"\x00"),
    ("2", b"\x01"),
    ("+2", b"\x01"),
    ("381115146191751804757868696628784997", b"Hello Cleveland"),
    ("9479543125109159158650175321189934146175361938985120077868441490465756706997907027887945065",
     b"It is probably better to encode length"),
])
def test_decode_length_text(text: str, data: bytes) -> None:
    assert decode_length_text(text) == data


@pytest.mark.parametrize("text", ["cheddar cheese please", "-256", "", " 12", "1_000", "1e3", "NaN", "12.0", 12, None])
def test_decode_length_text_rejects_bad_input(text) -> None:
    with pytest.raises(InvalidLength):
        decode_length_text(text)


def test_text_round_trip_beyond_digit_limit() -> None:
    # 2100 bytes give a length of more than 5000 decimal digits
    data = bytes(range(256)) * 8 + b"\x00" * 52
    text = encode_length_text(data)
    assert len(text) > 4300
    assert text.isdigit()
    assert decode_length_text(text) == data


def test_text_matches_integer_form() -> None:
    data = b"Goodbye world"
    assert encode_length_text(data) == "5739225900612881999752737287525"
    assert encode_to_integer(data) == 5739225900612881999752737287525
