# encoder tests
import pytest

from base1.codec.encoder import encode_to_integer
from base1.shared.utils import block_offset


@pytest.mark.parametrize("data, length", [
    (b"", 0),
    (b"\x00", 1),
    (b"\x01", 2),
    (b"\x02", 3),
    (b"b", 99),
    (b"\xff", 256),
    (b"\x00\x00", 257),
    (b"\x01\x00", 513),
    (b"\x03\xc0", 1217),
    (b"hi", 26986),
    (b"Goodbye world", 5739225900612881999752737287525),
    (b"Hello Cleveland", 381115146191751804757868696628784997),
])
def test_encode_literals(data: bytes, length: int) -> None:
    assert encode_to_integer(data) == length


def test_encode_accepts_bytearray_and_memoryview() -> None:
    assert encode_to_integer(bytearray(b"\x03\xc0")) == 1217
    assert encode_to_integer(memoryview(b"\x03\xc0")) == 1217


def test_encode_utf8_text() -> None:
    # "ほ" is three bytes, well past 64-bit range once the blocks are added
    data = "ほ".encode("utf-8")
    assert encode_to_integer(data) == block_offset(3) + int.from_bytes(data, "big")


def test_encode_exceeds_64_bits() -> None:
    assert encode_to_integer(b"\xff" * 8) == (1 << 64) - 1 + block_offset(8)
    assert encode_to_integer(b"\xff" * 8).bit_length() > 64


@pytest.mark.parametrize("data", ["hi", 12, None, [1, 2]])
def test_encode_rejects_non_bytes(data) -> None:
    with pytest.raises(TypeError):
        encode_to_integer(data)


def test_encode_is_monotonic_within_a_width() -> None:
    for width in (1, 2, 3):
        for value in (0, 1, 200, 254):
            data = value.to_bytes(width, "big")
            successor = (value + 1).to_bytes(width, "big")
            assert encode_to_integer(successor) == encode_to_integer(data) + 1


def test_encode_jumps_to_next_block_at_width_boundary() -> None:
    for width in (1, 2, 3, 8):
        largest = b"\xff" * width
        smallest_wider = b"\x00" * (width + 1)
        assert encode_to_integer(smallest_wider) == block_offset(width + 1)
        assert encode_to_integer(smallest_wider) == encode_to_integer(largest) + 1


def test_encode_never_collides() -> None:
    seen = {}
    for width in range(0, 3):
        for value in range(0, 256 ** width):
            data = value.to_bytes(width, "big") if width else b""
            length = encode_to_integer(data)
            assert length not in seen
            seen[length] = data
    # Every integer below offset(3) is used exactly once
    assert sorted(seen) == list(range(block_offset(3)))
