import pytest

from gpbot.buffer import Buffer
from gpbot.errors import InvalidArgsError, UnderflowError


def test_uint16_is_big_endian():
    buf = Buffer()
    buf.write_uint16(0x1234)
    assert buf.getvalue() == b"\x12\x34"


@pytest.mark.parametrize(
    "write, read, value",
    [
        ("write_byte", "read_byte", 200),
        ("write_uint16", "read_uint16", 0xBEEF),
        ("write_uint32", "read_uint32", 0xDEADBEEF),
        ("write_uint64", "read_uint64", 0x0123456789ABCDEF),
        ("write_float", "read_float", 1.5),
        ("write_double", "read_double", 0.1),
    ],
)
def test_round_trip(write, read, value):
    buf = Buffer()
    getattr(buf, write)(value)
    assert getattr(buf, read)() == value
    assert buf.remaining() == 0


def test_sizes_of_writes():
    buf = Buffer()
    buf.write_uint16(1)
    buf.write_uint32(1)
    buf.write_uint64(1)
    buf.write_float(1.0)
    buf.write_double(1.0)
    assert len(buf) == 2 + 4 + 8 + 4 + 8


def test_negative_values_wrap():
    buf = Buffer()
    buf.write_uint16(-1)
    buf.write_uint32(-1)
    assert buf.read_uint16() == 0xFFFF
    assert buf.read_uint32() == 0xFFFFFFFF


def test_underflow_leaves_position():
    buf = Buffer(b"\x01\x02\x03")
    with pytest.raises(UnderflowError):
        buf.read_uint32()
    assert buf.position == 0
    assert buf.read_bytes(3) == b"\x01\x02\x03"


def test_read_empty_buffer_underflows():
    with pytest.raises(UnderflowError):
        Buffer().read_byte()


def test_zero_length_read():
    buf = Buffer(b"ab")
    assert buf.read_bytes(0) == b""
    assert buf.position == 0


def test_negative_count_rejected():
    with pytest.raises(InvalidArgsError):
        Buffer(b"ab").read_bytes(-1)


def test_feed_and_compact():
    buf = Buffer(b"abcde")
    assert buf.read_bytes(2) == b"ab"
    buf.feed(b"fg")
    assert buf.remaining() == 5
    buf.compact()
    assert buf.position == 0
    assert buf.getvalue() == b"cdefg"
    assert buf.read_bytes(5) == b"cdefg"


def test_writes_append_after_reads():
    buf = Buffer(b"x")
    assert buf.read_byte() == ord("x")
    buf.write_bytes(b"yz")
    assert buf.getvalue() == b"xyz"
    assert buf.read_bytes(2) == b"yz"