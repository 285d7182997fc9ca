import pytest
from bytestream.endian import Endian
from bytestream.stream import ByteStream


ENDIANS = [Endian.BIG_ENDIAN, Endian.LITTLE_ENDIAN]


def _roundtrip(write, read, value, endian):
    data = ByteStream(endian=endian)
    getattr(data, write)(value)
    data.position = 0
    return getattr(data, read)()


class TestByteRoundtrip:
    """Test single byte reads and writes."""

    @pytest.mark.parametrize("value", [0, 1, 123, 127, -1, -128])
    def test_signed_byte(self, value):
        """Signed bytes come back unchanged."""
        assert _roundtrip("write_byte", "read_byte", value, Endian.BIG_ENDIAN) == value

    @pytest.mark.parametrize("value", [0, 128, 223, 255])
    def test_unsigned_byte(self, value):
        """Unsigned bytes come back unchanged."""
        assert _roundtrip("write_byte", "read_unsigned_byte", value, Endian.BIG_ENDIAN) == value

    def test_byte_overflow(self):
        """Only the low 8 bits are written: 42342 % 256 == 102."""
        assert _roundtrip("write_byte", "read_byte", 42342, Endian.BIG_ENDIAN) == 102

    @pytest.mark.parametrize("value,expected_signed,expected_unsigned", [
        (255, -1, 255),
        (256, 0, 0),
        (-129, 127, 127),
        (200, -56, 200),
    ])
    def test_byte_wraparound(self, value, expected_signed, expected_unsigned):
        """Out of range bytes wrap like two's complement."""
        data = ByteStream()
        data.write_byte(value)
        data.position = 0
        assert data.read_byte() == expected_signed
        data.position = 0
        assert data.read_unsigned_byte() == expected_unsigned

    @pytest.mark.parametrize("value,expected", [(True, True), (False, False), (1, True), (0, False), ("x", True)])
    def test_boolean(self, value, expected):
        """Booleans are stored as a single 0 or 1 byte."""
        data = ByteStream()
        data.write_boolean(value)
        assert data.length == 1
        assert data.buffer[0] == int(expected)
        data.position = 0
        assert data.read_boolean() is expected

    @pytest.mark.parametrize("raw,expected", [(b"\x00", False), (b"\x01", True), (b"\x80", True), (b"\xff", True)])
    def test_boolean_nonzero_is_true(self, raw, expected):
        """Any nonzero byte reads as True."""
        assert ByteStream(raw).read_boolean() is expected


class TestShortRoundtrip:
    """Test 16-bit integers."""

    @pytest.mark.parametrize("endian", ENDIANS)
    @pytest.mark.parametrize("value", [0, 23000, -1, -32768, 32767])
    def test_short(self, endian, value):
        """Signed shorts round-trip in both byte orders."""
        assert _roundtrip("write_short", "read_short", value, endian) == value

    @pytest.mark.parametrize("endian", ENDIANS)
    @pytest.mark.parametrize("value", [0, 60505, 65535])
    def test_unsigned_short(self, endian, value):
        """Unsigned shorts round-trip in both byte orders."""
        assert _roundtrip("write_short", "read_unsigned_short", value, endian) == value

    def test_short_overflow(self):
        """500000 keeps its low 16 bits and reads back as a signed short."""
        assert _roundtrip("write_short", "read_short", 500000, Endian.BIG_ENDIAN) == -24288

    @pytest.mark.parametrize("endian,expected", [
        (Endian.BIG_ENDIAN, b"\x12\x34"),
        (Endian.LITTLE_ENDIAN, b"\x34\x12"),
    ])
    def test_short_byte_order(self, endian, expected):
        """Byte order follows the endian setting."""
        data = ByteStream(endian=endian)
        data.write_short(0x1234)
        assert bytes(data) == expected


class TestIntRoundtrip:
    """Test 32-bit integers."""

    @pytest.mark.parametrize("endian", ENDIANS)
    @pytest.mark.parametrize("value", [0, 4533041, -1, -2147483648, 2147483647])
    def test_int(self, endian, value):
        """Signed ints round-trip in both byte orders."""
        assert _roundtrip("write_int", "read_int", value, endian) == value

    @pytest.mark.parametrize("endian", ENDIANS)
    @pytest.mark.parametrize("value", [0, 2442535, 4294967295])
    def test_unsigned_int(self, endian, value):
        """Unsigned ints round-trip in both byte orders."""
        assert _roundtrip("write_int", "read_unsigned_int", value, endian) == value
        assert _roundtrip("write_unsigned_int", "read_unsigned_int", value, endian) == value

    def test_int_overflow(self):
        """4444444444 keeps its low 32 bits."""
        assert _roundtrip("write_int", "read_int", 4_444_444_444, Endian.BIG_ENDIAN) == 149477148

    def test_negative_reads_unsigned(self):
        """-1 written as an int is 0xFFFFFFFF unsigned."""
        assert _roundtrip("write_int", "read_unsigned_int", -1, Endian.LITTLE_ENDIAN) == 0xFFFFFFFF

    @pytest.mark.parametrize("endian,expected", [
        (Endian.BIG_ENDIAN, bytes([0x12, 0x34, 0x56, 0x78])),
        (Endian.LITTLE_ENDIAN, bytes([0x78, 0x56, 0x34, 0x12])),
    ])
    def test_int_byte_order(self, endian, expected):
        """0x12345678 is written most or least significant byte first."""
        data = ByteStream(endian=endian)
        data.write_int(0x12345678)
        assert bytes(data) == expected

    def test_endian_switch_between_writes(self):
        """Each write uses the byte order in effect at the time of the call."""
        data = ByteStream()
        data.write_short(1)
        data.endian = Endian.LITTLE_ENDIAN
        data.write_short(1)
        assert bytes(data) == b"\x00\x01\x01\x00"

    def test_reading_with_other_endian(self):
        """Reading with the opposite byte order swaps the bytes."""
        data = ByteStream()
        data.write_int(0x12345678)
        data.position = 0
        data.endian = Endian.LITTLE_ENDIAN
        assert data.read_unsigned_int() == 0x78563412


class TestIntegerArguments:
    """Test argument validation for integer writes."""

    @pytest.mark.parametrize("method", ["write_byte", "write_short", "write_int"])
    @pytest.mark.parametrize("value", [1.5, "1", None])
    def test_non_integral_rejected(self, method, value):
        """Floats, strings and None are not masked, they raise without growing the buffer."""
        data = ByteStream()
        with pytest.raises(TypeError):
            getattr(data, method)(value)
        assert data.length == 0
        assert data.position == 0

    @pytest.mark.parametrize("method", ["write_byte", "write_short", "write_int"])
    def test_rejected_write_keeps_existing_bytes(self, method):
        """A rejected write in the middle of a stream leaves it as it was."""
        data = ByteStream(b"ab")
        data.position = 1
        with pytest.raises(TypeError):
            getattr(data, method)(2.5)
        assert bytes(data) == b"ab"
        assert data.position == 1

    def test_bool_is_integral(self):
        """bool is an int subclass and writes as 0/1."""
        data = ByteStream()
        data.write_short(True)
        assert bytes(data) == b"\x00\x01"
