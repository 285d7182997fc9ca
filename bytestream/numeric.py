import math
import operator
import struct
from typing import Tuple, Union

from bytestream.endian import Endian
from bytestream.errors import EndOfStreamError

_ReadBuf = Union[bytes, bytearray, memoryview]

# struct codes for IEEE-754 widths
_FLOAT_CODES = {4: "f", 8: "d"}


def available_at(buffer: _ReadBuf, offset: int) -> int:
    """Bytes readable from offset, never negative."""
    if offset < 0:
        return 0
    return max(len(buffer) - offset, 0)


def check_span(buffer: _ReadBuf, offset: int, size: int) -> None:
    """Raise EndOfStreamError unless [offset, offset + size) lies inside buffer."""
    if size < 0 or offset < 0 or offset + size > len(buffer):
        raise EndOfStreamError(size, offset, available_at(buffer, offset))


# ---------------------------------------------------------------------------- #
#                                   Integers                                   #
# ---------------------------------------------------------------------------- #
def to_unsigned(value: int, size: int) -> int:
    """Keep the low size*8 bits of value (two's complement wraparound)."""
    return operator.index(value) & ((1 << (size * 8)) - 1)


def to_signed(unsigned_value: int, size: int) -> int:
    """Reinterpret an unsigned size-byte value as two's complement."""
    sign_bit = 1 << (size * 8 - 1)
    if unsigned_value >= sign_bit:
        return unsigned_value - (1 << (size * 8))
    return unsigned_value


def encode_int_into(value: int, size: int, buffer: bytearray, offset: int, endian: Endian) -> int:
    """Write the low size bytes of value at offset. Returns the bytes written."""
    buffer[offset:offset + size] = to_unsigned(value, size).to_bytes(size, endian.byteorder)
    return size


def decode_int_from(
        buffer: _ReadBuf, offset: int, size: int, endian: Endian, signed: bool = False
) -> Tuple[int, int]:
    """Read a size-byte integer at offset. Returns (value, bytes read)."""
    check_span(buffer, offset, size)
    unsigned_value = int.from_bytes(buffer[offset:offset + size], endian.byteorder)
    if signed:
        return to_signed(unsigned_value, size), size
    return unsigned_value, size


# ---------------------------------------------------------------------------- #
#                                 Floating point                               #
# ---------------------------------------------------------------------------- #
def to_float(value) -> float:
    """Convert a numeric argument to float. Strings and bytes are rejected."""
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)


def encode_float_into(value: float, size: int, buffer: bytearray, offset: int, endian: Endian) -> int:
    """
    Write an IEEE-754 float of the given width (4 or 8) at offset.

    Finite values too large for single precision are stored as infinity,
    the way a narrowing C cast behaves, instead of raising.
    """
    fmt = endian.struct_prefix + _FLOAT_CODES[size]
    value = to_float(value)
    try:
        struct.pack_into(fmt, buffer, offset, value)
    except OverflowError:
        struct.pack_into(fmt, buffer, offset, math.copysign(math.inf, value))
    return size


def decode_float_from(buffer: _ReadBuf, offset: int, size: int, endian: Endian) -> Tuple[float, int]:
    check_span(buffer, offset, size)
    fmt = endian.struct_prefix + _FLOAT_CODES[size]
    return struct.unpack_from(fmt, buffer, offset)[0], size
