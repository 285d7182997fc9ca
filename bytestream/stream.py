import logging
import operator
from typing import Iterable, Optional, Union

from bytestream import config
from bytestream.compression import CompressionAlgorithm, compress_bytes, decompress_bytes
from bytestream.constants import (
    BOOLEAN_SIZE,
    BYTE_SIZE,
    DOUBLE_SIZE,
    FLOAT_SIZE,
    INT_SIZE,
    MAX_UTF_BYTES,
    SHORT_SIZE,
)
from bytestream.endian import Endian
from bytestream.errors import EndOfStreamError, LengthError
from bytestream.numeric import (
    check_span,
    decode_float_from,
    decode_int_from,
    encode_float_into,
    encode_int_into,
    to_float,
    to_unsigned,
)

logger = logging.getLogger(__name__)

_BytesLike = Union[bytes, bytearray, memoryview]


class ByteStream:
    """
    Growable byte buffer with a read/write cursor and typed accessors.

    Every read and write happens at ``position`` and moves it forward by the
    number of bytes consumed. Multi-byte numbers use the current ``endian``.

    Usage:
        >>> stream = ByteStream()
        >>> stream.write_int(0x12345678)
        >>> stream.write_utf("hi")
        >>> bytes(stream)
        b'\\x124Vx\\x00\\x02hi'
        >>> stream.position = 0
        >>> stream.read_int()
        305419896
        >>> stream.read_utf()
        'hi'

    A ``bytearray`` passed to the constructor becomes the backing buffer
    itself; any other byte sequence is copied.
    """

    __slots__ = ("_buffer", "_position", "_endian")

    def __init__(
            self,
            initial: Union[_BytesLike, Iterable[int], "ByteStream", None] = None,
            endian: Union[Endian, str, None] = None,
    ):
        if initial is None:
            self._buffer = bytearray()
        elif isinstance(initial, bytearray):
            self._buffer = initial
        elif isinstance(initial, ByteStream):
            self._buffer = bytearray(initial._buffer)
        elif isinstance(initial, int):
            raise TypeError("ByteStream initial data must be bytes-like or an iterable of ints, not int")
        else:
            self._buffer = bytearray(initial)
        self._position = 0
        self._endian = Endian.coerce(config.DEFAULT_ENDIAN if endian is None else endian)

    # ---------------------------------------------------------------------------- #
    #                                  Properties                                  #
    # ---------------------------------------------------------------------------- #
    @property
    def buffer(self) -> bytearray:
        """The backing bytearray."""
        return self._buffer

    @property
    def position(self) -> int:
        """Offset of the next read or write. May point past the end."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = operator.index(value)

    @property
    def endian(self) -> Endian:
        return self._endian

    @endian.setter
    def endian(self, value: Union[Endian, str]) -> None:
        self._endian = Endian.coerce(value)

    @property
    def length(self) -> int:
        return len(self._buffer)

    @length.setter
    def length(self, value: int) -> None:
        """Zero-fill on growth, truncate on shrink. The cursor is left alone."""
        value = operator.index(value)
        if value < 0:
            raise ValueError(f"length must be non-negative, got {value}")
        current = len(self._buffer)
        if value > current:
            self._buffer.extend(bytes(value - current))
        elif value < current:
            del self._buffer[value:]
        else:
            return
        logger.debug("length changed from %d to %d", current, value)

    @property
    def bytes_available(self) -> int:
        """length - position; negative when the cursor is past the end."""
        return len(self._buffer) - self._position

    # ---------------------------------------------------------------------------- #
    #                                   Lifecycle                                  #
    # ---------------------------------------------------------------------------- #
    def clear(self) -> None:
        """Drop all content and rewind."""
        self._buffer = bytearray()
        self._position = 0

    def compress(self, algorithm: Union[CompressionAlgorithm, str, None] = None) -> None:
        """Replace the whole buffer with its compressed form and rewind."""
        algorithm = CompressionAlgorithm.coerce(algorithm)
        original_size = len(self._buffer)
        self._buffer[:] = compress_bytes(self._buffer, algorithm, config.COMPRESSION_LEVEL)
        self._position = 0
        logger.debug("%s compressed %d bytes to %d", algorithm, original_size, len(self._buffer))

    def uncompress(self, algorithm: Union[CompressionAlgorithm, str, None] = None) -> None:
        """
        Replace the whole buffer with its decompressed form and rewind.

        Raises:
            DecodeError: the buffer does not hold valid data for ``algorithm``.
                The buffer and cursor are left untouched.
        """
        algorithm = CompressionAlgorithm.coerce(algorithm)
        compressed_size = len(self._buffer)
        self._buffer[:] = decompress_bytes(self._buffer, algorithm)
        self._position = 0
        logger.debug("%s uncompressed %d bytes to %d", algorithm, compressed_size, len(self._buffer))

    def deflate(self) -> None:
        self.compress(CompressionAlgorithm.DEFLATE)

    def inflate(self) -> None:
        self.uncompress(CompressionAlgorithm.DEFLATE)

    # ---------------------------------------------------------------------------- #
    #                                   Internals                                  #
    # ---------------------------------------------------------------------------- #
    def _check_buffer(self, size: int) -> None:
        """
        Make room for a write of ``size`` bytes at the cursor.

        When the slack after the cursor is too small the buffer grows by
        exactly ``size`` bytes at the end, even if the cursor sits inside the
        buffer and less would do. A cursor beyond the end is additionally
        padded up to ``position + size``.
        """
        position = self._position
        if position < 0:
            raise EndOfStreamError(size, position, 0)
        if len(self._buffer) - position < size:
            self._buffer.extend(bytes(size))
            shortfall = position + size - len(self._buffer)
            if shortfall > 0:
                self._buffer.extend(bytes(shortfall))

    def _write_raw(self, data: _BytesLike) -> None:
        size = len(data)
        self._check_buffer(size)
        position = self._position
        self._buffer[position:position + size] = data
        self._position = position + size

    def _peek(self, size: int) -> bytes:
        """Copy of the next ``size`` bytes without moving the cursor."""
        position = self._position
        check_span(self._buffer, position, size)
        return bytes(self._buffer[position:position + size])

    @staticmethod
    def _resolve_length(length: Optional[int], default: int) -> int:
        if length is None or (length == 0 and config.is_legacy_zero_length()):
            return default
        return operator.index(length)

    # ---------------------------------------------------------------------------- #
    #                               Sub-buffer copies                              #
    # ---------------------------------------------------------------------------- #
    def write_bytes(
            self, source: Union["ByteStream", _BytesLike], offset: int = 0, length: Optional[int] = None
    ) -> None:
        """
        Copy ``length`` bytes of ``source`` starting at ``offset`` to the cursor.

        ``length`` defaults to everything from ``offset`` to the end of
        ``source``. The position of a ``ByteStream`` source is not used or
        changed.
        """
        data = source._buffer if isinstance(source, ByteStream) else source
        offset = operator.index(offset)
        length = self._resolve_length(length, len(data) - offset)
        check_span(data, offset, length)
        self._write_raw(bytes(data[offset:offset + length]))

    def read_bytes(
            self, destination: Union["ByteStream", bytearray], offset: int = 0, length: Optional[int] = None
    ) -> None:
        """
        Copy ``length`` bytes from the cursor into ``destination`` at ``offset``.

        ``length`` defaults to ``bytes_available``. When ``destination`` has
        fewer than ``length`` bytes after ``offset`` it grows by ``length``
        bytes. The destination cursor is not changed.
        """
        if isinstance(destination, ByteStream):
            target = destination._buffer
        elif isinstance(destination, bytearray):
            target = destination
        else:
            raise TypeError(
                f"read_bytes destination must be a ByteStream or bytearray, got {type(destination).__name__}"
            )
        offset = operator.index(offset)
        length = self._resolve_length(length, self.bytes_available)
        chunk = self._peek(length)
        if offset < 0:
            raise EndOfStreamError(length, offset, 0)
        if len(target) - offset < length:
            target.extend(bytes(length))
            shortfall = offset + length - len(target)
            if shortfall > 0:
                target.extend(bytes(shortfall))
        target[offset:offset + length] = chunk
        self._position += length

    # ---------------------------------------------------------------------------- #
    #                                    Writes                                    #
    # ---------------------------------------------------------------------------- #
    def write_boolean(self, value: object) -> None:
        self._check_buffer(BOOLEAN_SIZE)
        self._buffer[self._position] = 1 if value else 0
        self._position += BOOLEAN_SIZE

    def write_byte(self, value: int) -> None:
        """Write the low 8 bits of ``value``."""
        value = to_unsigned(value, BYTE_SIZE)
        self._check_buffer(BYTE_SIZE)
        self._position += encode_int_into(value, BYTE_SIZE, self._buffer, self._position, self._endian)

    def write_short(self, value: int) -> None:
        """Write the low 16 bits of ``value``."""
        value = to_unsigned(value, SHORT_SIZE)
        self._check_buffer(SHORT_SIZE)
        self._position += encode_int_into(value, SHORT_SIZE, self._buffer, self._position, self._endian)

    def write_int(self, value: int) -> None:
        """Write the low 32 bits of ``value``."""
        value = to_unsigned(value, INT_SIZE)
        self._check_buffer(INT_SIZE)
        self._position += encode_int_into(value, INT_SIZE, self._buffer, self._position, self._endian)

    def write_unsigned_int(self, value: int) -> None:
        # Same bits as write_int
        self.write_int(value)

    def write_float(self, value: float) -> None:
        value = to_float(value)
        self._check_buffer(FLOAT_SIZE)
        self._position += encode_float_into(value, FLOAT_SIZE, self._buffer, self._position, self._endian)

    def write_double(self, value: float) -> None:
        value = to_float(value)
        self._check_buffer(DOUBLE_SIZE)
        self._position += encode_float_into(value, DOUBLE_SIZE, self._buffer, self._position, self._endian)

    def write_utf(self, value: str) -> None:
        """
        Write ``value`` as UTF-8 behind a 16-bit byte-length prefix.

        Raises:
            LengthError: the encoded string is longer than 65535 bytes. Nothing
                is written in that case.
        """
        data = value.encode("utf-8")
        if len(data) > MAX_UTF_BYTES:
            raise LengthError(f"UTF-8 length {len(data)} exceeds maximum {MAX_UTF_BYTES}")
        self.write_short(len(data))
        self._write_raw(data)

    def write_utf_bytes(self, value: str) -> None:
        self._write_raw(value.encode("utf-8"))

    def write_multi_byte(self, value: str, charset: str) -> None:
        """Write ``value`` in any Python codec, with no length prefix."""
        self._write_raw(value.encode(charset))

    # ---------------------------------------------------------------------------- #
    #                                     Reads                                    #
    # ---------------------------------------------------------------------------- #
    def _read_int(self, size: int, signed: bool) -> int:
        value, size = decode_int_from(self._buffer, self._position, size, self._endian, signed)
        self._position += size
        return value

    def _read_float(self, size: int) -> float:
        value, size = decode_float_from(self._buffer, self._position, size, self._endian)
        self._position += size
        return value

    def read_boolean(self) -> bool:
        """True when the next byte is nonzero."""
        return self._read_int(BOOLEAN_SIZE, False) != 0

    def read_byte(self) -> int:
        return self._read_int(BYTE_SIZE, True)

    def read_unsigned_byte(self) -> int:
        return self._read_int(BYTE_SIZE, False)

    def read_short(self) -> int:
        return self._read_int(SHORT_SIZE, True)

    def read_unsigned_short(self) -> int:
        return self._read_int(SHORT_SIZE, False)

    def read_int(self) -> int:
        return self._read_int(INT_SIZE, True)

    def read_unsigned_int(self) -> int:
        return self._read_int(INT_SIZE, False)

    def read_float(self) -> float:
        return self._read_float(FLOAT_SIZE)

    def read_double(self) -> float:
        return self._read_float(DOUBLE_SIZE)

    def read_utf(self) -> str:
        """Read a string written by write_utf. The cursor is restored on failure."""
        start = self._position
        length = self.read_unsigned_short()
        try:
            return self.read_utf_bytes(length)
        except (EndOfStreamError, UnicodeDecodeError):
            self._position = start
            raise

    def read_utf_bytes(self, length: int) -> str:
        """Decode exactly ``length`` bytes of UTF-8."""
        return self.read_multi_byte(length, "utf-8")

    def read_multi_byte(self, length: int, charset: str) -> str:
        length = operator.index(length)
        value = self._peek(length).decode(charset)
        self._position += length
        return value

    # ---------------------------------------------------------------------------- #
    #                                  Conversions                                 #
    # ---------------------------------------------------------------------------- #
    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    def to_json(self) -> str:
        return self._buffer.hex()

    @classmethod
    def from_json(cls, json_str: str) -> "ByteStream":
        if json_str.startswith(("0x", "0X")):
            json_str = json_str[2:]
        return cls(bytearray.fromhex(json_str))

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteStream):
            return self._buffer == other._buffer
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._buffer == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(length={len(self._buffer)}, "
            f"position={self._position}, endian={self._endian.value})"
        )

