"""Whole-buffer compression codecs used by ByteStream.compress/uncompress."""
import logging
import lzma
import zlib
from enum import Enum
from typing import Union

from bytestream.errors import DecodeError

logger = logging.getLogger(__name__)

_ReadBuf = Union[bytes, bytearray, memoryview]

# Negative window bits select a raw DEFLATE stream without the zlib header
_RAW_DEFLATE_WBITS = -zlib.MAX_WBITS


class CompressionAlgorithm(str, Enum):
    """Compression formats understood by compress() and uncompress()."""

    ZLIB = "zlib"
    DEFLATE = "deflate"
    LZMA = "lzma"

    @classmethod
    def coerce(cls, value) -> "CompressionAlgorithm":
        """Accept a member, its string value, or None for the zlib default."""
        if value is None:
            return cls.ZLIB
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown compression algorithm {value!r}, expected one of "
                f"{[m.value for m in cls]}"
            ) from None

    def __str__(self) -> str:
        return self.value


def compress_bytes(data: _ReadBuf, algorithm: CompressionAlgorithm, level: int = -1) -> bytes:
    """Compress data in one shot. level -1 selects the codec default."""
    if algorithm is CompressionAlgorithm.ZLIB:
        return zlib.compress(bytes(data), level)
    if algorithm is CompressionAlgorithm.DEFLATE:
        compressor = zlib.compressobj(level, zlib.DEFLATED, _RAW_DEFLATE_WBITS)
        return compressor.compress(bytes(data)) + compressor.flush()
    return lzma.compress(bytes(data), preset=None if level < 0 else level)


def decompress_bytes(data: _ReadBuf, algorithm: CompressionAlgorithm) -> bytes:
    """Decompress data in one shot, raising DecodeError for malformed input."""
    try:
        if algorithm is CompressionAlgorithm.ZLIB:
            return zlib.decompress(bytes(data))
        if algorithm is CompressionAlgorithm.DEFLATE:
            decompressor = zlib.decompressobj(_RAW_DEFLATE_WBITS)
            result = decompressor.decompress(bytes(data)) + decompressor.flush()
            if not decompressor.eof:
                raise zlib.error("incomplete or truncated stream")
            return result
        return lzma.decompress(bytes(data))
    except (zlib.error, lzma.LZMAError) as e:
        logger.debug("%s decompression of %d bytes failed: %s", algorithm, len(data), e)
        raise DecodeError(f"Invalid {algorithm} data: {e}") from e
