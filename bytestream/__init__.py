from bytestream.compression import CompressionAlgorithm
from bytestream.endian import Endian
from bytestream.errors import ByteStreamError, DecodeError, EndOfStreamError, LengthError
from bytestream.itf.data_io import DataInput, DataOutput
from bytestream.stream import ByteStream

__version__ = "0.1.0"

__all__ = [
    "ByteStream",
    "Endian",
    "CompressionAlgorithm",
    "DataInput",
    "DataOutput",
    "ByteStreamError",
    "LengthError",
    "EndOfStreamError",
    "DecodeError",
]
