"""Exceptions raised by ByteStream operations."""


class ByteStreamError(Exception):
    """Base class for stream errors."""


class LengthError(ByteStreamError, ValueError):
    """A string is too long for its 16-bit length prefix."""


class EndOfStreamError(ByteStreamError, EOFError):
    """A read or copy reaches past the bounds of the buffer."""

    def __init__(self, requested: int, offset: int, available: int):
        self.requested = requested
        self.offset = offset
        self.available = available
        super().__init__(
            f"Insufficient buffer: expected {requested} bytes at offset {offset}, "
            f"have {available} bytes"
        )


class DecodeError(ByteStreamError, ValueError):
    """Buffer content is not valid compressed data."""
