from __future__ import annotations

import os

# Environment-driven defaults
DEFAULT_ENDIAN = os.environ.get("BYTESTREAM_DEFAULT_ENDIAN", "bigEndian")
COMPRESSION_LEVEL = int(os.environ.get("BYTESTREAM_COMPRESSION_LEVEL", "-1"))
ZERO_LENGTH_MODE = os.environ.get("BYTESTREAM_ZERO_LENGTH_MODE", "explicit")

_ZERO_LENGTH_MODES = ("explicit", "legacy")


def set_default_endian(endian: str) -> None:
    """Set the byte order new streams start with: 'bigEndian' or 'littleEndian'."""
    from bytestream.endian import Endian

    global DEFAULT_ENDIAN
    DEFAULT_ENDIAN = Endian.coerce(endian).value


def set_compression_level(level: int) -> None:
    """Set the level used by compress(); -1 selects the codec default."""
    from bytestream.constants import MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL

    level = int(level)
    if not (MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL):
        raise ValueError(
            f"COMPRESSION_LEVEL must be in [{MIN_COMPRESSION_LEVEL}, {MAX_COMPRESSION_LEVEL}], got {level}"
        )
    global COMPRESSION_LEVEL
    COMPRESSION_LEVEL = level


def set_zero_length_mode(mode: str) -> None:
    """Set how an explicit length of 0 is read by read_bytes/write_bytes: 'explicit' or 'legacy'."""
    if mode not in _ZERO_LENGTH_MODES:
        raise ValueError("ZERO_LENGTH_MODE must be 'explicit' or 'legacy'")
    global ZERO_LENGTH_MODE
    ZERO_LENGTH_MODE = mode


def is_legacy_zero_length() -> bool:
    """True when an explicit length of 0 means 'copy the default amount'."""
    return ZERO_LENGTH_MODE == "legacy"


# Reject bad environment values at import rather than on first use
set_default_endian(DEFAULT_ENDIAN)
set_compression_level(COMPRESSION_LEVEL)
set_zero_length_mode(ZERO_LENGTH_MODE)
