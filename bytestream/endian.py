from enum import Enum


class Endian(str, Enum):
    """
    Byte order used for multi-byte numbers.

    The hexadecimal number 0x12345678 has 4 bytes; 0x12 is the most
    significant and 0x78 the least significant.

        >>> Endian.BIG_ENDIAN        # writes 12 34 56 78
        >>> Endian.LITTLE_ENDIAN     # writes 78 56 34 12
    """

    BIG_ENDIAN = "bigEndian"
    LITTLE_ENDIAN = "littleEndian"

    @property
    def struct_prefix(self) -> str:
        """Byte order character for the struct module."""
        return ">" if self is Endian.BIG_ENDIAN else "<"

    @property
    def byteorder(self) -> str:
        """Byte order name for int.to_bytes / int.from_bytes."""
        return "big" if self is Endian.BIG_ENDIAN else "little"

    @classmethod
    def coerce(cls, value) -> "Endian":
        """Accept an Endian member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown endian {value!r}, expected 'bigEndian' or 'littleEndian'"
            ) from None

    def __str__(self) -> str:
        return self.value
