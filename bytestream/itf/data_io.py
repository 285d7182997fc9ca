"""
Protocols for objects that read or write typed binary data at a cursor.

``DataInput`` covers the read side and ``DataOutput`` the write side, so a
function that only consumes data can accept any reader without depending on
``ByteStream`` itself.
"""
from typing import Protocol, Union, runtime_checkable

from bytestream.endian import Endian


@runtime_checkable
class DataInput(Protocol):
    @property
    def bytes_available(self) -> int: ...
    @property
    def endian(self) -> Endian: ...

    def read_bytes(self, destination, offset: int = 0, length: Union[int, None] = None) -> None: ...
    def read_boolean(self) -> bool: ...
    def read_byte(self) -> int: ...
    def read_unsigned_byte(self) -> int: ...
    def read_short(self) -> int: ...
    def read_unsigned_short(self) -> int: ...
    def read_int(self) -> int: ...
    def read_unsigned_int(self) -> int: ...
    def read_float(self) -> float: ...
    def read_double(self) -> float: ...
    def read_utf(self) -> str: ...
    def read_utf_bytes(self, length: int) -> str: ...
    def read_multi_byte(self, length: int, charset: str) -> str: ...


@runtime_checkable
class DataOutput(Protocol):
    @property
    def endian(self) -> Endian: ...

    def write_bytes(self, source, offset: int = 0, length: Union[int, None] = None) -> None: ...
    def write_boolean(self, value: object) -> None: ...
    def write_byte(self, value: int) -> None: ...
    def write_short(self, value: int) -> None: ...
    def write_int(self, value: int) -> None: ...
    def write_unsigned_int(self, value: int) -> None: ...
    def write_float(self, value: float) -> None: ...
    def write_double(self, value: float) -> None: ...
    def write_utf(self, value: str) -> None: ...
    def write_utf_bytes(self, value: str) -> None: ...
    def write_multi_byte(self, value: str, charset: str) -> None: ...
