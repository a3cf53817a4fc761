"""Fixed-width D-Bus integer types: INT16, UINT16, INT32, UINT32, INT64, UINT64."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .ostream import MessageOStream
from .scalars import DBusType


@dataclass
class _FixedInteger(DBusType):
    """An integer of fixed width that wraps to its range on construction."""

    value: int = 0

    size: ClassVar[int] = 4
    signed: ClassVar[bool] = False
    hex_width: ClassVar[int] = 4

    def __post_init__(self) -> None:
        bits = 8 * self.size
        wrapped = int(self.value) & ((1 << bits) - 1)
        if self.signed and wrapped >= 1 << (bits - 1):
            wrapped -= 1 << bits
        self.value = wrapped

    @property
    def unsigned_value(self) -> int:
        """The value's bit pattern read as an unsigned integer."""
        return self.value & ((1 << (8 * self.size)) - 1)

    def to_string(self, prefix: str = "") -> str:
        hex_text = format(self.unsigned_value, f"0{self.hex_width}x")
        return f"{prefix}{type(self).__name__} {self.value} (0x{hex_text})\n"

    def as_string(self) -> str:
        return str(self.value)


@dataclass
class Int16(_FixedInteger):
    """INT16: signed 16-bit integer, aligned to 2 bytes."""

    type_code: ClassVar[str] = "n"
    alignment: ClassVar[int] = 2
    size: ClassVar[int] = 2
    signed: ClassVar[bool] = True
    hex_width: ClassVar[int] = 2

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_int16(self.value)

    def to_string(self, prefix: str = "") -> str:
        return super().to_string(prefix)

    def as_string(self) -> str:
        return super().as_string()


@dataclass
class Uint16(_FixedInteger):
    """UINT16: unsigned 16-bit integer, aligned to 2 bytes."""

    type_code: ClassVar[str] = "q"
    alignment: ClassVar[int] = 2
    size: ClassVar[int] = 2
    signed: ClassVar[bool] = False
    hex_width: ClassVar[int] = 2

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_uint16(self.value)

    def to_string(self, prefix: str = "") -> str:
        return super().to_string(prefix)

    def as_string(self) -> str:
        return super().as_string()


@dataclass
class Int32(_FixedInteger):
    """INT32: signed 32-bit integer, aligned to 4 bytes."""

    type_code: ClassVar[str] = "i"
    alignment: ClassVar[int] = 4
    size: ClassVar[int] = 4
    signed: ClassVar[bool] = True
    hex_width: ClassVar[int] = 4

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_int32(self.value)

    def to_string(self, prefix: str = "") -> str:
        return super().to_string(prefix)

    def as_string(self) -> str:
        return super().as_string()


@dataclass
class Uint32(_FixedInteger):
    """UINT32: unsigned 32-bit integer, aligned to 4 bytes."""

    type_code: ClassVar[str] = "u"
    alignment: ClassVar[int] = 4
    size: ClassVar[int] = 4
    signed: ClassVar[bool] = False
    hex_width: ClassVar[int] = 4

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_uint32(self.value)

    def to_string(self, prefix: str = "") -> str:
        return super().to_string(prefix)

    def as_string(self) -> str:
        return super().as_string()


@dataclass
class Int64(_FixedInteger):
    """INT64: signed 64-bit integer, aligned to 8 bytes."""

    type_code: ClassVar[str] = "x"
    alignment: ClassVar[int] = 8
    size: ClassVar[int] = 8
    signed: ClassVar[bool] = True
    hex_width: ClassVar[int] = 8

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_int64(self.value)

    def to_string(self, prefix: str = "") -> str:
        return super().to_string(prefix)

    def as_string(self) -> str:
        return super().as_string()


@dataclass
class Uint64(_FixedInteger):
    """UINT64: unsigned 64-bit integer, aligned to 8 bytes."""

    type_code: ClassVar[str] = "t"
    alignment: ClassVar[int] = 8
    size: ClassVar[int] = 8
    signed: ClassVar[bool] = False
    hex_width: ClassVar[int] = 8

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_uint64(self.value)

    def to_string(self, prefix: str = "") -> str:
        return super().to_string(prefix)

    def as_string(self) -> str:
        return super().as_string()