"""Basic D-Bus value types: boolean, byte, double, string, object path, signature."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Union

from .ostream import MessageOStream

_Text = Union[str, bytes, bytearray]


def _as_text(value: _Text) -> str:
    """Return ``value`` as text; undecodable bytes survive as surrogate escapes."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "surrogateescape")
    return str(value)


def _as_bytes(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


class DBusType(ABC):
    """A value that can be marshalled onto the D-Bus wire."""

    type_code: ClassVar[str] = ""
    alignment: ClassVar[int] = 1

    @property
    def signature(self) -> str:
        """The D-Bus signature of this value."""
        return self.type_code

    @abstractmethod
    def marshall(self, stream: MessageOStream) -> None:
        """Append the wire form of this value to ``stream``."""

    def to_string(self, prefix: str = "") -> str:
        """Return a one-line, human-readable description ending in a newline."""
        return f"{prefix}{type(self).__name__} {self.as_string()}\n"

    def as_string(self) -> str:
        """Return the value itself as text."""
        return str(getattr(self, "value", ""))


@dataclass
class Boolean(DBusType):
    """BOOLEAN: carried as a 32-bit unsigned integer."""

    value: int = 0

    type_code: ClassVar[str] = "b"
    alignment: ClassVar[int] = 4

    def __post_init__(self) -> None:
        self.value = int(self.value) & 0xFFFFFFFF

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_boolean(self.value != 0)

    def to_string(self, prefix: str = "") -> str:
        return f"{prefix}Boolean {'True' if self.value else 'False'}\n"

    def as_string(self) -> str:
        return str(self.value)


@dataclass
class Byte(DBusType):
    """BYTE: a single unsigned octet."""

    value: int = 0

    type_code: ClassVar[str] = "y"
    alignment: ClassVar[int] = 1

    def __post_init__(self) -> None:
        self.value = int(self.value) & 0xFF

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_byte(self.value)

    def to_string(self, prefix: str = "") -> str:
        return f"{prefix}Byte {self.value} (0x{self.value:02x})\n"

    def as_string(self) -> str:
        return str(self.value)


@dataclass
class Double(DBusType):
    """DOUBLE: an IEEE 754 double, aligned to 8 bytes."""

    value: float = 0.0

    type_code: ClassVar[str] = "d"
    alignment: ClassVar[int] = 8

    def __post_init__(self) -> None:
        self.value = float(self.value)

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_double(self.value)

    def to_string(self, prefix: str = "") -> str:
        return f"{prefix}Double {self.as_string()}\n"

    def as_string(self) -> str:
        return format(self.value, "g")


@dataclass
class String(DBusType):
    """STRING: uint32 byte length, the bytes, then a nul."""

    value: str = ""

    type_code: ClassVar[str] = "s"
    alignment: ClassVar[int] = 4

    def __post_init__(self) -> None:
        self.value = _as_text(self.value)

    @property
    def encoded(self) -> bytes:
        """The bytes that go on the wire, without length or terminator."""
        return _as_bytes(self.value)

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_string(self.encoded)

    def to_string(self, prefix: str = "") -> str:
        return f'{prefix}String ({len(self.encoded)}) "{self.value}"\n'

    def as_string(self) -> str:
        return self.value


@dataclass
class ObjectPath(String):
    """OBJECT_PATH: marshalled exactly like a STRING."""

    type_code: ClassVar[str] = "o"


@dataclass
class Signature(DBusType):
    """SIGNATURE: one length byte, the type codes, then a nul."""

    value: str = ""

    type_code: ClassVar[str] = "g"
    alignment: ClassVar[int] = 1

    def __post_init__(self) -> None:
        self.value = _as_text(self.value)

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_signature(_as_bytes(self.value))

    def to_string(self, prefix: str = "") -> str:
        return f"{prefix}Signature ({self.value})\n"

    def as_string(self) -> str:
        return self.value