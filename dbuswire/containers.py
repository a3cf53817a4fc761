"""Container D-Bus types: STRUCT, DICT_ENTRY and VARIANT."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

from .integers import Uint32
from .ostream import MessageOStream
from .scalars import DBusType, String
from .validation import check_basic_type

_INDENT = "   "


def _require_type(value: object) -> DBusType:
    if not isinstance(value, DBusType):
        raise TypeError(f"Expected a D-Bus value, got {type(value).__name__}")
    return value


class Struct(DBusType):
    """STRUCT: its fields marshalled in order, starting on an 8-byte boundary."""

    type_code: ClassVar[str] = "("
    alignment: ClassVar[int] = 8

    def __init__(self, *values: DBusType) -> None:
        self._values: list[DBusType] = []
        for value in values:
            self.add(value)

    @property
    def signature(self) -> str:
        return "(" + "".join(value.signature for value in self._values) + ")"

    def add(self, value: DBusType) -> None:
        """Append a field to the struct."""
        self._values.append(_require_type(value))

    def clear(self) -> None:
        """Remove every field."""
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> DBusType:
        return self._values[index]

    def __iter__(self) -> Iterator[DBusType]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Struct):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Struct({', '.join(repr(value) for value in self._values)})"

    def marshall(self, stream: MessageOStream) -> None:
        stream.pad8()
        for value in self._values:
            value.marshall(stream)

    def to_string(self, prefix: str = "") -> str:
        inner = prefix + _INDENT
        body = "".join(value.to_string(inner) for value in self._values)
        return f"{prefix}Struct {self.signature} <\n{body}{prefix}>\n"

    def as_string(self) -> str:
        return "[struct]"


def _coerce_key(key: Union[DBusType, str]) -> DBusType:
    if isinstance(key, str):
        return String(key)
    return _require_type(key)


def _coerce_value(value: Union[DBusType, str, int]) -> DBusType:
    if isinstance(value, str):
        return String(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Uint32(value)
    return _require_type(value)


class DictEntry(DBusType):
    """DICT_ENTRY: a key of basic type and a value, aligned to 8 bytes.

    Plain text keys and values become STRING, plain integer values UINT32.
    """

    type_code: ClassVar[str] = "{"
    alignment: ClassVar[int] = 8

    def __init__(
        self,
        key: Union[DBusType, str],
        value: Union[DBusType, str, int],
    ) -> None:
        self.key: DBusType
        self.value: DBusType
        self.set(key, value)

    def set(
        self,
        key: Union[DBusType, str],
        value: Union[DBusType, str, int],
    ) -> None:
        """Replace the key and value; the key must be of a basic type."""
        new_key = _coerce_key(key)
        new_value = _coerce_value(value)
        check_basic_type(new_key.signature)
        self.key = new_key
        self.value = new_value

    @property
    def signature(self) -> str:
        return "{" + self.key.signature + self.value.signature + "}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictEntry):
            return NotImplemented
        return (self.key, self.value) == (other.key, other.value)

    def __repr__(self) -> str:
        return f"DictEntry({self.key!r}, {self.value!r})"

    def marshall(self, stream: MessageOStream) -> None:
        stream.pad8()
        self.key.marshall(stream)
        self.value.marshall(stream)

    def to_string(self, prefix: str = "") -> str:
        inner = prefix + _INDENT
        return (
            f"{prefix}DictEntry ({self.signature}) : {{\n"
            f"{prefix}   key:   {self.key.to_string(inner)}"
            f"{prefix}   value: {self.value.to_string(inner)}"
            f"{prefix}}}\n"
        )

    def as_string(self) -> str:
        return "[DictEntry]"


@dataclass
class Variant(DBusType):
    """VARIANT: the SIGNATURE of its contents followed by the contents."""

    value: DBusType

    type_code: ClassVar[str] = "v"
    alignment: ClassVar[int] = 8

    def __post_init__(self) -> None:
        _require_type(self.value)

    @property
    def contained_signature(self) -> str:
        """The signature of the value the variant holds."""
        return self.value.signature

    def marshall(self, stream: MessageOStream) -> None:
        stream.write_signature(self.contained_signature)
        self.value.marshall(stream)

    def to_string(self, prefix: str = "") -> str:
        return (
            f"{prefix}Variant ({self.contained_signature})\n"
            f"{self.value.to_string(prefix + _INDENT)}"
        )

    def as_string(self) -> str:
        return self.value.as_string()