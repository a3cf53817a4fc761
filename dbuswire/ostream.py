"""An output stream that marshalls D-Bus wire data in little-endian order."""

from __future__ import annotations

import struct
from typing import Union

from .utils import get_padding

_Writable = Union[bytes, bytearray, memoryview, str, "MessageOStream"]


def _to_bytes(text: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


class MessageOStream:
    """Accumulates marshalled values, inserting alignment padding as needed.

    Integers are written with two's-complement wrap-around to their width,
    so signed and unsigned writers of one width accept the same range.
    """

    def __init__(self) -> None:
        self.data = bytearray()

    def __len__(self) -> int:
        return len(self.data)

    def write_byte(self, value: int) -> None:
        self.data.append(value & 0xFF)

    def write_boolean(self, value: object) -> None:
        self.write_uint32(1 if value else 0)

    def _write_fixed(self, value: int, size: int) -> None:
        self.pad(size)
        self.data += (value & ((1 << (8 * size)) - 1)).to_bytes(size, "little")

    def write_int16(self, value: int) -> None:
        self._write_fixed(value, 2)

    def write_uint16(self, value: int) -> None:
        self._write_fixed(value, 2)

    def write_int32(self, value: int) -> None:
        self._write_fixed(value, 4)

    def write_uint32(self, value: int) -> None:
        self._write_fixed(value, 4)

    def write_int64(self, value: int) -> None:
        self._write_fixed(value, 8)

    def write_uint64(self, value: int) -> None:
        self._write_fixed(value, 8)

    def write_double(self, value: float) -> None:
        self.pad8()
        self.data += struct.pack("<d", value)

    def write(self, data: _Writable) -> None:
        """Append raw bytes, text (as UTF-8) or another stream's contents."""
        if isinstance(data, MessageOStream):
            self.data += bytes(data.data)
        else:
            self.data += _to_bytes(data)

    def write_string(self, text: Union[str, bytes]) -> None:
        """Write a STRING: aligned uint32 length, the bytes, then a nul."""
        raw = _to_bytes(text)
        self.write_uint32(len(raw))
        self.data += raw
        self.write_byte(0)

    def write_signature(self, text: Union[str, bytes]) -> None:
        """Write a SIGNATURE: one length byte, the bytes, then a nul."""
        raw = _to_bytes(text)
        if len(raw) > 255:
            raise ValueError("Signature longer than 255 bytes")
        self.write_byte(len(raw))
        self.data += raw
        self.write_byte(0)

    def pad(self, alignment: int) -> None:
        self.data += bytes(get_padding(alignment, len(self.data)))

    def pad2(self) -> None:
        self.pad(2)

    def pad4(self) -> None:
        self.pad(4)

    def pad8(self) -> None:
        self.pad(8)