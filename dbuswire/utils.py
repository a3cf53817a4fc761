"""Byte helpers: hex conversion and alignment arithmetic."""

from __future__ import annotations


def hex_to_binary(text: str) -> bytes:
    """Convert whitespace-separated hex text into bytes.

    Each run of non-blank characters is read two characters at a time,
    and each pair is one byte.
    """
    result = bytearray()
    for word in text.split():
        for start in range(0, len(word), 2):
            piece = word[start:start + 2]
            try:
                result.append(int(piece, 16) & 0xFF)
            except ValueError as exc:
                raise ValueError(f"Invalid hex digits: {piece!r}") from exc
    return bytes(result)


def binary_to_hex(data: bytes) -> str:
    """Return lower-case hex text, two digits per byte."""
    return bytes(data).hex()


def is_aligned_to(pad: int, size: int) -> bool:
    """Return whether ``size`` is a multiple of ``pad``."""
    return size % pad == 0


def is_aligned_to_8(offset: int) -> bool:
    """Return whether ``offset`` lies on an 8-byte boundary."""
    return is_aligned_to(8, offset)


def get_padding(pad: int, size: int) -> int:
    """Return how many bytes must follow ``size`` bytes to reach a multiple of ``pad``."""
    if pad == 0:
        return 0
    return (pad - size % pad) % pad