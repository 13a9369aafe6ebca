from __future__ import annotations

from typing import Dict, List

from workbench.errors import ValidationError

CROCKFORD = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_DECODE: Dict[str, int] = {char: index for index, char in enumerate(CROCKFORD)}


def encode_fixed_width(value: int, width: int) -> str:
    """Encode ``value`` as exactly ``width`` symbols, most significant first.

    Bits above ``width * 5`` are dropped rather than reported.
    """
    chars: List[str] = []
    for _ in range(width):
        chars.append(CROCKFORD[value % 32])
        value //= 32
    return "".join(reversed(chars))


def encode_bits(data: bytes) -> str:
    """Pack ``data`` into 5-bit groups; a short final group is zero-filled on the low end."""
    chars: List[str] = []
    buffer = 0
    bit_count = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bit_count += 8
        while bit_count >= 5:
            bit_count -= 5
            chars.append(CROCKFORD[(buffer >> bit_count) & 0x1F])
        buffer &= (1 << bit_count) - 1
    if bit_count:
        chars.append(CROCKFORD[(buffer << (5 - bit_count)) & 0x1F])
    return "".join(chars)


def _symbol_value(char: str) -> int:
    value = _DECODE.get(char.upper())
    if value is None:
        raise ValidationError(f"Invalid Base32 symbol: {char!r}")
    return value


def decode_fixed_width(text: str) -> int:
    value = 0
    for char in text:
        value = value * 32 + _symbol_value(char)
    return value


def decode_bits(text: str, byte_count: int) -> bytes:
    """Inverse of :func:`encode_bits`; padding bits of the final symbol are discarded."""
    out = bytearray()
    buffer = 0
    bit_count = 0
    for char in text:
        buffer = (buffer << 5) | _symbol_value(char)
        bit_count += 5
        if bit_count >= 8:
            bit_count -= 8
            out.append((buffer >> bit_count) & 0xFF)
            buffer &= (1 << bit_count) - 1
        if len(out) == byte_count:
            break
    if len(out) < byte_count:
        raise ValidationError(f"Expected {byte_count} bytes, decoded {len(out)}.")
    return bytes(out)
