"""
Minimal-size MessagePack packing for headers and numbers.

Every helper appends to a caller-owned ``bytearray``. Multi-byte values are
big-endian, as the MessagePack format requires.
"""

from __future__ import annotations

import struct

from ..errors import SizeLimitError

_U32_MAX = 0xFFFFFFFF
_I64_MIN = -0x8000000000000000
_U64_MAX = 0xFFFFFFFFFFFFFFFF
_F32_MAX = 3.4028234663852886e38

_pack_f32 = struct.Struct(">f").pack
_unpack_f32 = struct.Struct(">f").unpack
_pack_f64 = struct.Struct(">d").pack


def pack_uint(n: int, buf: bytearray) -> None:
    """Unsigned integer 0 <= n <= 2**64 - 1 in its smallest form."""
    if n <= 0x7F:
        buf.append(n)
    elif n <= 0xFF:
        buf.extend((0xCC, n))
    elif n <= 0xFFFF:
        buf.extend((0xCD, (n >> 8) & 0xFF, n & 0xFF))
    elif n <= _U32_MAX:
        buf.append(0xCE)
        buf.extend(n.to_bytes(4, "big"))
    else:
        buf.append(0xCF)
        buf.extend(n.to_bytes(8, "big"))


def pack_int(n: int, buf: bytearray, negative_fixint: bool = False) -> None:
    """
    Integer in its smallest form.

    Negative values use int 8/16/32/64; -32..-1 become a negative fixint only
    when ``negative_fixint`` is set.

    Raises:
        OverflowError: n is outside the int 64 and uint 64 ranges.
    """
    if n >= 0:
        if n > _U64_MAX:
            raise OverflowError(f"msgpack pack: integer {n} exceeds uint 64")
        pack_uint(n, buf)
    elif negative_fixint and n >= -32:
        buf.append((0x100 + n) & 0xFF)
    elif n >= -0x80:
        buf.extend((0xD0, (0x100 + n) & 0xFF))
    elif n >= -0x8000:
        buf.extend((0xD1, ((0x10000 + n) >> 8) & 0xFF, (0x10000 + n) & 0xFF))
    elif n >= -0x80000000:
        buf.append(0xD2)
        buf.extend(n.to_bytes(4, "big", signed=True))
    elif n >= _I64_MIN:
        buf.append(0xD3)
        buf.extend(n.to_bytes(8, "big", signed=True))
    else:
        raise OverflowError(f"msgpack pack: integer {n} below int 64")


def pack_float(x: float, buf: bytearray, compact: bool = False) -> None:
    """float 64, or float 32 when ``compact`` and float32 holds x exactly."""
    if compact and abs(x) <= _F32_MAX:
        packed = _pack_f32(x)
        if _unpack_f32(packed)[0] == x:
            buf.append(0xCA)
            buf.extend(packed)
            return
    buf.append(0xCB)
    buf.extend(_pack_f64(x))


def pack_str_header(n: int, buf: bytearray) -> None:
    """Header for a UTF-8 string of n bytes."""
    if n <= 31:
        buf.append(0xA0 | n)
    elif n <= 0xFF:
        buf.extend((0xD9, n))
    elif n <= 0xFFFF:
        buf.extend((0xDA, (n >> 8) & 0xFF, n & 0xFF))
    elif n <= _U32_MAX:
        buf.append(0xDB)
        buf.extend(n.to_bytes(4, "big"))
    else:
        raise SizeLimitError(f"string of {n} bytes exceeds the str 32 limit")


def _pack_container_header(
    n: int, buf: bytearray, fix: int, tag16: int, tag32: int, kind: str
) -> None:
    if n <= 15:
        buf.append(fix | n)
    elif n <= 0xFFFF:
        buf.extend((tag16, (n >> 8) & 0xFF, n & 0xFF))
    elif n <= _U32_MAX:
        buf.append(tag32)
        buf.extend(n.to_bytes(4, "big"))
    else:
        raise SizeLimitError(f"{kind} of {n} elements exceeds the 32-bit count limit")


def pack_array_header(n: int, buf: bytearray) -> None:
    """Header for an array of n elements."""
    _pack_container_header(n, buf, 0x90, 0xDC, 0xDD, "array")


def pack_map_header(n: int, buf: bytearray) -> None:
    """Header for a map of n key/value pairs."""
    _pack_container_header(n, buf, 0x80, 0xDE, 0xDF, "map")


__all__: tuple[str, ...] = (
    "pack_array_header",
    "pack_float",
    "pack_int",
    "pack_map_header",
    "pack_str_header",
    "pack_uint",
)
