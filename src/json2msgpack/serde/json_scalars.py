"""
JSON scalars (literals, numbers, strings) encoded straight to MessagePack.

Each encoder starts at the scalar's first codepoint, consumes exactly the
scalar, and appends its minimal MessagePack encoding to ``buf``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..errors import MalformedJSONError
from ..reader import WHITESPACE, Cursor
from .msgpack_pack import pack_float, pack_int, pack_str_header

if TYPE_CHECKING:
    from ..config import ConverterConfig


def encode_false(cur: Cursor, buf: bytearray) -> None:
    cur.expect_keyword("false")
    buf.append(0xC2)


def encode_null(cur: Cursor, buf: bytearray) -> None:
    cur.expect_keyword("null")
    buf.append(0xC0)


def encode_true(cur: Cursor, buf: bytearray) -> None:
    cur.expect_keyword("true")
    buf.append(0xC3)


# Numbers end at a structural delimiter or whitespace.
_NUMBER_STOP = frozenset("[{]}:,") | WHITESPACE
_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
# len("-9223372036854775808"), len("18446744073709551615") == 20
_MAX_INT_TOKEN = 20
_INT_MIN = -0x8000000000000000
_INT_MAX = 0xFFFFFFFFFFFFFFFF


def encode_number(cur: Cursor, buf: bytearray, options: ConverterConfig) -> None:
    """
    Encode a JSON number.

    Integral tokens take the smallest integer format that holds them (uint 8
    first, then int 8, wider unsigned, wider signed); everything else,
    including integers beyond 64 bits, is a float.
    """
    start = cur.offset
    token = cur.take_while_not(_NUMBER_STOP)
    m = _NUMBER_RE.fullmatch(token)
    if m is None:
        raise MalformedJSONError(f"invalid number {token!r}", start)
    if m.group(1) is None and m.group(2) is None and len(token) <= _MAX_INT_TOKEN:
        n = int(token)
        if _INT_MIN <= n <= _INT_MAX:
            pack_int(n, buf, options.negative_fixint)
            return
    pack_float(float(token), buf, options.compact_floats)


_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
# Runs of plain characters are copied in one slice; these need a closer look.
_STRING_STOP = (
    frozenset('"\\')
    | frozenset(map(chr, range(0x20)))
    | frozenset(map(chr, range(0xD800, 0xE000)))
)


def _read_hex4(cur: Cursor, start: int) -> int:
    digits = "".join(cur.advance() for _ in range(4))
    if not _HEX_DIGITS.issuperset(digits):
        raise MalformedJSONError(f"invalid \\u escape {digits!r}", start)
    return int(digits, 16)


def _read_escape(cur: Cursor, start: int) -> str:
    """Decode the escape whose backslash is at ``start`` (already consumed)."""
    e = cur.advance()
    if e in _ESCAPES:
        return _ESCAPES[e]
    if e != "u":
        raise MalformedJSONError(f"invalid escape '\\{e}'", start)
    cp = _read_hex4(cur, start)
    if 0xDC00 <= cp <= 0xDFFF:
        raise MalformedJSONError("unpaired low surrogate escape", start)
    if 0xD800 <= cp <= 0xDBFF:
        # must be followed by \uDC00-\uDFFF
        if cur.at_end or cur.peek() != "\\":
            raise MalformedJSONError("unpaired high surrogate escape", start)
        cur.advance()
        if cur.at_end or cur.peek() != "u":
            raise MalformedJSONError("unpaired high surrogate escape", start)
        cur.advance()
        low = _read_hex4(cur, start)
        if not 0xDC00 <= low <= 0xDFFF:
            raise MalformedJSONError("unpaired high surrogate escape", start)
        cp = 0x10000 + ((cp - 0xD800) << 10) + (low - 0xDC00)
    return chr(cp)


def encode_string(cur: Cursor, buf: bytearray) -> None:
    """Encode a JSON string as a MessagePack str (UTF-8 payload)."""
    open_quote = cur.offset
    cur.expect('"')
    parts: list[str] = []
    while True:
        parts.append(cur.take_while_not(_STRING_STOP))
        if cur.at_end:
            raise MalformedJSONError("unterminated string", open_quote)
        start = cur.offset
        c = cur.advance()
        if c == '"':
            break
        if c == "\\":
            parts.append(_read_escape(cur, start))
        elif c < " ":
            raise MalformedJSONError(f"control character {c!r} in string", start)
        else:
            raise MalformedJSONError("unpaired surrogate in string", start)
    data = "".join(parts).encode("utf-8")
    pack_str_header(len(data), buf)
    buf.extend(data)


__all__: tuple[str, ...] = (
    "encode_false",
    "encode_null",
    "encode_number",
    "encode_string",
    "encode_true",
)
