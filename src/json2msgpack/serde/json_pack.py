"""
Single-pass JSON to MessagePack encoder.

No tree is built: each value is encoded into a ``bytearray`` as soon as it is
recognized. Objects and arrays encode their members into a private scratch
buffer while counting them, then append the header for that count followed
by the buffered body to their parent's buffer.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, TextIO

from ..config import ConverterConfig
from ..errors import MalformedJSONError, NestingDepthError
from ..reader import Cursor
from .json_scalars import (
    encode_false,
    encode_null,
    encode_number,
    encode_string,
    encode_true,
)
from .msgpack_pack import pack_array_header, pack_map_header

logger = logging.getLogger(__name__)

_NUMBER_START = frozenset("-0123456789")


def encode_value(
    cur: Cursor, buf: bytearray, options: ConverterConfig, depth: int = 0
) -> None:
    """Encode the JSON value starting at the cursor into ``buf``."""
    c = cur.peek()
    if c == "{":
        encode_object(cur, buf, options, depth + 1)
    elif c == "[":
        encode_array(cur, buf, options, depth + 1)
    elif c == '"':
        encode_string(cur, buf)
    elif c in _NUMBER_START:
        encode_number(cur, buf, options)
    elif c == "f":
        encode_false(cur, buf)
    elif c == "n":
        encode_null(cur, buf)
    elif c == "t":
        encode_true(cur, buf)
    else:
        raise MalformedJSONError(f"unexpected character {c!r}", cur.offset)


def _after_member(cur: Cursor, close: str) -> bool:
    """Consume the separator after a member; True once ``close`` is reached."""
    cur.skip_whitespace()
    c = cur.peek()
    if c == close:
        return True
    if c != ",":
        raise MalformedJSONError(
            f"expected ',' or {close!r}, found {c!r}", cur.offset
        )
    cur.advance()
    cur.skip_whitespace()
    if cur.peek() == close:
        raise MalformedJSONError(f"trailing comma before {close!r}", cur.offset)
    return False


def encode_object(
    cur: Cursor, buf: bytearray, options: ConverterConfig, depth: int
) -> None:
    """Encode ``{...}`` as a MessagePack map."""
    if depth > options.max_depth:
        raise NestingDepthError(options.max_depth, cur.offset)
    cur.expect("{")
    cur.skip_whitespace()
    body = bytearray()
    n = 0
    done = cur.peek() == "}"
    while not done:
        if cur.peek() != '"':
            raise MalformedJSONError("object key must be a string", cur.offset)
        encode_string(cur, body)
        cur.skip_whitespace()
        cur.expect(":")
        cur.skip_whitespace()
        encode_value(cur, body, options, depth)
        n += 1
        done = _after_member(cur, "}")
    cur.advance()
    pack_map_header(n, buf)
    buf += body


def encode_array(
    cur: Cursor, buf: bytearray, options: ConverterConfig, depth: int
) -> None:
    """Encode ``[...]`` as a MessagePack array."""
    if depth > options.max_depth:
        raise NestingDepthError(options.max_depth, cur.offset)
    cur.expect("[")
    cur.skip_whitespace()
    body = bytearray()
    n = 0
    done = cur.peek() == "]"
    while not done:
        encode_value(cur, body, options, depth)
        n += 1
        done = _after_member(cur, "]")
    cur.advance()
    pack_array_header(n, buf)
    buf += body


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedJSONError(f"invalid UTF-8 ({e.reason})", e.start) from e


def json_to_msgpack(
    text: str | bytes, options: ConverterConfig | None = None
) -> bytes:
    """
    Convert one JSON text to MessagePack.

    Args:
        text: The whole JSON document; bytes are decoded as UTF-8.
        options: Converter settings; defaults when None.

    Returns:
        The MessagePack encoding of the document's single value.

    Raises:
        MalformedJSONError: the text is not a single valid JSON value.
        NestingDepthError: containers nest deeper than ``max_depth`` or than
            the Python stack allows.
        SizeLimitError: a string or container exceeds the 32-bit length limit.
    """
    if options is None:
        options = ConverterConfig()
    if isinstance(text, (bytes, bytearray)):
        text = _decode(bytes(text))
    cur = Cursor(text)
    cur.skip_whitespace()
    buf = bytearray()
    try:
        encode_value(cur, buf, options)
    except RecursionError:
        # max_depth above what the interpreter's stack allows
        raise NestingDepthError(options.max_depth, cur.offset) from None
    cur.skip_whitespace()
    if not cur.at_end:
        raise MalformedJSONError("trailing data after JSON value", cur.offset)
    logger.debug("Encoded %d codepoints into %d bytes", len(text), len(buf))
    return bytes(buf)


def convert(
    source: TextIO, sink: BinaryIO, options: ConverterConfig | None = None
) -> int:
    """
    Read all of ``source``, convert it and write the result to ``sink``.

    Nothing is written when the conversion fails.

    Returns:
        Number of bytes written.
    """
    data = json_to_msgpack(source.read(), options)
    sink.write(data)
    return len(data)


__all__: tuple[str, ...] = (
    "convert",
    "encode_array",
    "encode_object",
    "encode_value",
    "json_to_msgpack",
)
