"""Exceptions raised by the JSON to MessagePack converter."""

from __future__ import annotations


class JSONMsgpackError(Exception):
    """Base class for every error raised by json2msgpack."""


class MalformedJSONError(JSONMsgpackError, ValueError):
    """
    The input is not a JSON text the converter accepts.

    Attributes:
        reason: Short description of the violation.
        offset: Codepoint offset into the text where it was detected
            (byte offset when the input bytes were not valid UTF-8).
    """

    def __init__(self, reason: str, offset: int) -> None:
        super().__init__(f"{reason} at offset {offset}")
        self.reason = reason
        self.offset = offset


class NestingDepthError(MalformedJSONError):
    """Containers are nested deeper than the configured limit."""

    def __init__(self, limit: int, offset: int) -> None:
        super().__init__(f"nesting deeper than {limit} levels", offset)
        self.limit = limit


class SizeLimitError(JSONMsgpackError, OverflowError):
    """A string or container is too large for a 32-bit MessagePack length."""


__all__: tuple[str, ...] = (
    "JSONMsgpackError",
    "MalformedJSONError",
    "NestingDepthError",
    "SizeLimitError",
)
