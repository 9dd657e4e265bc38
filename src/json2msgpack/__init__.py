"""
JSON to MessagePack in a single pass, choosing the smallest encoding for every value.
Pure Python; the parser writes MessagePack bytes directly, without building a tree.
"""

from .__about__ import __version__
from .config import ConverterConfig
from .errors import (JSONMsgpackError, MalformedJSONError, NestingDepthError,
                     SizeLimitError)
from .serde import convert, json_to_msgpack

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Conversion
    "convert",
    "json_to_msgpack",
    # Config
    "ConverterConfig",
    # Errors
    "JSONMsgpackError",
    "MalformedJSONError",
    "NestingDepthError",
    "SizeLimitError",
)
