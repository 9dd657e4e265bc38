"""Serialization (serde): JSON text to MessagePack, minimal-size packing helpers."""

from .json_pack import convert, json_to_msgpack
from .msgpack_pack import (pack_array_header, pack_float, pack_int,
                           pack_map_header, pack_str_header, pack_uint)

__all__: tuple[str, ...] = (
    "convert",
    "json_to_msgpack",
    "pack_array_header",
    "pack_float",
    "pack_int",
    "pack_map_header",
    "pack_str_header",
    "pack_uint",
)
