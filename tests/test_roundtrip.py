"""Decoding the converter's output with msgpack gives back the JSON value."""

from __future__ import annotations

import json

import msgpack
import pytest

from json2msgpack import ConverterConfig, json_to_msgpack

DOCUMENTS = [
    "0",
    "-1",
    "255",
    "-129",
    "65536",
    "18446744073709551615",
    "-9223372036854775808",
    "3.14159",
    "-2.5e-7",
    "1e300",
    '""',
    '"hello"',
    '"' + "x" * 300 + '"',
    r'"tab\tnewline\nquote\" é 😀"',
    "[]",
    "{}",
    "[1, [2, [3, [4]]]]",
    '{"a": {"b": {"c": [true, false, null]}}}',
    json.dumps({f"key{i}": list(range(i)) for i in range(20)}),
    json.dumps([{"id": i, "name": f"item {i}", "score": i / 7} for i in range(40)]),
]


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_roundtrip(doc: str) -> None:
    packed = json_to_msgpack(doc)
    assert msgpack.unpackb(packed, raw=False) == json.loads(doc)


@pytest.mark.parametrize("doc", DOCUMENTS)
def test_roundtrip_with_compact_options(doc: str) -> None:
    options = ConverterConfig(negative_fixint=True, compact_floats=True)
    packed = json_to_msgpack(doc, options)
    assert msgpack.unpackb(packed, raw=False) == json.loads(doc)


def test_matches_msgpack_packb() -> None:
    value = {
        "ints": [0, 1, 127, 128, 255, 256, 65535, 65536, -1, -200, -40000],
        "strings": ["", "a" * 31, "a" * 32, "a" * 255, "a" * 256],
        "nested": [[], {}, [[[]]]],
    }
    ours = json_to_msgpack(json.dumps(value), ConverterConfig(negative_fixint=True))
    assert ours == msgpack.packb(value, use_bin_type=True)
