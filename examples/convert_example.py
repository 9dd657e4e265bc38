#!/usr/bin/env python3
"""Example: convert JSON text to MessagePack and inspect the chosen formats."""

import io

from json2msgpack import ConverterConfig, MalformedJSONError, convert, json_to_msgpack

# Smallest encoding is picked per value: fixint, uint 8, fixstr, str 8, ...
for doc in ["0", "100", "200", "-100", '""', "[]", "[1,[2,3]]", "1.5"]:
    print(f"{doc:<12} -> {json_to_msgpack(doc).hex(' ')}")

# Optional compact forms
options = ConverterConfig(negative_fixint=True, compact_floats=True)
print("compact -1  ->", json_to_msgpack("-1", options).hex(" "))
print("compact 1.5 ->", json_to_msgpack("1.5", options).hex(" "))

# Stream to stream
sink = io.BytesIO()
n = convert(io.StringIO('{"name": "example", "tags": ["a", "b"]}'), sink)
print(f"wrote {n} bytes:", sink.getvalue().hex(" "))

# Malformed input reports where it went wrong
try:
    json_to_msgpack('{"a": [1, 2,]}')
except MalformedJSONError as e:
    print("error:", e.reason, "at offset", e.offset)
