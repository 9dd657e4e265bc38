"""CLI entrypoint: convert a JSON file (or stdin) to MessagePack."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import ConverterConfig
from .errors import JSONMsgpackError
from .serde import json_to_msgpack

logger = logging.getLogger("json2msgpack")

EXIT_IO_ERROR = 1
EXIT_BAD_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2msgpack",
        description="Convert a JSON document to MessagePack",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="JSON file to read (default: standard input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="File to write MessagePack to (default: standard output)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help="Maximum nesting depth (overrides JSON2MSGPACK_MAX_DEPTH)",
    )
    parser.add_argument(
        "--negative-fixint",
        action="store_true",
        default=None,
        help="Encode -32..-1 as single-byte negative fixints",
    )
    parser.add_argument(
        "--compact-floats",
        action="store_true",
        default=None,
        help="Encode floats exactly representable in 32 bits as float 32",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Build config from env vars, with CLI flags taking precedence
    overrides = {
        "max_depth": args.max_depth,
        "negative_fixint": args.negative_fixint,
        "compact_floats": args.compact_floats,
        "log_level": args.log_level,
    }
    try:
        config = ConverterConfig(
            **{k: v for k, v in overrides.items() if v is not None}
        )
    except ValidationError as e:
        problems = ("%s: %s" % (err["loc"][0], err["msg"]) for err in e.errors())
        parser.error("; ".join(problems))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    source_name = args.input if args.input is not None else "<stdin>"
    try:
        if args.input is None:
            data = sys.stdin.buffer.read()
        else:
            with open(args.input, "rb") as f:
                data = f.read()
    except OSError as e:
        logger.error("%s: %s", source_name, e.strerror or e)
        return EXIT_IO_ERROR

    try:
        packed = json_to_msgpack(data, config)
    except JSONMsgpackError as e:
        logger.error("%s: %s", source_name, e)
        return EXIT_BAD_INPUT

    try:
        if args.output is None:
            sys.stdout.buffer.write(packed)
            sys.stdout.buffer.flush()
        else:
            with open(args.output, "wb") as f:
                f.write(packed)
    except OSError as e:
        logger.error("%s: %s", args.output or "<stdout>", e.strerror or e)
        return EXIT_IO_ERROR

    logger.info(
        "Converted %s (%d bytes) to %s (%d bytes)",
        source_name,
        len(data),
        args.output or "<stdout>",
        len(packed),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
