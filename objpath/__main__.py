"""Interface for ``python -m objpath``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

from ._version import version
from .errors import PathError
from .object_utils import (
    dash_to_lower_camel_keys,
    dash_to_snake_keys,
    delete_path,
    extract,
    flat,
    get_path,
    lower_camel_to_dash_keys,
    lower_camel_to_snake_keys,
    set_path,
    snake_to_dash_keys,
    snake_to_lower_camel_keys,
    unflat,
)


__all__ = ["main"]

_KEY_STYLES: dict[str, Callable[..., Any]] = {
    "lower-camel-to-snake": lower_camel_to_snake_keys,
    "lower-camel-to-dash": lower_camel_to_dash_keys,
    "snake-to-lower-camel": snake_to_lower_camel_keys,
    "snake-to-dash": snake_to_dash_keys,
    "dash-to-lower-camel": dash_to_lower_camel_keys,
    "dash-to-snake": dash_to_snake_keys,
}


def _load(source: str) -> Any:
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    return json.loads(text)


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _parse_selector(raw: str) -> str | dict[str, str]:
    destination, separator, source = raw.partition("=")
    return {destination: source} if separator else raw


def _run(args: Namespace) -> Any:
    document = _load(args.file)
    match args.command:
        case "get":
            return get_path(document, args.path, args.delimiter, args.strict)
        case "set":
            return set_path(document, args.path, _parse_value(args.value), args.delimiter, args.strict)
        case "delete":
            return delete_path(document, args.path, args.delimiter, not args.keep_empty, args.strict)
        case "extract":
            selectors = [_parse_selector(selector) for selector in args.selectors]
            return extract(document, selectors, args.delimiter, args.strict)
        case "flat":
            return flat(document, args.delimiter, args.prefix)
        case "unflat":
            return unflat(document, args.delimiter, args.strict)
        case "keys":
            return _KEY_STYLES[args.style](document, args.include, args.exclude, args.delimiter)
    msg = f"unknown command: {args.command}"
    raise ValueError(msg)


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="objpath", description="Read and reshape JSON documents through delimited paths.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level for diagnostic messages on stderr",
    )

    common = ArgumentParser(add_help=False)
    _ = common.add_argument("file", help="JSON document to read, '-' for stdin")
    _ = common.add_argument("-d", "--delimiter", default=".", help="path delimiter (default: '.')")

    strict = ArgumentParser(add_help=False)
    _ = strict.add_argument("--strict", action="store_true", help="fail on missing or blocked paths")

    commands = parser.add_subparsers(dest="command", required=True)

    get_parser = commands.add_parser("get", parents=[common, strict], help="print the value at a path")
    _ = get_parser.add_argument("path")

    set_parser = commands.add_parser("set", parents=[common, strict], help="set the value at a path")
    _ = set_parser.add_argument("path")
    _ = set_parser.add_argument("value", help="JSON value; anything that isn't JSON is used as a string")

    delete_parser = commands.add_parser("delete", parents=[common, strict], help="remove the value at a path")
    _ = delete_parser.add_argument("path")
    _ = delete_parser.add_argument("--keep-empty", action="store_true", help="keep containers left empty")

    extract_parser = commands.add_parser("extract", parents=[common, strict], help="copy selected paths")
    _ = extract_parser.add_argument("selectors", nargs="+", help="'path' or 'destination=source'")

    flat_parser = commands.add_parser("flat", parents=[common], help="flatten into a path map")
    _ = flat_parser.add_argument("--prefix", default="", help="prefix for every path")

    _ = commands.add_parser("unflat", parents=[common, strict], help="rebuild a document from a path map")

    keys_parser = commands.add_parser("keys", parents=[common], help="change the casing of keys")
    _ = keys_parser.add_argument("style", choices=sorted(_KEY_STYLES))
    _ = keys_parser.add_argument("-i", "--include", action="append", default=[], help="only rename this path")
    _ = keys_parser.add_argument("-e", "--exclude", action="append", default=[], help="never rename this path")
    return parser


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = _build_parser()
    namespace = parser.parse_args(args)
    logging.basicConfig(level=namespace.log_level, format="[%(levelname)s] %(name)s: %(message)s")

    try:
        result = _run(namespace)
    except (PathError, OSError, json.JSONDecodeError) as error:
        parser.exit(1, f"objpath: error: {error}\n")
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
