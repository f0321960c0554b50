from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import LoadError, SnipgenError
from .loader import load_collection, load_request
from .request import Request
from .targets import get_target, list_targets


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snipgen", description="Generate HTTP request code snippets.")
    parser.add_argument("source", nargs="?", help="Path or URL of a request or collection (JSON/YAML)")
    parser.add_argument("-t", "--target", default="python-http.client", help="Target id (see --list-targets)")
    parser.add_argument("--list-targets", action="store_true", help="List available targets and exit")
    parser.add_argument("--request", dest="request_name", help="Name of the collection request to convert")
    parser.add_argument("--indent-type", choices=["Tab", "Space"], help="Indentation character")
    parser.add_argument("--indent-count", type=int, help="Indentation characters per level")
    parser.add_argument("--timeout", type=int, help="Request timeout in milliseconds (0 for none)")
    parser.add_argument("--no-follow-redirect", action="store_true", help="Do not follow redirects")
    parser.add_argument("--trim", action="store_true", help="Trim request body fields")
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Set any target option; VALUE is parsed as JSON when possible",
    )
    parser.add_argument("-o", "--output", type=Path, help="Write the snippet to a file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.list_targets:
        for target in list_targets():
            print(f"{target.id}\t{target.label}")
        return 0
    if args.source is None:
        parser.error("the following arguments are required: source")

    try:
        target = get_target(args.target)
        request = _select_request(args.source, args.request_name)
        snippet = target.generate(request, _build_options(args)).code
    except SnipgenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        args.output.write_text(snippet + "\n", encoding="utf-8")
    else:
        print(snippet)
    return 0


def _select_request(source: str, name: str | None) -> Request:
    if name is None:
        return load_request(source)
    for item in load_collection(source):
        if item.name == name or item.name.rsplit("/", 1)[-1] == name:
            return item.request
    raise LoadError(f"No request named {name!r} in {source}")


def _build_options(args: argparse.Namespace) -> dict[str, object]:
    options: dict[str, object] = {}
    if args.indent_type is not None:
        options["indentType"] = args.indent_type
    if args.indent_count is not None:
        options["indentCount"] = args.indent_count
    if args.timeout is not None:
        options["requestTimeout"] = args.timeout
    if args.no_follow_redirect:
        options["followRedirect"] = False
    if args.trim:
        options["trimRequestBody"] = True
    for item in args.option:
        key, _, value = item.partition("=")
        try:
            options[key.strip()] = json.loads(value)
        except json.JSONDecodeError:
            options[key.strip()] = value
    return options


if __name__ == "__main__":
    raise SystemExit(main())
