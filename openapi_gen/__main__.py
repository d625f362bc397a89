"""Entry point: python -m openapi_gen [--output PATH] INPUT

Reads a Swagger JSON schema and generates C# model classes, written to
--output or to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .codegen import generate
from .config import DEFAULT_JSON_ATTRIBUTE, DEFAULT_NAMESPACE, config_from_args
from .exceptions import GeneratorError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openapi-gen",
        usage="openapi-gen [flags] inputs...",
        description="Generate C# model classes from a Swagger JSON schema.",
    )
    parser.add_argument("inputs", nargs="*", help="Input schema file (only the first is used).")
    parser.add_argument("--output", default="", help="The output for generated code.")
    parser.add_argument(
        "--namespace", default=DEFAULT_NAMESPACE,
        help=f"Namespace of the generated code (default: {DEFAULT_NAMESPACE}).",
    )
    parser.add_argument(
        "--json-attribute", default=DEFAULT_JSON_ATTRIBUTE,
        help=f"Serialization attribute put on each property (default: {DEFAULT_JSON_ATTRIBUTE}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.inputs:
        print(f"No input file found: {args.inputs}\n")
        parser.print_help(sys.stdout)
        return 0

    config = config_from_args(args)
    try:
        generate(config)
    except GeneratorError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
