#!/usr/bin/env python3
"""
Command-line interface for javastruct.
"""

import argparse
import logging
import sys


def parse_command(args) -> int:
    """Parse source files and print each compilation unit."""
    from .errors import ParseError, SourceLoadError
    from .parser import JavaParser
    from .render import render_tree

    parser = JavaParser(strict=args.strict)

    status = 0
    for source_file in args.files:
        try:
            unit = parser.parse_file(source_file)
        except SourceLoadError as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 1
            continue
        except ParseError as e:
            print(f"Error parsing {source_file}: {e}", file=sys.stderr)
            status = 1
            continue

        if args.format == "json":
            print(unit.to_json())
        else:
            print(f"{source_file}:")
            print(render_tree(unit))

    return status


def main(argv=None) -> int:
    """Main entry point for the javastruct CLI."""
    parser = argparse.ArgumentParser(
        prog="javastruct",
        description="Parse simplified Java-like source files into a structural AST",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse source files and print their structure",
    )
    parse_parser.add_argument(
        "files",
        nargs="+",
        help="Source files to parse",
    )
    parse_parser.add_argument(
        "-f", "--format",
        choices=("tree", "json"),
        default="tree",
        help="Output format (default: tree)",
    )
    parse_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject files with more than one package declaration",
    )
    parse_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parse_parser.set_defaults(func=parse_command)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
