"""`conflpy` command: check documents and print their tree or token stream."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from conflpy.ast import format_tree
from conflpy.diagnostics import ParseError
from conflpy.lexer import Lexer, dump_tokens
from conflpy.parser import DEFAULT_MAX_DEPTH, ParserOptions, parse


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="conflpy", description="Parse Confl documents and report errors.")
    parser.add_argument("paths", nargs="+", type=Path, help="Documents to parse.")
    parser.add_argument("--tokens", action="store_true", help="Print the token stream instead of the tree.")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum map/list nesting depth (defaults to {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument("--short", action="store_true", help="Report errors without source context.")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only report errors.")
    args = parser.parse_args(argv)

    try:
        options = ParserOptions(max_depth=args.max_depth)
    except ValueError as exc:
        parser.error(str(exc))

    failed = 0
    for path in args.paths:
        try:
            source = path.read_bytes()
        except OSError as exc:
            print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
            failed += 1
            continue

        if args.tokens:
            lexer = Lexer(source, allow_multiline_strings=options.allow_multiline_strings)
            tokens = lexer.lex()
            if not args.quiet:
                dump_tokens(tokens, source, lexer.diagnostics)
            if lexer.diagnostics:
                failed += 1
            continue

        try:
            root = parse(source, options=options)
        except ParseError as error:
            detail = error.message if args.short else error.with_source_context()
            print(f"{path}: {detail}", file=sys.stderr)
            failed += 1
            continue

        if not args.quiet:
            print(f"# {path}")
            print(format_tree(root))

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
