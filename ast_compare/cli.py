"""Command-line interface for ast_compare."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .ast_utils import format_tree
from .comparison import compare_ast
from .errors import GrammarError
from .parser import get_supported_languages, language_for_path, parse_code

EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def _read_source(path: Path) -> str:
    return path.read_text(encoding="utf8")


def _run_compare(args: argparse.Namespace) -> int:
    language_id = args.language or language_for_path(args.expected)
    expected = _read_source(args.expected)
    actual = _read_source(args.actual)

    if args.verbose:
        print("=" * 80)
        print(f"Comparing {args.expected} with {args.actual} as {language_id}")
        print("=" * 80)

    result = compare_ast(expected, actual, language_id, verbose=args.verbose)
    if result.equal:
        print("Equal")
        return EXIT_EQUAL

    print(f"Found {len(result.differences)} difference(s):")
    print(result.report())
    return EXIT_DIFFERENT


def _run_inspect(args: argparse.Namespace) -> int:
    language_id = args.language or language_for_path(args.file)
    try:
        tree = parse_code(_read_source(args.file), language_id)
    except GrammarError as exc:
        print(f"Tree-sitter not supported for language: {language_id} ({exc})", file=sys.stderr)
        return EXIT_ERROR

    print(format_tree(tree.root_node, named_only=not args.all))
    return EXIT_EQUAL


def _run_languages(args: argparse.Namespace) -> int:
    for language_id in get_supported_languages():
        print(language_id)
    return EXIT_EQUAL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ast-compare",
        description="Compare source files by their Tree-sitter syntax trees",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Compare two source files")
    compare.add_argument("expected", type=Path, help="File with the expected code")
    compare.add_argument("actual", type=Path, help="File with the actual code")
    compare.add_argument(
        "--language",
        help="Language identifier (default: inferred from the expected file's extension)",
    )
    compare.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed comparison trace",
    )
    compare.set_defaults(handler=_run_compare)

    inspect = subparsers.add_parser("inspect", help="Print the syntax tree of a file")
    inspect.add_argument("file", type=Path, help="Source file to parse")
    inspect.add_argument(
        "--language",
        help="Language identifier (default: inferred from the file extension)",
    )
    inspect.add_argument(
        "--all",
        action="store_true",
        help="Include anonymous nodes such as punctuation",
    )
    inspect.set_defaults(handler=_run_inspect)

    languages = subparsers.add_parser("languages", help="List supported language identifiers")
    languages.set_defaults(handler=_run_languages)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
