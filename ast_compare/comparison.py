"""Structural comparison of source snippets through their syntax trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from tree_sitter import Node

from .ast_utils import collapse_whitespace, node_text, normalize_text, preview
from .errors import GrammarError
from .parser import parse_code

PREVIEW_LENGTH = 50
ROOT_PATH = "root"
FALLBACK_NOTICE = "String comparison (language not supported for AST): texts differ"


@dataclass(frozen=True)
class ComparisonResult:
    differences: Tuple[str, ...] = ()

    @property
    def equal(self) -> bool:
        return not self.differences

    def __bool__(self) -> bool:
        return self.equal

    def report(self) -> str:
        return "\n".join(self.differences)


def _verbose_printer(verbose: bool):
    return (
        (lambda *args, **kwargs: print(*args, **kwargs))
        if verbose
        else (lambda *args, **kwargs: None)
    )


def compare_nodes(
    expected: Node,
    actual: Node,
    path: str = ROOT_PATH,
    *,
    verbose: bool = False,
) -> List[str]:
    """Compare two syntax trees and describe where they diverge.

    Each node pair is checked for type, whitespace-insensitive text and
    named child count, in that order. The first failing check is recorded
    and the pair's children are not visited; sibling pairs are still
    compared. Differences come back in pre-order.
    """
    verbose_print = _verbose_printer(verbose)
    differences: List[str] = []
    pending: List[Tuple[Node, Node, str]] = [(expected, actual, path)]

    while pending:
        expected_node, actual_node, current_path = pending.pop()
        verbose_print(f"  Visiting {current_path} ({expected_node.type})")

        if expected_node.type != actual_node.type:
            differences.append(
                f"Node type mismatch at {current_path}: "
                f'expected "{expected_node.type}", got "{actual_node.type}"'
            )
            continue

        expected_text = node_text(expected_node)
        actual_text = node_text(actual_node)
        if normalize_text(expected_text) != normalize_text(actual_text):
            differences.append(
                f"Node text mismatch at {current_path} ({expected_node.type}):\n"
                f'  Expected: "{preview(expected_text, PREVIEW_LENGTH)}"\n'
                f'  Actual:   "{preview(actual_text, PREVIEW_LENGTH)}"'
            )
            continue

        expected_count = expected_node.named_child_count
        actual_count = actual_node.named_child_count
        if expected_count != actual_count:
            differences.append(
                f"Child count mismatch at {current_path}: "
                f"expected {expected_count}, got {actual_count}"
            )
            continue

        children = []
        for index in range(expected_count):
            expected_child = expected_node.named_child(index)
            actual_child = actual_node.named_child(index)
            # Grammars may report a count they cannot back with nodes.
            if expected_child is None or actual_child is None:
                verbose_print(f"    Skipping missing child {index} of {current_path}")
                continue
            children.append(
                (
                    expected_child,
                    actual_child,
                    f"{current_path}.{expected_child.type}[{index}]",
                )
            )
        pending.extend(reversed(children))

    return differences


def compare_text(expected: str, actual: str) -> List[str]:
    """Compare two texts with whitespace runs collapsed."""
    if collapse_whitespace(expected) != collapse_whitespace(actual):
        return [FALLBACK_NOTICE]
    return []


def _check_arguments(expected, actual, language_id) -> None:
    for name, value in (
        ("expected", expected),
        ("actual", actual),
        ("language_id", language_id),
    ):
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    if not language_id.strip():
        raise ValueError("language_id must not be empty")


def compare_ast(
    expected: str,
    actual: str,
    language_id: str,
    *,
    verbose: bool = False,
) -> ComparisonResult:
    """Compare *expected* and *actual* source for structural equality.

    Both texts are parsed with the grammar registered for *language_id*.
    When either cannot be parsed the texts are compared as plain strings
    with whitespace collapsed instead.
    """
    _check_arguments(expected, actual, language_id)
    verbose_print = _verbose_printer(verbose)

    try:
        expected_tree = parse_code(expected, language_id)
        actual_tree = parse_code(actual, language_id)
    except GrammarError as exc:
        verbose_print(f"AST comparison unavailable for {language_id!r}: {exc}")
        verbose_print("Falling back to whitespace-collapsed string comparison")
        return ComparisonResult(tuple(compare_text(expected, actual)))

    verbose_print(f"Comparing syntax trees for {language_id!r}")
    differences = compare_nodes(
        expected_tree.root_node,
        actual_tree.root_node,
        ROOT_PATH,
        verbose=verbose,
    )
    return ComparisonResult(tuple(differences))
