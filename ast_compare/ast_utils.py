"""Helpers for inspecting Tree-sitter syntax trees."""

from __future__ import annotations

import re
from typing import Iterator, List, Tuple

from tree_sitter import Node

WHITESPACE_RE = re.compile(r"\s+")
INSPECT_PREVIEW_LENGTH = 100


def node_text(node: Node) -> str:
    """Return the source text spanned by *node* as a string."""
    text = node.text
    if not text:
        return ""
    if isinstance(text, str):
        return text
    return text.decode("utf8", errors="replace")


def normalize_text(text: str) -> str:
    """Remove every whitespace character from *text*."""
    return WHITESPACE_RE.sub("", text)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim both ends."""
    return WHITESPACE_RE.sub(" ", text).strip()


def preview(text: str, length: int) -> str:
    """Return at most *length* characters of *text* followed by an ellipsis."""
    return f"{text[:length]}..."


def iter_tree(root: Node, *, named_only: bool = True) -> Iterator[Tuple[Node, int]]:
    """Yield ``(node, depth)`` pairs in pre-order without recursing."""
    stack: List[Tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        children = node.named_children if named_only else node.children
        for child in reversed(children):
            stack.append((child, depth + 1))


def format_tree(root: Node, *, named_only: bool = True) -> str:
    """Render a syntax tree as an indented outline, one node per line."""
    lines: List[str] = []
    for node, depth in iter_tree(root, named_only=named_only):
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        line = f"{'  ' * depth}{node.type} [{start_row}:{start_col} - {end_row}:{end_col}]"

        if node.child_count == 0:
            text = node_text(node)
            if len(text) > INSPECT_PREVIEW_LENGTH:
                text = preview(text, INSPECT_PREVIEW_LENGTH)
            line += f" {text!r}"

        lines.append(line)
    return "\n".join(lines)
