"""Utilities for resolving Tree-sitter grammars by language identifier."""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, List, Mapping

from tree_sitter import Language, Parser, Tree

from .errors import GrammarUnavailable, ParseFailure


@dataclass(frozen=True)
class GrammarSpec:
    module: str
    function: str = "language"


GRAMMARS: Mapping[str, GrammarSpec] = {
    "javascript": GrammarSpec("tree_sitter_javascript"),
    "javascriptreact": GrammarSpec("tree_sitter_javascript"),
    "typescript": GrammarSpec("tree_sitter_typescript", "language_typescript"),
    "typescriptreact": GrammarSpec("tree_sitter_typescript", "language_tsx"),
    "python": GrammarSpec("tree_sitter_python"),
    "java": GrammarSpec("tree_sitter_java"),
    "csharp": GrammarSpec("tree_sitter_c_sharp"),
    "cpp": GrammarSpec("tree_sitter_cpp"),
}

EXTENSION_LANGUAGES: Mapping[str, str] = {
    ".js": "javascript",
    ".ts": "typescript",
    ".jsx": "javascriptreact",
    ".tsx": "typescriptreact",
    ".py": "python",
    ".java": "java",
    ".cs": "csharp",
    ".cpp": "cpp",
    ".c": "c",
}

DEFAULT_LANGUAGE_ID = "plaintext"

# Append-only; entries are never replaced or removed.
_LANGUAGE_CACHE: Dict[str, Language] = {}


def normalize_language_id(language_id: str) -> str:
    return language_id.strip().lower()


def is_language_supported(language_id: str) -> bool:
    """Return True if *language_id* names a registered grammar."""
    return normalize_language_id(language_id) in GRAMMARS


def get_supported_languages() -> List[str]:
    return sorted(GRAMMARS)


def language_for_path(path) -> str:
    """Guess a language identifier from the extension of *path*."""
    suffix = PurePath(path).suffix.lower()
    return EXTENSION_LANGUAGES.get(suffix, DEFAULT_LANGUAGE_ID)


def _load_language(key: str, spec: GrammarSpec) -> Language:
    try:
        module = importlib.import_module(spec.module)
        factory = getattr(module, spec.function)
        return Language(factory())
    except Exception as exc:
        raise GrammarUnavailable(
            f"Could not load grammar {spec.module}.{spec.function} for {key!r}: {exc}",
            key,
        ) from exc


def get_language(language_id: str) -> Language:
    """Resolve *language_id* to a Tree-sitter language, loading it once."""
    key = normalize_language_id(language_id)
    cached = _LANGUAGE_CACHE.get(key)
    if cached is not None:
        return cached

    spec = GRAMMARS.get(key)
    if spec is None:
        raise GrammarUnavailable(f"No grammar registered for {language_id!r}", key)

    return _LANGUAGE_CACHE.setdefault(key, _load_language(key, spec))


def create_parser(language_id: str) -> Parser:
    """Build a new Tree-sitter parser configured for *language_id*."""
    return Parser(get_language(language_id))


def parse_code(code: str, language_id: str) -> Tree:
    """Parse *code* into a syntax tree using the grammar for *language_id*."""
    parser = create_parser(language_id)
    try:
        source = bytes(code, "utf8")
    except UnicodeEncodeError as exc:
        raise ParseFailure(f"Source is not encodable as UTF-8: {exc}", language_id) from exc

    try:
        return parser.parse(source)
    except Exception as exc:
        raise ParseFailure(f"Parser failed for {language_id!r}: {exc}", language_id) from exc
