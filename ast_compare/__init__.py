"""Public interface for the ast_compare package."""

from .errors import GrammarError, GrammarUnavailable, ParseFailure
from .parser import (
    EXTENSION_LANGUAGES,
    GRAMMARS,
    GrammarSpec,
    create_parser,
    get_language,
    get_supported_languages,
    is_language_supported,
    language_for_path,
    parse_code,
)
from .ast_utils import collapse_whitespace, format_tree, iter_tree, node_text, normalize_text
from .comparison import (
    FALLBACK_NOTICE,
    PREVIEW_LENGTH,
    ComparisonResult,
    compare_ast,
    compare_nodes,
    compare_text,
)

__all__ = [
    "GrammarError",
    "GrammarUnavailable",
    "ParseFailure",
    "EXTENSION_LANGUAGES",
    "GRAMMARS",
    "GrammarSpec",
    "create_parser",
    "get_language",
    "get_supported_languages",
    "is_language_supported",
    "language_for_path",
    "parse_code",
    "collapse_whitespace",
    "format_tree",
    "iter_tree",
    "node_text",
    "normalize_text",
    "FALLBACK_NOTICE",
    "PREVIEW_LENGTH",
    "ComparisonResult",
    "compare_ast",
    "compare_nodes",
    "compare_text",
]
