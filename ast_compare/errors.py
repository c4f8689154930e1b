"""Exceptions raised while resolving grammars and parsing source text."""

from __future__ import annotations


class GrammarError(Exception):
    """Base class for failures of the parse step."""

    def __init__(self, message: str, language_id: str) -> None:
        super().__init__(message)
        self.language_id = language_id


class GrammarUnavailable(GrammarError, LookupError):
    """The language identifier is unknown or its grammar cannot be loaded."""


class ParseFailure(GrammarError, ValueError):
    """The grammar was resolved but the parser could not process the text."""
