"""Command lookup with single-typo suggestions."""

from .candidates import ALPHABET, similar_words
from .engine import (
    MAX_LENGTH,
    MIN_LENGTH,
    Advisor,
    default_advisor,
    find_command,
    find_misspelled_command,
    replace_commands_finder,
)
from .errors import AdvisorError, FinderError, FinderNotImplementedError
from .finder import Finder, HttpFinder, MappingFinder, NullFinder, Suggestion

__all__ = [
    "ALPHABET",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "Advisor",
    "AdvisorError",
    "Finder",
    "FinderError",
    "FinderNotImplementedError",
    "HttpFinder",
    "MappingFinder",
    "NullFinder",
    "Suggestion",
    "default_advisor",
    "find_command",
    "find_misspelled_command",
    "replace_commands_finder",
    "similar_words",
]
