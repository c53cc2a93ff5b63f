"""Command advisor - exact and misspelled command lookup."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .candidates import similar_words
from .finder import Finder, NullFinder, Suggestion

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Words outside this length band are never looked up as misspellings.
MIN_LENGTH = 3
MAX_LENGTH = 256


class Advisor:
    """Finds packages that provide a command, tolerating single typos."""

    def __init__(self, finder: Finder | None = None) -> None:
        """Initialize advisor.

        Args:
            finder: Lookup backend, defaults to a finder that raises
                ``FinderNotImplementedError``
        """
        self._finder: Finder = finder if finder is not None else NullFinder()
        self._lock = threading.Lock()

    @property
    def finder(self) -> Finder:
        """The active lookup backend."""
        with self._lock:
            return self._finder

    def replace_finder(self, finder: Finder) -> Callable[[], None]:
        """Swap the lookup backend.

        Args:
            finder: The new backend

        Returns:
            Callable that puts the previous backend back
        """
        with self._lock:
            old = self._finder
            self._finder = finder

        def restore() -> None:
            with self._lock:
                self._finder = old

        return restore

    def find_exact(self, command: str) -> list[Suggestion]:
        """Find packages that ship exactly ``command``.

        Backend errors propagate unchanged.
        """
        return self.finder.find(command)

    def find_fuzzy(self, command: str) -> list[Suggestion]:
        """Find packages shipping a command one edit away from ``command``.

        Every candidate from ``similar_words`` is looked up in turn and the
        hits are concatenated without ranking or de-duplication. The first
        backend error aborts the search and is re-raised; nothing found so
        far is returned in that case.

        Args:
            command: The command name that was not found

        Returns:
            Suggestions for all candidates, empty when ``command`` is
            shorter than ``MIN_LENGTH`` or longer than ``MAX_LENGTH``
        """
        if len(command) < MIN_LENGTH or len(command) > MAX_LENGTH:
            logger.debug(f"Skipping fuzzy lookup for {len(command)}-character command")
            return []

        finder = self.finder
        candidates = similar_words(command)
        logger.debug(f"Looking up {len(candidates)} candidates for {command!r}")

        alternatives: list[Suggestion] = []
        for word in candidates:
            found = finder.find(word)
            if found:
                alternatives.extend(found)

        return alternatives


_default_advisor = Advisor()


def default_advisor() -> Advisor:
    """Process-wide advisor used by the module-level helpers."""
    return _default_advisor


def find_command(command: str) -> list[Suggestion]:
    """Exact lookup on the default advisor."""
    return _default_advisor.find_exact(command)


def find_misspelled_command(command: str) -> list[Suggestion]:
    """Fuzzy lookup on the default advisor."""
    return _default_advisor.find_fuzzy(command)


def replace_commands_finder(finder: Finder) -> Callable[[], None]:
    """Swap the default advisor's backend, returning a restore callable."""
    return _default_advisor.replace_finder(finder)
