"""Shared fixtures."""

import pytest

from cmd_advisor.advisor.errors import FinderError
from cmd_advisor.advisor.finder import Finder, Suggestion


class SillyFinder(Finder):
    """Knows one command and fails on another."""

    def __init__(self) -> None:
        self.queries: list[str] = []

    def find(self, command: str) -> list[Suggestion]:
        self.queries.append(command)
        if command == "hello":
            return [
                Suggestion(package="hello", command="hello"),
                Suggestion(package="hello-wcm", command="hello"),
            ]
        if command == "error-please":
            raise FinderError("get failed")
        return []


@pytest.fixture
def silly_finder() -> SillyFinder:
    """Finder answering only for "hello"."""
    return SillyFinder()
