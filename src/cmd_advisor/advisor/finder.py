"""Lookup backends answering "which packages provide this command"."""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from .errors import FinderError, FinderNotImplementedError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

DEFAULT_INDEX_URL = "http://localhost:8080"


@dataclass(frozen=True)
class Suggestion:
    """A package that ships a command of the given name."""

    package: str
    command: str

    def __post_init__(self) -> None:
        if not self.package:
            raise ValueError("suggestion package must not be empty")
        if not self.command:
            raise ValueError("suggestion command must not be empty")

    def to_dict(self) -> dict[str, str]:
        """Serializable form used for JSON output."""
        return {"package": self.package, "command": self.command}


class Finder(ABC):
    """Backend that resolves an exact command name to packages."""

    @abstractmethod
    def find(self, command: str) -> list[Suggestion]:
        """Find packages providing ``command``.

        Args:
            command: Exact command name to look up

        Returns:
            Suggestions in backend order, empty when nothing matches

        Raises:
            FinderError: If the backend cannot answer the query
        """


class NullFinder(Finder):
    """Finder used when no index is configured."""

    def find(self, command: str) -> list[Suggestion]:
        raise FinderNotImplementedError("not implemented")


class MappingFinder(Finder):
    """In-memory index of command name to package names."""

    def __init__(self, index: Mapping[str, Iterable[str]]) -> None:
        """Initialize finder.

        Args:
            index: Mapping of command name to the packages that ship it
        """
        self._index: dict[str, list[Suggestion]] = {}
        for command, packages in index.items():
            if isinstance(packages, str) or not all(isinstance(p, str) for p in packages):
                raise TypeError(f"packages for {command!r} must be a list of strings")
            self._index[command] = [Suggestion(package=package, command=command) for package in packages]

    @classmethod
    def from_file(cls, path: str | Path) -> MappingFinder:
        """Load an index from a JSON file.

        The file holds a single object, e.g.
        ``{"hello": ["hello", "hello-wcm"]}``.

        Raises:
            FinderError: If the file cannot be read or has the wrong shape
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FinderError(f"cannot load command index {path}: {e}") from e

        if not isinstance(data, dict):
            raise FinderError(f"cannot load command index {path}: expected an object of string lists")

        try:
            finder = cls(data)
        except (TypeError, ValueError) as e:
            raise FinderError(f"cannot load command index {path}: {e}") from e

        logger.debug(f"Loaded {len(data)} commands from {path}")
        return finder

    def find(self, command: str) -> list[Suggestion]:
        return list(self._index.get(command, []))


class HttpFinder(Finder):
    """Finder backed by a remote command index service.

    The service answers ``GET /v1/commands/<name>`` with a JSON list of
    ``{"package": ..., "command": ...}`` objects, or 404 when no package
    ships the command.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize finder.

        Args:
            base_url: URL of the index service
            timeout: Per-request timeout in seconds
            client: Preconfigured client, mostly for tests
        """
        self.base_url = (base_url or os.getenv("CMD_ADVISOR_INDEX_URL", DEFAULT_INDEX_URL)).rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def find(self, command: str) -> list[Suggestion]:
        url = f"{self.base_url}/v1/commands/{quote(command, safe='')}"
        try:
            response = self._client.get(url, timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.warning(f"Command index request failed: {e}")
            raise FinderError(f"command index unavailable: {e}") from e

        if response.status_code == 404:
            return []
        if response.status_code != 200:
            raise FinderError(f"command index returned HTTP {response.status_code} for {command!r}")

        try:
            return [self._parse(item) for item in response.json()]
        except (ValueError, TypeError, KeyError) as e:
            raise FinderError(f"malformed command index response for {command!r}: {e}") from e

    @staticmethod
    def _parse(item: dict[str, Any]) -> Suggestion:
        package, command = item["package"], item["command"]
        if not isinstance(package, str) or not isinstance(command, str):
            raise TypeError("package and command must be strings")
        return Suggestion(package=package, command=command)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpFinder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
