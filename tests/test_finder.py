"""Tests for lookup backends."""

import json

import httpx
import pytest

from cmd_advisor.advisor.errors import FinderError, FinderNotImplementedError
from cmd_advisor.advisor.finder import HttpFinder, MappingFinder, NullFinder, Suggestion


class TestSuggestion:
    """Test the Suggestion value type."""

    def test_equality(self) -> None:
        """Test suggestions compare by value."""
        assert Suggestion("hello", "hello") == Suggestion(package="hello", command="hello")
        assert len({Suggestion("a", "b"), Suggestion("a", "b")}) == 1

    def test_immutable(self) -> None:
        """Test suggestions cannot be modified."""
        suggestion = Suggestion("hello", "hello")

        with pytest.raises(AttributeError):
            suggestion.package = "other"

    @pytest.mark.parametrize("package,command", [("", "hello"), ("hello", "")])
    def test_empty_fields_rejected(self, package: str, command: str) -> None:
        """Test both fields must be non-empty."""
        with pytest.raises(ValueError):
            Suggestion(package=package, command=command)

    def test_to_dict(self) -> None:
        """Test JSON form."""
        assert Suggestion("hello-wcm", "hello").to_dict() == {"package": "hello-wcm", "command": "hello"}


class TestNullFinder:
    """Test the default backend."""

    def test_not_implemented(self) -> None:
        """Test every query fails."""
        with pytest.raises(FinderNotImplementedError, match="not implemented"):
            NullFinder().find("hello")


class TestMappingFinder:
    """Test the in-memory backend."""

    def test_find(self) -> None:
        """Test packages come back in index order."""
        finder = MappingFinder({"hello": ["hello", "hello-wcm"]})

        assert finder.find("hello") == [
            Suggestion("hello", "hello"),
            Suggestion("hello-wcm", "hello"),
        ]
        assert finder.find("goodbye") == []

    @pytest.mark.parametrize("packages", ["hello", ["hello", 5], 7])
    def test_rejects_malformed_index(self, packages) -> None:
        """Test package lists must hold strings."""
        with pytest.raises(TypeError):
            MappingFinder({"hello": packages})

    def test_results_are_copies(self) -> None:
        """Test callers cannot alter the index through results."""
        finder = MappingFinder({"hello": ["hello"]})

        finder.find("hello").clear()

        assert finder.find("hello") == [Suggestion("hello", "hello")]

    def test_from_file(self, tmp_path) -> None:
        """Test loading a JSON index."""
        index = tmp_path / "commands.json"
        index.write_text(json.dumps({"hello": ["hello", "hello-wcm"], "vim": ["vim"]}))

        finder = MappingFinder.from_file(index)

        assert finder.find("vim") == [Suggestion("vim", "vim")]
        assert len(finder.find("hello")) == 2

    def test_from_missing_file(self, tmp_path) -> None:
        """Test a missing file is a lookup error."""
        with pytest.raises(FinderError, match="cannot load"):
            MappingFinder.from_file(tmp_path / "missing.json")

    @pytest.mark.parametrize(
        "content",
        ["{not json", '["hello"]', '{"hello": "hello"}', '{"hello": [1]}', '{"hello": [""]}', '{"hello": 5}'],
    )
    def test_from_malformed_file(self, tmp_path, content: str) -> None:
        """Test malformed indexes are rejected."""
        index = tmp_path / "commands.json"
        index.write_text(content)

        with pytest.raises(FinderError):
            MappingFinder.from_file(index)


def make_finder(handler) -> HttpFinder:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpFinder(base_url="http://index.test/", client=client)


class TestHttpFinder:
    """Test the remote index backend."""

    def test_find(self) -> None:
        """Test a 200 response is parsed into suggestions."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=[{"package": "hello", "command": "hello"}])

        with make_finder(handler) as finder:
            assert finder.find("hello") == [Suggestion("hello", "hello")]

        assert str(requests[0].url) == "http://index.test/v1/commands/hello"

    def test_not_found(self) -> None:
        """Test a 404 means no package ships the command."""
        finder = make_finder(lambda request: httpx.Response(404))

        assert finder.find("nope") == []

    def test_server_error(self) -> None:
        """Test other statuses are lookup errors."""
        finder = make_finder(lambda request: httpx.Response(503))

        with pytest.raises(FinderError, match="HTTP 503"):
            finder.find("hello")

    def test_transport_error(self) -> None:
        """Test connection failures are lookup errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        finder = make_finder(handler)

        with pytest.raises(FinderError, match="unavailable"):
            finder.find("hello")

    @pytest.mark.parametrize(
        "payload",
        [
            b"not json",
            b'{"package": "x"}',
            b'[{"package": "x"}]',
            b'[{"package": 5, "command": ["a"]}]',
            b'[{"package": "", "command": "hello"}]',
        ],
    )
    def test_malformed_response(self, payload: bytes) -> None:
        """Test unparseable bodies are lookup errors."""
        finder = make_finder(lambda request: httpx.Response(200, content=payload))

        with pytest.raises(FinderError, match="malformed"):
            finder.find("hello")

    def test_base_url_from_environment(self, monkeypatch) -> None:
        """Test the index URL falls back to the environment."""
        monkeypatch.setenv("CMD_ADVISOR_INDEX_URL", "http://env.test")

        finder = HttpFinder()
        try:
            assert finder.base_url == "http://env.test"
        finally:
            finder.close()
