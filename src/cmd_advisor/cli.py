"""Command-line interface for cmd-advisor."""

from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from cmd_advisor.advisor.engine import default_advisor
from cmd_advisor.advisor.errors import FinderError
from cmd_advisor.advisor.finder import Finder, HttpFinder, MappingFinder, Suggestion

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cmd-advisor - find the package that provides a missing command."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logging.getLogger("cmd_advisor").setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_finder(index_file: str | None, index_url: str | None) -> Finder | None:
    """Pick a lookup backend from the command-line options.

    Returns:
        The configured finder, or None to keep the current one
    """
    if index_file:
        return MappingFinder.from_file(index_file)
    if index_url:
        return HttpFinder(base_url=index_url)
    return None


def print_exact(command: str, suggestions: list[Suggestion], install_command: str) -> None:
    console.print(f'The program "{command}" can be found in the following packages:', markup=False)
    for suggestion in suggestions:
        console.print(f" * {suggestion.package}", markup=False)
    console.print(f"Try: {install_command} <selected package>", markup=False)


def print_misspelled(command: str, suggestions: list[Suggestion]) -> None:
    console.print(f'No command "{command}" found, did you mean:', markup=False)
    for suggestion in suggestions:
        console.print(f' Command "{suggestion.command}" from package "{suggestion.package}"', markup=False)


def advise_command(command: str, fmt: str = "pretty", install_command: str = "snap install") -> bool:
    """Look up ``command`` and print what provides it.

    The exact name is tried first; near misses only when that finds nothing.

    Args:
        command: The command that was not found
        fmt: ``pretty`` or ``json``
        install_command: Command shown in the install hint

    Returns:
        True if anything was found

    Raises:
        FinderError: If the lookup backend fails
    """
    advisor = default_advisor()

    suggestions = advisor.find_exact(command)
    exact = bool(suggestions)
    if not exact:
        suggestions = advisor.find_fuzzy(command)

    if fmt == "json":
        click.echo(json.dumps([s.to_dict() for s in suggestions], separators=(",", ":")))
    elif suggestions and exact:
        print_exact(command, suggestions, install_command)
    elif suggestions:
        print_misspelled(command, suggestions)

    return bool(suggestions)


@cli.command("advise-command")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["pretty", "json"]),
    default="pretty",
    help="Output format",
)
@click.option(
    "--index-file",
    type=click.Path(),
    envvar="CMD_ADVISOR_INDEX_FILE",
    help="JSON command index file",
)
@click.option(
    "--index-url",
    envvar="CMD_ADVISOR_INDEX_URL",
    help="Command index service URL",
)
@click.option(
    "--install-command",
    envvar="CMD_ADVISOR_INSTALL_COMMAND",
    default="snap install",
    show_default=True,
    help="Install command shown in hints",
)
@click.argument("command")
def advise_command_cmd(
    fmt: str,
    index_file: str | None,
    index_url: str | None,
    install_command: str,
    command: str,
) -> None:
    """Suggest packages that provide COMMAND or a near miss of it."""
    try:
        finder = build_finder(index_file, index_url)
    except FinderError as e:
        err_console.print(f"error: {e}", markup=False)
        sys.exit(1)

    restore = default_advisor().replace_finder(finder) if finder is not None else None
    try:
        found = advise_command(command, fmt, install_command)
    except FinderError as e:
        logger.debug(f"Lookup for {command!r} failed", exc_info=True)
        err_console.print(f"error: {e}", markup=False)
        sys.exit(1)
    finally:
        if restore is not None:
            restore()
        if isinstance(finder, HttpFinder):
            finder.close()

    if not found and fmt != "json":
        err_console.print(f"{command}: command not found", markup=False)
        sys.exit(1)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
