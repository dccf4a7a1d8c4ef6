"""CLI entry point for Deptrace."""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from deptrace.core.exceptions import DeptraceError
from deptrace.core.filtering import DEFAULT_PREFIX
from deptrace.core.graph import ProgressCallback, build_tree, find_all_paths, find_path
from deptrace.render import path_lines, paths_lines, tree_lines, tree_to_dict
from deptrace.sources import DependencySource, GoListSource

app = typer.Typer(
    name="deptrace",
    help="Import graph traversal for Go codebases.",
    add_completion=False,
)
console = Console()

_USAGE = "no action specified\nvalid actions are: tree, path, paths"

PrefixOption = Annotated[
    str, typer.Option("--prefix", "-p", help="Only follow imports under this prefix")
]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def get_source() -> DependencySource:
    """Get the dependency source queried by every command."""
    return GoListSource()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _say(message: str) -> None:
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def _fail(error: DeptraceError) -> NoReturn:
    console.print(f"[red]{escape(str(error))}[/red]", soft_wrap=True)
    raise typer.Exit(code=1)


@contextmanager
def _progress() -> Iterator[ProgressCallback]:
    """Show the module being expanded and the queue size on a spinner."""
    with console.status("Starting...") as status:

        def on_progress(module: str, queued: int) -> None:
            status.update(f"{queued}    [cyan]{escape(module)}[/]")

        yield on_progress


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Trace import dependencies between packages."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        _say(_USAGE)
        raise typer.Exit(code=1)


@app.command()
def tree(
    root: Annotated[str, typer.Argument(help="Package to build the tree under")],
    prefix: PrefixOption = DEFAULT_PREFIX,
    output_json: JsonOption = False,
) -> None:
    """Print the dependency tree under a package."""
    if not output_json:
        _say(f'Building dependency tree for "{root}"...')

    try:
        with _progress() as on_progress:
            result = build_tree(get_source(), root, prefix=prefix, on_progress=on_progress)
    except DeptraceError as e:
        _fail(e)

    if output_json:
        print(json.dumps(tree_to_dict(result)))
        return
    for line in tree_lines(result):
        _say(line)


@app.command()
def path(
    root: Annotated[str, typer.Argument(help="Package to start from")],
    target: Annotated[str, typer.Argument(help="Package to reach")],
    prefix: PrefixOption = DEFAULT_PREFIX,
    output_json: JsonOption = False,
) -> None:
    """Print a shortest import path from root to target."""
    if not output_json:
        _say(f'Finding path from "{root}" to "{target}"...')

    try:
        with _progress() as on_progress:
            result = find_path(get_source(), root, target, prefix=prefix, on_progress=on_progress)
    except DeptraceError as e:
        _fail(e)

    if output_json:
        print(json.dumps(path_lines(result)))
        return
    for line in path_lines(result):
        _say(line)


@app.command()
def paths(
    root: Annotated[str, typer.Argument(help="Package to start from")],
    target: Annotated[str, typer.Argument(help="Package to reach")],
    prefix: PrefixOption = DEFAULT_PREFIX,
    output_json: JsonOption = False,
) -> None:
    """Print every import path found from root to target."""
    if not output_json:
        _say(f'Finding all paths from "{root}" to "{target}"...')

    try:
        with _progress() as on_progress:
            result = find_all_paths(
                get_source(), root, target, prefix=prefix, on_progress=on_progress
            )
    except DeptraceError as e:
        _fail(e)

    if output_json:
        print(json.dumps([path_lines(p) for p in result]))
        return
    for line in paths_lines(result):
        _say(line)


if __name__ == "__main__":
    app()
