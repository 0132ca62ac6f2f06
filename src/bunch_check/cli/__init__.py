"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="bunch",
    help="Bunch - keep per-branch bunch files in sync with their originals",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"bunch-check {__version__}")
        raise typer.Exit(0)


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None, "--version",
        help="Show version and exit",
        callback=_version_callback, is_eager=True,
    ),
):
    """Bunch file tooling."""


def main() -> None:
    app()


# Import subcommands to register them
from .check import check as _check  # noqa: F401, E402
