"""Check command."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import console, err_console
from ..check import run_check
from ..config import BUNCH_FILE_NAME, load_settings
from ..exceptions import BunchCheckError
from ..logging_config import setup_logging
from ..report import render_result

CHECK_EPILOG = "Example: bunch check -C ~/Projects/kotlin HEAD 377572896b7dc09a5e2aa6af29825ffe07f71e58"


@app.command(epilog=CHECK_EPILOG)
def check(
    since_ref: str = typer.Argument(
        ..., metavar="SINCE_REF",
        help="Reference to the most recent commit that should be checked.",
    ),
    until_ref: str = typer.Argument(
        ..., metavar="UNTIL_REF",
        help="Parent of the last commit that should be checked.",
    ),
    repo: Path = typer.Option(
        Path("."), "--repo", "-C",
        help="Path to the git repository root",
        exists=True, file_okay=False, dir_okay=True,
    ),
    ext: Optional[str] = typer.Option(
        None, "--ext",
        help=f"Set of extensions to check with ',' separator. "
        f"'{BUNCH_FILE_NAME}' file will be used if the option is missing.",
    ),
    no_renames: bool = typer.Option(
        False, "--no-renames",
        help="Report renamed files as a deletion plus an addition",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Enable verbose output",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Also append log records to this file",
        dir_okay=False, writable=True,
    ),
):
    """Check if commits at this interval have forgotten bunch files."""
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        settings = load_settings(
            repo,
            since_ref,
            until_ref,
            extensions=ext,
            detect_renames=False if no_renames else None,
        )
        result = run_check(settings)

    except BunchCheckError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"Error: {e}", markup=False, highlight=False)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\nCheck interrupted", markup=False)
        raise typer.Exit(130)

    render_result(result, console)

    if result.has_problems:
        raise typer.Exit(1)
