"""Directory traversal CLI.

Streams the paths under a root directory that match a name filter, one per
line, limited by entry type and depth.
"""

import logging
import sys

import structlog
import typer

from treewalk.errors import InvalidInput, IOFailure
from treewalk.services.factory import create_walker
from treewalk.services.path_resolver import MATCH_ALL
from treewalk.support.env import get_env_default

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_logging() -> None:
    level_name = get_env_default("TREEWALK_LOG_LEVEL", "warning").strip().lower()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(_LOG_LEVELS.get(level_name, logging.WARNING)),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


_configure_logging()

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="treewalk",
    help="""Walk a directory tree lazily and print matching paths.

Examples:

  # Direct children and grandchildren of ./src (default depth 1)
  uv run treewalk walk ./src/

  # Every Python file, at any depth
  uv run treewalk walk . --filter '\\.py$' --no-dirs --max-depth -1""",
    rich_markup_mode="markdown",
)


@app.command()
def walk(
    root: str = typer.Argument(
        ...,
        help="Directory to walk",
    ),
    filter: str = typer.Option(
        MATCH_ALL,
        "--filter",
        "-f",
        help="Regular expression searched in each bare entry name",
    ),
    max_depth: int = typer.Option(
        1,
        "--max-depth",
        "-d",
        envvar="TREEWALK_MAX_DEPTH",
        help="Deepest level to report (root's children are level 0, negative for unlimited)",
    ),
    dirs: bool = typer.Option(True, "--dirs/--no-dirs", help="Report directories"),
    files: bool = typer.Option(True, "--files/--no-files", help="Report regular files"),
    special: bool = typer.Option(
        True,
        "--special/--no-special",
        help="Report symlinks, devices, sockets and FIFOs",
    ),
    cycle_guard: bool = typer.Option(
        False,
        "--cycle-guard",
        help="Never descend into the same directory twice",
    ),
    show_type: bool = typer.Option(
        False,
        "--show-type",
        "-t",
        help="Prefix each path with its entry type",
    ),
) -> None:
    """Print the paths under ROOT that match the filter."""
    try:
        walker = create_walker(
            root,
            filter,
            include_dirs=dirs,
            include_files=files,
            include_special=special,
            max_depth=max_depth,
            cycle_guard=cycle_guard,
        )
    except InvalidInput as e:
        logger.error("invalid_walk_input", root=root, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    except IOFailure as e:
        logger.error("walk_setup_failed", root=root, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        for entry in walker.walk_entries():
            if show_type:
                typer.echo(f"{entry.entry_type.value}\t{entry.path}")
            else:
                typer.echo(entry.path)
    except IOFailure as e:
        logger.error("walk_interrupted", root=walker.config.root, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from treewalk import __version__

    typer.echo(f"treewalk {__version__}")
