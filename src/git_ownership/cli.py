"""Command-line interface for git-ownership"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import load_config
from .exceptions import ExitCode, GitOwnershipError
from .logging_config import setup_logging
from .models import RepositoryScope
from .report import build_report, render_json, render_report

app = typer.Typer(
    name="git-ownership",
    help="git-ownership - per-author commit and line statistics for a git repository",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]git-ownership[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(ExitCode.SUCCESS)


@app.command()
def run(
    target_dir: Optional[Path] = typer.Option(
        None,
        "--target-dir",
        "-t",
        help="The target directory to analyze. It must be a git repo. "
        "If not provided, the current directory will be used instead.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch name used to search for commit authors (default: main)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every git command that is run",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Help establish ownership of a codebase.

    Lists every author of the repository with their number of commits and
    the lines they added and removed, most active first.

    [bold cyan]Examples:[/bold cyan]

      git-ownership

      git-ownership -t /path/to/repo --branch develop

      git-ownership --json
    """
    try:
        settings = load_config(
            config_file=config,
            branch=branch,
            output_format="json" if json_output else None,
            verbose=verbose,
            quiet=quiet,
        )
    except GitOwnershipError as e:
        _report_error(e)
        raise typer.Exit(e.exit_code)

    logger = setup_logging(verbose=settings.verbose, quiet=settings.quiet)
    scope = RepositoryScope(target_dir=target_dir or Path.cwd(), branch=settings.branch)

    try:
        records = build_report(scope, shell=settings.shell)

    except GitOwnershipError as e:
        logger.debug("Query failed", exc_info=True)
        _report_error(e)
        raise typer.Exit(e.exit_code)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(ExitCode.INTERRUPTED)

    except Exception as e:
        logger.exception("Unexpected error while collecting statistics")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(ExitCode.INTERNAL_ERROR)

    if settings.output_format == "json":
        typer.echo(render_json(records), nl=False)
    else:
        typer.echo(render_report(records), nl=False)


def _report_error(error: GitOwnershipError) -> None:
    console.print(f"[red]{error.label}:[/red] {escape(str(error))}", soft_wrap=True)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
