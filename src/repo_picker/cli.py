"""
Command-line interface for the repo picker.
"""

import click
import sys
import traceback
from typing import Optional, Dict, Any
from pathlib import Path

from . import __version__
from .config import AppConfig, ConfigManager
from .error_handling import RepoPickerError
from .logging import setup_logging, close_logging, LoggerConfig
from .menu import render_menu
from .models import MaterializationResult
from .orchestrator import RepoPicker
from .repository import normalize_account

USERNAME_PROMPT = "GitHub username"
SELECTION_PROMPT = "Enter the number of the repo to clone/update"


@click.command()
@click.version_option(version=__version__)
@click.option(
    '--config', '-c',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML configuration file'
)
@click.option(
    '--verbose', '-v',
    count=True,
    help='Increase verbosity (use -v or -vv)'
)
def cli(config: Optional[Path], verbose: int) -> None:
    """
    Pick one of a GitHub account's repositories and clone or update it.

    Repositories are listed with the GitHub CLI when it is installed and
    logged in, otherwise with the public GitHub API. A new repository is
    cloned over SSH into the current directory; an existing clone is
    updated with a fast-forward-only pull.
    """
    try:
        app_config = load_app_config(config, verbose)
        setup_logging(LoggerConfig.from_app_config(app_config.logging))

        run_session(RepoPicker(app_config), verbose)

    except RepoPickerError as e:
        fail(e, verbose)
    finally:
        close_logging()


def load_app_config(config_file: Optional[Path], verbose: int) -> AppConfig:
    """Load configuration, letting -v/-vv override the log level."""
    return ConfigManager(config_file).load_config(create_cli_overrides(verbose))


def create_cli_overrides(verbose: int) -> Dict[str, Any]:
    """Create configuration overrides from CLI options."""
    overrides: Dict[str, Any] = {}

    if verbose == 1:
        overrides['logging'] = {'level': 'INFO'}
    elif verbose > 1:
        overrides['logging'] = {'level': 'DEBUG'}

    return overrides


def run_session(picker: RepoPicker, verbose: int = 0) -> MaterializationResult:
    """Prompt, list, show the menu, prompt again, then clone or update."""
    lister = picker.prepare()

    account = normalize_account(
        click.prompt(USERNAME_PROMPT, default="", show_default=False)
    )

    click.echo(lister.announcement)
    repositories = picker.fetch(account)

    click.echo()
    click.echo("Available repositories:")
    for line in render_menu(repositories):
        click.echo(line)
    click.echo()

    selection = click.prompt(SELECTION_PROMPT, default="", show_default=False)
    chosen = picker.select(repositories, selection)

    click.echo(picker.describe_materialization(chosen))
    result = picker.materialize(chosen)

    if verbose > 0:
        display_result(result)

    return result


def display_result(result: MaterializationResult) -> None:
    """Display what happened to the working copy."""
    click.echo(f"{result.repository.full_name} {result.action} at {result.path}")
    if result.action == "updated" and not result.changed:
        click.echo("Already up to date.")
    elif result.new_commit:
        click.echo(f"HEAD is now {result.new_commit[:8]}")


def fail(error: RepoPickerError, verbose: int = 0) -> None:
    """Print a fatal error and exit with the error's status."""
    click.echo(f"❌  {error.message}", err=True)
    if verbose > 1:
        traceback.print_exc()
    sys.exit(error.exit_code)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
