"""
Command line interface for the commitgate tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``commitgate`` command. It sequences the
pipeline: select the staged files, collect and redact their diff, show
the diff and ask for consent, then ask the configured backend for a
commit message and print it. Nothing is ever committed; using the
printed message is up to the operator.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from commitgate import __version__
from commitgate.config.loader import ConfigError, Settings, load_settings
from commitgate.diff.diff_extractor import collect_diff
from commitgate.llm.base import CommitMessageGenerator
from commitgate.llm.commit_message_generator import (
    MISSING_CREDENTIAL_MESSAGE,
    create_generator,
)
from commitgate.vcs.file_selector import select_staged_files
from commitgate.vcs.git_client import GitClient

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes and status messages
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_CONFIG_ERROR = 5

NO_CHANGES_MESSAGE = "No changedFiles to commit."
CANCELED_MESSAGE = "Operation canceled."
CONSENT_PROMPT = "Do you want to send this diff to AI? (yes/no)"


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=False)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=False)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


# ---------------------------------------------------------------------------
# Consent gate
# ---------------------------------------------------------------------------

def colorize_diff(diff: str) -> str:
    """Render added lines green and removed lines red."""
    lines = []
    for line in diff.split("\n"):
        if line.startswith("+"):
            lines.append(click.style(line, fg="green"))
        elif line.startswith("-"):
            lines.append(click.style(line, fg="red"))
        else:
            lines.append(line)
    return "\n".join(lines)


def is_affirmative(answer: Optional[str]) -> bool:
    """Return True only for ``yes`` (case and surrounding space ignored)."""
    return (answer or "").strip().lower() == "yes"


def confirm_send(diff: str, colorize: bool = True) -> bool:
    """Show ``diff`` and ask whether it may be sent to the backend.

    Parameters
    ----------
    diff : str
        The redacted diff. This is exactly what would be transmitted.
    colorize : bool, optional
        Highlight added and removed lines.

    Returns
    -------
    bool
        True if the operator answered ``yes``; any other answer,
        including an empty one, declines.
    """
    click.echo(click.style("Show diff: ----------------------------\n\n", fg="yellow"))
    click.echo(colorize_diff(diff) if colorize else diff)
    click.echo(click.style("Show diff end. ----------------------------\n\n", fg="yellow"))
    answer = click.prompt(CONSENT_PROMPT, default="", show_default=False)
    return is_affirmative(answer)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def run_pipeline(
    settings: Settings,
    client: GitClient,
    generator: CommitMessageGenerator,
    colorize: bool = True,
) -> str:
    """Run the whole pipeline once and return the resulting status string.

    Parameters
    ----------
    settings : Settings
        Startup configuration.
    client : GitClient
        Client for the repository whose staged changes are described.
    generator : CommitMessageGenerator
        Backend strategy chosen at startup.
    colorize : bool, optional
        Highlight the diff shown at the consent prompt.

    Returns
    -------
    str
        The commit message, or one of the fixed notices for "no staged
        changes", "canceled" and "missing credential".
    """
    changed_files = select_staged_files(client, strict=settings.strict)
    if not changed_files:
        print_warning(NO_CHANGES_MESSAGE)
        return NO_CHANGES_MESSAGE

    print_info(f"Collecting diff for {len(changed_files)} file{'s' if len(changed_files) != 1 else ''}")
    diff = collect_diff(client, changed_files, strict=settings.strict)

    if not confirm_send(diff, colorize=colorize):
        print_warning(CANCELED_MESSAGE)
        return CANCELED_MESSAGE

    click.echo(f"Using {generator.name}...")
    if generator.missing_credential():
        print_error(MISSING_CREDENTIAL_MESSAGE)
        return MISSING_CREDENTIAL_MESSAGE

    commit_message = generator.generate(diff)
    click.echo(click.style(commit_message, fg="green"))
    print_success(f"End of commit message from {generator.name}")
    return commit_message


@click.command()
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Load settings from this .env file instead of searching for one.",
)
@click.option("--strict", is_flag=True, help="Only diff source files and mask long identifier tokens.")
@click.option("--no-color", "no_color", is_flag=True, help="Show the diff without highlighting.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="commitgate")
def main(env_file: Optional[Path], strict: bool, no_color: bool, verbose: bool) -> None:
    """Suggest a commit message for the staged changes using AI.

    The redacted diff is shown first and nothing leaves the machine
    unless you answer "yes".
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    ctx = click.get_current_context(silent=True)

    try:
        try:
            settings = load_settings(env_file=env_file)
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        if strict and not settings.strict:
            settings = replace(settings, strict=True)

        cwd = Path.cwd()
        repo_root = GitClient.find_repo_root(cwd) or cwd
        logger.debug("Repository root: %s", repo_root)

        run_pipeline(
            settings,
            GitClient(repo_root),
            create_generator(settings),
            colorize=not no_color,
        )
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        raise
    except click.exceptions.Abort:
        # Ctrl-C / EOF at the consent prompt declines
        print_warning(CANCELED_MESSAGE)
        raise click.exceptions.Exit(EXIT_SUCCESS)
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)
