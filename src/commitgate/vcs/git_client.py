"""
Git client implementation for commitgate.

This module wraps the two read-only Git operations the tool needs:
listing the staged file paths and showing the staged diff of a single
path. Commands are always executed as argument lists (never through a
shell) so that unit tests can mock :meth:`GitClient._run` easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitError(Exception):
    """Raised when a Git command fails or cannot be started."""

    pass


class GitClient:
    """Client for reading the staging area of a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If the command cannot be spawned or exits with a non-zero
            status.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.error("Unable to start Git: %s", exc)
            raise GitError(f"Failed to run git: {exc}") from exc

        if result.returncode != 0:
            logger.debug(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(
                result.stderr.strip()
                or result.stdout.strip()
                or f"git exited with status {result.returncode}"
            )
        return result

    # ------------------------------------------------------------------
    # Staging area
    # ------------------------------------------------------------------
    def list_staged_files(self) -> List[str]:
        """Return the raw lines of ``git diff --cached --name-only``.

        No filtering happens here; blank lines are kept so that the
        caller decides what counts as a usable path.

        Raises
        ------
        GitError
            If the command fails.
        """
        result = self._run(["diff", "--cached", "--name-only"])
        return result.stdout.split("\n")

    def get_staged_diff(self, path: str) -> str:
        """Return the staged diff for a single ``path``.

        The path is passed as its own argument after ``--``, so it is
        never interpreted by a shell or as a Git option.

        Raises
        ------
        GitError
            If the command fails.
        """
        result = self._run(["diff", "--cached", "--", path])
        return result.stdout
