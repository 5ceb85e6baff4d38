"""
Selection of the staged files whose diffs are worth sending.

The selector asks the :class:`~commitgate.vcs.git_client.GitClient` for
the staged paths and drops entries that are blank, minified build
artefacts, or configuration files. In strict mode only files with a
known source-code extension survive.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Iterable, List

from commitgate.vcs.git_client import GitClient, GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


MINIFIED_MARKER = ".min."
CONFIG_MARKER = "config"

# Extensions accepted in strict mode
SOURCE_EXTENSIONS = frozenset(
    {
        ".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx",
        ".py", ".rb", ".go", ".rs", ".java", ".kt", ".swift",
        ".c", ".h", ".cc", ".cpp", ".hpp", ".cs", ".php",
        ".css", ".scss", ".html", ".vue", ".svelte",
    }
)


def _is_candidate(path: str, strict: bool) -> bool:
    if not path.strip():
        return False
    if MINIFIED_MARKER in path:
        return False
    if CONFIG_MARKER in path:
        return False
    if strict and PurePosixPath(path).suffix.lower() not in SOURCE_EXTENSIONS:
        return False
    return True


def filter_changed_files(paths: Iterable[str], strict: bool = False) -> List[str]:
    """Filter raw staged paths, preserving their original order.

    Parameters
    ----------
    paths : Iterable[str]
        Paths as emitted by ``git diff --cached --name-only``.
    strict : bool, optional
        Additionally require a source-code extension (see
        :data:`SOURCE_EXTENSIONS`).

    Returns
    -------
    List[str]
        The paths that passed every filter.
    """
    return [path for path in paths if _is_candidate(path, strict)]


def select_staged_files(client: GitClient, strict: bool = False) -> List[str]:
    """Return the filtered list of staged files.

    A Git failure is reported and yields an empty list, which callers
    treat the same way as "nothing staged".
    """
    try:
        raw_paths = client.list_staged_files()
    except GitError as exc:
        logger.error("Error fetching changed files: %s", exc)
        return []
    files = filter_changed_files(raw_paths, strict=strict)
    logger.debug("Selected %d of %d staged paths", len(files), len(raw_paths))
    return files
