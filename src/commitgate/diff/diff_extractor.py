"""
Collect the staged diffs of the selected files into one redacted text.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from commitgate.diff.redactor import redact
from commitgate.vcs.git_client import GitClient, GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


_DISALLOWED_PATH_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_path(path: str) -> str:
    """Drop every character outside ``[a-zA-Z0-9._-]`` from ``path``.

    Rejected characters are removed, not escaped. Note that this also
    removes directory separators.
    """
    return _DISALLOWED_PATH_CHARS.sub("", path)


def collect_diff(client: GitClient, files: Iterable[str], strict: bool = False) -> str:
    """Return the redacted concatenation of the staged diffs of ``files``.

    Parameters
    ----------
    client : GitClient
        Client used to run ``git diff --cached`` per file.
    files : Iterable[str]
        Paths in the order their diffs should appear.
    strict : bool, optional
        Forwarded to :func:`~commitgate.diff.redactor.redact`.

    Returns
    -------
    str
        Per-file diffs joined by newlines, redacted once as a whole. A
        file whose diff cannot be read contributes an empty string.
    """
    parts = []
    for file in files:
        safe_path = sanitize_path(file)
        try:
            parts.append(client.get_staged_diff(safe_path))
        except GitError as exc:
            logger.error("Error getting diff for file %s: %s", file, exc)
            parts.append("")
    return redact("\n".join(parts), strict=strict)
