"""
Version control system (VCS) integration.

This package contains the :class:`GitClient` used to read the staging
area and the file selector that decides which staged paths are diffed.
"""

from .git_client import GitClient, GitError  # noqa: F401
from .file_selector import filter_changed_files, select_staged_files  # noqa: F401
