"""
Diff collection and redaction.

See :mod:`commitgate.diff.diff_extractor` for gathering the staged diffs
and :mod:`commitgate.diff.redactor` for the secret and comment filter.
"""

from .diff_extractor import collect_diff, sanitize_path  # noqa: F401
from .redactor import redact  # noqa: F401
