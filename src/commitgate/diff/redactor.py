"""
Best-effort redaction of diff text before it is displayed or sent.

:func:`redact` replaces the value of obvious secret assignments such as
``API_KEY=...`` and strips C-style comments. It is a heuristic and not
a guarantee: secrets written in other syntaxes, block comments that span
several lines, and anything else the patterns do not describe pass
through unchanged. ``//`` sequences inside string literals (for example
URLs) are treated as comments and removed along with the rest of the line.
Secret assignments are matched before comments are stripped, so a comment
placed inside a key name (``PASS/**/WORD=...``) is removed only after the
secret pattern has run, and the spliced ``PASSWORD=...`` line is left
unredacted.
"""

from __future__ import annotations

import re


SECRET_NAMES = ("API_KEY", "SECRET", "PASSWORD", "TOKEN", "PRIVATE_KEY")

SECRET_ASSIGNMENT_RE = re.compile(r"(" + "|".join(SECRET_NAMES) + r")=.+")
COMMENT_RE = re.compile(r"/\*.*?\*/|//.*?$", re.MULTILINE)
# Strict mode only
IDENTIFIER_RE = re.compile(r"[A-Za-z0-9_-]{32,}")

REDACTED = "REDACTED"
IDENTIFIER_PLACEHOLDER = "<IDENTIFIER>"


def redact(text: str, strict: bool = False) -> str:
    """Return ``text`` with secret assignments and comments removed.

    Parameters
    ----------
    text : str
        Concatenated diff text.
    strict : bool, optional
        Also replace long identifier-like tokens (hashes, keys, bearer
        tokens) with :data:`IDENTIFIER_PLACEHOLDER`.

    Returns
    -------
    str
        The redacted text.

    Examples
    --------
    >>> redact("+API_KEY=abc123")
    '+API_KEY=REDACTED'
    >>> redact("+x = 1; // temporary")
    '+x = 1; '
    """
    result = SECRET_ASSIGNMENT_RE.sub(lambda m: f"{m.group(1)}={REDACTED}", text)
    result = COMMENT_RE.sub("", result)
    if strict:
        result = IDENTIFIER_RE.sub(IDENTIFIER_PLACEHOLDER, result)
    return result
