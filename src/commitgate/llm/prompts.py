"""
Prompt text shared by both backends.
"""

from __future__ import annotations

from textwrap import dedent
from typing import Dict, List


SYSTEM_PROMPT = (
    "You are an excellent developer and code reviewer responsible for writing "
    "concise and descriptive Git commit messages."
)

# Reasoning models served locally tend to explain themselves otherwise.
LOCAL_SYSTEM_PROMPT = (
    SYSTEM_PROMPT
    + " Please generate a commit message without explanations or additional context."
)


def build_prompt(diff: str) -> str:
    """Return the atomic-PR analysis prompt with ``diff`` embedded."""
    template = dedent(
        """
        This is a git diff for atomic PRs. Your task is to:
        1. **First, analyze whether the PR is atomic** based on the following rules.
        2. **Second, generate a commit message no matter whether the PR is atomic or not**.

        ### Rules for an Atomic PR:
        - **Scope:** The change should only implement one feature, bug fix, or refactor.
        - **File Count:** No more than 10 files should be modified.
        - **Cohesion:** Changes should be within related files/modules (e.g., UI changes should not be mixed with database changes).
        - **Diff Size:** No file should have more than 100+ modified lines.

        ### Git Diff:
        ```
        {diff}
        ```

        ### Expected Response Format:
        - **Atomic (Yes/No)?** (Answer only "Yes" or "No")
        - **Reasoning:** Explain which criteria are met or violated.
        - **Commit Message:** a meaningful commit message with:
          1. **Summary** (no more than 50 characters)
          2. **Description** (bullet points describing the changes)
        """
    )
    # Substitute after dedent so the diff's own indentation is untouched.
    return template.replace("{diff}", diff, 1)


def build_messages(diff: str, system_prompt: str = SYSTEM_PROMPT) -> List[Dict[str, str]]:
    """Return the two-message chat array sent to either backend."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": build_prompt(diff)},
    ]
