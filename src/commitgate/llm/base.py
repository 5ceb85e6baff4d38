"""LLM base classes and shared helpers"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence, Union


DEFAULT_COMMIT_MESSAGE = "Default commit message."


class LLMError(Exception):
    """Raised when communication with a text-generation backend fails."""

    pass


def get_path(data: Any, path: Sequence[Union[str, int]], default: Any) -> Any:
    """Return the value at ``path`` inside nested dicts/lists, or ``default``.

    Missing keys, out-of-range indexes, ``None`` values and containers of
    the wrong type all resolve to ``default``; this never raises.
    """
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
        elif not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
        if current is None:
            return default
    return current


class CommitMessageGenerator(ABC):
    """Turns a redacted diff into a commit message.

    Implementations never raise for backend problems; they return their
    own fixed fallback message instead.
    """

    fallback_message: str

    @abstractmethod
    def generate(self, diff: str) -> str:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    def missing_credential(self) -> bool:
        """Return True if a required credential is absent.

        Callers check this before :meth:`generate` so that the condition
        is reported distinctly from a generation failure.
        """
        return False
