"""
Language model integration for commitgate.

This package contains the HTTP clients for the hosted chat completions
API (:class:`OpenAIClient`) and a local Ollama server
(:class:`OllamaClient`), and the two :class:`CommitMessageGenerator`
strategies that turn a redacted diff into a commit message.
"""

from .base import CommitMessageGenerator, LLMError  # noqa: F401
from .ollama_client import OllamaClient  # noqa: F401
from .openai_client import OpenAIClient  # noqa: F401
from .commit_message_generator import (  # noqa: F401
    HostedMessageGenerator,
    LocalMessageGenerator,
    create_generator,
)
