"""
Commit message generation strategies.

Two interchangeable :class:`~commitgate.llm.base.CommitMessageGenerator`
implementations exist, one per backend:

- :class:`HostedMessageGenerator` talks to the hosted chat completions
  API and falls back to ``"Refactor code."``.
- :class:`LocalMessageGenerator` talks to a local Ollama server and
  falls back to ``"Error summarizing with local model."``.

Each one builds the same prompt, performs exactly one request (no
retries), and extracts the reply with a null-safe lookup that yields
``"Default commit message."`` when the expected field is missing.
:func:`create_generator` picks the strategy from the startup settings.
"""

from __future__ import annotations

import logging

from commitgate.config.loader import Settings
from commitgate.llm.base import (
    DEFAULT_COMMIT_MESSAGE,
    CommitMessageGenerator,
    LLMError,
    get_path,
)
from commitgate.llm.ollama_client import OllamaClient, strip_thinking_tags
from commitgate.llm.openai_client import OpenAIClient
from commitgate.llm.prompts import LOCAL_SYSTEM_PROMPT, SYSTEM_PROMPT, build_messages


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


MISSING_CREDENTIAL_MESSAGE = "OPEN_AI_KEY_FOR_COMMIT is not set."
HOSTED_FALLBACK_MESSAGE = "Refactor code."
LOCAL_FALLBACK_MESSAGE = "Error summarizing with local model."


class HostedMessageGenerator(CommitMessageGenerator):
    """Generate messages with the hosted chat completions API.

    Parameters
    ----------
    client : OpenAIClient
        Configured API client.
    verbose_errors : bool, optional
        Log the full backend error. When False only a generic line is
        logged, so response bodies never reach production logs.
    """

    fallback_message = HOSTED_FALLBACK_MESSAGE

    def __init__(self, client: OpenAIClient, verbose_errors: bool = True) -> None:
        self.client = client
        self.verbose_errors = verbose_errors

    @property
    def name(self) -> str:
        return f"OpenAI API {self.client.model}"

    def missing_credential(self) -> bool:
        """Return True if no API key is configured."""
        return not self.client.api_key

    def generate(self, diff: str) -> str:
        if self.missing_credential():
            logger.error(MISSING_CREDENTIAL_MESSAGE)
            return MISSING_CREDENTIAL_MESSAGE
        try:
            data = self.client.chat(build_messages(diff, SYSTEM_PROMPT))
        except LLMError as exc:
            if self.verbose_errors:
                logger.error("Error generating commit message: %s", exc)
            else:
                logger.error("An error occurred while generating the commit message.")
            return self.fallback_message
        content = get_path(data, ["choices", 0, "message", "content"], DEFAULT_COMMIT_MESSAGE)
        return str(content).strip()


class LocalMessageGenerator(CommitMessageGenerator):
    """Generate messages with a local Ollama model.

    ``verbose_errors`` has the same meaning as for
    :class:`HostedMessageGenerator`.
    """

    fallback_message = LOCAL_FALLBACK_MESSAGE

    def __init__(self, client: OllamaClient, verbose_errors: bool = True) -> None:
        self.client = client
        self.verbose_errors = verbose_errors

    @property
    def name(self) -> str:
        return f"local model {self.client.model}"

    def generate(self, diff: str) -> str:
        try:
            data = self.client.chat(build_messages(diff, LOCAL_SYSTEM_PROMPT))
        except LLMError as exc:
            if self.verbose_errors:
                logger.error("Local model error: %s", exc)
            else:
                logger.error("An error occurred while summarizing with the local model.")
            return self.fallback_message
        content = get_path(data, ["message", "content"], DEFAULT_COMMIT_MESSAGE)
        return strip_thinking_tags(str(content))


def create_generator(settings: Settings) -> CommitMessageGenerator:
    """Return the generator selected by ``settings.use_local_model``."""
    if settings.use_local_model:
        return LocalMessageGenerator(
            OllamaClient(api_url=settings.local_model_api_url, model=settings.local_model_name),
            verbose_errors=settings.verbose_errors,
        )
    return HostedMessageGenerator(
        OpenAIClient(
            api_url=settings.openai_api_url,
            api_key=settings.openai_api_key,
            model=settings.openai_model,
        ),
        verbose_errors=settings.verbose_errors,
    )
