"""
Client for interacting with a local Ollama chat server.

This client wraps HTTP requests to the Ollama REST API's ``/api/chat``
endpoint. On error conditions (connection errors, HTTP errors, bodies
that are not JSON), a :class:`LLMError` is raised.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List

import requests

from commitgate.llm.base import LLMError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def strip_thinking_tags(text: str) -> str:
    """Remove thinking process tags from LLM responses.

    Reasoning models such as ``deepseek-r1`` emit their chain of thought
    in XML-like tags (``<think>``, ``<thinking>``, ``<thought>`` or
    ``<reasoning>``) ahead of the actual answer. This function strips
    these tags together with their contents.

    Parameters
    ----------
    text : str
        The raw LLM response text.

    Returns
    -------
    str
        The text with all thinking tags removed and surrounding
        whitespace trimmed.

    Examples
    --------
    >>> strip_thinking_tags("<think>reasoning...</think>Answer")
    'Answer'
    >>> strip_thinking_tags("<thinking>thoughts</thinking>\\n\\nReal answer")
    'Real answer'
    """
    thinking_patterns = [
        r"<think>.*?</think>",
        r"<thinking>.*?</thinking>",
        r"<thought>.*?</thought>",
        r"<reasoning>.*?</reasoning>",
    ]

    result = text
    for pattern in thinking_patterns:
        result = re.sub(pattern, "", result, flags=re.DOTALL | re.IGNORECASE)
    return result.strip()


@dataclass
class OllamaClient:
    """Client for an Ollama server.

    Parameters
    ----------
    api_url : str
        Full URL of the chat endpoint, e.g.
        ``"http://localhost:11434/api/chat"``.
    model : str
        Name of the model to use for generation, e.g. ``"deepseek-r1"``.
    temperature : float, optional
        Sampling temperature. Defaults to 0.2.
    top_p : float, optional
        Nucleus-sampling threshold. Defaults to 0.9.
    """

    api_url: str
    model: str
    temperature: float = 0.2
    top_p: float = 0.9

    def chat(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        """Send ``messages`` and return the decoded response body.

        Streaming is always disabled so that the server answers with a
        single JSON document.

        Raises
        ------
        LLMError
            If the request fails or the server returns an error.
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "stream": False,
        }
        logger.debug("Sending request to local model at %s with model %s", self.api_url, self.model)
        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except requests.RequestException as exc:
            raise LLMError(str(exc)) from exc
        if not 200 <= response.status_code < 300:
            raise LLMError(f"LLM returned status {response.status_code}: {response.text}")
        try:
            return response.json()
        except ValueError as exc:
            raise LLMError("Failed to parse LLM response") from exc
