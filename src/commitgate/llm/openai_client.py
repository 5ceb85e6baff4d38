"""
Client for an OpenAI-compatible chat completions endpoint.

A single authenticated ``POST`` is made per call; the decoded JSON body
is returned untouched. Transport failures, non-2xx responses and bodies
that are not JSON raise :class:`~commitgate.llm.base.LLMError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

import requests

from commitgate.llm.base import LLMError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass
class OpenAIClient:
    """Client for the hosted chat completions API.

    Parameters
    ----------
    api_url : str
        Full URL of the chat completions endpoint.
    api_key : str
        Bearer credential. Must not be logged.
    model : str
        Model identifier, e.g. ``"gpt-4o-mini"``.
    """

    api_url: str
    api_key: str
    model: str

    def chat(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        """Send ``messages`` and return the decoded response body.

        Raises
        ------
        LLMError
            If the request fails, the server answers with a non-2xx
            status, or the body is not valid JSON.
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        logger.debug("Sending chat request to %s with model %s", self.api_url, self.model)
        try:
            response = requests.post(self.api_url, json=payload, headers=headers)
        except requests.RequestException as exc:
            raise LLMError(str(exc)) from exc
        if not 200 <= response.status_code < 300:
            raise LLMError(f"API returned status {response.status_code}: {response.text}")
        try:
            return response.json()
        except ValueError as exc:
            raise LLMError("Failed to parse API response") from exc
