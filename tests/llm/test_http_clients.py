import json
import unittest
from types import SimpleNamespace
from unittest.mock import patch

import requests

from commitgate.llm.base import LLMError
from commitgate.llm.ollama_client import OllamaClient
from commitgate.llm.openai_client import OpenAIClient


class DummyResponse(SimpleNamespace):
    def json(self):
        return json.loads(self.text)


MESSAGES = [{"role": "system", "content": "sys"}, {"role": "user", "content": "diff"}]


class TestOpenAIClient(unittest.TestCase):
    def test_chat_sends_bearer_request(self) -> None:
        captured = {}

        def fake_post(url, *_args, **kwargs):
            captured["url"] = url
            captured.update(kwargs)
            return DummyResponse(status_code=200, text=json.dumps({"choices": []}))

        with patch("requests.post", fake_post):
            client = OpenAIClient("https://api.example.com/v1/chat/completions", "sk-test", "gpt-4o-mini")
            data = client.chat(MESSAGES)

        self.assertEqual(data, {"choices": []})
        self.assertEqual(captured["url"], "https://api.example.com/v1/chat/completions")
        self.assertEqual(captured["json"], {"model": "gpt-4o-mini", "messages": MESSAGES})
        self.assertEqual(captured["headers"]["Authorization"], "Bearer sk-test")
        self.assertEqual(captured["headers"]["Content-Type"], "application/json")

    def test_chat_non_2xx_raises(self) -> None:
        def fake_post(url, *_args, **kwargs):
            return DummyResponse(status_code=401, text='{"error": "invalid key"}')

        with patch("requests.post", fake_post):
            client = OpenAIClient("https://api.example.com", "bad", "m")
            with self.assertRaises(LLMError) as ctx:
                client.chat(MESSAGES)
        self.assertIn("401", str(ctx.exception))

    def test_chat_connection_error_raises(self) -> None:
        with patch("requests.post", side_effect=requests.ConnectionError("refused")):
            client = OpenAIClient("https://api.example.com", "k", "m")
            with self.assertRaises(LLMError):
                client.chat(MESSAGES)

    def test_chat_invalid_json_raises(self) -> None:
        def fake_post(url, *_args, **kwargs):
            return DummyResponse(status_code=200, text="<html>gateway</html>")

        with patch("requests.post", fake_post):
            client = OpenAIClient("https://api.example.com", "k", "m")
            with self.assertRaises(LLMError):
                client.chat(MESSAGES)


class TestOllamaClient(unittest.TestCase):
    def test_chat_sends_sampling_parameters_without_auth(self) -> None:
        captured = {}

        def fake_post(url, *_args, **kwargs):
            captured["url"] = url
            captured.update(kwargs)
            return DummyResponse(status_code=200, text=json.dumps({"message": {"content": "Hi"}}))

        with patch("requests.post", fake_post):
            client = OllamaClient("http://localhost:11434/api/chat", "deepseek-r1")
            data = client.chat(MESSAGES)

        self.assertEqual(data, {"message": {"content": "Hi"}})
        self.assertEqual(
            captured["json"],
            {
                "model": "deepseek-r1",
                "messages": MESSAGES,
                "temperature": 0.2,
                "top_p": 0.9,
                "stream": False,
            },
        )
        self.assertNotIn("Authorization", captured["headers"])

    def test_chat_error_status(self) -> None:
        def fake_post(url, *_args, **kwargs):
            return DummyResponse(status_code=404, text="model not found")

        with patch("requests.post", fake_post):
            client = OllamaClient("http://localhost:11434/api/chat", "missing")
            with self.assertRaises(LLMError):
                client.chat(MESSAGES)

    def test_chat_connection_error(self) -> None:
        with patch("requests.post", side_effect=requests.ConnectionError("refused")):
            client = OllamaClient("http://localhost:11434/api/chat", "m")
            with self.assertRaises(LLMError):
                client.chat(MESSAGES)


if __name__ == "__main__":
    unittest.main()
