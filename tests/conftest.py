import logging

import pytest


COMMITGATE_VARIABLES = (
    "USE_LOCAL_MODEL",
    "OPEN_AI_KEY_FOR_COMMIT",
    "OPEN_AI_MODEL",
    "LOCAL_MODEL_NAME",
    "COMMITGATE_ENV",
    "OPENAI_API_URL",
    "LOCAL_MODEL_API_URL",
    "COMMITGATE_STRICT",
)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Remove any commitgate settings inherited from the developer's shell.

    Tests that need a variable set it explicitly, so a real API key in
    the environment can never leak into a test run.
    """
    for name in COMMITGATE_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo ``logging.basicConfig(force=True)`` calls made by the CLI.

    ``CliRunner`` swaps the standard streams, so a handler installed
    during an invocation would otherwise keep writing to a closed stream.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
