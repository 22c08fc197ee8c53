"""Shared test fixtures and configuration."""

from types import SimpleNamespace

import pytest

from kommit.config import Config
from kommit.llm.credentials import EnvVarSource


def make_completion(content):
    """Build an object shaped like an OpenAI ChatCompletion."""
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/internal/llm/llm.go b/internal/llm/llm.go
index 1234567..abcdefg 100644
--- a/internal/llm/llm.go
+++ b/internal/llm/llm.go
@@ -1,3 +1,4 @@
 package llm
+
+const timeout = 10
"""


@pytest.fixture
def sample_config():
    """Config with a small set of types and scopes."""
    return Config.model_validate(
        {
            "llm": {"model": "gpt-4o"},
            "commit": {"types": ["feat", "fix"], "scopes": ["cli"]},
        }
    )


@pytest.fixture
def fake_sources():
    """Credential sources backed by an in-memory environment."""
    environ = {"KOMMIT_API_KEY": "test-key"}
    return [
        EnvVarSource("KOMMIT_API_KEY", environ=environ),
        EnvVarSource("OPENAI_API_KEY", environ=environ),
    ]


@pytest.fixture
def mock_openai(mocker):
    """Mock the OpenAI client class used by kommit.

    Set ``mock_openai.completion_content`` via ``set_content`` to control the
    reply; the created client is available as ``mock_openai.return_value``.
    """
    mock_cls = mocker.patch("kommit.llm.openai_provider.OpenAI")
    client = mock_cls.return_value
    client.chat.completions.create.return_value = make_completion("")

    def set_content(content):
        client.chat.completions.create.return_value = make_completion(content)

    mock_cls.set_content = set_content
    return mock_cls
