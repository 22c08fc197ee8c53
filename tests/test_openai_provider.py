"""Tests for kommit.llm.openai_provider module."""

import pytest

from kommit.llm.credentials import EnvVarSource
from kommit.llm.exceptions import JSONParseError, MissingAPIKeyError, OpenAIRequestError
from kommit.llm.openai_provider import chat, chat_structured, new_client
from kommit.llm.prompts import STRUCTURED_SYSTEM_PROMPT, SYSTEM_PROMPT
from kommit.llm.schema import StructuredOutput
from kommit.scope import Scopes

SCOPES = StructuredOutput.for_model(Scopes, name="names", description="Names.")


class TestNewClient:
    """Tests for new_client."""

    def test_uses_resolved_key_and_timeout(self, mock_openai, fake_sources):
        """Test client construction arguments."""
        client = new_client(fake_sources)

        mock_openai.assert_called_once_with(api_key="test-key", timeout=10.0, max_retries=0)
        assert client is mock_openai.return_value

    def test_missing_key_raises_before_construction(self, mock_openai):
        """Test that no client is built without a key."""
        with pytest.raises(MissingAPIKeyError):
            new_client([EnvVarSource("KOMMIT_API_KEY", environ={})])

        mock_openai.assert_not_called()


class TestChat:
    """Tests for chat."""

    def test_returns_content_verbatim(self, mock_openai, fake_sources):
        """Test that content is returned unchanged."""
        mock_openai.set_content("  feat(cli): add flag\n\n- Add flag\n")

        assert chat("gpt-4o", "prompt", fake_sources) == "  feat(cli): add flag\n\n- Add flag\n"

    def test_request_parameters(self, mock_openai, fake_sources):
        """Test the request sent to the API."""
        chat("gpt-4o", "the prompt", fake_sources)

        create = mock_openai.return_value.chat.completions.create
        create.assert_called_once_with(
            model="gpt-4o",
            temperature=0.0,
            top_p=1.0,
            presence_penalty=0.0,
            frequency_penalty=0.0,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": "the prompt"},
            ],
        )

    def test_no_response_format(self, mock_openai, fake_sources):
        """Test that plain chat is unconstrained."""
        chat("gpt-4o", "prompt", fake_sources)

        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert "response_format" not in kwargs

    def test_none_content_becomes_empty_string(self, mock_openai, fake_sources):
        """Test missing content."""
        mock_openai.set_content(None)
        assert chat("gpt-4o", "prompt", fake_sources) == ""

    def test_api_error_is_wrapped(self, mock_openai, fake_sources):
        """Test that API failures become OpenAIRequestError."""
        cause = RuntimeError("rate limited")
        mock_openai.return_value.chat.completions.create.side_effect = cause

        with pytest.raises(OpenAIRequestError) as exc_info:
            chat("gpt-4o", "prompt", fake_sources)

        assert exc_info.value.__cause__ is cause
        assert "rate limited" in str(exc_info.value)

    def test_not_retried(self, mock_openai, fake_sources):
        """Test that a failure is attempted once."""
        create = mock_openai.return_value.chat.completions.create
        create.side_effect = RuntimeError("boom")

        with pytest.raises(OpenAIRequestError):
            chat("gpt-4o", "prompt", fake_sources)

        assert create.call_count == 1

    def test_new_client_per_call(self, mock_openai, fake_sources):
        """Test that clients are not reused."""
        chat("gpt-4o", "one", fake_sources)
        chat("gpt-4o", "two", fake_sources)

        assert mock_openai.call_count == 2


class TestChatStructured:
    """Tests for chat_structured."""

    def test_decodes_scopes(self, mock_openai, fake_sources):
        """Test decoding a valid response."""
        mock_openai.set_content('{"scopes":["api","cli"]}')

        result = chat_structured("gpt-4o", "prompt", SCOPES, fake_sources)

        assert isinstance(result, Scopes)
        assert result.scopes == ["api", "cli"]

    def test_request_includes_strict_schema(self, mock_openai, fake_sources):
        """Test response_format and system prompt."""
        mock_openai.set_content('{"scopes":[]}')

        chat_structured("gpt-4o", "prompt", SCOPES, fake_sources)

        kwargs = mock_openai.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == SCOPES.schema.to_response_format()
        assert kwargs["response_format"]["json_schema"]["strict"] is True
        assert kwargs["messages"][0] == {"role": "system", "content": STRUCTURED_SYSTEM_PROMPT}
        assert kwargs["temperature"] == 0.0
        assert kwargs["top_p"] == 1.0

    def test_non_json_raises_parse_error(self, mock_openai, fake_sources):
        """Test that non-JSON content fails."""
        mock_openai.set_content("api, cli")

        with pytest.raises(JSONParseError) as exc_info:
            chat_structured("gpt-4o", "prompt", SCOPES, fake_sources)

        assert exc_info.value.raw_response == "api, cli"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_wrong_shape_raises_parse_error(self, mock_openai, fake_sources):
        """Test that valid JSON of the wrong shape fails."""
        mock_openai.set_content('{"names":["api"]}')

        with pytest.raises(JSONParseError):
            chat_structured("gpt-4o", "prompt", SCOPES, fake_sources)

    def test_api_error_is_wrapped(self, mock_openai, fake_sources):
        """Test that API failures become OpenAIRequestError."""
        mock_openai.return_value.chat.completions.create.side_effect = RuntimeError("down")

        with pytest.raises(OpenAIRequestError):
            chat_structured("gpt-4o", "prompt", SCOPES, fake_sources)

    def test_missing_key_makes_no_request(self, mock_openai):
        """Test that no request is sent without a key."""
        with pytest.raises(MissingAPIKeyError):
            chat_structured("gpt-4o", "prompt", SCOPES, [EnvVarSource("X", environ={})])

        mock_openai.return_value.chat.completions.create.assert_not_called()
