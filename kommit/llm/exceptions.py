"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when no API key is available
- OpenAIRequestError: Raised when the chat completion request fails
- JSONParseError: Raised when a structured response cannot be decoded
"""

from typing import Optional


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class OpenAIRequestError(LLMError):
    """Raised when the OpenAI API call fails.

    The original exception is available as ``__cause__``.
    """

    pass


class JSONParseError(LLMError):
    """Raised when the LLM response cannot be parsed into the expected shape."""

    def __init__(self, message: str, raw_response: Optional[str] = None):
        super().__init__(message)
        self.raw_response = raw_response
