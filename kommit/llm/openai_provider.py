"""OpenAI chat completion calls.

Every call builds its own client and sends one request with the fixed
sampling settings from kommit.config. Nothing is retried.
"""

import logging
from typing import Any, Optional, Sequence, TypeVar

from openai import OpenAI

from kommit.config import (
    FREQUENCY_PENALTY,
    MAX_RETRIES,
    PRESENCE_PENALTY,
    REQUEST_TIMEOUT,
    TEMPERATURE,
    TOP_P,
)
from kommit.llm.credentials import CredentialSource, resolve_api_key
from kommit.llm.exceptions import JSONParseError, OpenAIRequestError
from kommit.llm.prompts import STRUCTURED_SYSTEM_PROMPT, SYSTEM_PROMPT
from kommit.llm.schema import StructuredOutput

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_client(sources: Optional[Sequence[CredentialSource]] = None) -> OpenAI:
    """Create an OpenAI client bound to the resolved API key.

    Args:
        sources: Credential sources in priority order (defaults to the
            KOMMIT_API_KEY / OPENAI_API_KEY environment variables).

    Returns:
        A client with the fixed request timeout and retries disabled.

    Raises:
        MissingAPIKeyError: If no API key is available.
    """
    api_key = resolve_api_key(sources)
    return OpenAI(api_key=api_key, timeout=REQUEST_TIMEOUT, max_retries=MAX_RETRIES)


def _complete(
    model: str,
    system_prompt: str,
    prompt: str,
    sources: Optional[Sequence[CredentialSource]],
    **extra: Any,
) -> str:
    """Send one chat completion request and return the first choice's text."""
    client = new_client(sources)

    logger.debug("Requesting chat completion: model=%s prompt_chars=%d", model, len(prompt))

    try:
        response = client.chat.completions.create(
            model=model,
            temperature=TEMPERATURE,
            top_p=TOP_P,
            presence_penalty=PRESENCE_PENALTY,
            frequency_penalty=FREQUENCY_PENALTY,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            **extra,
        )
        content = response.choices[0].message.content
    except Exception as e:
        raise OpenAIRequestError(f"OpenAI API call failed: {e}") from e

    return content or ""


def chat(
    model: str,
    prompt: str,
    sources: Optional[Sequence[CredentialSource]] = None,
) -> str:
    """Send a prompt and return the model's reply verbatim.

    Args:
        model: The OpenAI model identifier.
        prompt: The user prompt.
        sources: Credential sources override.

    Returns:
        The first choice's message content.

    Raises:
        MissingAPIKeyError: If the API key is not set.
        OpenAIRequestError: If the API call fails.
    """
    return _complete(model, SYSTEM_PROMPT, prompt, sources)


def chat_structured(
    model: str,
    prompt: str,
    output: StructuredOutput[T],
    sources: Optional[Sequence[CredentialSource]] = None,
) -> T:
    """Send a prompt constrained to a JSON schema and decode the reply.

    Args:
        model: The OpenAI model identifier.
        prompt: The user prompt.
        output: Schema sent with the request and the decoder for the reply.
        sources: Credential sources override.

    Returns:
        The decoded response.

    Raises:
        MissingAPIKeyError: If the API key is not set.
        OpenAIRequestError: If the API call fails.
        JSONParseError: If the reply does not decode into the expected shape.
    """
    content = _complete(
        model,
        STRUCTURED_SYSTEM_PROMPT,
        prompt,
        sources,
        response_format=output.schema.to_response_format(),
    )

    try:
        return output.decode(content)
    except ValueError as e:
        logger.debug("Failed to decode %s response: %s", output.schema.name, e)
        raise JSONParseError(
            f"Failed to parse LLM response as {output.schema.name!r}.\n"
            f"Error: {e}\n"
            f"Raw response:\n{content}",
            raw_response=content,
        ) from e
