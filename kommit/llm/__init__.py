"""LLM module for kommit.

Entry points:
- generate_commit_message: Conventional commit message for a diff
- generate_scopes_from_filenames: Scope suggestions for a project
"""

from typing import Optional, Sequence

from kommit.config import Config
from kommit.llm.credentials import (
    CredentialSource,
    DotenvSource,
    EnvVarSource,
    resolve_api_key,
)
from kommit.llm.exceptions import (
    JSONParseError,
    LLMError,
    MissingAPIKeyError,
    OpenAIRequestError,
)
from kommit.llm.openai_provider import chat, chat_structured, new_client
from kommit.llm.prompts import (
    SCOPES_SCHEMA_DESCRIPTION,
    SCOPES_SCHEMA_NAME,
    build_commit_prompt,
    build_scopes_prompt,
)
from kommit.llm.schema import JSONSchemaFormat, StructuredOutput, generate_schema
from kommit.scope import Scopes, filter_scopes

SCOPES_OUTPUT = StructuredOutput.for_model(
    Scopes,
    name=SCOPES_SCHEMA_NAME,
    description=SCOPES_SCHEMA_DESCRIPTION,
)


def generate_commit_message(
    config: Config,
    diff: str,
    sources: Optional[Sequence[CredentialSource]] = None,
) -> str:
    """Generate a Conventional Commit message for a diff.

    The reply is returned as-is; whether it follows the format is left to
    the prompt and the model.

    Args:
        config: Provides the model and the allowed commit types and scopes.
        diff: The staged diff text.
        sources: Credential sources override.

    Returns:
        The commit message.

    Raises:
        MissingAPIKeyError: If the API key is not set.
        OpenAIRequestError: If the API call fails.
    """
    prompt = build_commit_prompt(config.commit.types, config.commit.scopes, diff)
    return chat(config.llm.model, prompt, sources=sources)


def generate_scopes_from_filenames(
    model: str,
    filenames: Sequence[str],
    existing_scopes: Sequence[str],
    sources: Optional[Sequence[CredentialSource]] = None,
) -> list[str]:
    """Ask the model for module or package names to use as commit scopes.

    Args:
        model: The OpenAI model identifier.
        filenames: Project file paths.
        existing_scopes: Scopes already configured.
        sources: Credential sources override.

    Returns:
        Suggested scopes, filtered by filter_scopes().

    Raises:
        MissingAPIKeyError: If the API key is not set.
        OpenAIRequestError: If the API call fails.
        JSONParseError: If the reply is not a valid scopes object.
    """
    prompt = build_scopes_prompt(filenames, existing_scopes)
    result = chat_structured(model, prompt, SCOPES_OUTPUT, sources=sources)
    return filter_scopes(result.scopes)


# Export commonly used items
__all__ = [
    "LLMError",
    "MissingAPIKeyError",
    "OpenAIRequestError",
    "JSONParseError",
    "CredentialSource",
    "EnvVarSource",
    "DotenvSource",
    "resolve_api_key",
    "JSONSchemaFormat",
    "StructuredOutput",
    "generate_schema",
    "new_client",
    "chat",
    "chat_structured",
    "generate_commit_message",
    "generate_scopes_from_filenames",
]
