"""LLM prompt templates for kommit.

- system: System prompts for plain and structured requests
- commit: Conventional commit message prompt
- scopes: Scope suggestion prompt
"""

from kommit.llm.prompts.system import (
    JSON_RESPONSE_PROMPT,
    STRUCTURED_SYSTEM_PROMPT,
    SYSTEM_PROMPT,
)
from kommit.llm.prompts.commit import COMMIT_BASE_PROMPT, build_commit_prompt
from kommit.llm.prompts.scopes import (
    SCOPES_SCHEMA_DESCRIPTION,
    SCOPES_SCHEMA_NAME,
    build_scopes_prompt,
)


__all__ = [
    # System prompts
    "SYSTEM_PROMPT",
    "JSON_RESPONSE_PROMPT",
    "STRUCTURED_SYSTEM_PROMPT",
    # Commit messages
    "COMMIT_BASE_PROMPT",
    "build_commit_prompt",
    # Scope suggestions
    "SCOPES_SCHEMA_NAME",
    "SCOPES_SCHEMA_DESCRIPTION",
    "build_scopes_prompt",
]
