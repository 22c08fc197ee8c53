"""Scope suggestion prompt template."""

from typing import Sequence

SCOPES_SCHEMA_NAME = "names"
SCOPES_SCHEMA_DESCRIPTION = "A list of module or package names."

PROMPT_SCOPES_INTRO = (
    "Based on the following project structure, guess module or package "
    "names used in this project:\n"
)

PROMPT_EXISTING_SCOPES = "Here are some existing scopes:\n"

PROMPT_SCOPES_CONSTRAINTS = """
- Do not suggest nested names
- Do not suggest names with "/"
- Do not suggest docs as a scope
"""


def build_scopes_prompt(filenames: Sequence[str], existing_scopes: Sequence[str]) -> str:
    """Build the prompt asking the model to name the project's modules.

    Args:
        filenames: Project file paths, one per line in the prompt.
        existing_scopes: Scopes already in use, one per line in the prompt.

    Returns:
        The user prompt string.
    """
    return (
        PROMPT_SCOPES_INTRO
        + "\n".join(filenames)
        + "\n\n"
        + PROMPT_EXISTING_SCOPES
        + "\n".join(existing_scopes)
        + "\n"
        + PROMPT_SCOPES_CONSTRAINTS
    )
