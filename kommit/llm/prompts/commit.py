"""Commit message prompt template.

The base prompt is a fixed sequence of rule sections. Context (allowed
types and scopes) and the diff are appended per request by
build_commit_prompt().
"""

from typing import Sequence

PROMPT_MAIN = (
    "Generate a single commit message following the **Conventional Commit** "
    "format, adhering to these rules:\n"
)

PROMPT_GENERAL_RULES = """
## **General Rules**
- Do **not**:
  - Wrap the message in a code block or triple backticks.
  - Use `build` as a scope.
  - Suggest `feat` for build scripts.
  - Include comments or remarks.

- **Do**:
	- Try your best to guess what the git diff is about.
"""

PROMPT_COMMIT_TYPE_GUIDELINES = """
## **Commit Type Guidelines**
- Use **lowercase** commit types:
  - `build`: For build systems, scripts, or settings (e.g., Makefile, Dockerfile).
  - `docs`: For documentation changes (e.g., README, CHANGELOG), **but not** script or code changes.
"""

PROMPT_SCOPE_RULES = """
## **Scope Rules**
- Use the **module or package name** as the scope.
- Leave the scope **empty** if:
  - The changes are **not** tied to a specific module or package.
  - The changes span **multiple modules, packages, files or scopes**.
"""

PROMPT_MESSAGE_FORMATTING = """
## **Message Formatting**
- **Subject**:
  - Use **imperative mood** (present tense).
- **Body**:
  - Use **bullet points**.
  - Use **imperative mood** (present tense).
  - Capitalize the **first letter** of each bullet point.
  - Wrap lines at **72 characters**.
  - Include a body **only if** the changes are significant.
"""

# Section order is fixed
COMMIT_BASE_PROMPT = (
    PROMPT_MAIN
    + PROMPT_GENERAL_RULES
    + PROMPT_COMMIT_TYPE_GUIDELINES
    + PROMPT_SCOPE_RULES
    + PROMPT_MESSAGE_FORMATTING
)


def _bullets(items: Sequence[str]) -> str:
    return "".join(f"  - `{item}`\n" for item in items)


def build_commit_prompt(types: Sequence[str], scopes: Sequence[str], diff: str) -> str:
    """Build the full commit message prompt.

    Args:
        types: Allowed commit types, listed in the given order.
        scopes: Allowed scopes, listed in the given order.
        diff: The staged diff, embedded verbatim.

    Returns:
        The user prompt string.
    """
    context = (
        "\n## Context:\n"
        "- Allowed commit types:\n"
        f"{_bullets(types)}"
        "- Allowed scopes **(if applicable)**:\n"
        f"{_bullets(scopes)}"
    )
    diff_block = (
        "## Git Diff:\n"
        "**Based on the following diff**:\n"
        "```diff\n"
        f"{diff}\n"
        "```\n"
    )
    return COMMIT_BASE_PROMPT + context + diff_block
