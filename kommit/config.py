"""Configuration for kommit.

Holds the fixed request settings used for every chat completion and the
Config model consumed by the generators. Loading Config from disk is left
to the calling application.
"""

from pydantic import BaseModel, Field


# ============================================================
# REQUEST SETTINGS
# ============================================================
# Fixed for every request

DEFAULT_MODEL = "gpt-4o-mini"
REQUEST_TIMEOUT = 10.0  # seconds
MAX_RETRIES = 0
TEMPERATURE = 0.0
TOP_P = 1.0
PRESENCE_PENALTY = 0.0
FREQUENCY_PENALTY = 0.0


# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VAR = "KOMMIT_API_KEY"
FALLBACK_API_KEY_ENV_VAR = "OPENAI_API_KEY"

# Checked in order, first non-empty value wins
API_KEY_ENV_VARS = [API_KEY_ENV_VAR, FALLBACK_API_KEY_ENV_VAR]


# ============================================================
# COMMIT DEFAULTS
# ============================================================

DEFAULT_COMMIT_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
]


class LLMConfig(BaseModel):
    """Model selection for chat requests.

    Attributes:
        model: The OpenAI chat model identifier.
    """

    model: str = DEFAULT_MODEL


class CommitConfig(BaseModel):
    """Allowed commit types and scopes, in the order they are listed in prompts.

    Attributes:
        types: Conventional commit types the model may choose from.
        scopes: Scopes the model may choose from.
    """

    types: list[str] = Field(default_factory=lambda: DEFAULT_COMMIT_TYPES.copy())
    scopes: list[str] = Field(default_factory=list)


class Config(BaseModel):
    """Top-level kommit configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    commit: CommitConfig = Field(default_factory=CommitConfig)
