"""API key resolution.

The key is looked up in an ordered list of credential sources. By default
KOMMIT_API_KEY takes precedence over OPENAI_API_KEY.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, Sequence

from dotenv import dotenv_values

from kommit.config import API_KEY_ENV_VARS
from kommit.llm.exceptions import MissingAPIKeyError


class CredentialSource(Protocol):
    """Anything that can produce an API key, or None when it has none."""

    @property
    def name(self) -> str: ...

    def get(self) -> Optional[str]: ...


@dataclass(frozen=True)
class EnvVarSource:
    """Read the key from an environment variable.

    Attributes:
        name: Environment variable name.
        environ: Mapping to read from instead of os.environ (used in tests).
    """

    name: str
    environ: Optional[Mapping[str, str]] = None

    def get(self) -> Optional[str]:
        environ = os.environ if self.environ is None else self.environ
        return environ.get(self.name)


@dataclass(frozen=True)
class DotenvSource:
    """Read the key from a dotenv file without touching os.environ.

    Attributes:
        key: Variable name inside the file.
        path: Path to the dotenv file.
    """

    key: str
    path: str = ".env"

    @property
    def name(self) -> str:
        return f"{self.key} ({self.path})"

    def get(self) -> Optional[str]:
        if not os.path.isfile(self.path):
            return None
        return dotenv_values(self.path).get(self.key)


DEFAULT_SOURCES: tuple[EnvVarSource, ...] = tuple(
    EnvVarSource(name) for name in API_KEY_ENV_VARS
)


def resolve_api_key(sources: Optional[Sequence[CredentialSource]] = None) -> str:
    """Return the first non-empty API key from the given sources.

    Args:
        sources: Credential sources in priority order. Defaults to
            KOMMIT_API_KEY followed by OPENAI_API_KEY.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If no source yields a non-empty key.
    """
    if sources is None:
        sources = DEFAULT_SOURCES

    for source in sources:
        api_key = source.get()
        if api_key:
            return api_key

    names = ", ".join(source.name for source in sources) or "<none>"
    raise MissingAPIKeyError(
        f"OpenAI API key not found. Checked: {names}.\n"
        f"Set it using: export {API_KEY_ENV_VARS[0]}=your_key_here"
    )
