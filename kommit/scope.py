"""Scope suggestions for kommit.

Holds the structured result returned by the scope suggestion request and
the filter applied to it. The prompt asks the model for flat module names;
filter_scopes() drops whatever slips through anyway.
"""

from typing import Iterable

from pydantic import BaseModel, ConfigDict

# Never suggested as a scope; docs changes use the `docs` type instead
EXCLUDED_SCOPES = {"docs"}


class Scopes(BaseModel):
    """Structured response of a scope suggestion request.

    Attributes:
        scopes: Suggested module or package names, in model order.
    """

    model_config = ConfigDict(extra="forbid")

    scopes: list[str]


def is_valid_scope(scope: str) -> bool:
    """Check if a suggested scope is a flat, usable name.

    Args:
        scope: The candidate scope (already stripped).

    Returns:
        True if the scope is non-empty, not nested and not excluded.
    """
    if not scope:
        return False
    if "/" in scope or "\\" in scope:
        return False
    return scope.lower() not in EXCLUDED_SCOPES


def filter_scopes(scopes: Iterable[str]) -> list[str]:
    """Clean up scopes suggested by the model.

    Strips whitespace, drops empty, nested ("a/b") and excluded names, and
    removes duplicates while keeping the first occurrence.

    Args:
        scopes: Raw scope names.

    Returns:
        The cleaned list, in original order.
    """
    result = []
    seen = set()
    for scope in scopes:
        scope = scope.strip()
        if not is_valid_scope(scope) or scope in seen:
            continue
        seen.add(scope)
        result.append(scope)
    return result
