"""JSON schema generation for structured chat output.

Strict structured output requires every object to be closed
(additionalProperties: false). generate_schema() also inlines pydantic's
$defs so the schema has no references.
"""

import copy
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

_DEFS_PREFIX = "#/$defs/"


def _inline(node: Any, defs: dict[str, Any], seen: tuple[str, ...]) -> Any:
    """Recursively inline $ref nodes and close every object schema."""
    if isinstance(node, list):
        return [_inline(item, defs, seen) for item in node]
    if not isinstance(node, dict):
        return node

    ref = node.get("$ref")
    if isinstance(ref, str) and ref.startswith(_DEFS_PREFIX):
        name = ref[len(_DEFS_PREFIX):]
        if name in seen:
            raise ValueError(f"Cannot inline recursive schema definition: {name}")
        # Sibling keys (e.g. description) override the referenced definition
        target = dict(defs[name])
        target.update({k: v for k, v in node.items() if k != "$ref"})
        return _inline(target, defs, seen + (name,))

    result = {}
    for key, value in node.items():
        if key == "$defs":
            continue
        if key == "properties" and isinstance(value, dict):
            # Field name -> schema, not a schema itself
            result[key] = {name: _inline(prop, defs, seen) for name, prop in value.items()}
        else:
            result[key] = _inline(value, defs, seen)

    # Only model-like objects; dict[str, X] keeps its value schema
    if result.get("type") == "object" and "properties" in result:
        result.setdefault("additionalProperties", False)
    return result


@lru_cache(maxsize=None)
def _generate_schema_cached(model_cls: type[BaseModel]) -> dict[str, Any]:
    raw = model_cls.model_json_schema()
    defs = raw.get("$defs", {})
    return _inline(raw, defs, ())


def generate_schema(model_cls: type[BaseModel]) -> dict[str, Any]:
    """Reflect a pydantic model into a closed, fully inlined JSON schema.

    Args:
        model_cls: The result model class.

    Returns:
        A JSON schema dict with additional properties forbidden on every
        object with declared properties and no $ref / $defs entries.

    Raises:
        ValueError: If the model is self-referencing and cannot be inlined.
    """
    # Callers get their own copy; the cached one stays untouched
    return copy.deepcopy(_generate_schema_cached(model_cls))


@dataclass(frozen=True)
class JSONSchemaFormat:
    """A named JSON schema sent as the response_format of a chat request.

    Attributes:
        name: Schema name reported to the API.
        schema: The JSON schema document.
        description: What the response represents.
        strict: Require the model output to match the schema exactly.
    """

    name: str
    schema: dict[str, Any]
    description: str = ""
    strict: bool = True

    def to_response_format(self) -> dict[str, Any]:
        """Render as the ``response_format`` argument of chat.completions.create."""
        json_schema: dict[str, Any] = {
            "name": self.name,
            "schema": self.schema,
            "strict": self.strict,
        }
        if self.description:
            json_schema["description"] = self.description
        return {"type": "json_schema", "json_schema": json_schema}


@dataclass(frozen=True)
class StructuredOutput(Generic[T]):
    """Pairs a response schema with the function that decodes it.

    The schema and decoder must describe the same shape; nothing checks
    that they agree.

    Attributes:
        schema: Named schema sent with the request.
        decode: Turns the response content into a T. Must raise ValueError
            (json.JSONDecodeError and pydantic.ValidationError both are)
            when the content does not fit.
    """

    schema: JSONSchemaFormat
    decode: Callable[[str], T] = field(repr=False)

    @classmethod
    def for_model(
        cls, model_cls: type[M], name: str, description: str = ""
    ) -> "StructuredOutput[M]":
        """Build a structured output for a pydantic model.

        Args:
            model_cls: The result model class.
            name: Schema name reported to the API.
            description: What the response represents.

        Returns:
            A StructuredOutput whose decoder validates JSON into model_cls.
        """
        schema = JSONSchemaFormat(
            name=name,
            schema=generate_schema(model_cls),
            description=description,
        )
        return cls(schema=schema, decode=model_cls.model_validate_json)
