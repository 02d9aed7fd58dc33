"""
JSON codec for custom resource payloads.

Typed ``Input``/``Output`` payloads go through pydantic, so handlers can use
pydantic models, dataclasses, TypedDicts or plain dicts. The wire document is
written with the standard ``json`` module.
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..errors.models import InputDecodingError


@lru_cache(maxsize=64)
def _adapter(input_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(input_type)


def drop_nulls(value: Any) -> Any:
    """Recursively remove ``None``-valued keys from JSON objects."""
    if isinstance(value, Mapping):
        return {key: drop_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [drop_nulls(item) for item in value]
    return value


class JsonCodec:
    """Encodes and decodes custom resource payloads."""

    def decode_input(self, raw: Mapping[str, Any] | None, input_type: Any = None) -> Any:
        """
        Decode ResourceProperties into the handler's input type.

        Args:
            raw: Raw properties mapping from the event
            input_type: Target type; ``None`` returns the mapping as a dict

        Returns:
            Decoded input value

        Raises:
            InputDecodingError: If the properties do not validate
        """
        properties = dict(raw or {})
        if input_type is None:
            return properties
        try:
            return _adapter(input_type).validate_python(properties)
        except ValidationError as e:
            # Keep the first error only, the full report is multi-line
            first = e.errors()[0] if e.errors() else {}
            location = ".".join(str(part) for part in first.get("loc", ())) or "ResourceProperties"
            raise InputDecodingError(
                f"invalid ResourceProperties ({e.error_count()} errors): "
                f"{location}: {first.get('msg', str(e))}"
            ) from e

    def encode_output(self, value: Any) -> dict[str, Any]:
        """
        Encode a handler's output as a JSON object.

        Raises:
            TypeError: If the output does not serialize to a JSON object
        """
        if value is None:
            return {}
        try:
            encoded = to_jsonable_python(value)
        except (PydanticSerializationError, ValueError) as e:
            # ValueError covers circular references
            raise TypeError(f"handler output is not JSON serializable: {e}") from e
        if not isinstance(encoded, dict):
            raise TypeError(
                f"handler output must encode to a JSON object, got {type(encoded).__name__}"
            )
        return encoded

    def dumps(self, document: Mapping[str, Any]) -> bytes:
        """Compact UTF-8 JSON with null-valued fields dropped."""
        return json.dumps(
            drop_nulls(document), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")


default_codec = JsonCodec()
