"""JSON codec for stored events.

Events are stored as UTF-8, indented JSON with camelCase property names.

Encoding rules:
- objects exposing ``to_dict()`` are written from that dictionary
  (domain events produce their camelCase wire form this way)
- pydantic models are dumped by pydantic (``mode="json"``, by alias), so
  their aliases, serializers, computed fields and exclusions apply; a
  model that declares no alias generator has its remaining top-level
  field names camelCased
- dataclasses are dumped through a pydantic TypeAdapter and have their
  top-level field names camelCased
- mapping keys are written as given, so free-form documents such as
  JSON schemas keep their own keys
- datetimes and dates use ISO 8601, UUIDs their string form, enums their
  value

Decoding returns plain JSON values, or a caller-chosen type: classes with
a ``from_dict()`` classmethod, pydantic models, dataclasses, or anything
pydantic's TypeAdapter can validate. Typed decoding reads the same
property names encoding writes.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel, TypeAdapter
from pydantic.alias_generators import to_camel

T = TypeVar("T")

JSON_INDENT = 2


class EventJsonCodec:
    """Encodes events for storage and decodes stored bodies."""

    def __init__(self) -> None:
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def encode(self, event: Any) -> bytes:
        """Serialize an event to indented camelCase JSON.

        Raises:
            TypeError: If the event holds a value with no JSON form.
            ValueError: If the event holds NaN or infinite floats.
        """
        document = self.to_jsonable(event)
        return json.dumps(
            document,
            indent=JSON_INDENT,
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")

    def decode(self, data: bytes) -> Any:
        """Deserialize a stored body into plain JSON values.

        Raises:
            UnicodeDecodeError: If the body is not UTF-8.
            json.JSONDecodeError: If the body is not valid JSON.
        """
        return json.loads(data.decode("utf-8-sig"))

    def decode_as(self, data: bytes, target: type[T]) -> T:
        """Deserialize a stored body into ``target``.

        Raises:
            ValueError: If the body is JSON null or does not fit ``target``
                (pydantic's ValidationError is a ValueError).
            TypeError: If ``target.from_dict`` rejects the shape.
            KeyError: If ``target.from_dict`` misses a required property.
        """
        payload = self.decode(data)
        if payload is None:
            raise ValueError("event body is JSON null")

        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate(_validation_input(target, payload))

        from_dict = getattr(target, "from_dict", None)
        if callable(from_dict):
            if not isinstance(payload, Mapping):
                raise TypeError(
                    f"expected a JSON object for {target.__name__}, "
                    f"got {type(payload).__name__}"
                )
            return from_dict(payload)

        return self._adapter_for(target).validate_python(
            _validation_input(target, payload)
        )

    def to_jsonable(self, value: Any) -> Any:
        """Convert an event value into JSON-compatible Python values.

        Raises:
            TypeError: If a value has no JSON representation.
        """
        if value is None or isinstance(value, (str, bool, int, float)):
            return value
        if isinstance(value, Enum):
            return self.to_jsonable(value.value)
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        if isinstance(value, UUID):
            return str(value)
        if isinstance(value, BaseModel):
            return _dump_model(value)
        if isinstance(value, Mapping):
            return {str(key): self.to_jsonable(item) for key, item in value.items()}

        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return self.to_jsonable(to_dict())
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return self._dump_dataclass(value)

        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.to_jsonable(item) for item in value]

        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

    def _dump_dataclass(self, value: Any) -> Any:
        try:
            document = self._adapter_for(type(value)).dump_python(
                value, mode="json", by_alias=True
            )
        except ValueError as e:  # PydanticSerializationError
            raise TypeError(str(e)) from e
        if _names_its_own_fields(type(value)):
            return document
        return _camel_case_keys(document, [f.name for f in dataclasses.fields(value)])

    def _adapter_for(self, target: Any) -> TypeAdapter[Any]:
        adapter = self._adapters.get(target)
        if adapter is None:
            adapter = TypeAdapter(target)
            self._adapters[target] = adapter
        return adapter


def _names_its_own_fields(target: type) -> bool:
    """Whether a pydantic model or dataclass declares an alias generator."""
    config = getattr(target, "model_config", None) or getattr(
        target, "__pydantic_config__", None
    )
    return bool(config) and config.get("alias_generator") is not None


def _camel_case_keys(document: dict[str, Any], names: list[str]) -> dict[str, Any]:
    renamed = {name: to_camel(name) for name in names}
    return {renamed.get(key, key): item for key, item in document.items()}


def _unaliased_model_names(model_type: type[BaseModel]) -> list[str]:
    names = [
        name
        for name, field in model_type.model_fields.items()
        if field.alias is None and field.serialization_alias is None
    ]
    names.extend(
        name
        for name, field in model_type.model_computed_fields.items()
        if field.alias is None
    )
    return names


def _dump_model(model: BaseModel) -> Any:
    try:
        document = model.model_dump(mode="json", by_alias=True)
    except ValueError as e:  # PydanticSerializationError
        raise TypeError(str(e)) from e

    model_type = type(model)
    if _names_its_own_fields(model_type):
        return document
    return _camel_case_keys(document, _unaliased_model_names(model_type))


def _validation_input(target: Any, payload: Any) -> Any:
    """Map camelCased top-level keys back to the names ``target`` validates."""
    if not isinstance(payload, Mapping) or _names_its_own_fields(target):
        return payload

    if isinstance(target, type) and issubclass(target, BaseModel):
        names = [
            name
            for name, field in target.model_fields.items()
            if field.alias is None and field.validation_alias is None
        ]
    elif isinstance(target, type) and dataclasses.is_dataclass(target):
        names = [f.name for f in dataclasses.fields(target)]
    else:
        return payload

    field_names = {to_camel(name): name for name in names}
    return {field_names.get(key, key): item for key, item in payload.items()}
