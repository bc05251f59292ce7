"""Snake-case JSON encoding and decoding.

Only field names of models and dataclasses are snake-cased. Mapping keys
and null values inside mappings are caller data and pass through as given.
"""
import dataclasses
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_snake

T = TypeVar("T")

_ANY_ADAPTER: TypeAdapter = TypeAdapter(Any)


class SnakeCaseModel(BaseModel):
    """Base for payload models whose attributes are not snake-case.

    Fields are read from snake-case JSON keys and can still be set by name.
    """

    model_config = ConfigDict(alias_generator=to_snake, populate_by_name=True)


def to_json_data(value: Any) -> Any:
    """Turn ``value`` into plain JSON data.

    Model and dataclass fields are renamed to snake-case and dropped when
    None. Datetimes, decimals, enums and UUIDs go through pydantic's JSON
    mode.
    """
    if isinstance(value, BaseModel):
        data = {}
        for name in type(value).model_fields:
            item = getattr(value, name)
            if item is not None:
                data[to_snake(name)] = to_json_data(item)
        for key, item in (value.model_extra or {}).items():
            data[key] = to_json_data(item)
        return data
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        data = {}
        for field in dataclasses.fields(value):
            item = getattr(value, field.name)
            if item is not None:
                data[to_snake(field.name)] = to_json_data(item)
        return data
    if isinstance(value, Mapping):
        return {str(key): to_json_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json_data(item) for item in value]
    return _ANY_ADAPTER.dump_python(value, mode="json")


def encode(body: Any) -> str:
    """Serialize ``body`` to snake-case JSON text."""
    return _ANY_ADAPTER.dump_json(to_json_data(body)).decode("utf-8")


def decode(text: str, target: Type[T] = dict) -> T:
    """Validate JSON ``text`` into ``target``; keys and nulls are kept.

    Raises ``pydantic.ValidationError`` (a ``ValueError``) when the text is
    not JSON or does not fit ``target``.
    """
    return TypeAdapter(target).validate_json(text)
