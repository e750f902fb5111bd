"""Struct serialization strategies.

Pydantic models are the structs of this package. They can be serialized in
two ways, which produce different MessagePack but share the same envelope:

- MAP: each model becomes a map of field name (or alias) to value
- ARRAY: each model becomes an array of field values in declaration order

Plain values (dicts, lists, ints, strings, bytes, ...) serialize identically
under both strategies.
"""

from __future__ import annotations

import enum
import types
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

import msgpack
from pydantic import BaseModel, ValidationError

from ..exceptions import SerializationError

M = TypeVar("M", bound=BaseModel)


def _model_as_map(obj: Any) -> Any:
    # keys must match what model_validate expects
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True)
    return _common_default(obj)


def _model_as_array(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return [getattr(obj, name) for name in type(obj).model_fields]
    return _common_default(obj)


def _common_default(obj: Any) -> Any:
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Cannot serialize object of type {type(obj).__name__}")


def _is_model(annotation: Any) -> bool:
    return (
        get_origin(annotation) is None
        and isinstance(annotation, type)
        and issubclass(annotation, BaseModel)
    )


def _has_model(annotation: Any) -> bool:
    """Return True if a model class appears anywhere inside an annotation."""
    if get_origin(annotation) is None:
        return _is_model(annotation)
    return any(_has_model(arg) for arg in get_args(annotation))


def _array_to_fields(model: type[BaseModel], items: Any) -> dict[str, Any]:
    """Map an array of field values back onto the model's field aliases."""
    if not isinstance(items, list):
        raise SerializationError(
            f"{model.__name__}: expected array of field values, got {type(items).__name__}"
        )

    fields = model.model_fields
    if len(items) != len(fields):
        raise SerializationError(
            f"{model.__name__}: expected {len(fields)} field values, got {len(items)}"
        )

    values: dict[str, Any] = {}
    for (name, info), item in zip(fields.items(), items):
        values[info.alias or name] = _array_field_value(info.annotation, item)
    return values


def _array_field_value(annotation: Any, item: Any) -> Any:
    """Rebuild nested models inside a decoded field value.

    Walks the annotation alongside the value: model classes take an array of
    field values, containers (list, tuple, set, dict values) are rebuilt
    element by element, and Annotated/Union are unwrapped.
    """
    if item is None or not _has_model(annotation):
        return item

    if _is_model(annotation):
        if isinstance(item, list):
            return _array_to_fields(annotation, item)
        return item

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        return _array_field_value(args[0], item)

    if origin in (Union, types.UnionType):
        return _union_value(args, item)

    if isinstance(item, dict):
        value_type = args[-1] if args else Any
        return {key: _array_field_value(value_type, value) for key, value in item.items()}

    if isinstance(item, list):
        if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
            # fixed-length tuple, one annotation per position
            rebuilt = [_array_field_value(arg, entry) for arg, entry in zip(args, item)]
            return rebuilt + item[len(args) :]
        element = args[0] if args else Any
        return [_array_field_value(element, entry) for entry in item]

    return item


def _union_value(members: tuple[Any, ...], item: Any) -> Any:
    candidates = [member for member in members if _has_model(member)]

    # An array matches a model member by field count
    if isinstance(item, list):
        for member in candidates:
            if _is_model(member) and len(member.model_fields) == len(item):
                return _array_to_fields(member, item)

    for member in candidates:
        if not _is_model(member):
            return _array_field_value(member, item)

    if candidates:
        return _array_field_value(candidates[0], item)
    return item


class StructStrategy(enum.Enum):
    """How pydantic models are laid out in MessagePack."""

    MAP = "map"
    ARRAY = "array"

    def serialize(self, value: Any) -> bytes:
        """Serialize a value to MessagePack bytes.

        Raises:
            SerializationError: If the value contains unsupported types
        """
        default = _model_as_map if self is StructStrategy.MAP else _model_as_array
        try:
            return msgpack.packb(value, default=default, use_bin_type=True)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize {type(value).__name__}: {e}") from e

    def deserialize(self, data: bytes, model: type[M] | None = None) -> Any:
        """Deserialize MessagePack bytes, optionally into a pydantic model.

        Args:
            data: MessagePack bytes
            model: Model class to validate the decoded map/array into

        Returns:
            Plain decoded value, or a ``model`` instance when a model is given

        Raises:
            SerializationError: If data is malformed or doesn't validate against the model
        """
        try:
            obj = msgpack.unpackb(data, raw=False, strict_map_key=False)
        except (msgpack.exceptions.UnpackException, ValueError, TypeError) as e:
            raise SerializationError(f"Failed to unpack MessagePack data: {e}") from e

        if model is None:
            return obj

        try:
            if self is StructStrategy.ARRAY:
                return model.model_validate(_array_to_fields(model, obj))
            return model.model_validate(obj)
        except ValidationError as e:
            raise SerializationError(f"Failed to construct {model.__name__}: {e}") from e
