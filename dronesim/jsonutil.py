"""Helpers for reading and building JSON-style entity descriptions."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any


class MissingKeyError(LookupError):
    """Raised when a required key is absent from a JSON object."""

    def __init__(self, what: str, key: str) -> None:
        super().__init__(f"Trying to get the {what} from key that does not exist: {key}")
        self.key = key


def _require(obj: Mapping[str, Any], key: str, what: str) -> Any:
    if key not in obj:
        raise MissingKeyError(what, key)
    return obj[key]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_value(obj: Mapping[str, Any], key: str) -> Any:
    """Return the raw value stored under ``key``."""
    return _require(obj, key, "value")


def get_object(obj: Mapping[str, Any], key: str) -> dict[str, Any]:
    """Return the JSON object stored under ``key``."""
    value = _require(obj, key, "object")
    if not isinstance(value, Mapping):
        raise TypeError(f"Value for key {key} is not an object")
    return value


def get_array(obj: Mapping[str, Any], key: str) -> list[Any]:
    """Return the JSON array stored under ``key``."""
    value = _require(obj, key, "array")
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"Value for key {key} is not an array")
    return list(value)


def get_string(obj: Mapping[str, Any], key: str) -> str:
    """Return the string stored under ``key``."""
    value = _require(obj, key, "string")
    if not isinstance(value, str):
        raise TypeError(f"Value for key {key} is not a string")
    return value


def get_double(obj: Mapping[str, Any], key: str) -> float:
    """Return the number stored under ``key`` as a float."""
    value = _require(obj, key, "double")
    if not _is_number(value):
        raise TypeError(f"Value for key {key} is not a number")
    return float(value)


def get_float_vector(obj: Mapping[str, Any], key: str) -> list[float]:
    """Return the numeric array stored under ``key`` as a list of floats."""
    _require(obj, key, "float vector")
    items = get_array(obj, key)
    if not all(_is_number(item) for item in items):
        raise TypeError(f"Array for key {key} holds a non-number")
    return [float(item) for item in items]


def contains_key(obj: Mapping[str, Any], key: str) -> bool:
    """Return whether ``key`` is present in ``obj``."""
    return key in obj


def create_notification() -> dict[str, Any]:
    """Return a new notification object."""
    return {"type": "notify"}


def encode_array(arr: Iterable[Iterable[float]]) -> list[list[float]]:
    """Turn a sequence of points into a JSON array of float arrays."""
    return [[float(v) for v in point] for point in arr]


def _serialize(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


def format_entity_details(obj: Mapping[str, Any]) -> str:
    """Return a human-readable report of an entity description."""
    lines = [
        "",
        "------JSON:------",
        "  " + _serialize(dict(obj)),
        "------Key Values:------",
        "PrintKeyValues ---------",
    ]
    lines.extend(f"  {key}: {_serialize(obj[key])}" for key in sorted(obj))
    lines.append("End PrintKeyValues ---------")
    lines.append("------Entity Type:------")
    lines.append("  " + get_string(obj, "type"))
    lines.append("------Contains Key:------")
    for key in ("type", "otherKey", "position"):
        lines.append(f"  Contains {key}: {int(contains_key(obj, key))}")
    lines.append("------Position array:------")
    if contains_key(obj, "position"):
        lines.extend(
            f"  position[{i}]: {_serialize(item)}"
            for i, item in enumerate(get_array(obj, "position"))
        )
    lines.append("")
    return "\n".join(lines) + "\n"