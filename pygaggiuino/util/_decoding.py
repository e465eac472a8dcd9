"""Decoding helpers for the loosely typed Gaggiuino payloads.

The firmware is not consistent about scalar types: some endpoints send
numbers and booleans natively, others send their string representation.
The ``flexible_*`` parsers accept both and are attached per field through
``field_options(deserialize=...)``.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from mashumaro.exceptions import InvalidFieldValue, MissingField
from mashumaro.mixins.json import DataClassJSONMixin

from pygaggiuino.const import FALSE_TOKENS, TRUE_TOKENS
from pygaggiuino.exceptions import DecodingFailed

T = TypeVar("T", bound=DataClassJSONMixin)


def _is_plain_number(value: str) -> bool:
    """Reject Python-only spellings like surrounding blanks or digit separators."""
    return value.isascii() and value == value.strip() and "_" not in value


def flexible_int(value: Any) -> int:
    """Parse an integer sent either natively or as a numeric string."""
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to int")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _is_plain_number(value):
        try:
            return int(value)
        except ValueError:
            pass
    raise ValueError(f"Cannot convert {value!r} to int")


def flexible_float(value: Any) -> float:
    """Parse a float sent either natively or as a numeric string."""
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to float")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and _is_plain_number(value):
        try:
            return float(value)
        except ValueError:
            pass
    raise ValueError(f"Cannot convert {value!r} to float")


def flexible_bool(value: Any) -> bool:
    """Parse a boolean sent either natively or as one of the known tokens."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.lower()
        if token in TRUE_TOKENS:
            return True
        if token in FALSE_TOKENS:
            return False
    raise ValueError(f"Cannot convert {value!r} to bool")


def lenient_bool(value: Any) -> bool | None:
    """Parse a boolean, mapping anything unparseable to None."""
    try:
        return flexible_bool(value)
    except ValueError:
        return None


def strict_int(value: Any) -> int:
    """Accept only a JSON number holding a whole value."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"Expected an integer, got {value!r}")


def strict_float(value: Any) -> float:
    """Accept only a JSON number."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ValueError(f"Expected a number, got {value!r}")


def strict_bool(value: Any) -> bool:
    """Accept only a JSON boolean."""
    if isinstance(value, bool):
        return value
    raise ValueError(f"Expected a boolean, got {value!r}")


def strict_str(value: Any) -> str:
    """Accept only a JSON string."""
    if isinstance(value, str):
        return value
    raise ValueError(f"Expected a string, got {value!r}")


def strict_int_list(value: Any) -> list[int]:
    """Accept only a JSON array of integers."""
    if not isinstance(value, list):
        raise ValueError(f"Expected an array, got {value!r}")
    return [strict_int(item) for item in value]


def strict_float_dict(value: Any) -> dict[str, float]:
    """Accept only a JSON object mapping names to numbers."""
    if not isinstance(value, dict):
        raise ValueError(f"Expected an object, got {value!r}")
    return {strict_str(key): strict_float(item) for key, item in value.items()}


def scale_tenths(values: list[int] | None) -> list[float] | None:
    """Convert a series stored in tenths to its physical unit."""
    if values is None:
        return None
    return [value / 10.0 for value in values]


def _describe(err: Exception) -> DecodingFailed:
    """Turn a mashumaro error chain into a DecodingFailed with a field path.

    Nested models raise inside mashumaro's own handler, so the inner error
    may be linked either as ``__cause__`` or as ``__context__``.
    """
    path: list[str] = []
    current: BaseException = err
    while isinstance(current, (InvalidFieldValue, MissingField)):
        path.append(current.field_name)
        if isinstance(current, MissingField):
            break
        inner = current.__cause__ or current.__context__
        if inner is None:
            break
        current = inner
    if isinstance(current, MissingField):
        detail = "required field is missing"
    else:
        detail = str(current)
    return DecodingFailed(detail, ".".join(path) or None)


def decode_json(body: bytes | str) -> Any:
    """Parse a raw JSON body."""
    try:
        return json.loads(body)
    except (ValueError, TypeError) as ex:
        raise DecodingFailed(f"Malformed JSON: {ex}") from ex


def decode_object(model: type[T], body: bytes | str) -> T:
    """Decode a JSON object body into a model."""
    return _from_dict(model, decode_json(body))


def decode_list(
    model: type[T], body: bytes | str
) -> list[T]:
    """Decode a JSON array body into a list of models."""
    data = decode_json(body)
    if not isinstance(data, list):
        raise DecodingFailed(
            f"Expected a JSON array for {model.__name__}, got {type(data).__name__}"
        )
    return [_from_dict(model, item) for item in data]


def _from_dict(model: type[T], data: Any) -> T:
    """Build a model from parsed JSON, normalising mashumaro's errors."""
    if not isinstance(data, dict):
        raise DecodingFailed(
            f"Expected a JSON object for {model.__name__}, got {type(data).__name__}"
        )
    try:
        return model.from_dict(data)
    except (InvalidFieldValue, MissingField) as ex:
        raise _describe(ex) from ex
    except (ValueError, TypeError) as ex:
        raise DecodingFailed(str(ex)) from ex
