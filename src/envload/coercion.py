"""
Conversion of raw environment strings into typed field values.
"""

import math
import re
import types
from collections.abc import Callable
from enum import Enum
from typing import Any, Union, get_args, get_origin

from envload.errors import CoercionError, UnsupportedTypeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

TRUE_VALUES = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSE_VALUES = frozenset({"0", "f", "false", "n", "no", "off"})

_INFINITY_SPELLINGS = frozenset({"inf", "infinity"})


class ScalarKind(str, Enum):
    """Closed set of field types that can be read from the environment."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


_KIND_BY_TYPE: dict[type, ScalarKind] = {
    str: ScalarKind.TEXT,
    int: ScalarKind.INTEGER,
    float: ScalarKind.FLOAT,
    bool: ScalarKind.BOOLEAN,
}


def _unwrap_optional(annotation: Any) -> Any:
    """Return X for Optional[X] / X | None, otherwise the annotation unchanged."""
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def scalar_kind_for(annotation: Any, field_name: str | None = None) -> ScalarKind:
    """
    Map a declared field type to its ScalarKind.

    Args:
        annotation: Declared type of the field.
        field_name: Field name, used in error messages.

    Raises:
        UnsupportedTypeError: The type is not a supported scalar.
    """
    target = _unwrap_optional(annotation)
    # Exact lookup so bool is never treated as int.
    kind = _KIND_BY_TYPE.get(target) if isinstance(target, type) else None
    if kind is None:
        raise UnsupportedTypeError(annotation, field_name)
    return kind


def _parse_text(raw: str, field_name: str) -> str:
    return raw


def _parse_integer(raw: str, field_name: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise CoercionError(field_name, raw, ScalarKind.INTEGER)
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise CoercionError(field_name, raw, ScalarKind.INTEGER, "value out of range")
    return value


def _parse_float(raw: str, field_name: str) -> float:
    # float() tolerates all of these, strict decimal syntax does not.
    if not raw.isascii() or raw != raw.strip() or "_" in raw:
        raise CoercionError(field_name, raw, ScalarKind.FLOAT)
    try:
        value = float(raw)
    except ValueError:
        raise CoercionError(field_name, raw, ScalarKind.FLOAT) from None
    if math.isinf(value) and raw.lstrip("+-").lower() not in _INFINITY_SPELLINGS:
        raise CoercionError(field_name, raw, ScalarKind.FLOAT, "value out of range")
    return value


def _parse_boolean(raw: str, field_name: str) -> bool:
    lowered = raw.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise CoercionError(field_name, raw, ScalarKind.BOOLEAN)


_PARSERS: dict[ScalarKind, Callable[[str, str], Any]] = {
    ScalarKind.TEXT: _parse_text,
    ScalarKind.INTEGER: _parse_integer,
    ScalarKind.FLOAT: _parse_float,
    ScalarKind.BOOLEAN: _parse_boolean,
}


def coerce_value(kind: ScalarKind, raw: str, field_name: str) -> Any:
    """
    Convert a raw string to a value of the given kind.

    Args:
        kind: Target scalar kind.
        raw: Raw string from the environment or a directive default.
        field_name: Field being loaded, carried by any error.

    Returns:
        Typed value.

    Raises:
        CoercionError: The string is not valid for the target kind.
    """
    return _PARSERS[kind](raw, field_name)
