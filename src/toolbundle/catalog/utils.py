# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed accessors over raw catalog JSON.

Every accessor takes the raw value plus the field ``key`` and a ``context``
prefix (usually ``<catalog path>:tools[<n>]``) and raises
:class:`CatalogMalformedError` naming both when the JSON type is wrong. Absent
optional fields arrive as ``None`` and map to an empty default.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .errors import CatalogMalformedError
from .types import JSONValue


def _malformed(context: str, key: str, expected: str) -> CatalogMalformedError:
    return CatalogMalformedError(f"{context}: expected '{key}' to be {expected}")


def _is_array(value: JSONValue) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def optional_string(value: JSONValue | None, *, key: str, context: str, default: str = "") -> str:
    """Return ``value`` when it is a string, ``default`` when it is absent."""
    if value is None:
        return default
    if isinstance(value, str):
        return value
    raise _malformed(context, key, "a string")


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return a required, non-empty string field.

    Raises:
        CatalogMalformedError: If the field is missing, empty, or not a string.
    """
    if isinstance(value, str) and value:
        return value
    raise _malformed(context, key, "a non-empty string")


def optional_bool(value: JSONValue | None, *, key: str, context: str, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise _malformed(context, key, "a boolean")


def optional_number(value: JSONValue | None, *, key: str, context: str) -> float | int | None:
    """Return a numeric field or ``None``; booleans are not numbers here."""
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    raise _malformed(context, key, "a number")


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return an array of strings as a tuple, preserving order.

    Raises:
        CatalogMalformedError: If ``value`` is not an array or holds a non-string item.
    """
    if value is None:
        return ()
    if not _is_array(value):
        raise _malformed(context, key, "an array of strings")
    items = tuple(value)  # type: ignore[arg-type]
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise _malformed(context, f"{key}[{index}]", "a string")
    return items


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    if isinstance(value, Mapping):
        return value
    raise _malformed(context, key, "an object")


def mapping_array(value: JSONValue | None, *, key: str, context: str) -> tuple[Mapping[str, JSONValue], ...]:
    """Return an array of JSON objects, checking each element."""
    if value is None:
        return ()
    if not _is_array(value):
        raise _malformed(context, key, "an array")
    return tuple(
        expect_mapping(item, key=f"{key}[{index}]", context=context)
        for index, item in enumerate(value)  # type: ignore[arg-type]
    )


def freeze_json_mapping(value: Mapping[str, JSONValue]) -> Mapping[str, JSONValue]:
    """Return a read-only shallow copy of ``value``."""
    return MappingProxyType(dict(value))


__all__ = [
    "expect_mapping",
    "expect_string",
    "freeze_json_mapping",
    "mapping_array",
    "optional_bool",
    "optional_number",
    "optional_string",
    "string_array",
]
