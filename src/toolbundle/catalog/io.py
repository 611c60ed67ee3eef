# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from importlib import resources
from pathlib import Path
from typing import Final, cast

from .errors import CatalogMalformedError, CatalogNotFoundError
from .types import JSONValue

SCHEMA_PACKAGE: Final[str] = "toolbundle.catalog.schemas"


def load_schema(name: str) -> Mapping[str, JSONValue]:
    """Load a JSON schema shipped with the package.

    Args:
        name: File name of the schema inside ``toolbundle/catalog/schemas``.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.
    """
    text = resources.files(SCHEMA_PACKAGE).joinpath(name).read_text(encoding="utf-8")
    payload = cast(JSONValue, json.loads(text))
    if not isinstance(payload, Mapping):  # pragma: no cover - packaging error
        raise CatalogMalformedError(f"{name}: expected a JSON object schema")
    return payload


def load_document(path: Path) -> JSONValue:
    """Load a JSON document from disk and validate the payload.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        CatalogNotFoundError: If the JSON document is missing.
        CatalogMalformedError: If the document cannot be read or contains invalid JSON.
    """
    if not path.is_file():
        raise CatalogNotFoundError(path)
    try:
        with path.open("r", encoding="utf-8") as stream:
            payload = cast(JSONValue, json.load(stream))
    except json.JSONDecodeError as exc:
        raise CatalogMalformedError(f"{path}: failed to parse catalog JSON: {exc.msg} (line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise CatalogMalformedError(f"{path}: catalog is not valid UTF-8") from exc
    return _ensure_json_value(payload, context=str(path))


__all__ = ["load_document", "load_schema"]


def _ensure_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Ensure ``value`` is composed of JSON-compatible structures.

    Args:
        value: Parsed JSON payload to validate recursively.
        context: Human-readable context string used in error messages.

    Returns:
        JSONValue: Validated JSON value.

    Raises:
        CatalogMalformedError: If ``value`` contains unsupported JSON constructs.
    """

    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _ensure_json_value(item, context=f"{context}.{key}") for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_ensure_json_value(item, context=f"{context}[]") for item in value]
    raise CatalogMalformedError(f"{context}: value is not valid JSON")  # pragma: no cover - json never yields this
