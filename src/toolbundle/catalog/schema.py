# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating catalog documents."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Protocol, runtime_checkable

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .errors import CatalogMalformedError
from .io import load_schema
from .types import JSONValue

BUNDLE_SCHEMA_NAME: Final[str] = "bundle.schema.json"


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def iter_errors(self, instance: JSONValue) -> Iterable[ValidationError]:
        """Iterate over validation errors for ``instance``.

        Args:
            instance: JSON payload to validate against the schema.

        Returns:
            Iterable[ValidationError]: Iterator yielding validation errors.
        """


@dataclass(frozen=True, slots=True)
class SchemaRepository:
    """Hold the validator used to check catalog documents."""

    bundle_validator: SchemaValidator

    @classmethod
    def load(cls) -> SchemaRepository:
        """Build the repository from the schema bundled with the package.

        Returns:
            SchemaRepository: Repository configured with the bundle validator.
        """
        schema = load_schema(BUNDLE_SCHEMA_NAME)
        return cls(bundle_validator=Draft202012Validator(schema))

    def validate_bundle(self, document: JSONValue, *, context: str) -> None:
        """Validate a catalog document, reporting the first error by path.

        Args:
            document: Parsed catalog payload.
            context: Human-readable location used in error messages.

        Raises:
            CatalogMalformedError: When the document violates the bundle schema.
        """
        errors = sorted(self.bundle_validator.iter_errors(document), key=_error_sort_key)
        if not errors:
            return
        first = errors[0]
        location = "/".join(str(part) for part in first.absolute_path) or "<root>"
        raise CatalogMalformedError(f"{context}: {location}: {first.message}")


def _error_sort_key(error: ValidationError) -> tuple[str, ...]:
    return tuple(str(part) for part in error.absolute_path)


@lru_cache(maxsize=1)
def default_schema_repository() -> SchemaRepository:
    """Return the process-wide schema repository."""
    return SchemaRepository.load()


__all__ = ["SchemaRepository", "SchemaValidator", "default_schema_repository"]
