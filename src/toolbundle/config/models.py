# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the tool bundle registry."""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_EXTENSION: Final[str] = ".js"
DEFAULT_NAMESPACE: Final[str] = "window.ToolVault"
DEFAULT_ENCAPSULATION_MARKERS: Final[tuple[str, ...]] = ("(function()", "(() => {")

RegistrationStyle = Literal["assignment", "call"]
DEFAULT_REGISTRATION_STYLES: Final[tuple[RegistrationStyle, ...]] = ("assignment",)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class OverrideTables(BaseModel):
    """Explicit exceptions to the id-derived category and registration name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    categories: dict[str, str] = Field(default_factory=dict)
    registration_names: dict[str, str] = Field(default_factory=dict)


class ArtifactConventions(BaseModel):
    """Layout and marker conventions shared by every artifact in a bundle."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    extension: str = DEFAULT_EXTENSION
    namespace: str = DEFAULT_NAMESPACE
    encapsulation_markers: tuple[str, ...] = DEFAULT_ENCAPSULATION_MARKERS
    registration_styles: tuple[RegistrationStyle, ...] = DEFAULT_REGISTRATION_STYLES

    @field_validator("extension")
    @classmethod
    def _normalise_extension(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped or stripped == ".":
            raise ValueError("extension must not be empty")
        return stripped if stripped.startswith(".") else f".{stripped}"

    @field_validator("namespace")
    @classmethod
    def _strip_namespace(cls, value: str) -> str:
        stripped = value.strip().rstrip(".")
        if not stripped:
            raise ValueError("namespace must not be empty")
        return stripped

    @field_validator("encapsulation_markers", "registration_styles")
    @classmethod
    def _require_entries(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        if not value:
            raise ValueError("at least one entry is required")
        return value


class ExecutionConfig(BaseModel):
    """Runtime knobs for a validation run."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    jobs: int = Field(default=1, ge=1)
    strict_metadata: bool = False


class RegistryConfig(BaseModel):
    """Top-level configuration consumed by the validation runner."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    overrides: OverrideTables = Field(default_factory=OverrideTables)
    conventions: ArtifactConventions = Field(default_factory=ArtifactConventions)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping suitable for merging."""
        return self.model_dump(mode="python")


__all__ = [
    "DEFAULT_ENCAPSULATION_MARKERS",
    "DEFAULT_EXTENSION",
    "DEFAULT_NAMESPACE",
    "DEFAULT_REGISTRATION_STYLES",
    "ArtifactConventions",
    "ConfigError",
    "ExecutionConfig",
    "OverrideTables",
    "RegistrationStyle",
    "RegistryConfig",
]
