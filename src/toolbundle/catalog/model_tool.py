# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tool metadata models for catalog entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .types import JSONValue
from .utils import (
    expect_string,
    freeze_json_mapping,
    mapping_array,
    optional_bool,
    optional_number,
    optional_string,
    string_array,
)


@dataclass(frozen=True, slots=True)
class ToolParameter:
    """Parameter descriptor declared by a catalog tool."""

    name: str
    param_type: str
    description: str
    default: JSONValue = None
    minimum: float | int | None = None
    maximum: float | int | None = None
    choices: tuple[str, ...] | None = None
    has_default: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, JSONValue], *, context: str) -> ToolParameter:
        """Materialise a parameter from its JSON payload.

        Args:
            data: Parameter object taken from the catalog.
            context: Human-readable location used in error messages.

        Returns:
            ToolParameter: Parsed parameter descriptor.
        """
        raw_choices = data.get("enum")
        return cls(
            name=optional_string(data.get("name"), key="name", context=context),
            param_type=optional_string(data.get("type"), key="type", context=context),
            description=optional_string(data.get("description"), key="description", context=context),
            default=data.get("default"),
            minimum=optional_number(data.get("min"), key="min", context=context),
            maximum=optional_number(data.get("max"), key="max", context=context),
            choices=None if raw_choices is None else string_array(raw_choices, key="enum", context=context),
            has_default="default" in data,
        )


@dataclass(frozen=True, slots=True)
class ToolExample:
    """Named example invocation attached to a tool."""

    name: str
    description: str
    parameters: Mapping[str, JSONValue]


@dataclass(frozen=True, slots=True)
class ToolMetadata:
    """Immutable representation of one catalog entry."""

    id: str
    name: str = ""
    description: str = ""
    labels: tuple[str, ...] = ()
    parameters: tuple[ToolParameter, ...] = ()
    input_types: tuple[str, ...] = ()
    output_types: tuple[str, ...] = ()
    commit: str = ""
    commit_date: str = ""
    is_temporal: bool = False
    examples: tuple[ToolExample, ...] = ()

    @property
    def display_name(self) -> str:
        """Return the display name, falling back to the id."""
        return self.name or self.id

    @classmethod
    def from_mapping(cls, data: Mapping[str, JSONValue], *, context: str) -> ToolMetadata:
        """Build tool metadata from a catalog JSON object.

        Args:
            data: Tool object taken from the catalog ``tools`` array.
            context: Human-readable location used in error messages.

        Returns:
            ToolMetadata: Parsed, immutable tool metadata.

        Raises:
            CatalogMalformedError: If a field has the wrong JSON type.
        """
        tool_id = expect_string(data.get("id"), key="id", context=context)
        tool_context = f"{context}[{tool_id}]"
        parameters = tuple(
            ToolParameter.from_mapping(item, context=f"{tool_context}.parameters[{index}]")
            for index, item in enumerate(mapping_array(data.get("parameters"), key="parameters", context=tool_context))
        )
        examples = tuple(
            _example_from_mapping(item, context=f"{tool_context}.examples[{index}]")
            for index, item in enumerate(mapping_array(data.get("examples"), key="examples", context=tool_context))
        )
        return cls(
            id=tool_id,
            name=optional_string(data.get("name"), key="name", context=tool_context),
            description=optional_string(data.get("description"), key="description", context=tool_context),
            labels=string_array(data.get("labels"), key="labels", context=tool_context),
            parameters=parameters,
            input_types=string_array(data.get("input_types"), key="input_types", context=tool_context),
            output_types=string_array(data.get("output_types"), key="output_types", context=tool_context),
            commit=optional_string(data.get("commit"), key="commit", context=tool_context),
            commit_date=optional_string(data.get("commit_date"), key="commit_date", context=tool_context),
            is_temporal=optional_bool(data.get("isTemporal"), key="isTemporal", context=tool_context),
            examples=examples,
        )


def _example_from_mapping(data: Mapping[str, JSONValue], *, context: str) -> ToolExample:
    raw_parameters = data.get("parameters")
    parameters = raw_parameters if isinstance(raw_parameters, Mapping) else {}
    return ToolExample(
        name=optional_string(data.get("name"), key="name", context=context),
        description=optional_string(data.get("description"), key="description", context=context),
        parameters=freeze_json_mapping(parameters),
    )


@dataclass(frozen=True, slots=True)
class ToolCatalog:
    """Bundle-level metadata plus the ordered tool entries."""

    tools: tuple[ToolMetadata, ...]
    source: Path
    name: str = ""
    description: str = ""
    version: str = ""
    bundle_format: str = ""
    runtime: str = ""

    def __len__(self) -> int:
        return len(self.tools)


__all__ = ["ToolCatalog", "ToolExample", "ToolMetadata", "ToolParameter"]
