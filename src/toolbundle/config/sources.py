# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, presets, TOML, pyproject)."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .models import ConfigError, RegistryConfig

LOGGER = logging.getLogger(__name__)

PRESET_PACKAGE: Final[str] = "toolbundle.config.presets"
CONFIG_FILENAME: Final[str] = "toolbundle.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "toolbundle"


class ConfigSource(Protocol):
    """Provide configuration data loaded from disk or other mediums."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return configuration values as a mapping."""

    def describe(self) -> str:
        """Return a human-readable description of the source."""


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return RegistryConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a TOML document."""

    def __init__(self, path: Path, *, name: str | None = None, required: bool = False) -> None:
        self._path = path
        self.name = name or str(path)
        self._required = required

    def load(self) -> Mapping[str, Any]:
        if not self._path.is_file():
            if self._required:
                raise ConfigError(f"Configuration file not found: {self._path}")
            return {}
        return _parse_toml(self._path.read_bytes(), context=str(self._path))

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.toolbundle]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


class PresetConfigSource:
    """Load a named preset shipped with the package."""

    def __init__(self, preset: str) -> None:
        self._preset = preset
        self.name = f"preset:{preset}"

    def load(self) -> Mapping[str, Any]:
        resource = resources.files(PRESET_PACKAGE).joinpath(f"{self._preset}.toml")
        if not resource.is_file():
            known = ", ".join(available_presets()) or "none"
            raise ConfigError(f"Unknown preset '{self._preset}' (available: {known})")
        return _parse_toml(resource.read_bytes(), context=self.name)

    def describe(self) -> str:
        return f"Built-in preset '{self._preset}'"


def available_presets() -> tuple[str, ...]:
    """Return the names of the presets shipped with the package."""

    return tuple(
        sorted(
            entry.name.removesuffix(".toml")
            for entry in resources.files(PRESET_PACKAGE).iterdir()
            if entry.name.endswith(".toml")
        ),
    )


@dataclass(slots=True)
class ConfigLoader:
    """Merge layered configuration sources into a :class:`RegistryConfig`."""

    sources: Sequence[ConfigSource]

    @classmethod
    def for_root(
        cls,
        root: Path,
        *,
        config_path: Path | None = None,
        preset: str | None = None,
    ) -> ConfigLoader:
        """Return a loader wired with the standard source order for ``root``.

        Args:
            root: Bundle root searched for ``pyproject.toml`` and ``toolbundle.toml``.
            config_path: Explicit configuration file replacing ``toolbundle.toml``.
            preset: Optional built-in preset applied on top of the defaults.

        Returns:
            ConfigLoader: Loader with defaults, preset, pyproject, and file sources.
        """

        sources: list[ConfigSource] = [DefaultConfigSource()]
        if preset:
            sources.append(PresetConfigSource(preset))
        sources.append(PyProjectConfigSource(root / PYPROJECT_FILENAME))
        if config_path is not None:
            sources.append(TomlConfigSource(config_path, required=True))
        else:
            sources.append(TomlConfigSource(root / CONFIG_FILENAME))
        return cls(sources=tuple(sources))

    def load(self, overrides: Mapping[str, Any] | None = None) -> RegistryConfig:
        """Merge every source, apply ``overrides``, and validate the result.

        Args:
            overrides: Final fragment applied after all sources, typically CLI flags.

        Returns:
            RegistryConfig: Validated configuration.

        Raises:
            ConfigError: If any source is unreadable or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        for source in self.sources:
            fragment = source.load()
            if fragment:
                LOGGER.debug("applying configuration from %s", source.describe())
            merged = _deep_merge(merged, fragment)
        if overrides:
            merged = _deep_merge(merged, overrides)
        try:
            return RegistryConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_config(
    root: Path,
    *,
    config_path: Path | None = None,
    preset: str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> RegistryConfig:
    """Return the effective configuration for the bundle at ``root``."""

    return ConfigLoader.for_root(root, config_path=config_path, preset=preset).load(overrides)


def _parse_toml(payload: bytes, *, context: str) -> dict[str, Any]:
    try:
        data = tomllib.loads(payload.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{context}: invalid TOML: {exc}") from exc
    return data


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = [
    "CONFIG_FILENAME",
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "PresetConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "available_presets",
    "load_config",
]
