# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and layered loading for the registry."""

from __future__ import annotations

from .models import (
    ArtifactConventions,
    ConfigError,
    ExecutionConfig,
    OverrideTables,
    RegistrationStyle,
    RegistryConfig,
)
from .sources import CONFIG_FILENAME, ConfigLoader, available_presets, load_config

__all__ = [
    "CONFIG_FILENAME",
    "ArtifactConventions",
    "ConfigError",
    "ConfigLoader",
    "ExecutionConfig",
    "OverrideTables",
    "RegistrationStyle",
    "RegistryConfig",
    "available_presets",
    "load_config",
]
