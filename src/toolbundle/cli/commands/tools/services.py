# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service helpers backing the ``tools`` command group."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ....catalog import ToolIndex, ToolMetadata, load_catalog
from ....catalog.types import CATALOG_FILENAME
from ....config import RegistryConfig, load_config
from ....registry import ToolBinding, bind_tool
from ..validate.models import ARTIFACT_DIRNAME


@dataclass(frozen=True, slots=True)
class BundleView:
    """Loaded catalog plus the configuration used to bind its entries."""

    index: ToolIndex
    config: RegistryConfig
    artifact_root: Path

    def bind(self, tool: ToolMetadata) -> ToolBinding:
        """Return the resolved binding for ``tool``."""

        return bind_tool(
            tool,
            overrides=self.config.overrides,
            conventions=self.config.conventions,
            artifact_root=self.artifact_root,
        )


def load_bundle_view(
    root: Path,
    *,
    catalog_path: Path | None = None,
    artifact_root: Path | None = None,
    config_path: Path | None = None,
    preset: str | None = None,
) -> BundleView:
    """Load the catalog and configuration for the bundle at ``root``.

    ``catalog_path`` and ``artifact_root`` default to ``ROOT/index.json`` and
    ``ROOT/tools``, matching the ``validate`` command.

    Raises:
        RegistryError: If the catalog is missing or malformed.
        ConfigError: If the configuration cannot be loaded.
    """

    resolved = root.resolve()
    config = load_config(resolved, config_path=config_path, preset=preset)
    catalog = load_catalog(catalog_path if catalog_path is not None else resolved / CATALOG_FILENAME)
    artifacts = artifact_root if artifact_root is not None else resolved / ARTIFACT_DIRNAME
    return BundleView(index=ToolIndex(catalog), config=config, artifact_root=artifacts)


def select_bindings(view: BundleView, *, category: str | None, search: str | None) -> list[ToolBinding]:
    """Return bindings in catalog order, filtered by resolved category and search term."""

    tools = view.index.search(search) if search else view.index.catalog.tools
    bindings = [view.bind(tool) for tool in tools]
    if category is not None:
        bindings = [binding for binding in bindings if binding.category == category]
    return bindings


__all__ = ["BundleView", "load_bundle_view", "select_bindings"]
