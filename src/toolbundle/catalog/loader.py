# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises the tool catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import CatalogMalformedError
from .io import load_document
from .model_tool import ToolCatalog, ToolMetadata
from .schema import SchemaRepository, default_schema_repository
from .types import TOOLS_KEY
from .utils import expect_mapping, mapping_array, optional_string

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ToolCatalogLoader:
    """Loader that validates and materialises a catalog document."""

    catalog_path: Path
    _schemas: SchemaRepository = field(default_factory=default_schema_repository, repr=False)

    def load(self) -> ToolCatalog:
        """Parse the catalog document into an ordered :class:`ToolCatalog`.

        Returns:
            ToolCatalog: Catalog entries in document order.

        Raises:
            CatalogNotFoundError: If the catalog file does not exist.
            CatalogMalformedError: If the document is not a valid catalog.
        """

        context = str(self.catalog_path)
        document = load_document(self.catalog_path)
        mapping = expect_mapping(document, key="<root>", context=context)
        if TOOLS_KEY not in mapping:
            raise CatalogMalformedError(f"{context}: missing required '{TOOLS_KEY}' array")
        self._schemas.validate_bundle(mapping, context=context)

        tools: list[ToolMetadata] = []
        seen: set[str] = set()
        entries = mapping_array(mapping.get(TOOLS_KEY), key=TOOLS_KEY, context=context)
        for index, entry in enumerate(entries):
            tool = ToolMetadata.from_mapping(entry, context=f"{context}:{TOOLS_KEY}[{index}]")
            if tool.id in seen:
                raise CatalogMalformedError(f"{context}: duplicate tool id '{tool.id}'")
            seen.add(tool.id)
            tools.append(tool)

        LOGGER.debug("loaded %d tools from %s", len(tools), self.catalog_path)
        return ToolCatalog(
            tools=tuple(tools),
            source=self.catalog_path,
            name=optional_string(mapping.get("name"), key="name", context=context),
            description=optional_string(mapping.get("description"), key="description", context=context),
            version=optional_string(
                mapping.get("version", mapping.get("commit")),
                key="version",
                context=context,
            ),
            bundle_format=optional_string(mapping.get("bundle_format"), key="bundle_format", context=context),
            runtime=optional_string(mapping.get("runtime"), key="runtime", context=context),
        )


def load_catalog(path: Path) -> ToolCatalog:
    """Load the catalog stored at ``path``.

    Args:
        path: Location of the catalog JSON document.

    Returns:
        ToolCatalog: Parsed catalog.
    """

    return ToolCatalogLoader(path).load()


__all__ = ["ToolCatalogLoader", "load_catalog"]
