# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for catalog lookup helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolbundle.catalog import ToolCatalog, ToolIndex, ToolMetadata, UnknownToolError


@pytest.fixture
def index() -> ToolIndex:
    tools = (
        ToolMetadata(id="translate", name="Translate", description="Shift points", labels=("transform",)),
        ToolMetadata(id="speed-series", name="Speed Series", description="Per-leg speed", labels=("analysis",)),
        ToolMetadata(id="export-csv", name="Export CSV", description="Write rows", labels=("io", "export")),
    )
    return ToolIndex(ToolCatalog(tools=tools, source=Path("index.json")))


def test_get_and_require(index: ToolIndex) -> None:
    assert index.get("translate") is not None
    assert index.get("rotate") is None
    assert index.require("export-csv").name == "Export CSV"


def test_require_unknown_raises(index: ToolIndex) -> None:
    with pytest.raises(UnknownToolError) as excinfo:
        index.require("rotate")

    assert str(excinfo.value) == "unknown tool: rotate"


def test_by_label_preserves_order(index: ToolIndex) -> None:
    assert [tool.id for tool in index.by_label("io")] == ["export-csv"]
    assert index.by_label("missing") == ()


def test_categories_are_sorted_and_unique(index: ToolIndex) -> None:
    assert index.categories() == ("analysis", "export", "io", "transform")


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        ("SPEED", ["speed-series"]),
        ("rows", ["export-csv"]),
        ("trans", ["translate"]),
        ("", ["translate", "speed-series", "export-csv"]),
    ],
)
def test_search(index: ToolIndex, term: str, expected: list[str]) -> None:
    assert [tool.id for tool in index.search(term)] == expected


def test_stats(index: ToolIndex) -> None:
    stats = index.stats()

    assert stats.total == 3
    assert stats.labels == 4
