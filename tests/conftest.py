# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest

BundleWriter = Callable[..., Path]


@pytest.fixture
def write_bundle(tmp_path: Path) -> BundleWriter:
    """Return a helper that lays out a bundle under ``tmp_path``.

    The helper accepts ``tools`` (catalog entries) and ``artifacts`` (mapping of
    paths relative to ``tools/`` to file contents) and returns the bundle root.
    """

    def _write(
        tools: Sequence[Mapping[str, Any]] = (),
        artifacts: Mapping[str, str] | None = None,
        *,
        catalog: str | None = None,
        create_artifact_root: bool = True,
    ) -> Path:
        root = tmp_path / "bundle"
        root.mkdir(exist_ok=True)
        payload = catalog if catalog is not None else json.dumps({"tools": list(tools)}, indent=2)
        (root / "index.json").write_text(payload, encoding="utf-8")
        if create_artifact_root:
            (root / "tools").mkdir(exist_ok=True)
        for relative, source in (artifacts or {}).items():
            target = root / "tools" / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source, encoding="utf-8")
        return root

    return _write
