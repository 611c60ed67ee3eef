# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for whole-bundle validation runs."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from bundle_factory import artifact_source, complete_tool

from toolbundle.catalog import CatalogMalformedError, CatalogNotFoundError, load_catalog
from toolbundle.config import ExecutionConfig, RegistryConfig, load_config
from toolbundle.registry import (
    ArtifactRootNotFoundError,
    IssueKind,
    ValidationRunner,
    collect_report,
    run_validation,
)


def _toolvault(root: Path, **execution: object) -> RegistryConfig:
    config = load_config(root, preset="toolvault")
    if execution:
        config = config.model_copy(update={"execution": ExecutionConfig(**execution)})
    return config


def test_scenario_translate_is_valid(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("translate")],
        {"transform/translate.js": artifact_source("translate")},
    )

    report = run_validation(root / "index.json", root / "tools", _toolvault(root))

    (result,) = report.results
    assert result.valid
    assert result.category == "transform"
    assert report.overall_valid


def test_scenario_registration_under_id_instead_of_override(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("flip-horizontal")],
        {"transform/flip-horizontal.js": artifact_source("flip-horizontal")},
    )

    report = run_validation(root / "index.json", root / "tools", _toolvault(root))

    (result,) = report.results
    assert result.implementation_found
    assert result.has_encapsulation
    assert not result.has_registration
    assert not result.valid
    assert not report.overall_valid


def test_scenario_missing_artifact_does_not_stop_run(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("speed-series"), complete_tool("translate")],
        {"transform/translate.js": artifact_source("translate")},
    )

    report = run_validation(root / "index.json", root / "tools", _toolvault(root))

    missing, present = report.results
    assert (missing.implementation_found, missing.has_encapsulation, missing.has_registration) == (
        False,
        False,
        False,
    )
    assert [issue.kind for issue in missing.issues] == [IssueKind.ARTIFACT_NOT_FOUND]
    assert present.valid
    assert not report.overall_valid


def test_scenario_unparseable_catalog_aborts(write_bundle) -> None:
    root = write_bundle(catalog="not json at all")

    with pytest.raises(CatalogMalformedError):
        run_validation(root / "index.json", root / "tools")

    report = collect_report(root / "index.json", root / "tools")
    assert report.results == ()
    assert report.fatal is not None
    assert not report.overall_valid


def test_missing_catalog_is_fatal(tmp_path: Path) -> None:
    (tmp_path / "tools").mkdir()

    with pytest.raises(CatalogNotFoundError):
        run_validation(tmp_path / "index.json", tmp_path / "tools")


def test_missing_artifact_root_is_fatal(write_bundle) -> None:
    root = write_bundle([complete_tool("translate")], create_artifact_root=False)

    with pytest.raises(ArtifactRootNotFoundError):
        run_validation(root / "index.json", root / "tools")


def test_catalog_checked_before_artifact_root(tmp_path: Path) -> None:
    with pytest.raises(CatalogNotFoundError):
        run_validation(tmp_path / "index.json", tmp_path / "tools")


def test_empty_catalog_is_valid(write_bundle) -> None:
    root = write_bundle([])

    report = run_validation(root / "index.json", root / "tools")

    assert report.results == ()
    assert report.overall_valid


def test_unknown_category_fallback(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("mystery")],
        {"unknown/mystery.js": artifact_source("mystery")},
    )

    report = run_validation(root / "index.json", root / "tools")

    assert report.results[0].category == "unknown"
    assert report.results[0].valid


def test_results_follow_catalog_order(write_bundle) -> None:
    ids = ["export-csv", "translate", "average-speed", "flip-vertical", "import-rep"]
    root = write_bundle([complete_tool(tool_id) for tool_id in ids])

    report = run_validation(root / "index.json", root / "tools", _toolvault(root))

    assert [result.tool_id for result in report.results] == ids


def test_parallel_run_matches_serial_run(write_bundle) -> None:
    ids = [f"tool-{index:02d}" for index in range(12)]
    artifacts = {
        f"misc/{tool_id}.js": artifact_source(tool_id, encapsulated=index % 3 != 0)
        for index, tool_id in enumerate(ids)
        if index % 4 != 0
    }
    root = write_bundle([complete_tool(tool_id, labels=["misc"]) for tool_id in ids], artifacts)

    serial = run_validation(root / "index.json", root / "tools", RegistryConfig())
    parallel = run_validation(
        root / "index.json",
        root / "tools",
        RegistryConfig(execution=ExecutionConfig(jobs=4)),
    )

    assert [result.tool_id for result in parallel.results] == ids
    assert parallel.to_json() == serial.to_json()


def test_repeated_runs_are_byte_identical(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("translate"), complete_tool("flip-horizontal")],
        {"transform/translate.js": artifact_source("translate")},
    )
    config = _toolvault(root)

    first = run_validation(root / "index.json", root / "tools", config).to_json()
    second = run_validation(root / "index.json", root / "tools", config).to_json()

    assert first == second
    assert json.loads(first)["overallValid"] is False


def test_unreadable_artifact_is_recorded_and_run_continues(write_bundle, monkeypatch) -> None:
    root = write_bundle(
        [complete_tool("translate", labels=["transform"]), complete_tool("rotate", labels=["transform"])],
        {
            "transform/translate.js": artifact_source("translate"),
            "transform/rotate.js": artifact_source("rotate"),
        },
    )
    original_read_text = Path.read_text

    def _read_text(self: Path, *args: object, **kwargs: object) -> str:
        if self.name == "translate.js":
            raise PermissionError(13, "Permission denied")
        return original_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", _read_text)

    report = run_validation(root / "index.json", root / "tools")

    unreadable, readable = report.results
    assert [issue.kind for issue in unreadable.issues] == [IssueKind.ARTIFACT_UNREADABLE]
    assert "Permission denied" in unreadable.issues[0].message
    assert not unreadable.valid
    assert readable.valid


def test_metadata_findings_only_fail_in_strict_mode(write_bundle) -> None:
    root = write_bundle(
        [{"id": "translate", "labels": ["transform"]}],
        {"transform/translate.js": artifact_source("translate")},
    )

    lenient = run_validation(root / "index.json", root / "tools")
    strict = run_validation(
        root / "index.json",
        root / "tools",
        RegistryConfig(execution=ExecutionConfig(strict_metadata=True)),
    )

    assert lenient.results[0].metadata_findings == ("missing name", "missing description")
    assert lenient.overall_valid
    assert strict.results[0].valid
    assert not strict.overall_valid


def test_runner_accepts_custom_inspector(write_bundle) -> None:
    class _AcceptEverything:
        def has_encapsulation(self, source: str) -> bool:
            return True

        def has_registration(self, source: str, name: str) -> bool:
            return True

    root = write_bundle(
        [complete_tool("translate", labels=["transform"])],
        {"transform/translate.js": "export default 1;\n"},
    )
    runner = ValidationRunner(artifact_root=root / "tools", inspector=_AcceptEverything())

    (result,) = runner.check_catalog(load_catalog(root / "index.json"))

    assert result.valid


def test_symlink_loop_is_contained_to_its_tool(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("loop", labels=["misc"]), complete_tool("ok", labels=["misc"])],
        {"misc/ok.js": artifact_source("ok")},
    )
    os.symlink("loop.js", root / "tools" / "misc" / "loop.js")

    report = collect_report(root / "index.json", root / "tools")

    assert report.fatal is None
    looping, readable = report.results
    assert [issue.kind for issue in looping.issues] == [IssueKind.ARTIFACT_UNREADABLE]
    assert not looping.valid
    assert readable.tool_id == "ok"
    assert readable.valid
    assert not report.overall_valid


def test_empty_first_label_is_looked_up_under_unknown(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("rotate", labels=[""])],
        {"rotate.js": artifact_source("rotate"), "unknown/rotate.js": artifact_source("rotate")},
    )

    (result,) = run_validation(root / "index.json", root / "tools").results

    assert result.category == "unknown"
    assert result.artifact_path == "unknown/rotate.js"
