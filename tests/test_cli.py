# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ``toolbundle`` command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

from bundle_factory import artifact_source, complete_tool
from typer.testing import CliRunner

from toolbundle.cli.app import app

WIDE = {"COLUMNS": "200"}


def _invoke(*args: str):
    return CliRunner().invoke(app, list(args), env=WIDE)


def test_validate_passing_bundle(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("translate")],
        {"transform/translate.js": artifact_source("translate")},
    )

    result = _invoke("validate", str(root), "--preset", "toolvault", "--no-emoji", "--no-color")

    assert result.exit_code == 0
    assert "translate: transform/translate.js registers as 'translate'" in result.stdout
    assert "Bundle validation passed: 1 tool valid" in result.stdout


def test_validate_reports_invalid_tools(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("flip-horizontal"), complete_tool("speed-series")],
        {"transform/flip-horizontal.js": artifact_source("flip-horizontal")},
    )

    result = _invoke("validate", str(root), "--preset", "toolvault", "--no-emoji")

    assert result.exit_code == 1
    assert "flip-horizontal: does not register properly (expected: flipHorizontal)" in result.stdout
    assert "speed-series: artifact not found: analysis/speed-series.js" in result.stdout
    assert "2 of 2 tools invalid" in result.stdout


def test_validate_malformed_catalog_exits_two(write_bundle) -> None:
    root = write_bundle(catalog="{ broken")

    result = _invoke("validate", str(root), "--no-emoji")

    assert result.exit_code == 2
    assert "Bundle validation failed" in result.stdout


def test_validate_missing_artifact_root_exits_two(write_bundle) -> None:
    root = write_bundle([complete_tool("translate")], create_artifact_root=False)

    result = _invoke("validate", str(root), "--no-emoji")

    assert result.exit_code == 2
    assert "artifact root not found" in result.stdout


def test_validate_config_error_exits_two(write_bundle) -> None:
    root = write_bundle([complete_tool("translate")])

    result = _invoke("validate", str(root), "--config", str(root / "absent.toml"), "--no-emoji")

    assert result.exit_code == 2
    assert "Configuration error" in result.stdout


def test_validate_writes_json_report(write_bundle, tmp_path: Path) -> None:
    root = write_bundle(
        [complete_tool("translate", labels=["transform"])],
        {"transform/translate.js": artifact_source("translate")},
    )
    report_path = tmp_path / "reports" / "bundle.json"

    result = _invoke("validate", str(root), "--report-out", str(report_path), "--jobs", "2", "--quiet")

    assert result.exit_code == 0
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["overallValid"] is True
    assert payload["results"][0]["registrationName"] == "translate"


def test_validate_strict_metadata_fails(write_bundle) -> None:
    root = write_bundle(
        [{"id": "translate", "labels": ["transform"]}],
        {"transform/translate.js": artifact_source("translate")},
    )

    lenient = _invoke("validate", str(root), "--no-emoji")
    strict = _invoke("validate", str(root), "--strict-metadata", "--no-emoji")

    assert lenient.exit_code == 0
    assert "translate: metadata missing name" in lenient.stdout
    assert strict.exit_code == 1


def test_validate_explicit_catalog_and_artifacts(write_bundle, tmp_path: Path) -> None:
    root = write_bundle([complete_tool("translate", labels=["transform"])])
    artifacts = tmp_path / "elsewhere"
    (artifacts / "transform").mkdir(parents=True)
    (artifacts / "transform" / "translate.js").write_text(artifact_source("translate"), encoding="utf-8")

    result = _invoke(
        "validate",
        "--catalog",
        str(root / "index.json"),
        "--artifacts",
        str(artifacts),
        "--no-emoji",
    )

    assert result.exit_code == 0


def test_validate_call_registration_needs_opt_in(write_bundle) -> None:
    root = write_bundle(
        [complete_tool("translate", labels=["transform"])],
        {"transform/translate.js": artifact_source("translate", style="call")},
    )

    default = _invoke("validate", str(root), "--no-emoji")
    (root / "toolbundle.toml").write_text(
        '[conventions]\nregistration_styles = ["assignment", "call"]\n',
        encoding="utf-8",
    )
    opted_in = _invoke("validate", str(root), "--no-emoji")

    assert default.exit_code == 1
    assert "translate: does not register properly (expected: translate)" in default.stdout
    assert opted_in.exit_code == 0


def test_validate_nul_byte_tool_id_exits_two(write_bundle) -> None:
    root = write_bundle([{"id": "bad\u0000id", "labels": ["transform"]}])

    result = _invoke("validate", str(root), "--no-emoji")

    assert result.exit_code == 2
    assert "Bundle validation failed" in result.stdout


def test_tools_list_shows_resolved_bindings(write_bundle) -> None:
    root = write_bundle([complete_tool("flip-horizontal"), complete_tool("rotate", labels=["geometry"])])

    result = _invoke("tools", "list", str(root), "--preset", "toolvault")

    assert result.exit_code == 0
    assert "flipHorizontal" in result.stdout
    assert "transform" in result.stdout
    assert "geometry" in result.stdout


def test_tools_list_filters_by_category(write_bundle) -> None:
    root = write_bundle([complete_tool("flip-horizontal"), complete_tool("rotate", labels=["geometry"])])

    result = _invoke("tools", "list", str(root), "--preset", "toolvault", "--category", "geometry")

    assert result.exit_code == 0
    assert "rotate" in result.stdout
    assert "flip-horizontal" not in result.stdout


def test_tools_show_known_tool(write_bundle) -> None:
    root = write_bundle(
        [
            complete_tool(
                "translate",
                parameters=[{"name": "dx", "type": "number", "default": 0, "min": -5, "max": 5}],
            ),
        ],
    )

    result = _invoke("tools", "show", "translate", str(root), "--preset", "toolvault")

    assert result.exit_code == 0
    assert "transform/translate.js" in result.stdout
    assert "dx" in result.stdout


def test_tools_show_unknown_tool_exits_one(write_bundle) -> None:
    root = write_bundle([complete_tool("translate")])

    result = _invoke("tools", "show", "rotate", str(root))

    assert result.exit_code == 1
    assert "unknown tool: rotate" in result.stdout


def test_tools_commands_accept_explicit_catalog_and_artifacts(tmp_path: Path) -> None:
    catalog = tmp_path / "meta" / "bundle.json"
    catalog.parent.mkdir()
    catalog.write_text(json.dumps({"tools": [complete_tool("translate", labels=["transform"])]}), encoding="utf-8")
    artifacts = tmp_path / "dist"
    (artifacts / "transform").mkdir(parents=True)
    (artifacts / "transform" / "translate.js").write_text(artifact_source("translate"), encoding="utf-8")
    layout = ["--catalog", str(catalog), "--artifacts", str(artifacts), "--no-color"]

    listed = _invoke("tools", "list", str(tmp_path), *layout)
    shown = _invoke("tools", "show", "translate", str(tmp_path), *layout)

    assert listed.exit_code == 0
    assert "transform/translate.js" in listed.stdout
    assert shown.exit_code == 0
    assert "Artifact Exists" in shown.stdout
    assert "yes" in shown.stdout


def test_tools_list_missing_explicit_catalog_exits_two(tmp_path: Path) -> None:
    result = _invoke("tools", "list", str(tmp_path), "--catalog", str(tmp_path / "absent.json"))

    assert result.exit_code == 2
    assert "catalog not found" in result.stdout
