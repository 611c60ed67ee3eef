# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the substring marker inspector."""

from __future__ import annotations

from toolbundle.config import ArtifactConventions
from toolbundle.registry import ArtifactInspector, SubstringInspector


def test_inspector_satisfies_protocol() -> None:
    assert isinstance(SubstringInspector(), ArtifactInspector)


def test_detects_both_encapsulation_idioms() -> None:
    inspector = SubstringInspector()

    assert inspector.has_encapsulation("(function() { })();")
    assert inspector.has_encapsulation("(() => { })();")
    assert not inspector.has_encapsulation("function run() {}")


def test_assignment_registration() -> None:
    inspector = SubstringInspector()
    source = "window.ToolVault.tools.flipHorizontal = run;"

    assert inspector.has_registration(source, "flipHorizontal")
    assert not inspector.has_registration(source, "flip-horizontal")


def test_call_registration_is_opt_in() -> None:
    source = 'window.ToolVault.register("translate", run);'

    assert not SubstringInspector().has_registration(source, "translate")
    assert SubstringInspector().registration_markers("translate") == ("window.ToolVault.tools.translate",)


def test_call_registration_accepts_both_quote_styles() -> None:
    conventions = ArtifactConventions(registration_styles=("assignment", "call"))
    inspector = SubstringInspector.from_conventions(conventions)

    assert inspector.has_registration('window.ToolVault.register("translate", run);', "translate")
    assert inspector.has_registration("window.ToolVault.register('translate', run);", "translate")
    assert inspector.has_registration("window.ToolVault.tools.translate = run;", "translate")


def test_markers_match_inside_comments() -> None:
    inspector = SubstringInspector()
    source = "// (function() { window.ToolVault.tools.translate }\n"

    assert inspector.has_encapsulation(source)
    assert inspector.has_registration(source, "translate")


def test_registration_styles_can_be_restricted_to_calls() -> None:
    conventions = ArtifactConventions(registration_styles=("call",))
    inspector = SubstringInspector.from_conventions(conventions)

    assert not inspector.has_registration("window.ToolVault.tools.translate = run;", "translate")
    assert inspector.registration_markers("translate") == (
        'window.ToolVault.register("translate"',
        "window.ToolVault.register('translate'",
    )


def test_custom_namespace() -> None:
    inspector = SubstringInspector.from_conventions(ArtifactConventions(namespace="globalThis.Kit."))

    assert inspector.has_registration("globalThis.Kit.tools.translate = run;", "translate")
