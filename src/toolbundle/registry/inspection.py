# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural marker checks applied to artifact source text.

The checks are textual: an artifact passes when the marker
strings occur anywhere in its source, comments included. Callers depend only
on :class:`ArtifactInspector`, so a parser-backed implementation can replace
:class:`SubstringInspector` without changing the validator or runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..config.models import (
    DEFAULT_ENCAPSULATION_MARKERS,
    DEFAULT_NAMESPACE,
    DEFAULT_REGISTRATION_STYLES,
    ArtifactConventions,
    RegistrationStyle,
)


@runtime_checkable
class ArtifactInspector(Protocol):
    """Decide whether artifact source text carries the required markers."""

    def has_encapsulation(self, source: str) -> bool:
        """Return ``True`` when ``source`` runs inside an isolated, self-invoking scope."""

    def has_registration(self, source: str, name: str) -> bool:
        """Return ``True`` when ``source`` binds itself under ``name`` in the shared namespace."""


@dataclass(frozen=True, slots=True)
class SubstringInspector:
    """Inspector matching literal marker substrings."""

    namespace: str = DEFAULT_NAMESPACE
    encapsulation_markers: tuple[str, ...] = DEFAULT_ENCAPSULATION_MARKERS
    registration_styles: tuple[RegistrationStyle, ...] = DEFAULT_REGISTRATION_STYLES

    @classmethod
    def from_conventions(cls, conventions: ArtifactConventions) -> SubstringInspector:
        """Build an inspector from the bundle's artifact conventions."""
        return cls(
            namespace=conventions.namespace,
            encapsulation_markers=conventions.encapsulation_markers,
            registration_styles=conventions.registration_styles,
        )

    def has_encapsulation(self, source: str) -> bool:
        return any(marker in source for marker in self.encapsulation_markers)

    def has_registration(self, source: str, name: str) -> bool:
        return any(marker in source for marker in self.registration_markers(name))

    def registration_markers(self, name: str) -> tuple[str, ...]:
        """Return every literal accepted as proof of registration under ``name``."""
        markers: list[str] = []
        if "assignment" in self.registration_styles:
            markers.append(f"{self.namespace}.tools.{name}")
        if "call" in self.registration_styles:
            markers.append(f'{self.namespace}.register("{name}"')
            markers.append(f"{self.namespace}.register('{name}'")
        return tuple(markers)


__all__ = ["ArtifactInspector", "SubstringInspector"]
