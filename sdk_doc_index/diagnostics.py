"""Recoverable diagnostics collected during a run.

Recoverable conditions never stop the pipeline. Instead of logging them as
they happen, each stage appends a :class:`Diagnostic` to a
:class:`Diagnostics` collector which is returned next to the primary result,
so callers (and tests) can inspect the complete batch once the run is over.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(str, Enum):
    MISSING_SERVICE_NAME = "MissingServiceName"
    AMBIGUOUS_METADATA = "AmbiguousMetadata"
    HIDDEN_ARTIFACT = "HiddenArtifact"
    UNRESOLVED_ENTRY_POINT = "UnresolvedEntryPoint"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    subject: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class Diagnostics:
    """Ordered, append-only collection of :class:`Diagnostic` records."""

    def __init__(self, items: Iterable[Diagnostic] = ()):
        self._items: list[Diagnostic] = list(items)

    def add(self, kind: DiagnosticKind, subject: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(kind, subject, message)
        self._items.append(diagnostic)
        return diagnostic

    def extend(self, other: Iterable[Diagnostic]) -> None:
        self._items.extend(other)

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._items if d.kind is kind]

    def subjects(self, kind: DiagnosticKind) -> list[str]:
        """Return the subjects (artifact names, language tags) for ``kind``."""
        return [d.subject for d in self.by_kind(kind)]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostics):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Diagnostics({self._items!r})"


__all__ = ["Diagnostic", "DiagnosticKind", "Diagnostics"]
