"""Diagnostics reported by validation.

A ``Diagnostic`` is immutable once created. ``Diagnostics`` is the
append-only collector for one validation pass; appends are guarded by a lock
so attributes may be checked from several threads.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from .paths import AttributePath


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """One validation finding.

    Attributes:
        severity: ``Severity.ERROR`` aborts the pending operation, warnings do not
        summary: Short human-readable summary
        detail: Longer explanation, naming the path and offending value
        path: Location the finding concerns (None for configuration-wide findings)
    """

    severity: Severity
    summary: str
    detail: str
    path: Optional[AttributePath] = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "summary": self.summary,
            "detail": self.detail,
            "path": str(self.path) if self.path is not None else None,
        }

    def __str__(self) -> str:
        where = f" ({self.path})" if self.path is not None else ""
        return f"{self.severity.value.upper()}{where}: {self.summary}: {self.detail}"


def error(summary: str, detail: str, path: Optional[AttributePath] = None) -> Diagnostic:
    return Diagnostic(Severity.ERROR, summary, detail, path)


def warning(summary: str, detail: str, path: Optional[AttributePath] = None) -> Diagnostic:
    return Diagnostic(Severity.WARNING, summary, detail, path)


class Diagnostics:
    """Thread-safe, append-only list of diagnostics."""

    def __init__(self, initial: Iterable[Diagnostic] = ()):
        self._lock = threading.Lock()
        self._items: list[Diagnostic] = list(initial)

    def append(self, diagnostic: Diagnostic) -> None:
        if not isinstance(diagnostic, Diagnostic):
            raise TypeError(f"Diagnostic expected, got {type(diagnostic).__name__}")
        with self._lock:
            self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        batch = list(diagnostics)
        for diagnostic in batch:
            if not isinstance(diagnostic, Diagnostic):
                raise TypeError(f"Diagnostic expected, got {type(diagnostic).__name__}")
        with self._lock:
            self._items.extend(batch)

    def add_error(self, summary: str, detail: str, path: Optional[AttributePath] = None) -> None:
        self.append(error(summary, detail, path))

    def add_warning(self, summary: str, detail: str, path: Optional[AttributePath] = None) -> None:
        self.append(warning(summary, detail, path))

    def snapshot(self) -> list[Diagnostic]:
        with self._lock:
            return list(self._items)

    def has_error(self) -> bool:
        return any(d.is_error for d in self.snapshot())

    def errors(self) -> list[Diagnostic]:
        return [d for d in self.snapshot() if d.is_error]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.snapshot() if not d.is_error]

    def to_list(self) -> list[dict[str, Any]]:
        return [d.to_dict() for d in self.snapshot()]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Diagnostics):
            return self.snapshot() == other.snapshot()
        if isinstance(other, list):
            return self.snapshot() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Diagnostics({self.snapshot()!r})"
