"""Protocols for dependency injection in html-creator."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ReporterProtocol(Protocol):
    """Protocol for diagnostic sinks."""

    def report(self, kind: str, message: str) -> None:
        """Emit a diagnostic message of the given severity."""
        ...


@runtime_checkable
class WriterProtocol(Protocol):
    """Protocol for writers that persist rendered output."""

    def persist(self, path: str | Path, content: str) -> Path:
        """Write content to path, creating missing parent directories."""
        ...
