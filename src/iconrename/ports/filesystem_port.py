from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    def is_directory(self, path: Path) -> bool:
        """Return True when path resolves to an existing directory."""

    def list_entries(self, directory: Path) -> list[str]:
        """Return the names of the direct children of a directory, unsorted."""

    def is_file(self, path: Path) -> bool:
        """Return True for regular files, following symbolic links."""

    def exists(self, path: Path) -> bool:
        """Return True when any entry exists at path."""

    def rename(self, source: Path, destination: Path) -> None:
        """Rename source to destination."""
