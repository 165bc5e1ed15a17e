from __future__ import annotations

import os
from pathlib import Path

from iconrename.ports.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def list_entries(self, directory: Path) -> list[str]:
        return os.listdir(directory)

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def exists(self, path: Path) -> bool:
        # dangling symlinks count as existing entries
        return os.path.lexists(path)

    def rename(self, source: Path, destination: Path) -> None:
        os.rename(source, destination)
