from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from iconrename.domain.errors import FolderPathError
from iconrename.domain.models import RenameConfig, RenameOp
from iconrename.domain.rename_logic import (
    FIRST_COLLISION_INDEX,
    collision_candidate,
    find_duplicate_destinations,
    format_plan_line,
    transform_filename,
)
from iconrename.ports.filesystem_port import FileSystemPort

log = logging.getLogger(__name__)

NOTHING_TO_RENAME = "No files to rename."


class RenameService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._fs = filesystem

    def ensure_unique_name(self, directory: Path, desired_name: str) -> str:
        """
        Return desired_name, or the first free "<stem>-N<ext>" variant with N >= 2.

        Each candidate is probed against the filesystem; nothing is reserved.
        """
        candidate = desired_name
        index = FIRST_COLLISION_INDEX
        while self._fs.exists(directory / candidate):
            log.debug("Name taken: %s", candidate)
            candidate = collision_candidate(desired_name, index)
            index += 1
        return candidate

    def build_plan(self, directory: Path) -> list[RenameOp]:
        if not self._fs.is_directory(directory):
            raise FolderPathError(f"Not a directory: {directory}")

        ops: list[RenameOp] = []
        for name in self._fs.list_entries(directory):
            source = directory / name
            if not self._fs.is_file(source):
                log.debug("Skipping non-file entry: %s", name)
                continue

            desired = transform_filename(name)
            if desired == name:
                log.debug("Name unchanged: %s", name)
                continue

            unique = self.ensure_unique_name(directory, desired)
            ops.append(
                RenameOp(
                    source_path=source,
                    destination_path=directory / unique,
                    source_name=name,
                    destination_name=unique,
                )
            )

        for duplicate in sorted(find_duplicate_destinations(ops)):
            log.warning("Several files are planned to become %s", duplicate)
        return ops

    def apply_plan(self, ops: list[RenameOp]) -> None:
        for op in ops:
            log.debug("Renaming %s -> %s", op.source_path, op.destination_path)
            self._fs.rename(op.source_path, op.destination_path)

    def run(self, config: RenameConfig, echo: Callable[[str], None] = print) -> list[RenameOp]:
        ops = self.build_plan(config.target_directory)
        if not ops:
            echo(NOTHING_TO_RENAME)
            return ops

        for op in ops:
            echo(format_plan_line(op, config.dry_run))

        if config.dry_run:
            return ops

        self.apply_plan(ops)
        return ops
