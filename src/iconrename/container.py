from __future__ import annotations

from typing import Any

from iconrename.adapters.local_filesystem import LocalFileSystemAdapter
from iconrename.services.rename_service import RenameService


def build_services() -> dict[str, Any]:
    filesystem = LocalFileSystemAdapter()
    return {
        "rename_service": RenameService(filesystem),
        "filesystem": filesystem,
    }
