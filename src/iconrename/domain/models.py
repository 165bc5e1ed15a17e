from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RenameOp:
    source_path: Path
    destination_path: Path
    source_name: str
    destination_name: str


@dataclass(frozen=True)
class RenameConfig:
    target_directory: Path
    dry_run: bool = False
