from .errors import FolderPathError
from .models import RenameConfig, RenameOp
from .rename_logic import (
    collision_candidate,
    format_plan_line,
    split_extension,
    to_camel_case_from_separators,
    transform_filename,
)

__all__ = [
    "FolderPathError",
    "RenameConfig",
    "RenameOp",
    "collision_candidate",
    "format_plan_line",
    "split_extension",
    "to_camel_case_from_separators",
    "transform_filename",
]
