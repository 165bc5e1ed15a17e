from __future__ import annotations

import os
import re

from .models import RenameOp

ICON_SUFFIX = "Icon"
FIRST_COLLISION_INDEX = 2

_SEPARATORS = re.compile(r"[\s-]+")


def to_camel_case_from_separators(stem: str) -> str:
    """
    Camel-case a space/hyphen separated stem, suffixing every fragment with "Icon".

    Stems with fewer than two fragments are returned untouched.

    Examples:
        >>> to_camel_case_from_separators("home icon")
        'HomeIconIconIcon'
        >>> to_camel_case_from_separators("arrow-left-bold")
        'ArrowIconLeftIconBoldIcon'
        >>> to_camel_case_from_separators("settings")
        'settings'
    """
    fragments = [part for part in _SEPARATORS.split(stem.strip()) if part]
    if len(fragments) <= 1:
        return stem
    return "".join(part[0].upper() + part[1:] + ICON_SUFFIX for part in fragments)


def split_extension(name: str) -> tuple[str, str]:
    """
    Split a filename into (stem, extension), keeping the dot in the extension.

    A leading dot does not start an extension, so ".hidden" has none.
    """
    return os.path.splitext(name)


def transform_filename(name: str) -> str:
    stem, ext = split_extension(name)
    return f"{to_camel_case_from_separators(stem)}{ext}"


def collision_candidate(desired_name: str, index: int) -> str:
    stem, ext = split_extension(desired_name)
    return f"{stem}-{index}{ext}"


def format_plan_line(op: RenameOp, dry_run: bool) -> str:
    suffix = "  (dry-run)" if dry_run else ""
    return f"{op.source_name}  ->  {op.destination_name}{suffix}"


def find_duplicate_destinations(ops: list[RenameOp]) -> set[str]:
    seen: set[str] = set()
    duplicates: set[str] = set()
    for op in ops:
        if op.destination_name in seen:
            duplicates.add(op.destination_name)
        seen.add(op.destination_name)
    return duplicates
