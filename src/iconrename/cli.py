from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from iconrename.container import build_services
from iconrename.domain.errors import FolderPathError
from iconrename.domain.models import RenameConfig
from iconrename.settings import LOG_LEVEL

USAGE_HINT = 'Missing folder path.\nExample: iconrename "/tmp/icons"'
DRY_RUN_FLAG = "--dry-run"


def parse_config(argv: list[str]) -> RenameConfig | None:
    """
    Build the run config from argv, or return None when no folder is given.

    Only an exact "--dry-run" counts; any other dash-prefixed argument is
    dropped before parsing, and the first remaining argument is the folder.
    """
    parser = argparse.ArgumentParser(
        prog="iconrename",
        description="Rename space/hyphen separated files to camel-case Icon names",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("folder", nargs="?", help="Directory whose files are renamed")
    parser.add_argument(
        DRY_RUN_FLAG,
        action="store_true",
        help="Print the rename plan without touching any file",
    )
    kept = [arg for arg in argv if arg == DRY_RUN_FLAG or not arg.startswith("-")]
    args, _extra = parser.parse_known_args(kept)
    if not args.folder:
        return None
    return RenameConfig(
        target_directory=Path(os.path.abspath(args.folder)),
        dry_run=args.dry_run,
    )


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=resolve_log_level(LOG_LEVEL), stream=sys.stderr)

    config = parse_config(sys.argv[1:] if argv is None else argv)
    if config is None:
        print(USAGE_HINT, file=sys.stderr)
        return 1

    rename_service = build_services()["rename_service"]
    try:
        rename_service.run(config)
    except FolderPathError as exc:
        print(exc, file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Failed: {exc}", file=sys.stderr)
        return 1
    return 0
