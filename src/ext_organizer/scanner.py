# scanner.py
from __future__ import annotations
import os
from collections import namedtuple
from pathlib import Path

from loguru import logger

from ext_organizer.errors import (
    DirectoryNotFoundError,
    DirectoryNotReadableError,
    InvalidExtensionError,
)

Match = namedtuple("Match", ["name", "path"])


def destination_name(extension: str) -> str:
    """Folder name for an extension: leading dots stripped, case kept."""
    name = extension.lstrip(".")
    if not name:
        raise InvalidExtensionError(f"extension must contain more than dots: {extension!r}")
    if "/" in name or (os.altsep and os.altsep in name) or os.sep in name:
        raise InvalidExtensionError(f"extension must not contain a path separator: {extension!r}")
    return name


def _matches(name: str, extension: str, ignore_case: bool) -> bool:
    if ignore_case:
        return name.casefold().endswith(extension.casefold())
    return name.endswith(extension)


def scan(directory: Path | str, extension: str, *, ignore_case: bool = False) -> list[Match]:
    """
    List the regular files directly inside `directory` whose name ends with
    `extension`, sorted by name. An empty result is not an error.
    """
    root = Path(directory)
    if not root.is_dir():
        raise DirectoryNotFoundError(root)

    found: list[Match] = []
    try:
        with os.scandir(root) as it:
            for entry in it:
                try:
                    if not entry.is_file():
                        continue
                except OSError as e:
                    logger.debug(f"skip {entry.path}: {e}")
                    continue
                if _matches(entry.name, extension, ignore_case):
                    found.append(Match(entry.name, Path(entry.path)))
    except OSError as e:
        raise DirectoryNotReadableError(root, e) from e

    found.sort(key=lambda m: m.name)
    logger.debug(f"scan {root} for {extension!r} (ignore_case={ignore_case}): {len(found)} match(es)")
    return found
