# mover.py
from __future__ import annotations
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from loguru import logger

from ext_organizer.errors import CollisionError, DestinationError
from ext_organizer.scanner import Match


@dataclass
class MoveReport:
    destination: Path
    created: bool = False
    moved: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def ensure_destination(destination: Path) -> bool:
    """Create `destination` if missing. Returns True when this call created it."""
    if destination.is_dir():
        return False
    try:
        destination.mkdir(exist_ok=True)
    except OSError as e:
        raise DestinationError(f"could not create folder {destination}: {e}") from e
    logger.debug(f"created {destination}")
    return True


def move_one(src: Path, destination: Path) -> Path:
    final = destination / src.name
    if final.exists():
        raise CollisionError(final)
    shutil.move(str(src), str(final))
    return final


def move_matches(
    matches: Iterable[Match],
    destination: Path,
    on_moved: Callable[[Match, Path], None] | None = None,
    on_failed: Callable[[Match, str], None] | None = None,
    on_created: Callable[[Path], None] | None = None,
) -> MoveReport:
    """
    Move every match into `destination`, one at a time.
    A failed file is recorded in the report and does not stop the batch.
    """
    report = MoveReport(destination=destination)
    report.created = ensure_destination(destination)
    if report.created and on_created:
        on_created(destination)

    for m in matches:
        try:
            final = move_one(m.path, destination)
        except OSError as e:
            reason = str(e) if isinstance(e, CollisionError) else (e.strerror or str(e))
            logger.warning(f"move failed: {m.path} -> {destination}: {reason}")
            report.failed.append((m.path, reason))
            if on_failed:
                on_failed(m, reason)
            continue
        logger.debug(f"moved {m.path} -> {final}")
        report.moved.append(final)
        if on_moved:
            on_moved(m, final)

    if report.ok:
        logger.success(f"moved {len(report.moved)} file(s) to {destination}")
    else:
        logger.warning(f"moved {len(report.moved)} file(s) to {destination}, {len(report.failed)} failed")
    return report
