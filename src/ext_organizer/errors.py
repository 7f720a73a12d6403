# errors.py
from __future__ import annotations
from pathlib import Path


class OrganizerError(Exception): ...


class InvalidExtensionError(OrganizerError, ValueError):
    """Raised for an extension that cannot name a destination folder."""


class PathError(OrganizerError):
    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


class DirectoryNotFoundError(PathError):
    def __init__(self, path: Path | str):
        super().__init__(path, "directory not found")


class DirectoryNotReadableError(PathError):
    def __init__(self, path: Path | str, cause: OSError):
        self.cause = cause
        super().__init__(path, f"directory not readable ({cause.strerror or cause})")


class DestinationError(OrganizerError):
    """Raised when the destination folder cannot be created."""


class CollisionError(OrganizerError, FileExistsError):
    def __init__(self, dest: Path):
        self.dest = dest
        super().__init__(f"already exists in destination: {dest}")
