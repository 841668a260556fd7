"""File system helpers that report failure as ``False`` instead of raising."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Union

from .strings import trim

PathLike = Union[str, "os.PathLike[str]"]


def exists(path: PathLike) -> bool:
    """Return whether ``path`` exists."""
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        return False


def create_directories(path: PathLike) -> bool:
    """Create ``path`` and its parents; ``True`` only if something was created."""
    try:
        if os.path.isdir(path):
            return False
        os.makedirs(path)
    except (OSError, ValueError):
        return False
    return True


def is_regular_file(path: PathLike) -> bool:
    """Return whether ``path`` is a regular file."""
    try:
        return os.path.isfile(path)
    except (OSError, ValueError):
        return False


def copy_file(source: PathLike, destination: PathLike) -> bool:
    """Copy a regular file; fails if ``destination`` already exists."""
    try:
        if not os.path.isfile(source) or os.path.lexists(destination):
            return False
        shutil.copyfile(source, destination)
        shutil.copymode(source, destination)
    except (OSError, ValueError):
        return False
    return True


def is_directory(path: PathLike) -> bool:
    """Return whether ``path`` is a directory."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def remove(path: PathLike) -> bool:
    """Remove a file or an empty directory; ``True`` if something was removed."""
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
    except (OSError, ValueError):
        return False
    return True


def remove_all(path: PathLike) -> bool:
    """Remove ``path`` and everything below it; ``True`` if something was removed."""
    try:
        if not os.path.lexists(path):
            return False
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except (OSError, ValueError):
        return False
    return True


def get_file_size(path: PathLike) -> int:
    """Return the size of a regular file in bytes, or 0 on any error."""
    try:
        if not os.path.isfile(path):
            return 0
        return os.path.getsize(path)
    except (OSError, ValueError):
        return 0


def is_sub_path(base: PathLike, destination: PathLike) -> bool:
    """Return whether ``destination`` lies at or below ``base``."""
    try:
        relative = os.path.relpath(
            os.path.realpath(destination), os.path.realpath(base)
        )
    except (OSError, ValueError):
        return False
    if len(relative) == 1:
        return True
    if not relative:
        return False
    return relative[0] != "." and relative[1] != "."


def to_short_path(path: PathLike) -> Path:
    """Return ``path`` in its short form; paths are returned unchanged."""
    return Path(path)


def get_executable_path() -> Path | None:
    """Return the path of the running executable, or ``None`` if unknown."""
    executable = trim(sys.executable or "")
    if not executable:
        return None
    return Path(executable)