"""File system queries and recursive directory creation."""

from __future__ import annotations

import enum
import os
import stat

from .paths import path_parent_dir

__all__ = [
    "StatFlag",
    "path_stat",
    "path_is_directory",
    "path_is_character_special",
    "path_is_valid",
    "path_get_size",
    "path_mkdir",
]


class StatFlag(enum.IntFlag):
    """What a stat of a path found."""

    NONE = 0
    IS_VALID = 1 << 0
    IS_DIRECTORY = 1 << 1
    IS_CHARACTER_SPECIAL = 1 << 2


def path_stat(path: str) -> StatFlag:
    """Return the flags describing ``path``; NONE when it does not exist."""
    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return StatFlag.NONE
    flags = StatFlag.IS_VALID
    if stat.S_ISDIR(info.st_mode):
        flags |= StatFlag.IS_DIRECTORY
    if stat.S_ISCHR(info.st_mode):
        flags |= StatFlag.IS_CHARACTER_SPECIAL
    return flags


def path_is_directory(path: str) -> bool:
    """True if ``path`` is a directory."""
    return bool(path_stat(path) & StatFlag.IS_DIRECTORY)


def path_is_character_special(path: str) -> bool:
    """True if ``path`` is a character device."""
    return bool(path_stat(path) & StatFlag.IS_CHARACTER_SPECIAL)


def path_is_valid(path: str) -> bool:
    """True if ``path`` exists."""
    return bool(path_stat(path) & StatFlag.IS_VALID)


def path_get_size(path: str) -> int:
    """Return the size of ``path`` in bytes; raises FileNotFoundError if it is missing."""
    try:
        return os.stat(path).st_size
    except OSError as exc:
        raise FileNotFoundError(f"cannot stat {path!r}") from exc


def path_mkdir(directory: str) -> None:
    """Create ``directory`` and any missing parents.

    An already existing directory is not an error. Raises ValueError when
    no parent can be worked out and OSError when creation fails.
    """
    if not directory:
        raise ValueError("directory must not be empty")

    parent = path_parent_dir(directory)
    if not parent or parent == directory:
        raise ValueError(f"cannot determine the parent of {directory!r}")

    if not path_is_directory(parent):
        path_mkdir(parent)

    try:
        os.mkdir(directory)
    except FileExistsError:
        if not path_is_directory(directory):
            raise