"""Path string manipulation: extensions, basenames, archive members and resolution."""

from __future__ import annotations

import os
from typing import Optional

__all__ = [
    "PATH_MAX_LENGTH",
    "PATH_DEFAULT_SLASH",
    "path_get_archive_delim",
    "path_get_extension",
    "path_remove_extension",
    "path_is_compressed_file",
    "find_last_slash",
    "path_basename",
    "path_basename_nocompression",
    "path_is_absolute",
    "path_basedir",
    "path_parent_dir",
    "path_resolve_realpath",
    "path_relative_to",
    "pathname_conform_slashes_to_os",
    "pathname_make_slashes_portable",
    "get_pathname_num_slashes",
    "path_basedir_wrapper",
]

PATH_MAX_LENGTH = 4096

_WINDOWS = os.name == "nt"
PATH_DEFAULT_SLASH = "\\" if _WINDOWS else "/"

_ARCHIVE_EXTENSIONS = ("zip", "apk", "7z")


def _is_slash(ch: str) -> bool:
    if _WINDOWS:
        return ch in ("/", "\\")
    return ch == "/"


def _ascii_lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def find_last_slash(path: str) -> Optional[int]:
    """Return the index of the last path separator in ``path``, or None."""
    slash = path.rfind("/")
    if _WINDOWS:
        backslash = path.rfind("\\")
        if slash < 0 or backslash > slash:
            return backslash if backslash >= 0 else None
    return slash if slash >= 0 else None


def path_get_archive_delim(path: str) -> Optional[int]:
    """Return the index of the '#' separating an archive from its member.

    Only a '#' directly after a '.zip', '.apk' or '.7z' extension in the
    last path component counts. Returns None when there is none.
    """
    last_slash = find_last_slash(path)
    start = 0 if last_slash is None else last_slash
    delim = path.find("#", start)
    while delim >= 0:
        distance = delim - start
        if distance > 4:
            suffix = _ascii_lower(path[delim - 4 : delim])
            if suffix in (".zip", ".apk") or suffix[1:] == ".7z":
                return delim
        elif distance > 3:
            if _ascii_lower(path[delim - 3 : delim]) == ".7z":
                return delim
        delim = path.find("#", delim + 1)
    return None


def _basename_start(path: str) -> int:
    delim = path_get_archive_delim(path)
    if delim is not None:
        return delim + 1
    last = find_last_slash(path)
    if last is not None:
        return last + 1
    return 0


def path_basename(path: str) -> str:
    """Return the file name part of ``path``, or the member after an archive '#'."""
    return path[_basename_start(path) :]


def path_basename_nocompression(path: str) -> str:
    """Return the part of ``path`` after its last separator."""
    last = find_last_slash(path)
    return path if last is None else path[last + 1 :]


def path_get_extension(path: str) -> str:
    """Return the extension (without the dot) of the basename, or ''."""
    if not path:
        return ""
    base = path_basename(path)
    dot = base.rfind(".")
    return "" if dot < 0 else base[dot + 1 :]


def path_remove_extension(path: str) -> Optional[str]:
    """Return ``path`` without its extension, or None if it has none or is empty."""
    if not path:
        return None
    dot = path.rfind(".", _basename_start(path))
    if dot < 0:
        return None
    return path[:dot]


def path_is_compressed_file(path: str) -> bool:
    """True if ``path`` has a zip, apk or 7z extension (any case)."""
    ext = path_get_extension(path)
    return bool(ext) and _ascii_lower(ext) in _ARCHIVE_EXTENSIONS


def path_is_absolute(path: str) -> bool:
    """True if ``path`` is an absolute path."""
    if not path:
        return False
    if path[0] == "/":
        return True
    if _WINDOWS:
        return path.startswith("\\\\") or path[1:3] in (":/", ":\\")
    return False


def path_basedir(path: str) -> str:
    """Return the directory part of ``path``, keeping the trailing separator.

    A path without separators gives './'; paths shorter than two
    characters are returned unchanged.
    """
    if len(path) < 2:
        return path
    last = find_last_slash(path)
    if last is not None:
        return path[: last + 1]
    return "." + PATH_DEFAULT_SLASH


def path_parent_dir(path: str) -> str:
    """Return the parent of directory ``path``, keeping the trailing separator.

    Returns '' when ``path`` is already the root.
    """
    if path and _is_slash(path[-1]):
        was_absolute = path_is_absolute(path)
        path = path[:-1]
        if was_absolute and find_last_slash(path) is None:
            return ""
    return path_basedir(path)


def path_resolve_realpath(path: str, resolve_symlinks: bool = False) -> str:
    """Resolve '.', '..' and repeated separators in ``path``.

    Relative paths are rebased on the current working directory. With
    ``resolve_symlinks`` the file system is consulted and OSError is raised
    when the path does not exist. ValueError is raised for a '..' that
    climbs above the root or when the result would be too long.
    """
    if _WINDOWS:
        return os.path.abspath(path)

    if resolve_symlinks:
        return os.path.realpath(path, strict=True)

    end = len(path)
    if not path_is_absolute(path):
        out = os.getcwd()
        if not out.endswith("/"):
            out += "/"
        if not path:
            return out
        pos = 0
    else:
        pos = len(path) - len(path.lstrip("/"))
        out = "/" * pos

    while True:
        nxt = path.find("/", pos) if pos <= end else -1
        if nxt < 0:
            nxt = end
        segment = path[pos:nxt]
        if segment == "..":
            pos += 3
            if len(out) == 1 or out[-2] == "/":
                raise ValueError(f"path climbs above the root: {path!r}")
            cut = out.rfind("/", 0, len(out) - 1)
            if cut < 0:
                raise ValueError(f"path climbs above the root: {path!r}")
            out = out[: cut + 1]
        elif segment == ".":
            pos += 2
        elif segment == "":
            pos += 1
        else:
            if len(out) + len(segment) + 1 > PATH_MAX_LENGTH - 1:
                raise ValueError("resolved path is too long")
            out += segment + ("/" if nxt < end else "")
            pos = nxt + 1
        if nxt >= end:
            break
    return out


def path_relative_to(path: str, base: str) -> str:
    """Express absolute ``path`` relative to the base directory ``base``.

    ``base`` is expected to end with a separator; both paths should be free
    of '.' and '..' segments.
    """
    if (
        _WINDOWS
        and len(path) >= 2
        and len(base) >= 2
        and path[1] == ":"
        and base[1] == ":"
        and path[0] != base[0]
    ):
        return path

    common = 0
    cut = 0
    for a, b in zip(path, base):
        if a != b:
            break
        common += 1
        if a == PATH_DEFAULT_SLASH:
            cut = common

    ups = base[common:].count(PATH_DEFAULT_SLASH)
    return (".." + PATH_DEFAULT_SLASH) * ups + path[cut:]


def pathname_conform_slashes_to_os(path: str) -> str:
    """Replace every '/' and '\\' with the platform's separator."""
    return path.replace("/", PATH_DEFAULT_SLASH).replace("\\", PATH_DEFAULT_SLASH)


def pathname_make_slashes_portable(path: str) -> str:
    """Replace every '\\' with '/'."""
    return path.replace("\\", "/")


def get_pathname_num_slashes(path: str) -> int:
    """Count the separators in the first PATH_MAX_LENGTH characters of ``path``."""
    text = path.split("\0", 1)[0][:PATH_MAX_LENGTH]
    return sum(1 for ch in text if _is_slash(ch))


def path_basedir_wrapper(path: str) -> str:
    """Return the directory part of ``path``, keeping the trailing separator."""
    return path_basedir(path)