"""Build path strings: extension replacement, joins, dated names and special prefixes."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import Optional

from .paths import (
    PATH_DEFAULT_SLASH,
    PATH_MAX_LENGTH,
    find_last_slash,
    get_pathname_num_slashes,
    path_basedir,
    path_basedir_wrapper,
    path_basename,
    path_is_absolute,
    path_parent_dir,
    path_relative_to,
    path_remove_extension,
    path_resolve_realpath,
    pathname_conform_slashes_to_os,
)

__all__ = [
    "fill_pathname",
    "fill_pathname_noext",
    "fill_pathname_slash",
    "fill_pathname_dir",
    "fill_pathname_base",
    "fill_pathname_base_noext",
    "fill_pathname_base_ext",
    "fill_pathname_basedir",
    "fill_pathname_basedir_noext",
    "fill_pathname_parent_dir_name",
    "fill_pathname_parent_dir",
    "fill_dated_filename",
    "fill_str_dated_filename",
    "fill_pathname_resolve_relative",
    "fill_pathname_join",
    "fill_pathname_join_special_ext",
    "fill_pathname_join_concat_noext",
    "fill_pathname_join_concat",
    "fill_pathname_join_noext",
    "fill_pathname_join_delim",
    "fill_pathname_join_delim_concat",
    "fill_short_pathname_representation",
    "fill_short_pathname_representation_noext",
    "fill_pathname_expand_special",
    "fill_pathname_abbreviate_special",
    "fill_pathname_abbreviated_or_relative",
    "fill_pathname_application_path",
    "fill_pathname_application_dir",
    "fill_pathname_home_dir",
    "is_path_accessible_using_standard_io",
]

_WINDOWS = os.name == "nt"

# Sandboxed platforms only allow ordinary file I/O below the application
# and home directories; no platform Python runs on here is sandboxed.
_SANDBOXED = False


def _is_slash(ch: str) -> bool:
    if _WINDOWS:
        return ch in ("/", "\\")
    return ch == "/"


def _without_extension(path: str) -> str:
    stripped = path_remove_extension(path)
    return path if stripped is None else stripped


def _bounded(path: str) -> str:
    if len(path) >= PATH_MAX_LENGTH:
        raise ValueError("path is too long")
    return path


def fill_pathname(in_path: str, replace: str) -> str:
    """Replace the extension of ``in_path`` with ``replace``.

    Without an extension, ``replace`` is simply appended.
    """
    return fill_pathname_noext(_without_extension(in_path), replace)


def fill_pathname_noext(in_path: str, replace: str) -> str:
    """Append ``replace`` to ``in_path``."""
    return in_path + replace


def fill_pathname_slash(path: str) -> str:
    """Append a separator to directory ``path`` unless it already ends in one.

    The kind of separator already used in the path is preserved.
    """
    last = find_last_slash(path)
    if last is None:
        return path + PATH_DEFAULT_SLASH
    if last != len(path) - 1:
        return path + path[last]
    return path


def fill_pathname_dir(in_dir: str, in_basename: str, replace: str) -> str:
    """Append the basename of ``in_basename`` and then ``replace`` to ``in_dir``."""
    return fill_pathname_slash(in_dir) + path_basename(in_basename) + replace


def fill_pathname_base(in_path: str) -> str:
    """Return the basename of ``in_path``."""
    return path_basename(in_path)


def fill_pathname_base_noext(in_path: str) -> str:
    """Return the basename of ``in_path`` without its extension."""
    return _without_extension(fill_pathname_base(in_path))


def fill_pathname_base_ext(in_path: str, ext: str) -> str:
    """Return the basename of ``in_path`` with its extension replaced by ``ext``."""
    return fill_pathname_base_noext(in_path) + ext


def fill_pathname_basedir(in_path: str) -> str:
    """Return the base directory of ``in_path`` ('./' when it has no separator)."""
    return path_basedir(in_path)


def fill_pathname_basedir_noext(in_path: str) -> str:
    """Return the base directory of ``in_path`` with any extension removed."""
    return _without_extension(fill_pathname_basedir(in_path))


def fill_pathname_parent_dir_name(in_dir: str) -> str:
    """Return only the name of the parent directory of ``in_dir``.

    Raises ValueError when no such name can be found.
    """
    temp = in_dir
    last = find_last_slash(temp)
    if last is not None and last == len(temp) - 1:
        temp = temp[:last]
        last = find_last_slash(temp)
    if last is not None:
        temp = temp[:last]
    slash = find_last_slash(temp)
    if slash is None or slash + 1 >= len(temp):
        raise ValueError(f"no parent directory name in {in_dir!r}")
    return temp[slash + 1 :]


def fill_pathname_parent_dir(in_dir: str) -> str:
    """Return the parent directory of directory ``in_dir``, keeping the trailing separator."""
    return path_parent_dir(in_dir)


def fill_dated_filename(ext: str, now: Optional[datetime] = None) -> str:
    """Return 'RetroArch-MMDD-HHMMSS' followed by ``ext``."""
    moment = now if now is not None else datetime.now()
    return moment.strftime("RetroArch-%m%d-%H%M%S") + ext


def fill_str_dated_filename(
    in_str: str, ext: Optional[str], now: Optional[datetime] = None
) -> str:
    """Return ``in_str`` with '-YYMMDD-HHMMSS' appended, then '.' and ``ext`` if given."""
    moment = now if now is not None else datetime.now()
    if not ext:
        return fill_pathname_noext(in_str, moment.strftime("-%y%m%d-%H%M%S"))
    return fill_pathname_join_concat_noext(
        in_str, moment.strftime("-%y%m%d-%H%M%S."), ext
    )


def fill_pathname_resolve_relative(in_refpath: str, in_path: str) -> str:
    """Join the base directory of ``in_refpath`` with ``in_path``.

    An absolute ``in_path`` is returned unchanged. The joined path is
    normalised where possible.
    """
    if path_is_absolute(in_path):
        return in_path
    joined = fill_pathname_basedir(in_refpath) + in_path
    try:
        return path_resolve_realpath(joined, False)
    except ValueError:
        return joined


def fill_pathname_join(directory: str, path: str) -> str:
    """Join ``directory`` and ``path`` with exactly one separator between them."""
    out = directory
    if out:
        out = fill_pathname_slash(out)
    return out + path


def fill_pathname_join_special_ext(
    directory: str, path: str, last: str, ext: str
) -> str:
    """Join ``directory`` and ``path`` as a directory, then append ``last`` and ``ext``."""
    out = fill_pathname_join(directory, path)
    if out:
        out = fill_pathname_slash(out)
    return out + last + ext


def fill_pathname_join_concat_noext(directory: str, path: str, concat: str) -> str:
    """Concatenate the three parts without adding separators."""
    return fill_pathname_noext(directory, path) + concat


def fill_pathname_join_concat(directory: str, path: str, concat: str) -> str:
    """Join ``directory`` and ``path``, then append ``concat``."""
    return fill_pathname_join(directory, path) + concat


def fill_pathname_join_noext(directory: str, path: str) -> str:
    """Join ``directory`` and ``path`` and drop the extension of the result."""
    return _without_extension(fill_pathname_join(directory, path))


def fill_pathname_join_delim(directory: str, path: Optional[str], delim: str) -> str:
    """Join ``directory`` and ``path`` with the single character ``delim``."""
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    return directory + delim + (path or "")


def fill_pathname_join_delim_concat(
    directory: str, path: Optional[str], delim: str, concat: str
) -> str:
    """Join with ``delim`` and append ``concat``."""
    return fill_pathname_join_delim(directory, path, delim) + concat


def fill_short_pathname_representation(in_path: str) -> str:
    """Return a short display form of ``in_path``: its basename without extension."""
    return fill_pathname(path_basename(in_path), "")


def fill_short_pathname_representation_noext(in_path: str) -> str:
    """Return the short display form with a further extension removed."""
    return _without_extension(fill_short_pathname_representation(in_path))


def _with_prefix_dir(prefix_dir: str, rest: str) -> str:
    out = prefix_dir
    if not _is_slash(out[-1]):
        out += PATH_DEFAULT_SLASH
    return out + rest


def fill_pathname_expand_special(in_path: str) -> str:
    """Expand a leading '~' to the home directory and ':' to the application directory."""
    if in_path.startswith("~"):
        home = fill_pathname_home_dir()
        if home:
            return _bounded(_with_prefix_dir(home, in_path[2:]))
    elif in_path.startswith(":"):
        app_dir = fill_pathname_application_dir()
        if app_dir:
            return _bounded(_with_prefix_dir(app_dir, in_path[2:]))
    return _bounded(in_path)


def fill_pathname_abbreviate_special(in_path: str) -> str:
    """Abbreviate a leading application directory to ':' or home directory to '~'.

    The application directory is tried first; at most one abbreviation is made.
    """
    candidates = (
        (fill_pathname_application_dir(), ":"),
        (fill_pathname_home_dir(), "~"),
    )
    for candidate, notation in candidates:
        if candidate and in_path.startswith(candidate):
            rest = in_path[len(candidate) :]
            out = notation
            if not (rest and _is_slash(rest[0])):
                out += PATH_DEFAULT_SLASH
            return _bounded(out + rest)
    return _bounded(in_path)


def fill_pathname_abbreviated_or_relative(in_refpath: str, in_path: str) -> str:
    """Return whichever of the relative or abbreviated form of ``in_path`` is shallower.

    The relative form, taken against ``in_refpath``, wins a tie.
    """
    path_conformed = pathname_conform_slashes_to_os(in_path)
    refpath_conformed = pathname_conform_slashes_to_os(in_refpath)

    expanded = fill_pathname_expand_special(path_conformed)
    if path_is_absolute(expanded):
        absolute = expanded
    else:
        absolute = fill_pathname_resolve_relative(refpath_conformed, path_conformed)
    absolute = pathname_conform_slashes_to_os(absolute)

    relative = path_relative_to(absolute, refpath_conformed)
    abbreviated = fill_pathname_abbreviate_special(absolute)

    if get_pathname_num_slashes(relative) <= get_pathname_num_slashes(abbreviated):
        return _bounded(relative)
    return _bounded(abbreviated)


def fill_pathname_application_path() -> str:
    """Return the path of the running executable, or '' when it cannot be found."""
    if not _WINDOWS:
        pid = os.getpid()
        for entry in ("exe", "file", "path/a.out"):
            try:
                return os.readlink(f"/proc/{pid}/{entry}")
            except OSError:
                continue
    return sys.executable or ""


def fill_pathname_application_dir() -> str:
    """Return the directory holding the running executable."""
    return path_basedir_wrapper(fill_pathname_application_path())


def fill_pathname_home_dir() -> str:
    """Return $HOME, or '' when it is not set."""
    return os.environ.get("HOME", "")


def is_path_accessible_using_standard_io(path: str) -> bool:
    """Tell whether ``path`` can be reached with ordinary file I/O.

    Outside a sandbox every path can; inside one only paths below the
    application or home directory can.
    """
    if not _SANDBOXED:
        return True
    abbreviated = fill_pathname_abbreviate_special(path)
    return (
        len(abbreviated) >= 2
        and abbreviated[0] in (":", "~")
        and _is_slash(abbreviated[1])
    )