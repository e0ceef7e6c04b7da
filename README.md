# retrocommon

Small helpers with no dependencies for the plumbing an emulator front end needs.
It covers path strings that understand archive members (`pack.zip#game.gba`),
bounded string copies, UTF-8/UTF-16/UTF-32 conversion on raw code units, and
fixed-width bit sets. It also has a few filesystem queries.

All functions return new values. They do not fill caller buffers. Errors are
raised as exceptions, not returned as codes.

## Install

```
pip install retrocommon
```

To run the tests:

```
pip install "retrocommon[test]"
pytest
```

## Modules

### `retrocommon.compat`

- `strlcpy(source, size)` returns `(copy, len(source))`. The copy holds at most
  `size - 1` characters.
- `strlcat(dest, source, size)` returns `(combined, len(dest) + len(source))`,
  bounded the same way.
- `strldup(s, n)` keeps at most `n - 1` characters of `s`.
- `strcasestr(haystack, needle)` gives the index of the first ASCII
  case-insensitive match, or `None`.
- `strcasecmp(a, b)` returns the difference of the first pair of lower-cased
  characters that differ, or 0.
- `isblank(c)` is true for a space or a tab. It takes a character or a code point.
- `strtok(text, delim)` is a generator of the non-empty tokens.
- `fopen_utf8(filename, mode)` opens a file. Byte names are decoded as UTF-8, and
  text modes use the UTF-8 encoding.

### `retrocommon.bits`

- `RetroBits(width=256)` is a set of flags stored as 32-bit words. Its methods
  are `set`, `clear`, `get` (returns 0 or 1), `clear_all`, `copy16`, `copy32`,
  `copy64` and `any_set`.
- The module-level functions work on lists of 32-bit words:
  - `bits_or_bits(a, b, count)` returns a new list.
  - `bits_clear_bits(a, b, count)` returns a new list.
  - `bits_any_set(words, count)` returns a bool.

### `retrocommon.utf`

- `utf8_conv_utf32(data, max_chars)` decodes up to `max_chars` code points. It
  stops quietly at invalid input.
- `utf16_conv_utf8(units)` encodes UTF-16 code units as UTF-8 bytes. It raises
  `ValueError` on an unpaired surrogate.
- `utf8cpy(data, d_len, chars)` copies whole characters into at most
  `d_len - 1` bytes.
- `utf8skip(data, chars)` returns a byte offset.
- `utf8len(data)` counts characters up to the first NUL.
- `utf8_walk(data, pos)` returns `(code_point, next_pos)`.
- These convert whole strings:
  - `utf16_to_char_string`
  - `utf8_to_local_string`
  - `local_to_utf8_string`
  - `utf8_to_utf16_string`
  - `utf16_to_utf8_string`

  They return `None` for empty input.

### `retrocommon.paths`

Pure string queries on paths. There is no filesystem access, except
`path_resolve_realpath` in two cases: relative paths use the current directory,
and `resolve_symlinks=True` checks the path on disk.

- Archive members and file names:
  - `path_get_archive_delim` returns the index of the archive `#`, or `None`.
  - `path_basename`
  - `path_basename_nocompression`
  - `path_get_extension`
  - `path_remove_extension` returns `None` when there is no extension.
  - `path_is_compressed_file` matches zip, apk and 7z.
- Separators and directories:
  - `find_last_slash`
  - `path_is_absolute`
  - `path_basedir`
  - `path_basedir_wrapper`
  - `path_parent_dir`
- Relative paths:
  - `path_relative_to`
  - `path_resolve_realpath` raises `ValueError` when a `..` climbs above the root.
- Slash helpers:
  - `pathname_conform_slashes_to_os`
  - `pathname_make_slashes_portable`
  - `get_pathname_num_slashes`
- Constants: `PATH_MAX_LENGTH` and `PATH_DEFAULT_SLASH`.

### `retrocommon.pathfill`

Builders that return new path strings.

- Extensions and base names:
  - `fill_pathname`
  - `fill_pathname_noext`
  - `fill_pathname_base`
  - `fill_pathname_base_noext`
  - `fill_pathname_base_ext`
- Directories:
  - `fill_pathname_slash`
  - `fill_pathname_dir`
  - `fill_pathname_basedir`
  - `fill_pathname_basedir_noext`
  - `fill_pathname_parent_dir`
  - `fill_pathname_parent_dir_name` raises `ValueError` when no name is found.
- Joins:
  - `fill_pathname_join`
  - `fill_pathname_join_special_ext`
  - `fill_pathname_join_concat`
  - `fill_pathname_join_concat_noext`
  - `fill_pathname_join_noext`
  - `fill_pathname_join_delim`
  - `fill_pathname_join_delim_concat`
- Dated names. Both accept an optional `datetime`:
  - `fill_dated_filename(ext, now)` gives `RetroArch-MMDD-HHMMSS` plus `ext`.
  - `fill_str_dated_filename(in_str, ext, now)`
- Relative paths and display forms:
  - `fill_pathname_resolve_relative`
  - `fill_short_pathname_representation`
  - `fill_short_pathname_representation_noext`
- `~` (home) and `:` (application directory) prefixes:
  - `fill_pathname_expand_special`
  - `fill_pathname_abbreviate_special`
  - `fill_pathname_abbreviated_or_relative`
- Locating the program and home:
  - `fill_pathname_application_path`
  - `fill_pathname_application_dir`
  - `fill_pathname_home_dir` reads `$HOME`.
  - `is_path_accessible_using_standard_io`

### `retrocommon.pathio`

- `path_stat(path)` returns a `StatFlag`: `NONE`, `IS_VALID`, `IS_DIRECTORY`
  or `IS_CHARACTER_SPECIAL`.
- `path_is_directory`, `path_is_character_special` and `path_is_valid`.
- `path_get_size(path)` raises `FileNotFoundError` when the path is missing.
- `path_mkdir(directory)` creates missing parents. An existing directory is not
  an error.

## Examples

```python
from retrocommon.paths import path_basename, path_get_extension
from retrocommon.pathfill import fill_pathname_join, fill_pathname

path_basename("/roms/pack.zip#game.gba")      # "game.gba"
path_get_extension("/roms/game.gba")          # "gba"
fill_pathname_join("/saves", "game.srm")      # "/saves/game.srm"
fill_pathname("/roms/game.gba", ".sav")       # "/roms/game.sav"
```

```python
from retrocommon.compat import strlcpy, strtok

strlcpy("hello", 4)                # ("hel", 5)
list(strtok("a,,b c", ", "))       # ["a", "b", "c"]
```

```python
from retrocommon.bits import RetroBits

buttons = RetroBits(256)
buttons.set(3)
buttons.get(3)       # 1
buttons.any_set()    # True
```

## What it does not do

- It recognises archive member paths such as `pack.zip#game.gba` but never opens
  archives or reads their contents.
- Filesystem queries and directory creation always go straight to the operating
  system. There is no way to plug in a different file-access backend.
- There is no command-line program; the package is a library only.