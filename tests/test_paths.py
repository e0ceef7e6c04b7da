import os

import pytest

from retrocommon.paths import (
    PATH_MAX_LENGTH,
    find_last_slash,
    get_pathname_num_slashes,
    path_basedir,
    path_basedir_wrapper,
    path_basename,
    path_basename_nocompression,
    path_get_archive_delim,
    path_get_extension,
    path_is_absolute,
    path_is_compressed_file,
    path_parent_dir,
    path_relative_to,
    path_remove_extension,
    path_resolve_realpath,
    pathname_conform_slashes_to_os,
    pathname_make_slashes_portable,
)

ARCHIVE = "/path/to/myarchive.7z#folder/to/game.img"
SOURCE_FILE = "/foo/bar/baz/boo.c"


def test_archive_delim_case_insensitive_zip():
    path = "/roms/Game.ZIP#inner.bin"
    assert path_get_archive_delim(path) == path.index("#")


def test_archive_delim_skips_plain_hashes():
    path = "/roms/my#file.zip#inner.bin"
    assert path_get_archive_delim(path) == path.rindex("#")


def test_archive_delim_absent():
    assert path_get_archive_delim("/roms/a#b.bin") is None
    assert path_get_archive_delim("/roms.zip#x/file.bin") is None


def test_basename_plain():
    assert path_basename(SOURCE_FILE) == "boo.c"
    assert path_basename("boo.c") == "boo.c"


def test_find_last_slash():
    assert find_last_slash(SOURCE_FILE) == SOURCE_FILE.rindex("/")
    assert find_last_slash("boo.c") is None


def test_get_extension():
    assert path_get_extension(SOURCE_FILE) == "c"
    assert path_get_extension("/foo/bar.d/boo") == ""
    assert path_get_extension("") == ""


def test_remove_extension():
    assert path_remove_extension(SOURCE_FILE) == "/foo/bar/baz/boo"
    assert path_remove_extension("/foo/bar.d/boo") is None
    assert path_remove_extension("") is None


def test_remove_extension_then_extension_round_trip():
    stripped = path_remove_extension(SOURCE_FILE)
    assert stripped + "." + path_get_extension(SOURCE_FILE) == SOURCE_FILE


@pytest.mark.parametrize(
    "path, expected",
    [("game.zip", True), ("game.APK", True), ("game.7Z", True), ("game.gba", False), ("game", False)],
)
def test_is_compressed_file(path, expected):
    assert path_is_compressed_file(path) is expected


def test_is_absolute():
    assert path_is_absolute(SOURCE_FILE) is True
    assert path_is_absolute("foobar.cg") is False
    assert path_is_absolute("") is False


def test_basedir():
    assert path_basedir(SOURCE_FILE) == "/foo/bar/baz/"
    assert path_basedir("boo.c") == "./"
    assert path_basedir("a") == "a"


def test_basedir_wrapper_matches_basedir():
    for path in (SOURCE_FILE, "boo.c", "a", "/x/y/"):
        assert path_basedir_wrapper(path) == path_basedir(path)


def test_parent_dir():
    assert path_parent_dir("/foo/bar/") == "/foo/"
    assert path_parent_dir("/foo/bar/baz.a") == "/foo/bar/"
    assert path_parent_dir("/") == ""


def test_resolve_realpath_normalises_segments():
    assert path_resolve_realpath("/a/./b//c/../d", False) == "/a/b/d"
    assert path_resolve_realpath("/a/b/", False) == "/a/b/"
    assert path_resolve_realpath("/a/..", False) == "/"


def test_resolve_realpath_rejects_climb_above_root():
    with pytest.raises(ValueError):
        path_resolve_realpath("/..", False)
    with pytest.raises(ValueError):
        path_resolve_realpath("//..", False)


def test_resolve_realpath_rejects_overlong():
    with pytest.raises(ValueError):
        path_resolve_realpath("/" + "a" * (PATH_MAX_LENGTH + 10), False)


def test_resolve_realpath_relative_uses_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()
    assert path_resolve_realpath("x/./y", False) == cwd + "/x/y"
    assert path_resolve_realpath("", False) == cwd + "/"


def test_resolve_realpath_with_symlinks(tmp_path):
    target = tmp_path / "target.txt"
    target.write_text("data")
    link = tmp_path / "link.txt"
    link.symlink_to(target)
    assert path_resolve_realpath(str(link), True) == os.path.realpath(target)
    with pytest.raises(OSError):
        path_resolve_realpath(str(tmp_path / "missing" / "file"), True)


def test_relative_to_worked_example():
    assert path_relative_to("/a/b/e/f.cg", "/a/b/c/d/") == "../../e/f.cg"


def test_relative_to_same_directory():
    assert path_relative_to("/a/b/f.cg", "/a/b/") == "f.cg"


def test_relative_round_trip_through_resolve():
    base = "/a/b/c/d/"
    target = "/a/b/e/f.cg"
    rel = path_relative_to(target, base)
    assert path_resolve_realpath(base + rel, False) == target


def test_make_slashes_portable():
    assert pathname_make_slashes_portable("a\\b/c") == "a/b/c"


def test_conform_slashes_to_os():
    result = pathname_conform_slashes_to_os("a\\b/c")
    assert result.replace(os.sep, "") == "abc"
    assert result.count(os.sep) == 2


def test_num_slashes():
    assert get_pathname_num_slashes(SOURCE_FILE) == 4
    assert get_pathname_num_slashes("boo.c") == 0
    assert get_pathname_num_slashes("/a\0/b") == 1