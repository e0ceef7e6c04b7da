from datetime import datetime

import pytest

from retrocommon import pathfill
from retrocommon.paths import PATH_DEFAULT_SLASH, get_pathname_num_slashes


def test_fill_pathname_replaces_extension():
    assert pathfill.fill_pathname("/foo/bar/baz/boo.c", ".asm") == "/foo/bar/baz/boo.asm"


def test_fill_pathname_removes_extension():
    assert pathfill.fill_pathname("/foo/bar/baz/boo.c", "") == "/foo/bar/baz/boo"


def test_fill_pathname_without_extension_appends():
    assert pathfill.fill_pathname("/foo/bar/boo", ".asm") == "/foo/bar/boo.asm"


def test_fill_pathname_noext_concatenates():
    assert pathfill.fill_pathname_noext("/a/b.c", ".d") == "/a/b.c.d"


def test_fill_pathname_slash_preserves_existing_kind():
    path = "/a/b"
    assert pathfill.fill_pathname_slash(path) == path + "/"
    assert pathfill.fill_pathname_slash(path + "/") == path + "/"


def test_fill_pathname_slash_without_separator_uses_default():
    assert pathfill.fill_pathname_slash("name") == "name" + PATH_DEFAULT_SLASH


def test_fill_pathname_dir_example():
    result = pathfill.fill_pathname_dir("/tmp/some_dir", "/some_content/foo.c", ".asm")
    assert result == "/tmp/some_dir/foo.c.asm"


def test_fill_pathname_base_variants():
    assert pathfill.fill_pathname_base("/a/b/file.txt") == "file.txt"
    assert pathfill.fill_pathname_base_noext("/a/b/file.txt") == "file"
    assert pathfill.fill_pathname_base_ext("/a/b/file.txt", ".bak") == "file.bak"


def test_fill_pathname_base_archive_member():
    assert pathfill.fill_pathname_base("/x/game.zip#rom.gba") == "rom.gba"


def test_fill_pathname_basedir():
    assert pathfill.fill_pathname_basedir("/a/b/file.txt") == "/a/b/"
    assert pathfill.fill_pathname_basedir("file.txt") == "." + PATH_DEFAULT_SLASH


def test_fill_pathname_basedir_noext_keeps_dotted_directory():
    assert pathfill.fill_pathname_basedir_noext("/a/b.c/file") == "/a/b.c/"


def test_fill_pathname_parent_dir_name():
    assert pathfill.fill_pathname_parent_dir_name("/a/b/c/") == "b"
    assert pathfill.fill_pathname_parent_dir_name("/a/b/c.txt") == "b"


def test_fill_pathname_parent_dir_name_without_slash_raises():
    with pytest.raises(ValueError):
        pathfill.fill_pathname_parent_dir_name("noslash")


def test_fill_pathname_parent_dir():
    assert pathfill.fill_pathname_parent_dir("/a/b/") == "/a/"
    assert pathfill.fill_pathname_parent_dir("/") == ""


def test_fill_dated_filename():
    now = datetime(2021, 3, 4, 5, 6, 7)
    assert pathfill.fill_dated_filename(".png", now) == "RetroArch-0304-050607.png"


def test_fill_str_dated_filename_with_and_without_ext():
    now = datetime(2021, 3, 4, 5, 6, 7)
    with_ext = pathfill.fill_str_dated_filename("shot", "png", now)
    without_ext = pathfill.fill_str_dated_filename("shot", "", now)
    assert with_ext == "shot-210304-050607.png"
    assert without_ext + ".png" == with_ext


def test_fill_pathname_resolve_relative_example():
    result = pathfill.fill_pathname_resolve_relative("/foo/bar/baz.a", "foobar.cg")
    assert result == "/foo/bar/foobar.cg"


def test_fill_pathname_resolve_relative_absolute_input():
    assert pathfill.fill_pathname_resolve_relative("/foo/bar/baz.a", "/x/y") == "/x/y"


def test_fill_pathname_resolve_relative_collapses_dotdot():
    result = pathfill.fill_pathname_resolve_relative("/foo/bar/baz.a", "../q.cg")
    assert result == "/foo/q.cg"


def test_fill_pathname_join():
    assert pathfill.fill_pathname_join("/a", "b") == "/a/b"
    assert pathfill.fill_pathname_join("/a/", "b") == "/a/b"
    assert pathfill.fill_pathname_join("", "b") == "b"


def test_join_variants():
    assert pathfill.fill_pathname_join_special_ext("/a", "b", "c", ".d") == "/a/b/c.d"
    assert pathfill.fill_pathname_join_concat_noext("/a", "b", "c") == "/abc"
    assert pathfill.fill_pathname_join_concat("/a", "b", ".c") == "/a/b.c"
    assert pathfill.fill_pathname_join_noext("/a", "f.txt") == "/a/f"


def test_join_delim():
    assert pathfill.fill_pathname_join_delim("a", "b", ":") == "a:b"
    assert pathfill.fill_pathname_join_delim("a", None, ":") == "a:"
    assert pathfill.fill_pathname_join_delim_concat("a", "b", ":", "c") == "a:bc"


def test_join_delim_rejects_long_delimiter():
    with pytest.raises(ValueError):
        pathfill.fill_pathname_join_delim("a", "b", "::")


def test_short_representation():
    assert pathfill.fill_short_pathname_representation("/path/to/game.img") == "game"
    assert pathfill.fill_short_pathname_representation_noext("/p/game.tar.gz") == "game"


def test_expand_special_home(monkeypatch):
    monkeypatch.setenv("HOME", "/nonexistent-home")
    assert pathfill.fill_pathname_expand_special("~/games/a.gba") == "/nonexistent-home/games/a.gba"


def test_expand_special_plain_path_unchanged(monkeypatch):
    monkeypatch.setenv("HOME", "/nonexistent-home")
    assert pathfill.fill_pathname_expand_special("/x/y") == "/x/y"


def test_abbreviate_special_home(monkeypatch):
    monkeypatch.setenv("HOME", "/nonexistent-home")
    result = pathfill.fill_pathname_abbreviate_special("/nonexistent-home/games/a.gba")
    assert result == "~/games/a.gba"


def test_abbreviate_expand_round_trip(monkeypatch):
    monkeypatch.setenv("HOME", "/nonexistent-home")
    original = "/nonexistent-home/saves/b.sav"
    short = pathfill.fill_pathname_abbreviate_special(original)
    assert pathfill.fill_pathname_expand_special(short) == original


def test_abbreviated_or_relative_prefers_relative(monkeypatch):
    monkeypatch.setenv("HOME", "/nonexistent-home")
    result = pathfill.fill_pathname_abbreviated_or_relative("/r/s/", "/r/s/t/u.gba")
    assert result == "t/u.gba"


def test_abbreviated_or_relative_prefers_shallower_abbreviation(monkeypatch):
    monkeypatch.setenv("HOME", "/nonexistent-home")
    result = pathfill.fill_pathname_abbreviated_or_relative(
        "/a/b/c/d/", "/nonexistent-home/x.gba"
    )
    assert result == "~/x.gba"
    assert get_pathname_num_slashes(result) == 1


def test_home_dir(monkeypatch):
    monkeypatch.setenv("HOME", "/nonexistent-home")
    assert pathfill.fill_pathname_home_dir() == "/nonexistent-home"
    monkeypatch.delenv("HOME")
    assert pathfill.fill_pathname_home_dir() == ""


def test_application_dir_is_prefix_of_path():
    app_path = pathfill.fill_pathname_application_path()
    app_dir = pathfill.fill_pathname_application_dir()
    assert len(app_path) > 1
    assert app_path.startswith(app_dir)
    assert app_dir[-1] in ("/", "\\")


def test_is_path_accessible_using_standard_io():
    assert pathfill.is_path_accessible_using_standard_io("/any/path") is True