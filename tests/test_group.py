import os
from pathlib import Path

import pytest

from pacdef.group import (
    Group,
    add_new_section_with_packages,
    extract_group_name,
    find_first_package_line_in_section,
    is_child_of_any_dir,
    load_groups,
    write_packages_to_existing_section,
)
from pacdef.package import Package
from pacdef.section import Section


def test_extract_group_name():
    assert extract_group_name(Path("/a/b/c/d/e"), Path("/a/b/c")) == "d/e"


def test_is_child_of_any_symlink_dir():
    path = Path("/a/b/c/d/e")
    symlink_dirs = [Path("/z")]
    assert not is_child_of_any_dir(path, symlink_dirs)
    symlink_dirs.append(Path("/a/b/c"))
    assert is_child_of_any_dir(path, symlink_dirs)


def test_extract_group_name_identical_paths():
    with pytest.raises(ValueError):
        extract_group_name(Path("/a/b"), Path("/a/b"))


def test_extract_group_name_not_below():
    with pytest.raises(ValueError):
        extract_group_name(Path("/a/x/c"), Path("/a/b"))


def test_find_first_package_line_in_section():
    content = "[arch]\nfoo\n"
    index = find_first_package_line_in_section(content, "[arch]")
    assert content[index:] == "foo\n"


def test_find_first_package_line_missing_header():
    with pytest.raises(ValueError):
        find_first_package_line_in_section("[arch]\nfoo\n", "[rust]")


def test_find_first_package_line_no_newline():
    with pytest.raises(ValueError):
        find_first_package_line_in_section("foo\n[arch]", "[arch]")


def test_write_packages_to_existing_section():
    content = "[arch]\nfoo\n\n[rust]\nbat\n"
    result = write_packages_to_existing_section(
        content, "[rust]", [Package("a"), Package("b", "repo")]
    )
    assert result == "[arch]\nfoo\n\n[rust]\na\nrepo/b\nbat\n"


def test_add_new_section_with_packages():
    result = add_new_section_with_packages("[arch]\nfoo\n", "[rust]", [Package("a")])
    assert result == "[arch]\nfoo\n\n[rust]\na\n"


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def test_from_file_reads_sections(tmp_path):
    group_dir = tmp_path / "groups"
    path = _write(group_dir / "sub" / "base", "[arch]\nvim\ncore/git # vcs\n\n[rust]\nripgrep\n")
    group = Group.from_file(path, group_dir)
    assert group.name == "sub/base"
    assert group.path == path
    assert sorted(s.name for s in group.sections) == ["arch", "rust"]
    arch = next(s for s in group.sections if s.name == "arch")
    assert sorted(str(p) for p in arch.packages) == ["core/git", "vim"]


def test_from_file_skips_bad_section(tmp_path, capsys):
    path = _write(tmp_path / "base", "[empty]\n\n[arch]\nvim\n")
    group = Group.from_file(path, tmp_path)
    assert [s.name for s in group.sections] == ["arch"]
    assert "could not process a section under group 'base'" in capsys.readouterr().err


def test_from_file_without_sections_warns(tmp_path, capsys):
    path = _write(tmp_path / "base", "just text\n")
    group = Group.from_file(path, tmp_path)
    assert group.sections == set()
    assert "no sections found in group 'base'" in capsys.readouterr().err


def test_group_str_sorts_sections():
    group = Group(
        "g",
        {Section("rust", {Package("c")}), Section("arch", {Package("b"), Package("a")})},
        Path("/x/g"),
    )
    assert str(group) == "[arch]\na\nb\n\n[rust]\nc"


def test_group_identity_by_name():
    a = Group("a", set(), Path("/one"))
    a2 = Group("a", {Section("x", {Package("p")})}, Path("/two"))
    b = Group("b", set(), Path("/one"))
    assert a == a2
    assert hash(a) == hash(a2)
    assert len({a, a2, b}) == 2
    assert sorted([b, a]) == [a, b]


def test_save_packages_existing_section(tmp_path):
    path = _write(tmp_path / "base", "[arch]\nvim\n")
    group = Group.from_file(path, tmp_path)
    group.save_packages("[arch]", [Package("git")])
    assert path.read_text() == "[arch]\ngit\nvim\n"


def test_save_packages_new_section(tmp_path):
    path = _write(tmp_path / "base", "[arch]\nvim\n")
    group = Group.from_file(path, tmp_path)
    group.save_packages("[rust]", [Package("ripgrep")])
    reloaded = Group.from_file(path, tmp_path)
    rust = next(s for s in reloaded.sections if s.name == "rust")
    assert rust.packages == {Package("ripgrep")}


def test_load_groups_creates_missing_dir(tmp_path):
    group_dir = tmp_path / "groups"
    assert load_groups(group_dir, True) == set()
    assert group_dir.is_dir()


def test_load_groups_nested_and_warnings(tmp_path, capsys):
    group_dir = tmp_path / "groups"
    _write(group_dir / "plain", "[arch]\nvim\n")
    target = _write(tmp_path / "elsewhere" / "linked", "[arch]\ngit\n")
    os.symlink(target, group_dir / "linked")
    external_dir = tmp_path / "external"
    _write(external_dir / "inner", "[rust]\nbat\n")
    os.symlink(external_dir, group_dir / "dirlink")

    groups = load_groups(group_dir, True)
    assert sorted(g.name for g in groups) == ["dirlink/inner", "linked", "plain"]

    err = capsys.readouterr().err
    assert "plain is not a symlink" in err
    assert "linked is not a symlink" not in err
    assert "inner is not a symlink" not in err


def test_load_groups_without_warnings(tmp_path, capsys):
    group_dir = tmp_path / "groups"
    _write(group_dir / "plain", "[arch]\nvim\n")
    groups = load_groups(group_dir, False)
    assert [g.name for g in groups] == ["plain"]
    assert "not a symlink" not in capsys.readouterr().err