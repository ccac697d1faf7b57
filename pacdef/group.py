"""Group files and the sections they hold.

A group contains sections, which relate to individual backends, and each
section contains packages. On start-up all groups are read with
`load_groups`.
"""

from __future__ import annotations

import os
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .package import Package
from .paths import get_relative_path
from .section import Section, read_section


@dataclass(eq=False)
class Group:
    """A group file: its name relative to the group dir, its sections and its path."""

    name: str
    sections: set[Section]
    path: Path

    @classmethod
    def from_file(
        cls, path: str | PathLike[str], group_dir: str | PathLike[str]
    ) -> Group:
        """Read the group at `path`; its name is the path relative to `group_dir`.

        Sections that cannot be processed are skipped with a warning.
        """
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        name = extract_group_name(path, group_dir)

        lines = deque(_split_lines(content))
        sections: set[Section] = set()
        while lines:
            try:
                section = read_section(lines)
            except ValueError as exc:
                print(
                    f"WARNING: could not process a section under group '{name}': {exc}",
                    file=sys.stderr,
                )
                continue
            if section not in sections:
                sections.add(section)

        if not sections:
            print(f"WARNING: no sections found in group '{name}'", file=sys.stderr)

        return cls(name, sections, path)

    def save_packages(self, section_header: str, packages: Sequence[Package]) -> None:
        """Add packages right after `section_header`, creating the section if needed."""
        content = self.path.read_text(encoding="utf-8")
        if section_header in content:
            content = write_packages_to_existing_section(content, section_header, packages)
        else:
            content = add_new_section_with_packages(content, section_header, packages)
        self.path.write_text(content, encoding="utf-8")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.name < other.name

    def __str__(self) -> str:
        return "\n\n".join(str(section) for section in sorted(self.sections))


def _split_lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _walk(directory: Path) -> Iterator[Path]:
    """Yield every entry below `directory`, following symlinked directories."""
    for entry in sorted(directory.iterdir()):
        yield entry
        if entry.is_dir():
            yield from _walk(entry)


def load_groups(group_dir: str | PathLike[str], warn_not_symlinks: bool) -> set[Group]:
    """Load every group file below `group_dir`, creating the dir if it is missing.

    If `warn_not_symlinks` is true, a warning is printed for each group file
    that is neither a symlink nor inside a symlinked directory.
    """
    group_dir = Path(os.path.abspath(group_dir))
    if not group_dir.is_dir():
        group_dir.mkdir()

    groups: set[Group] = set()
    symlink_dirs: list[Path] = []

    for path in _walk(group_dir):
        if path.is_dir():
            if warn_not_symlinks and path.is_symlink():
                symlink_dirs.append(path)
            continue

        if (
            warn_not_symlinks
            and not path.is_symlink()
            and not is_child_of_any_dir(path, symlink_dirs)
        ):
            print(f"WARNING: group file {path} is not a symlink", file=sys.stderr)
        groups.add(Group.from_file(path, group_dir))

    return groups


def is_child_of_any_dir(
    path: str | PathLike[str], dirs: Iterable[str | PathLike[str]]
) -> bool:
    """Tell whether `path` lies below any of `dirs`. All paths should be absolute."""
    file_parts = Path(path).parts
    return any(
        all(d == f for d, f in zip(Path(directory).parts, file_parts))
        for directory in dirs
    )


def extract_group_name(
    path: str | PathLike[str], group_path: str | PathLike[str]
) -> str:
    """Return the path of the group file relative to the group dir, joined by '/'.

    Raises ValueError if `path` is not below `group_path` or equals it.
    """
    parts = get_relative_path(path, group_path).parts
    if not parts:
        raise ValueError(f"{path} does not name a group below {group_path}")
    return "/".join(parts)


def find_first_package_line_in_section(content: str, section_header: str) -> int:
    """Return the index of the first line after `section_header`.

    Raises ValueError if the header is missing or its line has no newline.
    """
    section_start = content.find(section_header)
    if section_start == -1:
        raise ValueError("finding first package after section header")
    newline = content.find("\n", section_start)
    if newline == -1:
        raise ValueError("getting next newline")
    return newline + 1


def write_packages_to_existing_section(
    content: str, section_header: str, packages: Iterable[Package]
) -> str:
    """Return `content` with the packages inserted right after `section_header`."""
    index = find_first_package_line_in_section(content, section_header)
    inserted = "".join(f"{package}\n" for package in packages)
    return content[:index] + inserted + content[index:]


def add_new_section_with_packages(
    content: str, section_header: str, packages: Iterable[Package]
) -> str:
    """Return `content` with a new section holding the packages appended."""
    body = "".join(f"{package}\n" for package in packages)
    return f"{content}\n{section_header}\n{body}"