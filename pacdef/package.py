"""A single package, optionally qualified by a repository."""

from __future__ import annotations

import functools
from dataclasses import dataclass


def _remove_comment_and_trim_whitespace(text: str) -> str:
    return text.split("#", 1)[0].strip()


def split_into_name_and_repo(text: str) -> tuple[str, str | None]:
    """Split `repo/name` into the name and the repository, if any."""
    parts = text.split("/")
    name = parts[-1]
    repo = parts[-2] if len(parts) > 1 else None
    return name, repo


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Package:
    """A package with a name and an optional repository."""

    name: str
    repo: str | None = None

    def _sort_key(self) -> tuple[str, bool, str]:
        return (self.name, self.repo is not None, self.repo or "")

    def __eq__(self, other: object) -> bool:
        """Names must match; repositories only when both packages have one."""
        if not isinstance(other, Package):
            return NotImplemented
        repos_match = self.repo is None or other.repo is None or self.repo == other.repo
        return self.name == other.name and repos_match

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        if self.repo is None:
            return self.name
        return f"{self.repo}/{self.name}"


def parse_package(line: str) -> Package | None:
    """Parse a line of a group file; None if nothing is left after removing comments."""
    trimmed = _remove_comment_and_trim_whitespace(line)
    if not trimmed:
        return None
    name, repo = split_into_name_and_repo(trimmed)
    return Package(name, repo)


def package_from_string(text: str) -> Package:
    """Build a package from a string that must hold a package name."""
    package = parse_package(text)
    if package is None:
        raise ValueError("empty package names are not allowed")
    return package