"""A section of a group file, holding the packages for one backend."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field

from .package import Package, parse_package


@dataclass(eq=False)
class Section:
    """A named section with its packages."""

    name: str
    packages: set[Package] = field(default_factory=set)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self.name < other.name

    def __str__(self) -> str:
        body = "\n".join(str(p) for p in sorted(self.packages))
        return f"[{self.name}]\n{body}"


def read_section(lines: deque[str]) -> Section:
    """Read the next section from `lines`, consuming the lines it uses.

    Lines before the next header are skipped. Raises ValueError if there is
    no further header or the section holds no packages.
    """
    name = _find_next_section_name(lines)
    packages: set[Package] = set()

    while lines and not lines[0].startswith("["):
        package = parse_package(lines.popleft())
        if package is not None:
            _insert_package(package, packages)

    if not packages:
        raise ValueError(f"[{name}] is empty")
    return Section(name, packages)


def _find_next_section_name(lines: deque[str]) -> str:
    while lines:
        line = lines.popleft()
        if line.startswith("["):
            return line.strip().lstrip("[").rstrip("]")
    raise ValueError("finding beginning of next section")


def _insert_package(package: Package, packages: set[Package]) -> None:
    if package in packages:
        print(
            f"warning: {package.name} occurs twice in the same section",
            file=sys.stderr,
        )
        return
    packages.add(package)