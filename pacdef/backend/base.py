"""The interface shared by all package manager backends."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Sequence
from typing import ClassVar, TypeVar

from ..group import Group
from ..package import Package

_K = TypeVar("_K", bound=Hashable)
_V = TypeVar("_V")


def _run_status(cmd: Sequence[str]) -> int:
    """Run `cmd` and return its exit code; negative if killed by a signal."""
    try:
        completed = subprocess.run(list(cmd), check=False)
    except OSError as exc:
        raise RuntimeError(f"running command {list(cmd)}") from exc
    return completed.returncode


class Backend(ABC):
    """A package manager whose packages are listed under one section of the group files.

    Subclasses set the class attributes below. `binary` may be replaced on an
    instance when the backend supports more than one program.
    """

    binary: str
    section: ClassVar[str]
    switches_info: ClassVar[tuple[str, ...]] = ()
    switches_install: ClassVar[tuple[str, ...]] = ()
    switches_noconfirm: ClassVar[tuple[str, ...]] = ()
    switches_remove: ClassVar[tuple[str, ...]] = ()
    switches_make_dependency: ClassVar[tuple[str, ...]] = ()
    supports_as_dependency: ClassVar[bool] = False

    def __init__(self) -> None:
        self.packages: set[Package] = set()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(binary={self.binary!r}, packages={len(self.packages)})"

    def load(self, groups: Iterable[Group]) -> None:
        """Collect the packages of this backend's section from all groups."""
        for group in groups:
            for section in group.sections:
                if section.name == self.section:
                    self.packages.update(section.packages)

    @abstractmethod
    def get_all_installed_packages(self) -> set[Package]:
        """Return all packages installed on the system."""

    @abstractmethod
    def get_explicitly_installed_packages(self) -> set[Package]:
        """Return the packages that were installed explicitly."""

    def assign_group(self, to_assign: Iterable[tuple[Package, Group]]) -> None:
        """Write each package into the group file it is assigned to."""
        section_header = f"[{self.section}]"
        for group, packages in to_group_map(to_assign).items():
            group.save_packages(section_header, packages)

    def install_packages(self, packages: Sequence[Package], noconfirm: bool) -> int:
        """Install the packages and return the exit code of the package manager."""
        cmd = [self.binary, *self.switches_install]
        if noconfirm:
            cmd.extend(self.switches_noconfirm)
        cmd.extend(str(p) for p in packages)
        return _run_status(cmd)

    def make_dependency(self, packages: Sequence[Package]) -> int:
        """Mark the packages as installed as dependencies; return the exit code."""
        cmd = [self.binary, *self.switches_make_dependency]
        cmd.extend(str(p) for p in packages)
        return _run_status(cmd)

    def remove_packages(self, packages: Sequence[Package], noconfirm: bool) -> int:
        """Remove the packages and return the exit code of the package manager."""
        cmd = [self.binary, *self.switches_remove]
        if noconfirm:
            cmd.extend(self.switches_noconfirm)
        cmd.extend(str(p) for p in packages)
        return _run_status(cmd)

    def get_missing_packages_sorted(self) -> list[Package]:
        """Return the managed packages that are not installed, sorted."""
        try:
            installed = self.get_all_installed_packages()
        except Exception as exc:
            raise RuntimeError("could not get installed packages") from exc
        return sorted(p for p in self.packages if p not in installed)

    def show_package_info(self, package: Package) -> int:
        """Let the package manager show information on a package."""
        return _run_status([self.binary, *self.switches_info, str(package)])

    def get_unmanaged_packages_sorted(self) -> list[Package]:
        """Return the explicitly installed packages that no group lists, sorted."""
        try:
            installed = self.get_explicitly_installed_packages()
        except Exception as exc:
            raise RuntimeError("could not get explicitly installed packages") from exc
        return sorted(p for p in installed if p not in self.packages)


def to_group_map(to_assign: Iterable[tuple[_V, _K]]) -> dict[_K, list[_V]]:
    """Group values by their key; each list of values is sorted."""
    result: dict[_K, list[_V]] = {}
    for value, key in to_assign:
        result.setdefault(key, []).append(value)
    return {key: sorted(values) for key, values in result.items()}  # type: ignore[type-var]