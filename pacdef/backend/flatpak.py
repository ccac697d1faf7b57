"""The Flatpak backend."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from ..package import Package, package_from_string
from .base import Backend, _run_status


class Flatpak(Backend):
    """Flatpak applications, installed system-wide or for the user."""

    binary = "flatpak"
    section = "flatpak"
    switches_info = ("info",)
    switches_install = ("install",)
    switches_noconfirm = ("--assumeyes",)
    switches_remove = ("uninstall",)
    switches_make_dependency = ()
    supports_as_dependency = False

    def __init__(self) -> None:
        super().__init__()
        self.systemwide = True

    def _switches_runtime(self) -> tuple[str, ...]:
        return () if self.systemwide else ("--user",)

    def _get_installed_packages(self, include_implicit: bool) -> set[Package]:
        cmd = [self.binary, "list", "--columns=application"]
        if not include_implicit:
            cmd.append("--app")
        if not self.systemwide:
            cmd.append("--user")
        try:
            completed = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as exc:
            raise RuntimeError(f"running command {cmd}") from exc
        output = completed.stdout.decode("utf-8")
        return {package_from_string(line) for line in output.splitlines() if line.strip()}

    def get_all_installed_packages(self) -> set[Package]:
        return self._get_installed_packages(include_implicit=True)

    def get_explicitly_installed_packages(self) -> set[Package]:
        return self._get_installed_packages(include_implicit=False)

    def install_packages(self, packages: Sequence[Package], noconfirm: bool) -> int:
        cmd = [self.binary, *self.switches_install, *self._switches_runtime()]
        if noconfirm:
            cmd.extend(self.switches_noconfirm)
        cmd.extend(str(p) for p in packages)
        return _run_status(cmd)

    def remove_packages(self, packages: Sequence[Package], noconfirm: bool) -> int:
        cmd = [self.binary, *self.switches_remove, *self._switches_runtime()]
        if noconfirm:
            cmd.extend(self.switches_noconfirm)
        cmd.extend(str(p) for p in packages)
        return _run_status(cmd)

    def make_dependency(self, packages: Sequence[Package]) -> int:
        """Flatpak has no dependency marking; always raises RuntimeError."""
        raise RuntimeError(f"not supported by {type(self).binary}")

    def show_package_info(self, package: Package) -> int:
        cmd = [self.binary, *self.switches_info, *self._switches_runtime(), str(package)]
        return _run_status(cmd)