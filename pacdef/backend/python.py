"""The Python backend, using pip or pipx."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Sequence
from typing import Any

from ..package import Package, package_from_string
from .base import Backend

_DEFAULT_BINARY = "pip"

_SWITCHES_ALL = {
    "pip": ("list", "--format", "json", "--not-required", "--user"),
    "pipx": ("list", "--json"),
}
_SWITCHES_EXPLICIT = {
    "pip": ("list", "--format", "json", "--user"),
    "pipx": ("list", "--json"),
}


def _node_name(node: Any) -> str:
    name = node.get("name") if isinstance(node, dict) else None
    if not isinstance(name, str):
        raise ValueError("package name should always be a string")
    return name


def extract_pip_packages(value: Any) -> set[Package]:
    """Return the packages listed in the JSON output of `pip list`."""
    if not isinstance(value, list):
        raise ValueError("getting inner json array")
    return {package_from_string(_node_name(node)) for node in value}


def extract_pipx_packages(value: Any) -> set[Package]:
    """Return the packages listed in the JSON output of `pipx list`."""
    venvs = value.get("venvs") if isinstance(value, dict) else None
    if not isinstance(venvs, dict):
        raise ValueError("getting inner json object")
    return {package_from_string(name) for name in venvs}


_EXTRACTORS: dict[str, Callable[[Any], set[Package]]] = {
    "pip": extract_pip_packages,
    "pipx": extract_pipx_packages,
}


class Python(Backend):
    """Python packages managed by pip or pipx."""

    binary = _DEFAULT_BINARY
    section = "python"
    switches_info = ("show",)
    switches_install = ("install",)
    switches_noconfirm = ()
    switches_remove = ("uninstall",)
    switches_make_dependency = ()
    supports_as_dependency = False

    def __init__(self) -> None:
        super().__init__()
        self.binary = _DEFAULT_BINARY

    def _lookup(self, table: dict[str, Any]) -> Any:
        try:
            return table[self.binary]
        except KeyError:
            raise ValueError(
                f"Cannot use {self.binary} for package management in python. "
                "Please use a valid package manager like pip or pipx."
            ) from None

    def _query(self, switches: Sequence[str]) -> set[Package]:
        extract = self._lookup(_EXTRACTORS)
        cmd = [self.binary, *switches]
        try:
            completed = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as exc:
            raise RuntimeError(f"running command {cmd}") from exc
        return extract(json.loads(completed.stdout.decode("utf-8")))

    def get_all_installed_packages(self) -> set[Package]:
        return self._query(self._lookup(_SWITCHES_ALL))

    def get_explicitly_installed_packages(self) -> set[Package]:
        return self._query(self._lookup(_SWITCHES_EXPLICIT))

    def make_dependency(self, packages: Sequence[Package]) -> int:
        """Python packages cannot be marked as dependencies; always raises RuntimeError."""
        raise RuntimeError(f"not supported by {_DEFAULT_BINARY}")