"""The Rust backend, using cargo."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..package import Package, parse_package
from ..paths import get_home_dir
from .base import Backend


def get_crates_file() -> Path:
    """Return the file in which cargo records installed crates."""
    return get_home_dir() / ".cargo" / ".crates2.json"


def _crate_name(identifier: str) -> Package:
    words = identifier.split()
    package = parse_package(words[0]) if words else None
    if package is None:
        raise ValueError(f"invalid crate identifier {identifier!r}")
    return package


def extract_cargo_packages(data: Any) -> set[Package]:
    """Return the crates listed under 'installs' in cargo's crates file."""
    if not isinstance(data, dict) or "installs" not in data:
        raise ValueError("get 'installs' field from json")
    installs = data["installs"]
    if not isinstance(installs, dict):
        raise ValueError("getting object")
    return {_crate_name(identifier) for identifier in installs}


class Rust(Backend):
    """Crates installed with cargo."""

    binary = "cargo"
    section = "rust"
    switches_info = ("search", "--limit", "1")
    switches_install = ("install",)
    switches_noconfirm = ()
    switches_remove = ("uninstall",)
    switches_make_dependency = ()
    supports_as_dependency = False

    def get_all_installed_packages(self) -> set[Package]:
        try:
            content = get_crates_file().read_text(encoding="utf-8")
        except FileNotFoundError:
            print(
                "WARNING: no crates file found for cargo. Assuming no crates installed yet.",
                file=sys.stderr,
            )
            return set()
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ValueError("parsing JSON from crates file") from exc
        return extract_cargo_packages(data)

    def get_explicitly_installed_packages(self) -> set[Package]:
        return self.get_all_installed_packages()

    def make_dependency(self, packages: Sequence[Package]) -> int:
        """Cargo cannot mark crates as dependencies; always raises RuntimeError."""
        raise RuntimeError(f"not supported by {type(self).binary}")