"""Packages to act on, per backend."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from ..package import Package
from .base import Backend


class ToDoPerBackend:
    """A list of backends, each with the packages that are missing or unmanaged."""

    def __init__(self) -> None:
        self._items: list[tuple[Backend, list[Package]]] = []

    def append(self, backend: Backend, packages: Sequence[Package]) -> None:
        """Add a backend with its packages."""
        self._items.append((backend, list(packages)))

    def __iter__(self) -> Iterator[tuple[Backend, list[Package]]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def nothing_to_do_for_all_backends(self) -> bool:
        """Tell whether no backend has any packages."""
        return all(not packages for _, packages in self._items)

    def install_missing_packages(self, noconfirm: bool) -> None:
        """Install the packages of each backend."""
        self._handle_backend_command(
            lambda b, p, n: b.install_packages(p, n), noconfirm, "install", "installing"
        )

    def remove_unmanaged_packages(self, noconfirm: bool) -> None:
        """Remove the packages of each backend."""
        self._handle_backend_command(
            lambda b, p, n: b.remove_packages(p, n), noconfirm, "remove", "removing"
        )

    def _handle_backend_command(
        self,
        func: Callable[[Backend, list[Package], bool], int],
        noconfirm: bool,
        verb: str,
        verb_continuous: str,
    ) -> None:
        for backend, packages in self._items:
            if not packages:
                continue
            try:
                code = func(backend, packages, noconfirm)
            except Exception as exc:
                raise RuntimeError(
                    f"{verb_continuous} packages for {backend.section}"
                ) from exc
            if code < 0:
                raise RuntimeError(f"could not {verb} packages for {backend.section}")
            if code != 0:
                raise RuntimeError(f"command returned with exit code {code}")

    def format(self) -> str:
        """Render the packages per backend under their section headers."""
        parts = [
            "\n".join([f"[{backend.section}]", *(str(p) for p in packages)])
            for backend, packages in self._items
            if packages
        ]
        return "\n\n".join(parts)

    def show(self) -> None:
        """Print the packages per backend."""
        print(self.format())