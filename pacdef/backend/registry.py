"""The backends pacdef knows about."""

from __future__ import annotations

from collections.abc import Iterator

from .base import Backend
from .flatpak import Flatpak
from .python import Python
from .rust import Rust

BACKEND_TYPES: tuple[type[Backend], ...] = (Flatpak, Python, Rust)


def iter_backends() -> Iterator[Backend]:
    """Yield a fresh instance of every backend, in registration order."""
    for backend_type in BACKEND_TYPES:
        yield backend_type()