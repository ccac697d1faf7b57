"""Decisions made while reviewing unmanaged packages."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto

from ..backend.base import Backend
from ..group import Group
from ..package import Package
from .strategy import Strategy


@dataclass(frozen=True)
class AsDependency:
    """Mark the package as installed as a dependency."""

    package: Package


@dataclass(frozen=True)
class Delete:
    """Remove the package."""

    package: Package


@dataclass(frozen=True)
class AssignGroup:
    """Add the package to a group file."""

    package: Package
    group: Group


ReviewAction = AsDependency | Delete | AssignGroup


class ReviewIntention(Enum):
    """What the user asked to do with a package."""

    AS_DEPENDENCY = auto()
    ASSIGN_GROUP = auto()
    DELETE = auto()
    INFO = auto()
    INVALID = auto()
    SKIP = auto()
    QUIT = auto()


class ReviewsPerBackend:
    """The review actions collected for each backend."""

    def __init__(self) -> None:
        self._items: list[tuple[Backend, list[ReviewAction]]] = []

    def append(self, backend: Backend, actions: Sequence[ReviewAction]) -> None:
        """Add a backend with its actions."""
        self._items.append((backend, list(actions)))

    def __iter__(self) -> Iterator[tuple[Backend, list[ReviewAction]]]:
        return iter(self._items)

    def nothing_to_do(self) -> bool:
        """Tell whether no backend has any action."""
        return all(not actions for _, actions in self._items)

    def into_strategies(self) -> list[Strategy]:
        """Return one strategy per backend that has actions."""
        strategies = []
        for backend, actions in self._items:
            strategy = Strategy(backend)
            for action in actions:
                match action:
                    case Delete(package):
                        strategy.delete.append(package)
                    case AssignGroup(package, group):
                        strategy.assign_group.append((package, group))
                    case AsDependency(package):
                        strategy.as_dependency.append(package)
            if not strategy.nothing_to_do():
                strategies.append(strategy)
        return strategies