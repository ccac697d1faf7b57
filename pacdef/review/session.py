"""Interactive review of unmanaged packages."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence

from ..backend.base import Backend
from ..backend.todo import ToDoPerBackend
from ..group import Group
from ..package import Package
from ..ui import get_user_confirmation, read_single_char_from_terminal
from .actions import (
    AsDependency,
    AssignGroup,
    Delete,
    ReviewAction,
    ReviewIntention,
    ReviewsPerBackend,
)

_INDEX = re.compile(r"\+?[0-9]+")

_KEYS = {
    "d": ReviewIntention.DELETE,
    "g": ReviewIntention.ASSIGN_GROUP,
    "i": ReviewIntention.INFO,
    "q": ReviewIntention.QUIT,
    "s": ReviewIntention.SKIP,
}


def review(todo_per_backend: ToDoPerBackend, groups: Iterable[Group]) -> None:
    """Ask the user what to do with each unmanaged package, then carry it out."""
    sorted_groups = sorted(groups)

    if todo_per_backend.nothing_to_do_for_all_backends():
        print("nothing to do")
        return

    reviews = ReviewsPerBackend()
    for backend, packages in todo_per_backend:
        actions: list[ReviewAction] = []
        for package in packages:
            print(f"{backend.section}: {package}")
            if not get_action_for_package(package, sorted_groups, actions, backend):
                return
        reviews.append(backend, actions)

    if reviews.nothing_to_do():
        print("nothing to do")
        return

    strategies = reviews.into_strategies()

    print()
    print("\n\n".join(strategy.format() for strategy in strategies))
    print()
    if not get_user_confirmation():
        return

    for strategy in strategies:
        strategy.execute()


def get_action_for_package(
    package: Package,
    groups: Sequence[Group],
    actions: list[ReviewAction],
    backend: Backend,
) -> bool:
    """Ask until the user decides on `package`, appending the decision to `actions`.

    Returns False if the user wants to quit the review.
    """
    while True:
        intention = ask_user_action_for_package(backend.supports_as_dependency)
        if intention is ReviewIntention.AS_DEPENDENCY:
            if not backend.supports_as_dependency:
                raise RuntimeError("backend does not support dependencies")
            actions.append(AsDependency(package))
            return True
        if intention is ReviewIntention.ASSIGN_GROUP:
            try:
                group = ask_group(groups)
            except OSError:
                group = None
            if group is not None:
                actions.append(AssignGroup(package, group))
                return True
        elif intention is ReviewIntention.DELETE:
            actions.append(Delete(package))
            return True
        elif intention is ReviewIntention.INFO:
            backend.show_package_info(package)
        elif intention is ReviewIntention.SKIP:
            return True
        elif intention is ReviewIntention.QUIT:
            return False


def ask_user_action_for_package(supports_as_dependency: bool) -> ReviewIntention:
    """Ask for the action on a package with a single key press."""
    print(build_query(supports_as_dependency), end="", flush=True)
    key = read_single_char_from_terminal().lower()
    if key == "a" and supports_as_dependency:
        return ReviewIntention.AS_DEPENDENCY
    return _KEYS.get(key, ReviewIntention.INVALID)


def build_query(supports_as_dependency: bool) -> str:
    """Return the space-terminated question for the action on a package."""
    query = "assign to (g)roup, (d)elete, (s)kip, (i)nfo, "
    if supports_as_dependency:
        query += "(a)s dependency, "
    return query + "(q)uit? "


def format_enumerated_groups(groups: Sequence[Group]) -> str:
    """Render the groups with their indices, right-aligned."""
    width = get_amount_of_digits_for_number(len(groups))
    return "\n".join(f"{i:>{width}}: {group.name}" for i, group in enumerate(groups))


def get_amount_of_digits_for_number(number: int) -> int:
    """Return the number of decimal digits of a non-negative number."""
    return len(str(number))


def ask_group(groups: Sequence[Group]) -> Group | None:
    """Let the user pick a group by index; None if the reply is not a valid index."""
    if groups:
        print(format_enumerated_groups(groups))
    reply = sys.stdin.readline().strip()
    if not _INDEX.fullmatch(reply):
        return None
    index = int(reply)
    return groups[index] if index < len(groups) else None