"""What to do for one backend after a review."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..backend.base import Backend
from ..group import Group
from ..package import Package


@dataclass
class Strategy:
    """All actions to carry out for one backend."""

    backend: Backend
    delete: list[Package] = field(default_factory=list)
    as_dependency: list[Package] = field(default_factory=list)
    assign_group: list[tuple[Package, Group]] = field(default_factory=list)

    def execute(self) -> None:
        """Remove, mark as dependency and assign to groups.

        Raises RuntimeError if the package manager reports failure.
        """
        section = self.backend.section
        if self.delete and self.backend.remove_packages(self.delete, False) != 0:
            raise RuntimeError(f"removing packages for {section} failed")
        if self.as_dependency and self.backend.make_dependency(self.as_dependency) != 0:
            raise RuntimeError(f"marking packages as dependency for {section} failed")
        if self.assign_group:
            self.backend.assign_group(self.assign_group)

    def format(self) -> str:
        """Render the planned actions; empty if there is nothing to do."""
        if self.nothing_to_do():
            return ""
        lines = [f"[{self.backend.section}]"]
        if self.delete:
            lines.append("delete:")
            lines.extend(f"  {p}" for p in self.delete)
        if self.as_dependency:
            lines.append("as dependency:")
            lines.extend(f"  {p}" for p in self.as_dependency)
        if self.assign_group:
            lines.append("assign groups:")
            lines.extend(f"  {p} -> {g.name}" for p, g in self.assign_group)
        return "\n".join(lines)

    def show(self) -> None:
        """Print the planned actions, if any."""
        if not self.nothing_to_do():
            print(self.format())

    def nothing_to_do(self) -> bool:
        """Tell whether there are no actions."""
        return not (self.delete or self.as_dependency or self.assign_group)