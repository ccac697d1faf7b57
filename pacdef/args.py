"""Command line interface: the parser and the parsed arguments."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version


@dataclass
class Version:
    """Show version information."""


@dataclass
class GroupEdit:
    """Edit existing groups."""

    groups: list[str] = field(default_factory=list)


@dataclass
class GroupExport:
    """Export group files to a directory."""

    groups: list[str] = field(default_factory=list)
    output_dir: str | None = None
    force: bool = False


@dataclass
class GroupImport:
    """Import files as groups."""

    groups: list[str] = field(default_factory=list)


@dataclass
class GroupList:
    """List the names of all groups."""


@dataclass
class GroupNew:
    """Create new group files."""

    groups: list[str] = field(default_factory=list)
    edit: bool = False


@dataclass
class GroupRemove:
    """Remove groups."""

    groups: list[str] = field(default_factory=list)


@dataclass
class GroupShow:
    """Show the packages of groups."""

    groups: list[str] = field(default_factory=list)


@dataclass
class PackageClean:
    """Remove unmanaged packages."""

    noconfirm: bool = False


@dataclass
class PackageReview:
    """Review unmanaged packages."""


@dataclass
class PackageSearch:
    """Search packages matching a regular expression."""

    regex: str = ""


@dataclass
class PackageSync:
    """Install missing packages."""

    noconfirm: bool = False


@dataclass
class PackageUnmanaged:
    """Show unmanaged packages."""


GroupAction = GroupEdit | GroupExport | GroupImport | GroupList | GroupNew | GroupRemove | GroupShow
PackageAction = PackageClean | PackageReview | PackageSearch | PackageSync | PackageUnmanaged
Arguments = Version | GroupAction | PackageAction

_Builder = Callable[[argparse.Namespace], Arguments]


def get_version_string() -> str:
    """Return the version of the installed package."""
    try:
        return version("pacdef")
    except PackageNotFoundError:
        return "unknown"


def _add_command(
    subparsers: argparse._SubParsersAction,
    name: str,
    alias: str | None,
    about: str,
    build: _Builder | None = None,
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        name,
        aliases=[alias] if alias else [],
        help=about,
        description=about,
    )
    if build is not None:
        parser.set_defaults(build=build)
    return parser


def _add_groups_arg(parser: argparse.ArgumentParser, about: str | None = None) -> None:
    parser.add_argument("groups", nargs="+", help=about)


def _add_noconfirm_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--noconfirm", action="store_true", help="do not ask for any confirmation"
    )


def _add_group_cmd(subparsers: argparse._SubParsersAction) -> None:
    group = _add_command(subparsers, "group", "g", "manage groups")
    actions = group.add_subparsers(dest="group_action", required=True, metavar="subcommand")

    edit = _add_command(
        actions, "edit", "ed", "edit one or more existing group",
        lambda ns: GroupEdit(list(ns.groups)),
    )
    _add_groups_arg(edit, "a previously imported group")

    export = _add_command(
        actions, "export", "ex", "export one or more group files",
        lambda ns: GroupExport(list(ns.groups), ns.output_dir, ns.force),
    )
    export.add_argument(
        "-f", "--force", action="store_true", help="overwrite output files if they exist"
    )
    export.add_argument(
        "-o", "--output", dest="output_dir",
        help="(optional) the directory under which to save the group",
    )
    _add_groups_arg(export, "the file to export as group")

    imported = _add_command(
        actions, "import", "i", "import one or more group files",
        lambda ns: GroupImport(list(ns.groups)),
    )
    _add_groups_arg(imported, "the file to import as group")

    _add_command(actions, "list", "l", "list names of imported groups", lambda ns: GroupList())

    new = _add_command(
        actions, "new", "n", "create new group files",
        lambda ns: GroupNew(list(ns.groups), ns.edit),
    )
    new.add_argument(
        "-e", "--edit", action="store_true", help="edit the new group files after creation"
    )
    _add_groups_arg(new)

    remove = _add_command(
        actions, "remove", "r", "remove one or more previously imported groups",
        lambda ns: GroupRemove(list(ns.groups)),
    )
    _add_groups_arg(remove, "a previously imported group that will be removed")

    show = _add_command(
        actions, "show", "s", "show packages under an imported group",
        lambda ns: GroupShow(list(ns.groups)),
    )
    _add_groups_arg(show, "group file(s) to show")


def _add_package_cmd(subparsers: argparse._SubParsersAction) -> None:
    package = _add_command(subparsers, "package", "p", "manage packages")
    actions = package.add_subparsers(
        dest="package_action", required=True, metavar="subcommand"
    )

    clean = _add_command(
        actions, "clean", "c", "remove unmanaged packages",
        lambda ns: PackageClean(ns.noconfirm),
    )
    _add_noconfirm_arg(clean)

    _add_command(actions, "review", "r", "review unmanaged packages", lambda ns: PackageReview())

    search = _add_command(
        actions, "search", "se", "search for packages which match a provided regex",
        lambda ns: PackageSearch(ns.regex),
    )
    search.add_argument("regex", help="the regular expression the package must match")

    sync = _add_command(
        actions, "sync", "sy", "install packages from all imported groups",
        lambda ns: PackageSync(ns.noconfirm),
    )
    _add_noconfirm_arg(sync)

    _add_command(
        actions, "unmanaged", "u",
        "show explicitly installed packages not managed by pacdef",
        lambda ns: PackageUnmanaged(),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="pacdef",
        description="multi-backend declarative package manager for Linux",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="subcommand")
    _add_group_cmd(subparsers)
    _add_package_cmd(subparsers)
    _add_command(subparsers, "version", None, "show version info", lambda ns: Version())
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Arguments:
    """Parse the arguments (without the program name); exits on invalid input."""
    namespace = build_parser().parse_args(None if argv is None else list(argv))
    return namespace.build(namespace)