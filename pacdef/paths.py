"""Locations of pacdef's config files and helpers for paths."""

from __future__ import annotations

import os
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

CONFIG_FILE_NAME = "pacdef.yaml"
CONFIG_FILE_NAME_OLD = "pacdef.conf"


def get_home_dir() -> Path:
    """Return the home directory from $HOME."""
    home = os.environ.get("HOME")
    if home is None:
        raise RuntimeError("getting $HOME variable")
    return Path(home)


def get_xdg_config_home() -> Path:
    """Return $XDG_CONFIG_HOME, falling back to $HOME/.config."""
    config = os.environ.get("XDG_CONFIG_HOME")
    if config is not None:
        return Path(config)
    return get_home_dir() / ".config"


def get_pacdef_base_dir() -> Path:
    """Return the base directory for pacdef's config files."""
    return get_xdg_config_home() / "pacdef"


def get_group_dir() -> Path:
    """Return the directory holding all group files."""
    return get_pacdef_base_dir() / "groups"


def get_config_path() -> Path:
    """Return the path of the config file."""
    return get_pacdef_base_dir() / CONFIG_FILE_NAME


def get_config_path_old_version() -> Path:
    """Return the path of the config file used by version 0.x."""
    return get_pacdef_base_dir() / CONFIG_FILE_NAME_OLD


def binary_in_path(name: str) -> bool:
    """Tell whether a file called `name` exists in any directory of $PATH."""
    paths = os.environ.get("PATH")
    if paths is None:
        raise RuntimeError("getting $PATH")
    return any((Path(directory) / name).is_file() for directory in paths.split(os.pathsep))


def get_relative_path(
    full_path: str | PathLike[str], base_path: str | PathLike[str]
) -> Path:
    """Return `full_path` relative to `base_path`.

    Raises ValueError if a component of `base_path` differs from the
    corresponding component of `full_path`.
    """
    full_parts = Path(full_path).parts
    base_parts = Path(base_path).parts
    for base_part, full_part in zip(base_parts, full_parts):
        if base_part != full_part:
            raise ValueError(f"{full_path} is not below {base_path}")
    return Path(*full_parts[len(base_parts):])


def get_absolutized_file_paths(names: Iterable[str]) -> list[Path]:
    """Return the absolute, lexically normalised path of each name."""
    return [Path(os.path.abspath(name)) for name in names]