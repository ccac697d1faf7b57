"""Running the user's editor."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from .env import get_editor


def run_edit_command(files: Sequence[str | PathLike[str]]) -> int:
    """Run the editor on the files and return its exit code.

    The working directory is the parent of the first file.
    """
    if not files:
        raise ValueError("no files to edit")
    editor = get_editor()
    paths = [Path(f) for f in files]
    completed = subprocess.run(
        [editor, *(str(p) for p in paths)],
        cwd=paths[0].parent,
        check=False,
    )
    return completed.returncode