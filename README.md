# pacdef

A library for declarative package management on Linux across several
backends. You describe the packages you want in plain-text *group files*;
the library reads them, asks each backend's package manager what is
installed, and works out which declared packages are missing and which
installed packages are not declared anywhere. It can install or remove
those packages and lead the user through an interactive review.

Supported backends: `flatpak`, `python` (pip or pipx) and `rust` (cargo).

## Installation

```
pip install .
```

The package has no runtime dependencies beyond the standard library. The
terminal helpers in `pacdef.ui` use `termios` and so need a POSIX system.

## Group files

`pacdef.paths.get_group_dir()` returns `$XDG_CONFIG_HOME/pacdef/groups`,
falling back to `$HOME/.config/pacdef/groups`. A group file may sit in a
subdirectory; its name is then the path relative to the group directory,
joined with `/`, for example `generic/base`.

A file consists of sections, each starting with a line that begins with
`[`, followed by one package per line. Everything after `#` is a comment and
blank lines are ignored. Lines before the first header are skipped.

```
[flatpak]
org.gimp.GIMP

[python]
black   # formatter

[rust]
ripgrep
```

A package may carry a repository prefix, such as `myrepo/somepackage`. Two
packages are equal when their names match and, if both have a repository,
their repositories match too.

Warnings go to standard error for an empty section, a package listed twice
in one section, and a file with no sections. `load_groups(group_dir,
warn_not_symlinks)` creates the group directory if it is missing, follows
symlinked directories, and, when `warn_not_symlinks` is true, warns about
every group file that is neither a symlink nor inside a symlinked directory.

## Modules

- `pacdef.package` — `Package`, `parse_package(line)` (returns `None` for a
  line with nothing but a comment), `package_from_string(text)` and
  `split_into_name_and_repo(text)`.
- `pacdef.section` — `Section` and `read_section(lines)`, which consumes a
  `collections.deque` of lines.
- `pacdef.group` — `Group` with `Group.from_file(path, group_dir)`,
  `Group.save_packages(section_header, packages)` (inserts the packages right
  after the header, or appends a new section), and `load_groups`.
- `pacdef.paths` — config and group locations, `binary_in_path(name)`,
  `get_relative_path`, `get_absolutized_file_paths`.
- `pacdef.backend.base` — the abstract `Backend`. `load(groups)` collects the
  packages of the backend's section; `get_missing_packages_sorted()` and
  `get_unmanaged_packages_sorted()` compare them with what is installed;
  `install_packages`, `remove_packages`, `make_dependency` and
  `show_package_info` run the package manager and return its exit code.
- `pacdef.backend.flatpak.Flatpak` — set `systemwide = False` to act on the
  user installation (`--user`).
- `pacdef.backend.python.Python` — set `binary` to `"pip"` (the default) or
  `"pipx"`; any other value raises `ValueError` when packages are queried.
- `pacdef.backend.rust.Rust` — reads installed crates from
  `$HOME/.cargo/.crates2.json`.
- `pacdef.backend.registry.iter_backends()` — a fresh instance of every
  backend, in the order flatpak, python, rust.
- `pacdef.backend.todo.ToDoPerBackend` — packages per backend, with
  `format()`/`show()`, `install_missing_packages(noconfirm)` and
  `remove_unmanaged_packages(noconfirm)`; a non-zero exit code raises
  `RuntimeError`.
- `pacdef.review.session.review(todo_per_backend, groups)` — asks for each
  package with a single key: assign to (g)roup, (d)elete, (s)kip, (i)nfo,
  (a)s dependency where the backend supports it, or (q)uit. The chosen
  actions are listed and carried out after confirmation.
- `pacdef.args.parse_args(argv)` — parses the command line into dataclasses
  such as `GroupList`, `GroupExport` or `PackageSync`.
- `pacdef.cmd.run_edit_command(files)` — opens files in `$EDITOR`, falling
  back to `$VISUAL`.
- `pacdef.ui.get_user_confirmation()` — asks `Continue? [Y/n]`.

## Example

```python
from pacdef.backend.registry import iter_backends
from pacdef.backend.todo import ToDoPerBackend
from pacdef.group import load_groups
from pacdef.paths import binary_in_path, get_group_dir

groups = load_groups(get_group_dir(), warn_not_symlinks=True)

missing = ToDoPerBackend()
for backend in iter_backends():
    if not binary_in_path(backend.binary):
        continue
    backend.load(groups)
    missing.append(backend, backend.get_missing_packages_sorted())

if missing.nothing_to_do_for_all_backends():
    print("nothing to do")
else:
    missing.show()
```

## Command-line arguments

`pacdef.args.parse_args` understands these forms (argparse exits on invalid
input):

```
group list | import FILE... | new [-e] NAME... | edit NAME...
      show NAME... | remove NAME... | export [-f] [-o DIR] NAME...
package sync [--noconfirm] | unmanaged | clean [--noconfirm]
        review | search REGEX
version
```

with the aliases `g` for `group`, `p` for `package`, and `l`, `i`, `n`, `r`,
`s`, `ed`, `ex`, `sy`, `c`, `u`, `se` for the commands below them.

## What this package does not do

- It installs no `pacdef` command. `parse_args` only turns arguments into
  dataclasses; nothing dispatches them to an action.
- It reads no configuration file. Options such as the pip binary, the
  Flatpak installation or disabled backends are set on the backend objects
  directly.
- It has no functions for creating, importing, exporting or removing group
  files, for printing a group's content, or for searching declared packages
  by regular expression.