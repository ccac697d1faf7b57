"""Package manager backends (flatpak, python, rust) and the per-backend work lists."""