[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacdef"
version = "1.0.0"
description = "Declarative package management across several backends: group files, backends and interactive review"
requires-python = ">=3.10"
dependencies = []
keywords = ["package-manager", "declarative", "flatpak", "pip", "pipx", "cargo", "linux"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pacdef"]

[tool.pytest.ini_options]
addopts = "-ra"
