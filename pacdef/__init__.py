"""Declarative package management across backends: group files, backends and review."""

__version__ = "1.0.0"