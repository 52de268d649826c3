"""System-level helpers for lpsnapi (paths, logging setup)."""

from .path_resolver import PathResolver

__all__ = ["PathResolver"]
