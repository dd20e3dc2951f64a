"""Utility modules for dbg."""

from dbg.utils.config import get_default_root, resolve_setting, set_default_root
from dbg.utils.paths import PathCache, relativize

__all__ = [
    "PathCache",
    "relativize",
    "resolve_setting",
    "get_default_root",
    "set_default_root",
]
