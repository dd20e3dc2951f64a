"""Path lookups used to shorten source file names in FILE_LINE output.

``PathCache`` memoizes three values: the configured root source directory,
its ``src`` subdirectory, and the working directory. Each value is computed
at most once per cache; concurrent first callers block on a per-value lock
until the winner has stored the result. Later changes to the environment or
the working directory are not observed.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Callable, Dict

from dbg.utils import debug as _debug
from dbg.utils.config import resolve_root

__all__ = ["PathCache", "relativize", "shorten"]

_UNSET = object()


class _Once:
    """Hold a lazily computed value, computing it on first access only."""

    def __init__(self, compute: Callable[[], str]) -> None:
        self._compute = compute
        self._lock = threading.Lock()
        self._value: object = _UNSET

    def get(self) -> str:
        value = self._value
        if value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = self._compute()
                value = self._value
        return value  # type: ignore[return-value]

    @property
    def done(self) -> bool:
        return self._value is not _UNSET


class PathCache:
    """Compute-once root, source and working directories.

    Parameters
    ----------
    root:
        Explicit root source directory. When omitted the root is resolved
        through ``DBG_ROOT``, the user config file, then the home directory.
    cwd:
        Explicit working directory. When omitted ``os.getcwd()`` is used, or
        ``"."`` if the working directory cannot be determined.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self._explicit_root = root
        self._explicit_cwd = cwd
        self._values: Dict[str, _Once] = {
            "root": _Once(self._compute_root),
            "source": _Once(self._compute_source),
            "cwd": _Once(self._compute_cwd),
        }

    def _compute_root(self) -> str:
        return resolve_root(self._explicit_root)

    def _compute_source(self) -> str:
        return os.path.join(self.root, "src")

    def _compute_cwd(self) -> str:
        if self._explicit_cwd is not None:
            return str(self._explicit_cwd)
        try:
            return os.getcwd()
        except OSError as exc:
            _debug.debug(f"working directory unavailable, using '.': {exc}")
            return "."

    @property
    def root(self) -> str:
        return self._values["root"].get()

    @property
    def source(self) -> str:
        return self._values["source"].get()

    @property
    def cwd(self) -> str:
        return self._values["cwd"].get()

    def computed(self) -> Dict[str, bool]:
        """Report which values have been computed so far."""
        return {name: once.done for name, once in self._values.items()}


def relativize(path: str, start: str) -> str | None:
    """Return *path* relative to *start*, or None if no relative form exists."""
    try:
        return os.path.relpath(path, start)
    except ValueError:
        # Different drives on Windows, or an empty path.
        return None


def shorten(path: str, cache: PathCache) -> str:
    """Shorten a source file path for display.

    The path is made relative to the working directory. If that fails or
    the result starts with ``"."`` (the file lies outside the working
    directory), it is made relative to the root's ``src`` directory instead,
    and if that also fails the path is returned unchanged.
    """
    rel = relativize(path, cache.cwd)
    if rel is not None and not rel.startswith("."):
        return rel
    rel = relativize(path, cache.source)
    if rel is None:
        _debug.debug(f"cannot shorten {path!r}, keeping it as is")
        return path
    return rel
