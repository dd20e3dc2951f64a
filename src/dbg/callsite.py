"""Caller resolution and style prefixes."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from dbg.style import Style
from dbg.utils import debug as _debug
from dbg.utils.paths import PathCache, shorten

__all__ = ["CallSite", "resolve_caller", "format_prefix"]

_UNKNOWN = "???"


@dataclass(frozen=True)
class CallSite:
    """Where a debug line was requested from."""

    filename: str
    lineno: int
    function: str
    pc: int = 0
    ok: bool = True


def resolve_caller(depth: int) -> CallSite:
    """Describe the frame *depth* levels above the caller of this function.

    ``depth=0`` is the function calling ``resolve_caller``; ``depth=1`` is
    whoever called that, and so on. A missing frame yields a CallSite with
    ``ok=False`` and empty fields.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        _debug.debug(f"no caller frame at depth {depth}")
        return CallSite("", 0, "", ok=False)
    try:
        code = frame.f_code
        module = frame.f_globals.get("__name__", _UNKNOWN)
        qualname = getattr(code, "co_qualname", code.co_name)
        return CallSite(
            filename=code.co_filename,
            lineno=frame.f_lineno or 0,
            function=f"{module}.{qualname}",
            pc=frame.f_lasti,
        )
    finally:
        del frame


def format_prefix(style: Style, site: CallSite, paths: PathCache) -> str:
    """Build the text written ahead of a debug line for *style*."""
    prefix = ""
    if not site.ok:
        prefix = f"pc[{site.pc:#x}] "
    if style == Style.FILE_LINE:
        filename = shorten(site.filename, paths) if site.ok else site.filename
        prefix += f"{filename}:{site.lineno}: "
    elif style == Style.FUNC:
        prefix += f"{site.function}() "
    return prefix
