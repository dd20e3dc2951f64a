"""The style printer.

``StylePrinter`` owns a sink and a path cache and implements the two print
operations:

* ``log(style, *args)`` writes the style prefix, then the arguments separated
  by single spaces, then a newline.
* ``logf(style, template, *args)`` writes the style prefix, then
  ``template % args``, then a newline.

Nothing is printed for ``Style.NOOP``, when no arguments are given, or when the
first argument is None. Whenever the first argument is an exception it is
returned, so a print can double as the error return::

    return dbg.FILE_LINE.log(exc)

A process-wide default printer backs ``Style.log``, ``Style.logf`` and the
module-level helpers. Configure it once at startup with
:func:`set_default_printer` or just swap its sink with :func:`set_writer`.
Failures while resolving paths or writing to the sink never propagate to the
caller; they are reported on the ``dbg`` stdlib logger at DEBUG level.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from dbg.callsite import CallSite, format_prefix, resolve_caller
from dbg.sink import AtomicSink, Sink, write_line
from dbg.style import Style
from dbg.utils import debug as _debug
from dbg.utils.paths import PathCache

__all__ = [
    "PrinterSettings",
    "StylePrinter",
    "default_printer",
    "set_default_printer",
    "set_writer",
    "get_writer",
    "log",
    "logf",
]


class PrinterSettings(BaseModel):
    """Explicit path configuration for a printer.

    Fields left as None are looked up lazily (``DBG_ROOT``/config file for
    the root, ``os.getcwd()`` for the working directory) the first time a
    FILE_LINE prefix needs them.
    """

    model_config = ConfigDict(frozen=True)

    root: Optional[Path] = None
    """Root source directory; files outside the working directory are shown
    relative to its ``src`` subdirectory."""

    cwd: Optional[Path] = None
    """Working directory that caller file names are made relative to."""

    def path_cache(self) -> PathCache:
        return PathCache(root=self.root, cwd=self.cwd)


def _suppressed(style: Style, args: Sequence[Any]) -> bool:
    return style == Style.NOOP or len(args) == 0 or args[0] is None


def _passthrough(args: Sequence[Any]) -> Optional[BaseException]:
    first = args[0]
    if isinstance(first, BaseException):
        return first
    return None


def _text(arg: Any) -> str:
    try:
        return str(arg)
    except Exception as exc:
        _debug.debug(f"str() of {type(arg).__name__} failed: {exc!r}")
        return f"<{type(arg).__name__} str() failed: {exc}>"


def _join(args: Sequence[Any]) -> str:
    return " ".join(_text(arg) for arg in args)


def _bad_format(template: str, args: Sequence[Any]) -> str:
    extra = ", ".join(f"{type(arg).__name__}={_text(arg)}" for arg in args)
    return f"{template}%!(EXTRA {extra})"


def _render(template: str, args: Sequence[Any]) -> str:
    if not template:
        return _join(args)
    values: Any = tuple(args)
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return template % values
    except Exception as exc:
        # Mismatched directives, or an argument whose __str__/__repr__ raises.
        _debug.debug(f"template {template!r} does not match arguments: {exc!r}")
        return _bad_format(template, args)


class StylePrinter:
    """Formats and writes debug lines to one sink.

    Parameters
    ----------
    sink:
        Text stream or :class:`rich.console.Console`. None means whatever
        ``sys.stdout`` is at the time of each write.
    settings:
        Path configuration used for FILE_LINE prefixes.
    """

    def __init__(
        self,
        sink: Optional[Sink] = None,
        settings: Optional[PrinterSettings] = None,
    ) -> None:
        self.settings = settings or PrinterSettings()
        self.paths = self.settings.path_cache()
        self._sink = AtomicSink(sink)

    def set_writer(self, sink: Optional[Sink]) -> None:
        """Replace the sink for all later prints; None restores stdout."""
        self._sink.set(sink)

    def get_writer(self) -> Optional[Sink]:
        return self._sink.get()

    def log(self, style: Style, *args: Any, _skip: int = 0) -> Optional[BaseException]:
        """Print the style prefix, then *args* separated by spaces."""
        if _suppressed(style, args):
            return None
        site = resolve_caller(1 + _skip)
        self._emit(style, site, _join(args))
        return _passthrough(args)

    def logf(
        self, style: Style, template: str, *args: Any, _skip: int = 0
    ) -> Optional[BaseException]:
        """Print the style prefix, then ``template % args`` and a newline."""
        if _suppressed(style, args):
            return None
        site = resolve_caller(1 + _skip)
        self._emit(style, site, _render(template, args))
        return _passthrough(args)

    def _emit(self, style: Style, site: CallSite, body: str) -> None:
        sink = self._sink.get()
        prefix = format_prefix(style, site, self.paths)
        write_line(sink, f"{prefix}{body}\n")


_default_lock = threading.Lock()
_default: StylePrinter = StylePrinter()


def default_printer() -> StylePrinter:
    return _default


def set_default_printer(printer: Optional[StylePrinter] = None) -> StylePrinter:
    """Install *printer* as the process-wide default, or a fresh one if None.

    Meant to be called once during startup (or from a test fixture).
    """
    global _default
    with _default_lock:
        _default = printer if printer is not None else StylePrinter()
        return _default


def set_writer(sink: Optional[Sink]) -> None:
    """Atomically replace the default printer's sink."""
    default_printer().set_writer(sink)


def get_writer() -> Optional[Sink]:
    return default_printer().get_writer()


def log(style: Style, *args: Any) -> Optional[BaseException]:
    """Print through the default printer; see :meth:`StylePrinter.log`."""
    return default_printer().log(style, *args, _skip=1)


def logf(style: Style, template: str, *args: Any) -> Optional[BaseException]:
    """Print through the default printer; see :meth:`StylePrinter.logf`."""
    return default_printer().logf(style, template, *args, _skip=1)
