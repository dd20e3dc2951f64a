"""Debug print styles.

A style decides whether a debug line is printed and how it is prefixed:

* ``NOOP`` prints nothing.
* ``PLAIN`` prints the arguments only::

      printed

* ``FILE_LINE`` prefixes the caller's file and line::

      tests/test_printer.py:22: printed

  or, if the file is outside the working directory, the path relative to the
  root source directory::

      dbg/tests/test_printer.py:22: printed

* ``FUNC`` prefixes the caller's qualified function name::

      tests.test_printer.test_func() printed

Styles are plain values, so a module can keep one in a variable and turn its
output on from a test fixture::

    # mypkg/core.py
    err = dbg.NOOP
    ...
    return err.log(exc)

    # tests/conftest.py
    @pytest.fixture(autouse=True)
    def verbose_errors(monkeypatch):
        monkeypatch.setattr(core, "err", dbg.FILE_LINE)
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Union

__all__ = ["Style", "NOOP", "PLAIN", "FILE_LINE", "FUNC", "style_name"]

_NAMES = ("NoOp", "Plain", "FileLine", "Func")


class Style(IntEnum):
    """Verbosity and prefix mode of a debug line."""

    NOOP = 0
    PLAIN = 1
    FILE_LINE = 2
    FUNC = 3

    def __str__(self) -> str:
        return _NAMES[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def log(self, *args: Any) -> Optional[BaseException]:
        """Print the style prefix, then *args* separated by spaces.

        Returns ``args[0]`` if it is an exception, otherwise None.
        """
        from dbg.printer import default_printer

        return default_printer().log(self, *args, _skip=1)

    def logf(self, template: str, *args: Any) -> Optional[BaseException]:
        """Print the style prefix, then ``template % args`` and a newline.

        Returns ``args[0]`` if it is an exception, otherwise None.
        """
        from dbg.printer import default_printer

        return default_printer().logf(self, template, *args, _skip=1)


NOOP = Style.NOOP
PLAIN = Style.PLAIN
FILE_LINE = Style.FILE_LINE
FUNC = Style.FUNC


def style_name(style: Union[Style, int]) -> str:
    """Return the name of *style*, or its decimal value if it is undefined."""
    value = int(style)
    if 0 <= value < len(_NAMES):
        return _NAMES[value]
    return str(value)
