# SPDX-FileCopyrightText: 2025-present dbg contributors
#
# SPDX-License-Identifier: MIT

"""dbg - yet another stylized debug printer.

Usage::

    dbg.PLAIN.log(*args)
    dbg.FILE_LINE.logf(template, *args)

Nothing is printed with NOOP, no args, or a None first arg. If the first
argument is an exception, both log and logf return it; otherwise they return
None.
"""

from dbg.__about__ import __version__
from dbg.printer import (
    PrinterSettings,
    StylePrinter,
    default_printer,
    get_writer,
    log,
    logf,
    set_default_printer,
    set_writer,
)
from dbg.style import FILE_LINE, FUNC, NOOP, PLAIN, Style, style_name
from dbg.utils.paths import PathCache

__all__ = [
    "__version__",
    "Style",
    "NOOP",
    "PLAIN",
    "FILE_LINE",
    "FUNC",
    "style_name",
    "StylePrinter",
    "PrinterSettings",
    "PathCache",
    "default_printer",
    "set_default_printer",
    "set_writer",
    "get_writer",
    "log",
    "logf",
]
