"""Output sinks for debug lines.

A sink is either a text stream (anything with ``write(str)``) or a
:class:`rich.console.Console`. Rich consoles are written through
``Console.out`` with highlighting off, so the text lands unstyled but still
goes through the console's own file handling and recording.
"""

from __future__ import annotations

import sys
import threading
from typing import Optional, Protocol, Union, runtime_checkable

from rich.console import Console

from dbg.utils import debug as _debug

__all__ = ["TextSink", "Sink", "AtomicSink", "write_line"]


@runtime_checkable
class TextSink(Protocol):
    def write(self, s: str, /) -> object: ...


Sink = Union[TextSink, Console]


class AtomicSink:
    """A replaceable sink reference.

    ``set`` swaps the reference under a lock; ``get`` is a single attribute
    read, so a reader sees either the old or the new sink, never a mix.
    ``None`` means the process's current ``sys.stdout``.
    """

    def __init__(self, sink: Optional[Sink] = None) -> None:
        self._lock = threading.Lock()
        self._sink = sink

    def set(self, sink: Optional[Sink]) -> None:
        with self._lock:
            self._sink = sink

    def get(self) -> Optional[Sink]:
        sink = self._sink
        if sink is None:
            return sys.stdout
        return sink


def write_line(sink: Optional[Sink], text: str) -> None:
    """Write *text* to *sink* in a single call; any write failure is dropped."""
    if sink is None:
        # sys.stdout is None under pythonw and in some embedded interpreters.
        return
    try:
        if isinstance(sink, Console):
            sink.out(text, end="", highlight=False)
            return
        sink.write(text)
        flush = getattr(sink, "flush", None)
        if callable(flush):
            flush()
    except Exception as exc:
        # Broken pipe, closed file, binary stream and the like.
        _debug.debug(f"debug line dropped, sink {sink!r} failed: {exc}")
