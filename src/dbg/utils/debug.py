"""Internal diagnostics for dbg itself.

Provides debug() and warn() functions used when the printer has
to degrade (unresolvable paths, missing frames, broken sinks). Output is off
unless the DBG_DEBUG environment variable is set to 1, so the library stays
silent inside host programs by default. Nothing here writes to the debug-print
sink.
"""

import logging
import os
from typing import Optional

DEBUG_ON = os.getenv("DBG_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger("dbg")
    if not logger.handlers:
        if DEBUG_ON:
            handler: logging.Handler = logging.StreamHandler()
            formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
            handler.setFormatter(formatter)
            logger.setLevel(logging.DEBUG)
        else:
            handler = logging.NullHandler()
        logger.addHandler(handler)
    _logger = logger
    return logger


def debug(msg: str) -> None:
    """Log a debug message."""
    setup_logger().debug(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    setup_logger().warning(msg)
