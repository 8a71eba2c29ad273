"""Logging configuration for command-line use.

The library itself only creates module loggers; handlers are installed here
by the entry point.
"""

import logging
import sys
from typing import IO, Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "mazerace-console"


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[IO] = None) -> logging.Logger:
    """
    Attach a single console handler to the `mazerace` logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger("mazerace")
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    console = logging.StreamHandler(stream or sys.stderr)
    console.set_name(_HANDLER_NAME)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)
    root.setLevel(level)
    return root
