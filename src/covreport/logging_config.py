from __future__ import annotations

import logging
from typing import Optional

# cargo and genhtml share the terminal, so plain lines carry the tool name.
_BRIEF_FMT = "covreport: %(levelname)s %(message)s"
_DEBUG_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEBUG_DATEFMT = "%H:%M:%S"


def log_format(level: int) -> logging.Formatter:
    if level <= logging.DEBUG:
        return logging.Formatter(_DEBUG_FMT, datefmt=_DEBUG_DATEFMT)
    return logging.Formatter(_BRIEF_FMT)


def configure_logging(level: Optional[int]) -> None:
    """Configure root logging once; later calls only adjust the level."""
    lvl = level if level is not None else logging.WARNING
    root = logging.getLogger()

    if root.handlers:
        # Already configured (e.g. by pytest or an embedding tool).
        root.setLevel(lvl)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(log_format(lvl))
    root.addHandler(handler)
    root.setLevel(lvl)
