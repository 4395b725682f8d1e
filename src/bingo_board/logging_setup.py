from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler


def make_console(colors: str = "auto", *, stderr: bool = False) -> Console:
    """Console honouring the ``auto|always|never`` colour setting."""
    colors = (colors or "auto").strip().lower()
    if colors == "always":
        return Console(stderr=stderr, force_terminal=True)
    if colors == "never":
        return Console(stderr=stderr, no_color=True, highlight=False)
    return Console(stderr=stderr)


def setup_logging(*, level: str = "INFO", log_file: Optional[str] = None, colors: str = "auto") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    handlers: List[logging.Handler] = []
    rich_handler = RichHandler(
        console=make_console(colors, stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    # time and level are rendered by rich itself
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(rich_handler)
    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
        file_handler.setLevel(lvl)
        fmt = logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s')
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)
    logging.basicConfig(level=lvl, handlers=handlers, force=True)
