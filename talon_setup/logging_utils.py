from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .config import DEFAULT_LOG_PATH


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging.

    The log file is the only record of what failed during a run, so it is
    opened in append mode and receives DEBUG records (captured command
    stdout/stderr included); the console only shows `level` and above.

    If the requested file cannot be opened we fall back to the temp dir and
    report the path actually used.

    Returns the actual file path being used.
    """

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_talon_configured", False):
        return getattr(logger, "_talon_log_path", log_path)

    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        chosen_path = log_path
    except OSError:
        fallback = str(Path(tempfile.gettempdir()) / "talon-setup.log")
        file_handler = logging.FileHandler(fallback, mode="a", encoding="utf-8")
        chosen_path = fallback
    file_handler.setFormatter(fmt)
    file_handler.setLevel(logging.DEBUG)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        console.setLevel(level)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_talon_configured", True)
    setattr(logger, "_talon_log_path", chosen_path)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
