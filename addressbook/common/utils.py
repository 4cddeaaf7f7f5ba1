"""Common helpers: logging setup and null checks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from addressbook.configs.settings import app_config


def setup_file_logging(log_file: Optional[Path] = None) -> None:
    """Configure file-only logging for the address book.

    Parameters
    ----------
    log_file : Optional[Path], default=None
        Destination of the log. Defaults to ``app_config.LOG_FILE``.
    """
    log_file = Path(log_file or app_config.LOG_FILE)
    log_file.touch(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.FileHandler(log_file, encoding="utf-8")],
        force=True,
    )


def is_any_none(*items: Any) -> bool:
    """Return True if any of the given items is ``None``.

    Examples
    --------
    >>> is_any_none("a", None)
    True
    >>> is_any_none("", 0)
    False
    """
    return any(item is None for item in items)
