"""
Project-local logging wrapper that configures handlers and re-exports stdlib logging.
Usage in your code:
    import wall_utils.logging as logging
    logging.setup(level="INFO", log_dir=None)
    logger = logging.getLogger(__name__)

The console handler writes to stderr; stdout is reserved for the solver answer.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional
import logging as _stdlog
from logging.handlers import RotatingFileHandler

from wall_utils.context import LogContextFilter


FORMAT = "%(asctime)s | %(levelname)s | %(name)s | scenario=%(scenario_id)s | %(message)s"


def setup(
    log_dir: Optional[str] = None,
    level: str = "INFO",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> _stdlog.Logger:
    """
    Configure a stderr console handler, plus rotating file handlers when
    log_dir is given. Safe to call multiple times; guarded by a flag on the
    root logger.
    """
    root = _stdlog.getLogger()
    if getattr(root, "_wall_local_logging_initialized", False):
        return root

    lvl = getattr(_stdlog, level.upper(), _stdlog.INFO)
    root.setLevel(lvl)
    filt = LogContextFilter()

    console = _stdlog.StreamHandler(sys.stderr)
    console.setLevel(lvl)
    console.setFormatter(_stdlog.Formatter(FORMAT))
    console.addFilter(filt)
    root.addHandler(console)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        app_path = Path(log_dir) / "app.log"
        err_path = Path(log_dir) / "errors.log"

        file_info = RotatingFileHandler(str(app_path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        file_info.setLevel(lvl)
        file_info.setFormatter(_stdlog.Formatter(FORMAT))
        file_info.addFilter(filt)

        file_err = RotatingFileHandler(str(err_path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        file_err.setLevel(_stdlog.ERROR)
        file_err.setFormatter(_stdlog.Formatter(FORMAT))
        file_err.addFilter(filt)

        root.addHandler(file_info)
        root.addHandler(file_err)

    root._wall_local_logging_initialized = True  # type: ignore[attr-defined]
    return root


# Re-export stdlib logging API so you can use this module like logging
getLogger = _stdlog.getLogger
