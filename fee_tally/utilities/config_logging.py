# fee_tally/utilities/config_logging.py
from __future__ import annotations

import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMATTERS: Dict[str, Dict[str, str]] = {
    "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    "verbose": {
        "format": "%(asctime)s %(levelname)s %(name)s "
        "[%(process)d:%(threadName)s] %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
}


def build_logging_config(
    log_file: Optional[Path] = None, console_level: str = "WARNING"
) -> Dict[str, Any]:
    """Return a ``dictConfig`` mapping; the rotating file handler is added only if ``log_file`` is set."""
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": console_level,
            "formatter": "simple",
            "stream": "ext://sys.stderr",
        },
    }
    if log_file is not None:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": str(log_file),
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": LOG_FORMATTERS,
        "handlers": handlers,
        "loggers": {
            # root logger
            "": {
                "level": "DEBUG",
                "handlers": list(handlers),
            },
        },
    }


def configure_logging(
    log_file: Optional[Path] = None, *, verbose: bool = False
) -> None:
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    console_level = "INFO" if verbose else "WARNING"
    logging.config.dictConfig(build_logging_config(log_file, console_level))
