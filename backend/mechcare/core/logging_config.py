# backend/mechcare/core/logging_config.py
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured = False


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }
    level_name = str(level).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    return {
        "version": 1,
        # uvicorn ve kütüphane loggerları susturulmaz
        "disable_existing_loggers": False,
        "formatters": {"plain": {"format": LOG_FORMAT, "datefmt": LOG_DATEFMT}},
        "handlers": handlers,
        "root": {"level": level_name, "handlers": list(handlers)},
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    # süreç başına bir kez; testlerde create_app tekrar tekrar çağrılır
    global _configured
    if _configured:
        return
    logging.config.dictConfig(build_logging_config(level, logfile))
    _configured = True
