from __future__ import annotations
import logging, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_DIR = Path("logs")
LOG_FILE_NAME = "postercrop.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

BANNER = "=" * 75

def build_logger(name: str = "postercrop", log_dir: Optional[Path] = LOG_DIR,
                 level: int = logging.INFO) -> logging.Logger:
    """
    Root application logger. Module loggers ("postercrop.pipeline",
    "postercrop.batch") propagate here. Pass log_dir=None for stdout only.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    fmt = logging.Formatter(LOG_FORMAT)

    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        fh = RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    sh.setLevel(level)
    logger.addHandler(sh)
    return logger

class QtTailHandler(logging.Handler):
    """Forwards formatted records to a callable, typically a Qt signal's emit."""
    def __init__(self, signal_emit):
        super().__init__()
        self.emit_to_gui = signal_emit
        self.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            self.emit_to_gui(line)
        except Exception:
            self.handleError(record)

class log_section:
    def __init__(self, title: str, logger: logging.Logger):
        self.title = title
        self.logger = logger

    def __enter__(self):
        self.logger.info("\n%s\n%s\n%s", BANNER, self.title, BANNER)
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc is not None:
            self.logger.error("%s failed: %s", self.title, exc)
        return False
