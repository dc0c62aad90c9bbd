"""
logger.py

Application logger for BlockWatch: one named logger, stdout handler,
optional rotating log file, level adjustable from the command line.
"""

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List

from utils.config import config


LOGGER_NAME = "BlockWatch"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggerSetup:
    """
    Builds the ``BlockWatch`` logger from the ``logging.*`` config keys.
    Handlers are attached once; later calls reuse the same logger.
    """

    _initialized = False

    @classmethod
    def setup(cls) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        if cls._initialized:
            return logger

        logger.setLevel(cls._level_from_config())
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        for handler in cls._build_handlers():
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        cls._initialized = True
        logger.debug("Logging system initialized")
        return logger

    @classmethod
    def set_verbosity(cls, verbose: bool = False, quiet: bool = False) -> None:
        """Apply -v / -q. Verbose wins when both are given."""
        logger = cls.setup()
        if verbose:
            logger.setLevel(logging.DEBUG)
        elif quiet:
            logger.setLevel(logging.WARNING)

    @staticmethod
    def _level_from_config() -> int:
        name = str(config.get("logging.level", "INFO")).upper()
        return getattr(logging, name, logging.INFO)

    @staticmethod
    def _build_handlers() -> List[logging.Handler]:
        handlers: List[logging.Handler] = []

        if config.get("logging.console_output", True):
            handlers.append(logging.StreamHandler(sys.stdout))

        if config.get("logging.file_output", False):
            logs_path = Path(config.get("paths.logs_dir", "logs"))
            logs_path.mkdir(parents=True, exist_ok=True)
            handlers.append(RotatingFileHandler(
                logs_path / f"blockwatch_{datetime.now().strftime('%Y%m%d')}.log",
                maxBytes=config.get("logging.max_log_size_mb", 10) * 1024 * 1024,
                backupCount=config.get("logging.backup_count", 5),
                encoding="utf-8",
            ))

        return handlers


app_logger = LoggerSetup.setup()
