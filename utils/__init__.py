"""
utils package

Provides shared utilities like configuration management and logging.
"""

from utils.config import config
from utils.logger import app_logger

__all__ = ["config", "app_logger"]
