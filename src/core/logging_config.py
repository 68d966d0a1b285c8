"""
Logging configuration for production use.

Console plus rotating file output for the package logger. Every module logs
through logging.getLogger(__name__), so configuring "src" covers them all.
"""

import logging
import logging.handlers
from typing import Optional

from .config import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(logger_name: str = "src", log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger instance.
    
    Args:
        logger_name: Name of the logger to configure
        log_level: Overrides config.log_level when given
    
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    level = (log_level or config.log_level).upper()
    logger.setLevel(level)
    
    # Handlers are attached once; later calls only adjust the level
    if logger.handlers:
        return logger
    
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    file_handler = logging.handlers.RotatingFileHandler(
        config.logs_dir / f"{logger_name}.log",
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    
    return logger
