"""
secretkit.log
Logger helpers shared by the library modules.

Library code only calls get_logger(); nothing is printed unless the
application (or the CLI's --verbose flag) calls setup_logging().
"""

import logging
from typing import Optional

from rich.logging import RichHandler


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'secretkit'."""
    return logging.getLogger(f"secretkit.{name}")


def setup_logging(level=logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the secretkit root logger.

    Args:
        level: Logging level or level name (default WARNING)
        log_file: Optional file path for plain-text file logging
    """
    logger = logging.getLogger("secretkit")
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler = RichHandler(show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    logger.addHandler(handler)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))
        logger.addHandler(fh)
    return logger
