# ==============================================================================
# XIVPATH - LOGGING SETUP
# ==============================================================================
# Configures the standard logging module for the command line tools.
#
# Library modules only create loggers (logging.getLogger(__name__)); the
# entry point decides where records go by calling setup_logging() once.
#
# Usage:
#   from xivpath.core.logging_setup import setup_logging
#   setup_logging("DEBUG", log_file=Paths.get_log_file_path())
# ==============================================================================

import logging
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[str, int] = logging.WARNING,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure console (and optionally file) logging for the xivpath package.

    Calling this again replaces the handlers from the previous call.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant
        log_file: Optional file that receives DEBUG and above

    Returns:
        The configured 'xivpath' logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger('xivpath')
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.setLevel(logging.DEBUG)
    else:
        root.setLevel(level)

    root.propagate = False
    return root
