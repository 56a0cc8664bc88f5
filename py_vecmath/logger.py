"""Library logger for py_vecmath.

All modules log through `logger` (name ``py_vecmath``). A console handler prints
``LEVEL:name:message`` at INFO and above; raise the level to DEBUG to see conversion
details such as integer truncation. A DEBUG file log can be switched on and off at runtime.

Examples:
    ```python
    import logging
    from py_vecmath.logger import logger, enable_file_logging, disable_file_logging

    logger.setLevel(logging.DEBUG)
    enable_file_logging("vecmath.log")
    # ... conversions ...
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))

logger: logging.Logger = logging.getLogger('py_vecmath')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

#: Active file handler, None while file logging is off
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "py_vecmath.log") -> None:
    """Append log records of every level to `filename`.

    A previously enabled file log is closed first.
    """
    global file_handler
    disable_file_logging()
    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Detach and close the file log, if any."""
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
