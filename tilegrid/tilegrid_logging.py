"""Logging functionality for tilegrid.

It is modeled on the default `logging approach that comes with Python
<https://docs.python.org/library/logging.html>`_. All loggers hang off a single
package root logger, which carries a ``NullHandler`` so the library stays quiet
until an application opts in with :func:`log_to_stderr`.
"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO, WARNING

__all__ = [
    "DEBUG",
    "INFO",
    "LOGGER_NAME",
    "WARNING",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]

LOGGER_NAME = "TILEGRID"
DEFAULT_FORMAT = "%(levelname)s %(name)s %(asctime)s - %(message)s"


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Create a module logger.

    Args:
        name: name of the module; inferred from the calling module if None
    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        name = mod.__name__
    return get_module_logger(name)


def get_module_logger(name: str) -> logging.Logger:
    """Return the logger for a module, namespaced under the package root logger.

    Args:
        name: name of the module
    """
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def method_logger(name: str):
    """Decorator that logs each call of a method at DEBUG level.

    Args:
        name: name of the module in which the method is defined
    """
    logger = get_module_logger(name)
    classname = inspect.getouterframes(inspect.currentframe())[1][3]

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # args[0] is the instance
            logger.debug(
                f"calling {classname}.{func.__name__} with {args[1:]} and {kwargs}"
            )
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def function_logger(name: str):
    """Decorator that logs each call of a module-level function at DEBUG level.

    Args:
        name: name of the module in which the function is defined
    """
    logger = get_module_logger(name)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def get_rootlogger() -> logging.Logger:
    """Return the package root logger."""
    return _rootlogger


def log_to_stderr(level: int | None = None, pass_root_logger_level: bool = False):
    """Attach a stream handler writing formatted records to stderr.

    Args:
        level: level for the package root logger; left unchanged if None
        pass_root_logger_level: also apply ``level`` to the Python root logger
    """
    logger = get_rootlogger()

    if not any(getattr(h, "_tilegrid_stderr", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        handler._tilegrid_stderr = True
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
        if pass_root_logger_level:
            logging.getLogger().setLevel(level)

    return logger


_rootlogger = logging.getLogger(LOGGER_NAME)
_rootlogger.addHandler(logging.NullHandler())
