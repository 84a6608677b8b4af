"""Small helpers shared by tilegrid consumers."""

import time

from tilegrid.tilegrid_logging import create_module_logger

_tilegrid_logger = create_module_logger()


def sleep(secs: float) -> None:
    """Block the calling thread for a (possibly fractional) number of seconds."""
    if secs < 0:
        raise ValueError(f"Sleep duration must be non-negative, got {secs}.")
    _tilegrid_logger.debug(f"sleeping for {secs} seconds")
    time.sleep(secs)
