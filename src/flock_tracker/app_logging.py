"""Logging setup for the flock_tracker logger tree.

Records from ``flock_tracker.*`` go to stderr through one handler owned by
the ``flock_tracker`` logger, so CLI output on stdout stays clean.
"""

import logging

_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set the flock_tracker level and install its stderr handler once.

    Later calls only change the level. The logger stops propagating so that
    records are not printed twice when the root logger is also configured.
    """
    logger = logging.getLogger("flock_tracker")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
