"""Logging configuration for notomattic.

Modules log through the package logger hierarchy:
    import logging
    log = logging.getLogger(__name__)

The level comes from the NOTOMATTIC_LOG_LEVEL environment variable when set,
otherwise from the caller (the CLI passes the [log].level config value).
"""

import logging
import os
import sys

LEVEL_ENV = "NOTOMATTIC_LOG_LEVEL"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the `notomattic` logger.

    Subsequent calls only adjust the level.
    """
    root_logger = logging.getLogger("notomattic")

    level_name = os.environ.get(LEVEL_ENV, level).upper()
    numeric = getattr(logging, level_name, logging.INFO)
    root_logger.setLevel(numeric)

    if root_logger.handlers:
        for h in root_logger.handlers:
            h.setLevel(numeric)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(name)s: %(message)s"))

    root_logger.addHandler(handler)
    # Avoid duplicate lines when the host app configures the root logger
    root_logger.propagate = False
