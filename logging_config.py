"""Logging setup for the ``catalog`` logger tree.

Every module logs through ``logging.getLogger('catalog.<area>')`` so that a
single console handler installed here covers the store, the import pipeline
and the Drive lookup alike.
"""

import logging
import sys

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level="INFO"):
    """Attach a console handler to the ``catalog`` logger and set its level."""
    root_logger = logging.getLogger("catalog")
    root_logger.setLevel(level)

    # create_app may run many times in one process (tests)
    if root_logger.handlers:
        return root_logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(console_handler)
    return root_logger
