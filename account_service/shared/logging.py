"""
Logging setup for the account service.

All records go to stdout in one line format. The server and the
MongoDB driver are kept at WARNING so that per-request access lines
and driver heartbeats do not drown the service's own records.
Request bodies and password hashes are never passed to a logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

THIRD_PARTY_LEVELS = {
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.WARNING,
    "pymongo": logging.WARNING,
}


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Install the stdout handler on the root logger.

    Safe to call more than once; each call replaces the previous
    handler, so the service level follows the latest settings.

    Args:
        level: Level name for the service loggers. Unknown names
            fall back to INFO.
    """
    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name, third_party_level in THIRD_PARTY_LEVELS.items():
        logging.getLogger(name).setLevel(third_party_level)
