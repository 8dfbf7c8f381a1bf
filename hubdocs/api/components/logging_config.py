"""Logging configuration for hubdocs.

Schema inference degrades silently and logs each failure at debug level. A
hub whose model cannot be resolved is inspected once per method that uses it,
so the same degradation can be reported many times; the filter below keeps
the first record per type.
"""

import logging
import threading
from typing import Set

HUBDOCS_LOGGER = "hubdocs"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class SchemaDegradationFilter(logging.Filter):
    """Filter that suppresses repeated degradation records for the same type.

    Records without a ``type_name`` attribute always pass.
    """

    def __init__(self) -> None:
        super().__init__()
        self._seen: Set[str] = set()
        self._lock = threading.Lock()

    def filter(self, record: logging.LogRecord) -> bool:
        type_name = getattr(record, "type_name", None)
        if type_name is None:
            return True
        with self._lock:
            if type_name in self._seen:
                return False
            self._seen.add(type_name)
        return True

    def reset(self) -> None:
        with self._lock:
            self._seen.clear()


class LoggingConfigurator:
    """Sets up the ``hubdocs`` logger."""

    @staticmethod
    def configure(level: str = "info") -> logging.Logger:
        """Attach a formatted handler and the degradation filter once.

        Args:
            level: Level name ("debug", "info", ...); unknown names fall back to info

        Returns:
            The configured ``hubdocs`` logger
        """
        logger = logging.getLogger(HUBDOCS_LOGGER)
        logger.setLevel(_LEVELS.get(level.lower(), logging.INFO))

        if not any(getattr(h, "_hubdocs_handler", False) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            # Records from child loggers only pass through handler filters
            handler.addFilter(SchemaDegradationFilter())
            handler._hubdocs_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)

        return logger


__all__ = ["SchemaDegradationFilter", "LoggingConfigurator"]
