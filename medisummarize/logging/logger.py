import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Process-wide facade over the ``medisummarize`` logger."""

    _logger: logging.Logger = logging.getLogger("medisummarize")
    _handler: logging.Handler | None = None

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler (stdout by default).

        Calling again only changes the level; the first handler is kept.
        Handlers added by others (test capture, embedding apps) are ignored.
        """
        cls._logger.setLevel(log_level.upper())
        if cls._handler is not None and cls._handler in cls._logger.handlers:
            return
        cls._handler = logging.StreamHandler(stream or sys.stdout)
        cls._handler.setFormatter(logging.Formatter(LOG_FORMAT))
        cls._logger.addHandler(cls._handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
