import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the ingestion and normalization pipeline."""

    _logger: logging.Logger = logging.getLogger("bioranges")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Attach a single handler at the given level.

        Logs go to stderr by default so stdout stays free for the CLI's JSON.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
