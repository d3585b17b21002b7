import logging
import sys

# Client libraries that log every HTTP request at INFO.
_CHATTY_LOGGERS = ("httpx", "httpcore", "openai", "PIL")


class Log:
    """Centralized logging for the training generator."""

    _logger: logging.Logger = logging.getLogger("training_generator")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach a stdout handler once and quiet client libraries."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        library_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(library_level)

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
