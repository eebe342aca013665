import logging
import sys


class Log:
    """Centralized capture-pipeline logging.

    Keyword arguments are attached to the record as ``extra`` and rendered
    after the message as ``key=value`` pairs so attachment identity shows up
    in plain text logs.
    """

    _logger: logging.Logger = logging.getLogger("journal_capture")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and a stderr handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(cls._render(message, kwargs), extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(cls._render(message, kwargs), extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(cls._render(message, kwargs), extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(cls._render(message, kwargs), extra=kwargs)

    @staticmethod
    def _render(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{message} [{pairs}]"
