import logging
import sys


class Log:
    """Centralized logging for the detector pipeline.

    Keyword arguments are appended to the message as ``key=value`` pairs so
    session events stay greppable, e.g. ``State -> ready generation=3``.
    """

    _logger: logging.Logger = logging.getLogger("detector")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(cls._with_fields(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(cls._with_fields(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(cls._with_fields(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(cls._with_fields(message, fields))

    @staticmethod
    def _with_fields(message: str, fields: dict[str, object]) -> str:
        if not fields:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} {rendered}"
