import logging


_DEFAULT_LOGGER_NAME = "strsplit"


class SilentHandler(logging.Handler):
    """Handler that drops every record, so the library stays quiet unless a logger is given."""

    def emit(self, record: logging.LogRecord) -> None:
        pass


def get_null_logger(name: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name or _DEFAULT_LOGGER_NAME)
    # Loggers are process-wide singletons, attach the handler only once.
    if not any(isinstance(handler, SilentHandler) for handler in logger.handlers):
        logger.addHandler(SilentHandler())
    logger.propagate = False
    return logger
