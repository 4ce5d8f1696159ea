import logging

_ROOT_LOGGER_NAME = "kiln"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> None:
    """
    Attach a stream handler to the kiln logger in case the app didn't configure logging.
    Safe to call multiple times.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
