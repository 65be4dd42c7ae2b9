import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "booking_grid"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once (e.g. when the app factory runs per test);
    the handler is only installed the first time.
    """
    logger = logging.getLogger("booking_grid")
    logger.setLevel(level.upper())

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
