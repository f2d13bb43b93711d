import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Set up a console logger with the specified name and logging level."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Only attach a handler once, repeated imports would duplicate output
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
