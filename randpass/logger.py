"""Logging setup for RandPass entry points"""

import logging

LOGGER_NAME = "randpass"


def setup_logger(level=logging.WARNING, log_file=None):
    """
    Set up the logging system

    Args:
        level: Minimum level to emit
        log_file: Optional path of a file to log to as well

    Returns:
        Logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Calling this twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
