import logging
from logging.handlers import RotatingFileHandler
import os


# Configure the logger
def setup_logger(
    name: str, log_file: str | None = None, level: int = logging.INFO
) -> logging.Logger:
    """
    Sets up a logger with a specified name, optional log file, and logging level.
    This function configures a logger to write log messages to the console and,
    when a log file is given, to a rotating file as well. The log messages will
    include the timestamp, logger name, log level, and message.

    Calling it twice for the same name returns the already configured logger
    without attaching a second set of handlers.

    Args:
        name (str): The name of the logger.
        log_file (str | None, optional): The file path where the log messages will
            be written. Defaults to None (console only).
        level (int, optional): The logging level (e.g., logging.INFO, logging.DEBUG). Defaults to logging.INFO.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    # Define the log format
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    handlers: list[logging.Handler] = []
    # File handler (with rotation)
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # Add handlers to the logger
    for handler in handlers:
        logger.addHandler(handler)

    return logger
