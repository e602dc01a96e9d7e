"""
Loggers for the Shiba Lambda functions.

Each module logger writes to stdout, which the Lambda runtime ships to the
function's CloudWatch log group. LOG_LEVEL picks the verbosity; device
classification details only appear at DEBUG.
"""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level_from_env() -> int:
    level_name = os.environ.get('LOG_LEVEL', 'INFO').upper()
    return getattr(logging, level_name, logging.INFO)


def get_logger(name: str = None) -> logging.Logger:
    """
    Return the stdout logger for a Shiba module.

    Args:
        name: Module name, usually __name__

    Returns:
        Logger with a single stdout handler at the LOG_LEVEL level
    """
    logger = logging.getLogger(name or __name__)

    # Already configured by an earlier call
    if logger.handlers:
        return logger

    level = _level_from_env()
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.setLevel(level)
    logger.addHandler(stdout_handler)
    # Records would otherwise be printed again by the runtime's root handler
    logger.propagate = False

    return logger
