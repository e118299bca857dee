"""
Logging utilities for flygff.
"""

import sys
import logging

DETAILED_FORMAT = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def setup_logging(debug=False, log_file=None, verbose=False, quiet=False):
    """
    Configure the root logger for a conversion run.

    Console output goes to stderr so items written to stdout stay clean.
    A log file, if given, always gets the detailed format.
    """
    if debug:
        log_level = logging.DEBUG
        log_format = DETAILED_FORMAT
    elif verbose:
        log_level = logging.INFO
        log_format = '%(asctime)s - %(levelname)s - %(message)s'
    elif quiet:
        log_level = logging.WARNING
        log_format = '%(levelname)s: %(message)s'
    else:
        log_level = logging.INFO
        log_format = '%(message)s'

    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        logger.addHandler(file_handler)

    return logger
