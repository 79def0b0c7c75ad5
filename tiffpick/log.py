# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
"""Logging helpers.

The library itself only ever emits DEBUG traces through loggers under
the "tiffpick" namespace; it never configures handlers. Applications
that want to see those traces can call setup_logger().
"""
import logging

ROOT_LOGGER_NAME = "tiffpick"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

def get_logger (name = ROOT_LOGGER_NAME):
    """Return a logger under the tiffpick namespace."""
    if name != ROOT_LOGGER_NAME \
            and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = "{}.{}".format(ROOT_LOGGER_NAME, name)

    return logging.getLogger(name)

def setup_logger (debug = False):
    """Configure the tiffpick logger to write to stderr."""
    logger = get_logger()

    if debug:
        log_level = logging.DEBUG
        log_format = "%(levelname)-5s  %(message)s"
    else:
        log_level = logging.INFO
        log_format = "%(message)s"

    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(log_format))
    logger.setLevel(log_level)
    stream.setLevel(log_level)
    logger.addHandler(stream)

    return logger
