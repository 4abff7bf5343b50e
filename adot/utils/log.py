#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging Utilities
-----------------
Functions for setting up the application logger.
"""

import logging
import os
import sys
from datetime import datetime

import colorlog

LOGGER_NAME = "adot"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FORMAT = (
    "%(asctime)s - "
    "%(levelname)s - "
    "%(message)s"
)
# Colored format string requires %(log_color)s
COLOR_LOG_FORMAT = (
    "%(log_color)s%(asctime)s - "
    "%(levelname)s%(reset)s - "
    "%(log_color)s%(message)s%(reset)s"
)


def setup_logging(log_dir_base=None, verbose=False):
    """配置日志记录器

    Args:
        log_dir_base: The base directory where the 'logs' subdirectory should be
            created. When None only the console handler is installed; call
            add_file_handler later.
        verbose: If True, set console level to DEBUG, otherwise WARNING.
            The file handler always records DEBUG.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Reconfigure from scratch when called more than once in a process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # --- Console Handler (StreamHandler, stderr) --- #
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(colorlog.ColoredFormatter(
        COLOR_LOG_FORMAT,
        datefmt=DATE_FORMAT,
        reset=True,
        log_colors={
            'DEBUG':    'cyan',
            'INFO':     'green',
            'WARNING':  'yellow',
            'ERROR':    'red',
            'CRITICAL': 'red,bg_white',
        },
        secondary_log_colors={},
        style='%'
    ))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_dir_base is not None:
        add_file_handler(logger, log_dir_base)
    return logger


def add_file_handler(logger, log_dir_base):
    """Adds the daily plain-text log file under ``<log_dir_base>/logs``.

    Returns the log file path, or None when the file could not be opened
    (logging then continues on the console only).
    """
    log_dir = os.path.join(log_dir_base, "logs")
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        print(f"Warning: cannot create log directory {log_dir} - {e}", file=sys.stderr)
        return None

    log_file = os.path.join(log_dir, f"adot_{datetime.now().strftime('%Y%m%d')}.log")
    try:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
    except OSError as e:
        print(f"Warning: cannot open log file {log_file} - {e}", file=sys.stderr)
        return None

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    file_handler.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)
    logger.debug(f"日志将写入文件: {log_file}")
    return log_file
