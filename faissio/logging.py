#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# FAISS index persistence: file and buffer codecs
#
# Copyright (C) 2025 Ran Aroussi
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
faissio logging configuration.

Library modules log through child loggers of "faissio" and install no
handlers. configure_logging() attaches handlers to the "faissio" logger only,
so an application's root logger is never touched.
"""

import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "faissio"

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(PACKAGE_LOGGER)

# Handlers installed by configure_logging, removed again on reconfiguration
_installed_handlers: List[logging.Handler] = []


def configure_logging(log_level: str = "INFO",
                      log_file: Optional[str] = None,
                      log_format: Optional[str] = None,
                      stream=None) -> logging.Logger:
    """
    Send faissio log records to stdout (and optionally a file).

    Calling it again replaces the handlers from the previous call; handlers
    added by the application are kept. Records stop propagating to the root
    logger while faissio's own handlers are installed.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown names fall back to INFO
        log_file: Path to log file (None for console only)
        log_format: Custom log format string
        stream: Console stream (defaults to sys.stdout at call time)

    Returns:
        The configured "faissio" logger
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    reset_logging()

    formatter = logging.Formatter(log_format or DEFAULT_LOG_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed_handlers.append(handler)

    logger.setLevel(level)
    logger.propagate = False

    logger.debug(f"Logging configured with level: {logging.getLevelName(level)}")
    return logger


def reset_logging() -> None:
    """Remove the handlers installed by configure_logging and restore propagation."""
    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
