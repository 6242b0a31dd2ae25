#!/usr/bin/env python3
#
# Tests for faissio configuration and logging
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
Tests for environment driven settings and logging configuration.
"""

import logging

from faissio import config
from faissio.logging import configure_logging, reset_logging


def test_defaults():
    settings = config.get_settings()
    assert settings.log_level == "WARNING"
    assert settings.create_dirs is False


def test_environment(monkeypatch):
    monkeypatch.setenv("FAISSIO_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FAISSIO_CREATE_DIRS", "1")
    config.reset()

    settings = config.get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.create_dirs is True


def test_configure_keeps_unset_values():
    config.configure(create_dirs=True)
    assert config.get_settings().create_dirs is True
    assert config.get_settings().log_level == "WARNING"

    config.configure(log_level="ERROR")
    assert config.get_settings().create_dirs is True
    assert config.get_settings().log_level == "ERROR"


def test_reset_discards_changes():
    config.configure(create_dirs=True)
    config.reset()
    assert config.get_settings().create_dirs is False


def test_configure_logging(tmp_path):
    log_file = tmp_path / "faissio.log"

    package_logger = configure_logging("debug", log_file=str(log_file))
    assert package_logger is logging.getLogger("faissio")
    assert package_logger.level == logging.DEBUG
    assert package_logger.propagate is False
    assert len(package_logger.handlers) == 2

    logging.getLogger("faissio.test").debug("hello from faissio")
    for handler in package_logger.handlers:
        handler.flush()
    assert "hello from faissio" in log_file.read_text()


def test_configure_logging_leaves_root_alone():
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    saved_handlers = root.handlers[:]
    saved_level = root.level

    try:
        configure_logging("DEBUG")
        assert root.handlers == saved_handlers
        assert root.level == saved_level
    finally:
        root.removeHandler(sentinel)


def test_configure_logging_replaces_own_handlers():
    package_logger = logging.getLogger("faissio")
    own = logging.NullHandler()
    package_logger.addHandler(own)

    try:
        configure_logging("INFO")
        configure_logging("WARNING")
        assert own in package_logger.handlers
        assert len(package_logger.handlers) == 2
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.removeHandler(own)


def test_configure_logging_unknown_level():
    assert configure_logging("chatty").level == logging.INFO


def test_reset_logging():
    configure_logging("DEBUG")
    reset_logging()
    package_logger = logging.getLogger("faissio")
    assert package_logger.handlers == []
    assert package_logger.propagate is True
    assert package_logger.level == logging.NOTSET
