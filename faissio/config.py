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
faissio configuration.

Settings are read from the environment when the package is imported and can
be changed at runtime with configure():

- FAISSIO_LOG_LEVEL: log level used by the command line tool (default WARNING)
- FAISSIO_CREATE_DIRS: set to "1" to create missing parent directories
  before writing an index (default off)
"""

import os
from typing import Optional


class Settings:
    """Runtime settings for the persistence layer."""

    def __init__(self):
        """Initialize settings from environment variables."""
        self.log_level = os.environ.get("FAISSIO_LOG_LEVEL", "WARNING")
        self.create_dirs = os.environ.get("FAISSIO_CREATE_DIRS", "0") == "1"

    def configure(
        self,
        create_dirs: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        """Update settings; arguments left as None keep their current value."""
        if create_dirs is not None:
            self.create_dirs = create_dirs
        if log_level is not None:
            self.log_level = log_level


_settings = Settings()


def get_settings() -> Settings:
    """Return the global settings instance."""
    return _settings


def configure(
    create_dirs: Optional[bool] = None,
    log_level: Optional[str] = None,
) -> None:
    """
    Configure the global settings.

    Args:
        create_dirs: Create missing parent directories in write_index
        log_level: Log level used by the command line tool
    """
    _settings.configure(create_dirs=create_dirs, log_level=log_level)


def reset() -> None:
    """Discard runtime changes and re-read the environment."""
    global _settings
    _settings = Settings()
