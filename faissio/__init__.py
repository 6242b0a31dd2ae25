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
faissio - persistence for FAISS indices.

Write and read indices as files (optionally memory-mapped or read-only) or
as in-memory buffers, with engine failures reported as structured errors.
"""

import os


def get_version() -> str:
    """
    Read and return the package version from the .version file.

    Returns:
        str: The current version of the package
    """
    version_file = os.path.join(os.path.dirname(__file__), ".version")
    with open(version_file, "r", encoding="utf-8") as f:
        return f.read().strip()


__version__ = get_version()

__author__ = "Ran Aroussi"
__license__ = "Apache-2.0"

from .errors import (  # noqa: E402
    BadFilePath,
    BadPath,
    ErrorCode,
    HandleReleasedError,
    NativeError,
    PersistenceError,
    check,
    faiss_try,
)
from .index import IndexHandle, wrap_handle  # noqa: E402
from .io import (  # noqa: E402
    deserialize,
    read_index,
    read_index_with_flags,
    serialize,
    write_index,
)
from .io_flags import IoFlags  # noqa: E402
from .paths import NativePath, to_native_path  # noqa: E402

__all__ = [
    "BadFilePath",
    "BadPath",
    "ErrorCode",
    "HandleReleasedError",
    "IndexHandle",
    "IoFlags",
    "NativeError",
    "NativePath",
    "PersistenceError",
    "check",
    "deserialize",
    "faiss_try",
    "read_index",
    "read_index_with_flags",
    "serialize",
    "to_native_path",
    "wrap_handle",
    "write_index",
]
