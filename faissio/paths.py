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
Path conversion for FAISS engine calls.

The engine takes paths as UTF-8 C strings, so a path is unusable before the
call only if it embeds a NUL byte or cannot be encoded as UTF-8 (for example
bytes paths that are not valid UTF-8). Existence and permissions are left to
the engine and surface as NativeError.
"""

import os
from typing import NewType, Union

from .errors import BadFilePath

NativePath = NewType("NativePath", str)

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def to_native_path(path: PathLike) -> NativePath:
    """
    Validate a path or engine description string for an engine call.

    Args:
        path: Filesystem path or engine-specific description string

    Returns:
        The path as a NUL-free string

    Raises:
        BadFilePath: If the path contains a NUL byte or cannot be encoded
            as UTF-8
    """
    text = os.fsdecode(os.fspath(path))
    if "\0" in text:
        raise BadFilePath(path)
    # The engine bindings take UTF-8 strings; surrogates from undecodable
    # bytes cannot cross
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise BadFilePath(path, "is not representable as UTF-8") from None
    return NativePath(text)
