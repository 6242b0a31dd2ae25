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
I/O flags for reading FAISS indices from disk.

Two independent option groups are encoded in one integer:

- storage: resident (copy the whole index into memory, the default) or
  memory-mapped (map the file and let the OS page it in)
- access: read-write (the default) or read-only

Flags combine with ``|`` and convert to the engine's integer code with
``int()``. ``IoFlags.MEM_RESIDENT`` is zero, so it is both the default and the
identity for composition.
"""

from enum import IntFlag

import faiss


class IoFlags(IntFlag):
    """Load strategy and access mode for read_index_with_flags."""

    MEM_RESIDENT = 0
    MEM_MAP = faiss.IO_FLAG_MMAP
    READ_ONLY = faiss.IO_FLAG_READ_ONLY

    @classmethod
    def parse(cls, text: str) -> "IoFlags":
        """
        Build flags from a comma separated list of option names.

        Accepted names are ``resident``, ``mmap`` and ``read-only``
        (case-insensitive, ``_`` and ``-`` are interchangeable). An empty
        string gives the default flags.

        Args:
            text: Option names, e.g. "mmap,read-only"

        Returns:
            The combined flags

        Raises:
            ValueError: If an option name is not recognized
        """
        flags = cls.MEM_RESIDENT
        for name in text.split(","):
            key = name.strip().lower().replace("_", "-")
            if not key:
                continue
            if key not in _NAMES:
                raise ValueError(f"Unknown I/O flag: {name.strip()}")
            flags |= _NAMES[key]
        return flags


_NAMES = {
    "resident": IoFlags.MEM_RESIDENT,
    "mem-resident": IoFlags.MEM_RESIDENT,
    "mmap": IoFlags.MEM_MAP,
    "mem-map": IoFlags.MEM_MAP,
    "read-only": IoFlags.READ_ONLY,
    "readonly": IoFlags.READ_ONLY,
}
