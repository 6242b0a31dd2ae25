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
faissio index persistence.

File codec:
- write_index: write an index to a named file
- read_index / read_index_with_flags: read an index from a named file,
  optionally memory-mapped and/or read-only

Buffer codec:
- serialize: copy an index's persisted form into a bytes object
- deserialize: rebuild an index from a bytes-like object

The byte format is FAISS's own, so files and buffers are interchangeable
with faiss.write_index / faiss.read_index from the same FAISS version.
"""

import os
import logging
from typing import Union

import numpy as np
import faiss

from .config import get_settings
from .errors import faiss_try
from .index import IndexHandle, wrap_handle
from .io_flags import IoFlags
from .paths import PathLike, to_native_path

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, np.ndarray]


def write_index(index: IndexHandle, fname: PathLike) -> None:
    """
    Write an index to a file.

    The file is created or overwritten. A failed write may leave a partial
    file behind.

    Args:
        index: The index to save
        fname: Output file name

    Raises:
        BadFilePath: If fname contains a NUL byte
        NativeError: If the engine fails to write the index
    """
    path = to_native_path(fname)
    native = index.native

    if get_settings().create_dirs:
        _ensure_directory_exists(path)

    faiss_try(faiss.write_index, native, path)
    logger.info(f"Saved index to {path} (d={native.d}, ntotal={native.ntotal})")


def read_index(fname: PathLike) -> IndexHandle:
    """
    Read an index from a file, loading it fully into memory.

    Args:
        fname: Path to the index file

    Returns:
        A handle owning the loaded index

    Raises:
        BadFilePath: If fname contains a NUL byte
        NativeError: If the engine fails to read the index
    """
    return read_index_with_flags(fname, IoFlags.MEM_RESIDENT)


def read_index_with_flags(fname: PathLike, io_flags: IoFlags) -> IndexHandle:
    """
    Read an index from a file with explicit I/O flags.

    IoFlags.MEM_MAP maps the file instead of copying it, which keeps large
    indices out of process memory for the index types FAISS can map.

    Args:
        fname: Path to the index file
        io_flags: Load strategy and access mode

    Returns:
        A handle owning the loaded index

    Raises:
        BadFilePath: If fname contains a NUL byte
        NativeError: If the engine fails to read the index
    """
    path = to_native_path(fname)
    flags = IoFlags(io_flags)

    native = faiss_try(faiss.read_index, path, int(flags))
    handle = wrap_handle(native)
    logger.info(
        f"Loaded {type(native).__name__} from {path} with flags {int(flags):#x} "
        f"(d={native.d}, ntotal={native.ntotal})"
    )
    return handle


def serialize(index: IndexHandle) -> bytes:
    """
    Serialize an index into an in-memory buffer.

    Args:
        index: The index to serialize

    Returns:
        bytes holding the index in FAISS's persisted format

    Raises:
        NativeError: If the engine fails to serialize the index
    """
    native = index.native
    buffer = None
    try:
        # Engine-allocated array, copied out and dropped on every path
        buffer = faiss_try(faiss.serialize_index, native)
        data = buffer.tobytes()
    finally:
        del buffer

    logger.debug(f"Serialized {type(native).__name__} into {len(data)} bytes")
    return data


def deserialize(data: BytesLike) -> IndexHandle:
    """
    Rebuild an index from a buffer produced by serialize().

    The buffer is only read during the call and is not retained. Contiguous
    buffers are read in place; a non-contiguous view (e.g. a strided
    memoryview) is first copied into one contiguous run of bytes.

    Args:
        data: Serialized index bytes (any object supporting the buffer protocol)

    Returns:
        A handle owning the rebuilt index

    Raises:
        NativeError: If the engine cannot read an index from the buffer
    """
    buffer = memoryview(data)
    if not buffer.c_contiguous:
        buffer = memoryview(buffer.tobytes())
    view = np.frombuffer(buffer, dtype=np.uint8)
    size = view.size
    try:
        native = faiss_try(faiss.deserialize_index, view)
    finally:
        del view, buffer

    handle = wrap_handle(native)
    logger.debug(
        f"Deserialized {type(native).__name__} from {size} bytes "
        f"(d={native.d}, ntotal={native.ntotal})"
    )
    return handle


def _ensure_directory_exists(file_path: str) -> None:
    """Ensure the directory for a file path exists."""
    dirname = os.path.dirname(file_path)
    if dirname and not os.path.isdir(dirname):
        os.makedirs(dirname, exist_ok=True)
