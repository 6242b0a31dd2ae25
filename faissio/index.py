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
Owned handles for native FAISS indices.

An IndexHandle is the single owner of one engine index. Indices produced by
the file and buffer codecs are wrapped with :func:`wrap_handle` right after
the engine call succeeds; the handle keeps the only reference and drops it
on release(), at which point the engine frees the index.
"""

import logging
from typing import Any, Optional

from .errors import HandleReleasedError

logger = logging.getLogger(__name__)


class IndexHandle:
    """
    Exclusive owner of a native FAISS index.

    The handle can be used as a context manager to release the index when
    the block exits. Pickling goes through the engine's own serialization.
    """

    def __init__(self, native: Any):
        if native is None:
            raise ValueError("Cannot wrap a null index")
        self._native: Optional[Any] = native

    @classmethod
    def from_native(cls, native: Any) -> "IndexHandle":
        """
        Take ownership of an engine index.

        The caller must not keep using ``native`` afterwards; the handle is
        now responsible for releasing it.
        """
        return cls(native)

    @property
    def native(self) -> Any:
        """The underlying engine index."""
        if self._native is None:
            raise HandleReleasedError("Index handle has already been released")
        return self._native

    @property
    def d(self) -> int:
        """Vector dimensionality."""
        return self.native.d

    @property
    def ntotal(self) -> int:
        """Number of indexed vectors."""
        return self.native.ntotal

    @property
    def is_trained(self) -> bool:
        return bool(self.native.is_trained)

    @property
    def metric_type(self) -> int:
        return self.native.metric_type

    @property
    def released(self) -> bool:
        return self._native is None

    def release(self) -> None:
        """Release the native index. Calling this more than once does nothing."""
        if self._native is None:
            return
        native, self._native = self._native, None
        logger.debug(f"Releasing {type(native).__name__} (d={native.d}, ntotal={native.ntotal})")
        del native

    def __enter__(self) -> "IndexHandle":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    def __reduce__(self):
        from .io import deserialize, serialize

        return (deserialize, (serialize(self),))

    def __repr__(self) -> str:
        if self._native is None:
            return "IndexHandle(released)"
        return (
            f"IndexHandle({type(self._native).__name__}, "
            f"d={self._native.d}, ntotal={self._native.ntotal})"
        )


def wrap_handle(native: Any) -> IndexHandle:
    """
    Wrap an index returned by a successful engine call into an owned handle.

    Args:
        native: Engine index produced by read or deserialize

    Returns:
        IndexHandle that exclusively owns the index

    Raises:
        ValueError: If the engine returned no index
    """
    return IndexHandle.from_native(native)
