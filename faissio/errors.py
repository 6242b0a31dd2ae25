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
faissio error model.

Every call into the FAISS engine is routed through :func:`faiss_try`, which
turns engine exceptions into a :class:`NativeError` carrying a status code.
:func:`check` does the same for raw integer codes. Status codes mirror the
ones exposed by the FAISS C API.
"""

from enum import IntEnum
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(IntEnum):
    """Status codes returned by FAISS engine calls."""

    OK = 0
    UNKNOWN_EXCEPT = -1
    FAISS_EXCEPT = -2
    STD_EXCEPT = -4


_CODE_DESCRIPTIONS = {
    ErrorCode.UNKNOWN_EXCEPT: "unknown exception raised by the FAISS engine",
    ErrorCode.FAISS_EXCEPT: "FAISS exception",
    ErrorCode.STD_EXCEPT: "standard library exception raised by the FAISS engine",
}


class PersistenceError(Exception):
    """Base class for all faissio errors."""


class BadFilePath(PersistenceError, ValueError):
    """Raised when a path cannot be handed to the engine as a C string."""

    def __init__(self, path: Any, reason: str = "contains a NUL byte"):
        self.path = path
        self.reason = reason
        super().__init__(f"Path {reason}: {path!r}")


# Same error, named for non-file descriptors
BadPath = BadFilePath


class NativeError(PersistenceError, RuntimeError):
    """
    Raised when a FAISS engine call reports a non-success status.

    Attributes:
        code: The engine status code
        message: Best-effort description taken from the engine
    """

    def __init__(self, code: int, message: Optional[str] = None):
        try:
            code = ErrorCode(code)
        except ValueError:
            pass
        self.code = code
        self.message = message or _CODE_DESCRIPTIONS.get(code, f"status code {int(code)}")
        super().__init__(f"FAISS error ({int(code)}): {self.message}")


class HandleReleasedError(PersistenceError):
    """Raised when an index handle is used after its native index was released."""


def check(code: int, message: Optional[str] = None) -> None:
    """
    Interpret an engine status code.

    Args:
        code: Status returned by the engine
        message: Engine description of the failure, if any

    Raises:
        NativeError: If code is anything but ErrorCode.OK
    """
    if code != ErrorCode.OK:
        raise NativeError(code, message)


def _engine_message(error: BaseException) -> Optional[str]:
    # Only the first line of an engine message is kept
    text = str(error).strip()
    if not text:
        return None
    return text.splitlines()[0].strip()


def faiss_try(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run a FAISS engine call and translate its failures into NativeError.

    Args:
        func: The engine function to call
        *args: Positional arguments for func
        **kwargs: Keyword arguments for func

    Returns:
        Whatever func returns on success

    Raises:
        NativeError: If the engine call fails
    """
    try:
        return func(*args, **kwargs)
    except NativeError:
        raise
    except RuntimeError as e:
        raise NativeError(ErrorCode.FAISS_EXCEPT, _engine_message(e)) from e
    except (MemoryError, OSError) as e:
        raise NativeError(ErrorCode.STD_EXCEPT, _engine_message(e)) from e
