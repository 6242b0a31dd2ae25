#!/usr/bin/env python3
#
# Pytest configuration and fixtures for faissio tests
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
Pytest configuration and fixtures for faissio tests
"""

import logging

import faiss
import numpy as np
import pytest

from faissio import IndexHandle
from faissio import config
from faissio.logging import reset_logging

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

D = 8

# Five 8-dimensional vectors
SOME_DATA = np.array(
    [
        7.5, -7.5, 7.5, -7.5, 7.5, 7.5, 7.5, 7.5,
        -1., 1., 1., 1., 1., 1., 1., -1.,
        4., -4., -8., 1., 1., 2., 4., -1.,
        8., 8., 10., -10., -10., 10., -10., 10.,
        16., 16., 32., 25., 20., 20., 40., 15.,
    ],
    dtype=np.float32,
).reshape(5, D)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test with settings taken from a clean environment."""
    monkeypatch.delenv("FAISSIO_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FAISSIO_CREATE_DIRS", raising=False)
    config.reset()
    yield
    config.reset()
    reset_logging()


@pytest.fixture
def flat_index():
    """An owned flat L2 index holding SOME_DATA."""
    native = faiss.IndexFlatL2(D)
    native.add(SOME_DATA)
    handle = IndexHandle.from_native(native)
    yield handle
    handle.release()


@pytest.fixture
def empty_index():
    """An owned flat L2 index with no vectors."""
    handle = IndexHandle.from_native(faiss.IndexFlatL2(D))
    yield handle
    handle.release()


@pytest.fixture
def index_file(tmp_path, flat_index):
    """Path of a file holding flat_index, written with the engine directly."""
    path = tmp_path / "test_write_read.index"
    faiss.write_index(flat_index.native, str(path))
    return path
