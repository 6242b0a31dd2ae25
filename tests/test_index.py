#!/usr/bin/env python3
#
# Tests for faissio index handles
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
Tests for IndexHandle ownership and wrap_handle.
"""

import faiss
import pytest

from faissio import HandleReleasedError, IndexHandle, wrap_handle

from .conftest import D


def test_attributes(flat_index):
    assert flat_index.d == D
    assert flat_index.ntotal == 5
    assert flat_index.is_trained is True
    assert flat_index.metric_type == faiss.METRIC_L2
    assert not flat_index.released


def test_wrap_handle_takes_ownership():
    native = faiss.IndexFlatIP(4)
    handle = wrap_handle(native)
    assert isinstance(handle, IndexHandle)
    assert handle.native is native
    assert handle.metric_type == faiss.METRIC_INNER_PRODUCT


def test_wrap_handle_rejects_none():
    with pytest.raises(ValueError):
        wrap_handle(None)


def test_release_is_idempotent(flat_index):
    flat_index.release()
    assert flat_index.released
    flat_index.release()
    assert flat_index.released


@pytest.mark.parametrize("attribute", ["native", "d", "ntotal", "is_trained", "metric_type"])
def test_use_after_release(flat_index, attribute):
    flat_index.release()
    with pytest.raises(HandleReleasedError):
        getattr(flat_index, attribute)


def test_context_manager_releases():
    with IndexHandle.from_native(faiss.IndexFlatL2(D)) as handle:
        assert handle.d == D
    assert handle.released


def test_context_manager_releases_on_error():
    with pytest.raises(KeyError):
        with IndexHandle.from_native(faiss.IndexFlatL2(D)) as handle:
            raise KeyError("boom")
    assert handle.released


def test_repr(flat_index):
    assert repr(flat_index) == f"IndexHandle(IndexFlatL2, d={D}, ntotal=5)"
    flat_index.release()
    assert repr(flat_index) == "IndexHandle(released)"
