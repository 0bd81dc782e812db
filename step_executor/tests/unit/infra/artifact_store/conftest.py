# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
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

"""Shared fixtures for remote store tests."""

import pytest

from core.artifacts.value_objects import StorageLocation
from infra.artifact_store.file_remote_store import FileRemoteStore
from infra.artifact_store.in_memory_remote_store import InMemoryRemoteStore


@pytest.fixture
def memory_store() -> InMemoryRemoteStore:
    """In-memory store with a small object limit."""
    return InMemoryRemoteStore(max_object_size_bytes=1024)


@pytest.fixture
def file_store(tmp_path) -> FileRemoteStore:
    """File store rooted in a temporary directory."""
    return FileRemoteStore(base_path=tmp_path / "store")


@pytest.fixture
def report_location() -> StorageLocation:
    """Location of the report artifact."""
    return StorageLocation(bucket="test-bucket", key="test-workflow/report")
