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

"""Unit tests for InMemoryRemoteStore."""

import pytest

from core.artifacts.exceptions import ArtifactNotFoundError, ArtifactStoreError
from core.artifacts.value_objects import StorageLocation


class TestPut:
    """Tests for uploading content."""

    def test_put_file(self, memory_store, log_file):
        location = StorageLocation(bucket="b", key="wf/build.log")

        memory_store.put(log_file, location)

        assert memory_store.get(location) == b"step finished\n"
        assert memory_store.exists(location)

    def test_put_directory_stores_one_object_per_file(
        self, memory_store, report_dir, report_location
    ) -> None:
        memory_store.put(report_dir, report_location)

        assert memory_store.list_keys("test-bucket") == [
            "test-workflow/report/css/site.css",
            "test-workflow/report/index.html",
        ]
        assert memory_store.exists(report_location)

    def test_put_replaces_existing(self, memory_store, log_file):
        location = StorageLocation(bucket="b", key="wf/build.log")
        memory_store.put(log_file, location)
        log_file.write_text("second run\n")

        memory_store.put(log_file, location)

        assert memory_store.get(location) == b"second run\n"

    def test_put_missing_path_raises(self, memory_store, tmp_path):
        with pytest.raises(ArtifactStoreError, match="Failed to read"):
            memory_store.put(tmp_path / "absent", StorageLocation(bucket="b", key="k"))

    def test_put_unkeyable_file_name_raises_store_error(self, memory_store, tmp_path):
        weird = tmp_path / "weird"
        weird.mkdir()
        (weird / "a\\b.html").write_text("x")
        location = StorageLocation(bucket="b", key="k/weird")

        with pytest.raises(ArtifactStoreError, match="Cannot store"):
            memory_store.put(weird, location)
        assert not memory_store.exists(location)

    def test_put_oversized_object_raises(self, memory_store, tmp_path):
        big = tmp_path / "big.bin"
        big.write_bytes(b"x" * 2048)
        location = StorageLocation(bucket="b", key="wf/big.bin")

        with pytest.raises(ArtifactStoreError, match="exceeds maximum"):
            memory_store.put(big, location)
        assert not memory_store.exists(location)


class TestLookup:
    """Tests for reading back content."""

    def test_get_missing_raises(self, memory_store):
        with pytest.raises(ArtifactNotFoundError):
            memory_store.get(StorageLocation(bucket="b", key="nothing"))

    def test_exists_false_for_unknown(self, memory_store):
        assert not memory_store.exists(StorageLocation(bucket="b", key="nothing"))

    def test_list_keys_scoped_to_bucket(self, memory_store, log_file):
        memory_store.put(log_file, StorageLocation(bucket="one", key="a"))
        memory_store.put(log_file, StorageLocation(bucket="two", key="b"))

        assert memory_store.list_keys("one") == ["a"]

    def test_clear(self, memory_store, log_file):
        location = StorageLocation(bucket="b", key="k")
        memory_store.put(log_file, location)

        memory_store.clear()

        assert not memory_store.exists(location)
