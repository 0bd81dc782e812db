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

"""In-memory implementation of RemoteStoreClient for dev/test."""

from pathlib import Path
from typing import Dict, List

from core.artifacts.exceptions import ArtifactNotFoundError, ArtifactStoreError
from core.artifacts.value_objects import StorageLocation


class InMemoryRemoteStore:
    """In-memory remote store for development and testing.

    Objects are kept in a dictionary keyed by ``<bucket>/<key>``. A
    directory is stored as one object per file under ``<key>/<relpath>``.
    """

    DEFAULT_MAX_OBJECT_SIZE: int = 50 * 1024 * 1024  # 50 MB

    def __init__(self, max_object_size_bytes: int = DEFAULT_MAX_OBJECT_SIZE) -> None:
        """Initialize in-memory remote store.

        Args:
            max_object_size_bytes: Maximum allowed size of a single object.
        """
        self._storage: Dict[str, bytes] = {}
        self._max_object_size_bytes = max_object_size_bytes

    def put(self, path: Path, location: StorageLocation) -> None:
        """Upload a file or directory.

        Args:
            path: Archived or pass-through local path.
            location: Target location.

        Raises:
            ArtifactStoreError: If the path cannot be read or is too large.
        """
        try:
            if path.is_dir():
                objects = {
                    self._object_id(location.join(file_path.relative_to(path).as_posix())):
                        file_path.read_bytes()
                    for file_path in sorted(path.rglob("*"))
                    if file_path.is_file()
                }
            else:
                objects = {self._object_id(location): path.read_bytes()}
        except OSError as e:
            raise ArtifactStoreError(f"Failed to read {path} for upload: {e}") from e
        except ValueError as e:
            # A file name that cannot be expressed as a key under location
            raise ArtifactStoreError(f"Cannot store {path} under {location}: {e}") from e

        for object_id, data in objects.items():
            if len(data) > self._max_object_size_bytes:
                raise ArtifactStoreError(
                    f"Object {object_id} size {len(data)} bytes exceeds maximum "
                    f"{self._max_object_size_bytes} bytes"
                )
        self._storage.update(objects)

    def get(self, location: StorageLocation) -> bytes:
        """Return the content stored at location.

        Raises:
            ArtifactNotFoundError: If nothing is stored there.
        """
        object_id = self._object_id(location)
        if object_id not in self._storage:
            raise ArtifactNotFoundError(path=object_id)
        return self._storage[object_id]

    def exists(self, location: StorageLocation) -> bool:
        """Check whether an object (or a directory prefix) exists."""
        object_id = self._object_id(location)
        prefix = object_id.rstrip("/") + "/"
        return object_id in self._storage or any(
            stored.startswith(prefix) for stored in self._storage
        )

    def list_keys(self, bucket: str) -> List[str]:
        """Return all keys stored in a bucket, sorted."""
        prefix = f"{bucket}/"
        return sorted(
            object_id[len(prefix):]
            for object_id in self._storage
            if object_id.startswith(prefix)
        )

    def clear(self) -> None:
        """Clear all stored objects (test helper)."""
        self._storage.clear()

    @staticmethod
    def _object_id(location: StorageLocation) -> str:
        return f"{location.bucket}/{location.key}"
