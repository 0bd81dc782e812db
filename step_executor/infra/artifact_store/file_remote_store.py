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

"""File-based implementation of RemoteStoreClient.

Mirrors the bucket/key layout of an object store on a local or network
filesystem: ``<base_path>/<bucket>/<key>``.
"""

import shutil
from pathlib import Path

from core.artifacts.exceptions import ArtifactNotFoundError, ArtifactStoreError
from core.artifacts.value_objects import StorageLocation


class FileRemoteStore:
    """File-based remote store for single-node deployments and testing."""

    def __init__(self, base_path: Path) -> None:
        """Initialize file-based remote store.

        Args:
            base_path: Directory holding one subdirectory per bucket.

        Raises:
            ValueError: If base_path is not a directory.
        """
        self._base_path = base_path
        self._base_path.mkdir(parents=True, exist_ok=True)
        if not self._base_path.is_dir():
            raise ValueError(f"base_path is not a directory: {base_path}")

    def put(self, path: Path, location: StorageLocation) -> None:
        """Copy a file or directory to its location.

        Existing content at the location is replaced.

        Args:
            path: Archived or pass-through local path.
            location: Target location.

        Raises:
            ArtifactStoreError: If the copy fails.
        """
        target = self._get_object_path(location)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            if path.is_dir():
                if target.exists():
                    shutil.rmtree(target)
                shutil.copytree(path, target)
            else:
                shutil.copyfile(path, target)
        except OSError as e:
            raise ArtifactStoreError(
                f"Failed to write {path} to {location}: {e}"
            ) from e

    def get(self, location: StorageLocation) -> bytes:
        """Return the content of a file object.

        Raises:
            ArtifactNotFoundError: If no file exists at location.
            ArtifactStoreError: If reading fails.
        """
        object_path = self._get_object_path(location)
        if not object_path.is_file():
            raise ArtifactNotFoundError(path=str(location))
        try:
            return object_path.read_bytes()
        except OSError as e:
            raise ArtifactStoreError(
                f"Failed to read object {location}: {e}"
            ) from e

    def exists(self, location: StorageLocation) -> bool:
        """Check if an object exists at location."""
        return self._get_object_path(location).exists()

    def _get_object_path(self, location: StorageLocation) -> Path:
        return self._base_path / location.bucket / location.key
