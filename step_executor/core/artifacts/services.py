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

"""Domain services for Artifact outputs."""

import logging
import os
from pathlib import Path
from typing import Optional

from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.exceptions import ArtifactNotFoundError, StoreAssignmentError
from core.artifacts.value_objects import StorageLocation

logger = logging.getLogger(__name__)


class LocalPathValidator:  # pylint: disable=too-few-public-methods
    """Checks that a declared local path exists and can be read."""

    def validate(self, local_path: str) -> None:
        """Validate a local path.

        Args:
            local_path: Filesystem path declared by the artifact.

        Raises:
            ArtifactNotFoundError: If the path is missing or unreadable.
        """
        path = Path(local_path)
        try:
            readable = path.exists() and os.access(path, os.R_OK)
            # Directories must also be traversable to be archived or uploaded
            if readable and path.is_dir():
                readable = os.access(path, os.X_OK)
        except OSError as e:
            raise ArtifactNotFoundError(path=local_path) from e
        if not readable:
            raise ArtifactNotFoundError(path=local_path)


class DefaultLocationAssigner:  # pylint: disable=too-few-public-methods
    """Attaches a remote location to an artifact descriptor.

    The key is derived from the step's default archive location and the
    artifact name: ``<default.key>/<name><ext>`` where ``ext`` depends on
    the archive strategy. A location already carried by the descriptor
    is an override and wins.
    """

    def assign(
        self,
        record: ArtifactDescriptor,
        default_location: Optional[StorageLocation],
    ) -> ArtifactDescriptor:
        """Attach a storage location.

        Args:
            record: Descriptor to finalize.
            default_location: Step's archive location.

        Returns:
            Copy of record with storage_location set.

        Raises:
            StoreAssignmentError: If no location can be computed.
        """
        if record.storage_location is not None:
            logger.debug(
                "Artifact %s uses override location %s",
                record.name,
                record.storage_location,
            )
            return record.with_storage_location(record.storage_location)

        if default_location is None:
            raise StoreAssignmentError(
                name=record.name,
                reason="no default archive location and no override",
            )

        file_name = f"{record.name}{record.archive_strategy.file_extension}"
        try:
            location = default_location.join(file_name)
        except ValueError as e:
            raise StoreAssignmentError(name=record.name, reason=str(e)) from e

        return record.with_storage_location(location)
