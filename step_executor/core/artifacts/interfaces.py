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

"""Port interfaces (Protocols) for Artifact domain.

These define the contracts that infrastructure implementations must satisfy.
"""

import threading
from pathlib import Path
from typing import List, Optional, Protocol, Tuple

from .entities import ArtifactDescriptor
from .value_objects import ArchiveStrategy, StorageLocation


class PathValidator(Protocol):
    """Port for checking that a declared local path can be read."""

    def validate(self, local_path: str) -> None:
        """Validate a local path.

        Args:
            local_path: Filesystem path declared by the artifact.

        Raises:
            ArtifactNotFoundError: If the path is missing or unreadable.
        """
        ...


class Archiver(Protocol):
    """Port for packaging an artifact's content before storage."""

    def archive(
        self,
        local_path: str,
        strategy: ArchiveStrategy,
        cancel_event: Optional[threading.Event] = None,
    ) -> Path:
        """Package the content at local_path.

        Args:
            local_path: File or directory to package.
            strategy: Packaging to apply.
            cancel_event: Set by the caller to abort archive creation.

        Returns:
            Path of the produced archive, or local_path for NONE.

        Raises:
            ArchiveError: If packaging fails.
            ArchiveCancelledError: If cancelled or timed out.
        """
        ...


class LocationAssigner(Protocol):
    """Port for attaching a remote location to an artifact."""

    def assign(
        self,
        record: ArtifactDescriptor,
        default_location: Optional[StorageLocation],
    ) -> ArtifactDescriptor:
        """Attach a storage location.

        Args:
            record: Descriptor to finalize.
            default_location: Step's archive location, used unless the
                descriptor carries its own.

        Returns:
            Copy of record with storage_location set.

        Raises:
            StoreAssignmentError: If no location can be computed.
        """
        ...


class RemoteStoreClient(Protocol):
    """Port for writing artifact content to the remote store."""

    def put(self, path: Path, location: StorageLocation) -> None:
        """Upload a file or directory.

        Args:
            path: Archived or pass-through local path.
            location: Target location.

        Raises:
            ArtifactStoreError: If the upload fails.
        """
        ...


class SnapshotSerializer(Protocol):
    """Port for encoding finalized records for the orchestrator."""

    def encode(self, step_id: str, records: List[ArtifactDescriptor]) -> str:
        """Encode records as a JSON document.

        Raises:
            SerializationError: If encoding fails.
        """
        ...

    def decode(self, document: str) -> Tuple[str, List[ArtifactDescriptor]]:
        """Decode a JSON document produced by encode into (step_id, records).

        Raises:
            SerializationError: If the document is malformed.
        """
        ...
