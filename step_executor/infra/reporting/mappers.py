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

"""Mappers for domain ↔ reporting payload conversion.

Explicit mapping between domain entities and payload models.
No domain logic lives here, only data transformation.
"""

from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.value_objects import ArchiveStrategy, StorageLocation

from .payloads import ArtifactPayload


class ArtifactMapper:
    """Mapper for ArtifactDescriptor ↔ ArtifactPayload."""

    @staticmethod
    def to_payload(record: ArtifactDescriptor) -> ArtifactPayload:
        """Convert an ArtifactDescriptor to its payload model.

        Args:
            record: ArtifactDescriptor domain entity.

        Returns:
            ArtifactPayload instance.
        """
        location = record.storage_location
        return ArtifactPayload(
            name=record.name,
            path=record.local_path,
            preview_path=record.preview_path,
            archive=record.archive_strategy,
            bucket=location.bucket if location is not None else None,
            key=location.key if location is not None else None,
            optional=True if record.optional else None,
        )

    @staticmethod
    def to_domain(payload: ArtifactPayload) -> ArtifactDescriptor:
        """Convert an ArtifactPayload to an ArtifactDescriptor.

        Args:
            payload: ArtifactPayload instance.

        Returns:
            ArtifactDescriptor domain entity.

        Raises:
            ValueError: If the payload does not describe a valid artifact.
        """
        if (payload.bucket is None) != (payload.key is None):
            raise ValueError(
                f"Artifact {payload.name} must define both bucket and key, or neither"
            )
        location = None
        if payload.bucket is not None and payload.key is not None:
            location = StorageLocation(bucket=payload.bucket, key=payload.key)

        return ArtifactDescriptor(
            name=payload.name,
            local_path=payload.path or "",
            preview_path=payload.preview_path,
            archive_strategy=payload.archive or ArchiveStrategy.NONE,
            storage_location=location,
            optional=bool(payload.optional),
        )
