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

"""Artifact domain entities."""

from dataclasses import dataclass, replace
from typing import ClassVar, Optional

from .value_objects import ArchiveStrategy, StorageLocation


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Declared output artifact of a workflow step.

    Created when the step template is parsed and refined by the saver.
    Once ``storage_location`` is populated the descriptor is a finalized
    record: the artifact exists in the remote store at that location.

    Every change goes through ``dataclasses.replace`` so fields the
    pipeline does not own (``preview_path`` in particular) are carried
    over untouched.

    Attributes:
        name: Identifier of the artifact, unique within the step.
        local_path: Path of the content on the step's volume.
        preview_path: Relative path inside the content used for rendering
            a preview. Opaque metadata, never checked against the filesystem.
        archive_strategy: Packaging applied before storage.
        storage_location: Remote location; set by the template author as an
            override or attached by the location assigner.
        optional: Whether a missing local path is expected.
    """

    name: str
    local_path: str
    preview_path: Optional[str] = None
    archive_strategy: ArchiveStrategy = ArchiveStrategy.NONE
    storage_location: Optional[StorageLocation] = None
    optional: bool = False

    NAME_MAX_LENGTH: ClassVar[int] = 253

    def __post_init__(self) -> None:
        """Validate descriptor fields."""
        if not self.name or not self.name.strip():
            raise ValueError("ArtifactDescriptor name cannot be empty")
        if len(self.name) > self.NAME_MAX_LENGTH:
            raise ValueError(
                f"ArtifactDescriptor name length cannot exceed "
                f"{self.NAME_MAX_LENGTH} characters, got {len(self.name)}"
            )
        if "/" in self.name or "\x00" in self.name:
            raise ValueError(
                f"ArtifactDescriptor name must not contain '/' or null bytes: {self.name!r}"
            )
        if not self.local_path or not self.local_path.strip():
            raise ValueError(
                f"ArtifactDescriptor local_path cannot be empty for artifact: {self.name}"
            )
        if "\x00" in self.local_path:
            raise ValueError("ArtifactDescriptor local_path must not contain null bytes")
        if not isinstance(self.archive_strategy, ArchiveStrategy):
            # Accept raw strings such as "tar-gzip" from templates
            object.__setattr__(
                self, "archive_strategy", ArchiveStrategy(self.archive_strategy)
            )

    @property
    def is_finalized(self) -> bool:
        """Whether a storage location has been attached."""
        return self.storage_location is not None

    def with_storage_location(self, location: StorageLocation) -> "ArtifactDescriptor":
        """Return a copy of this descriptor with ``storage_location`` patched.

        Args:
            location: Remote location to attach.

        Returns:
            New ArtifactDescriptor; all other fields are identical.
        """
        return replace(self, storage_location=location)
