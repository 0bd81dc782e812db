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

"""Artifact domain module for the Step Executor."""

from .value_objects import (
    ArchiveStrategy,
    ArchiveTimeout,
    StorageLocation,
)
from .exceptions import (
    ArtifactDomainError,
    ArtifactNotFoundError,
    ArchiveError,
    ArchiveCancelledError,
    StoreAssignmentError,
    ArtifactStoreError,
    SerializationError,
    ArtifactBatchError,
)
from .entities import ArtifactDescriptor
from .interfaces import (
    Archiver,
    LocationAssigner,
    PathValidator,
    RemoteStoreClient,
    SnapshotSerializer,
)

__all__ = [
    "ArchiveStrategy",
    "ArchiveTimeout",
    "StorageLocation",
    "ArtifactDomainError",
    "ArtifactNotFoundError",
    "ArchiveError",
    "ArchiveCancelledError",
    "StoreAssignmentError",
    "ArtifactStoreError",
    "SerializationError",
    "ArtifactBatchError",
    "ArtifactDescriptor",
    "Archiver",
    "LocationAssigner",
    "PathValidator",
    "RemoteStoreClient",
    "SnapshotSerializer",
]
