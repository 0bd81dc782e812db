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

"""Domain exceptions for Artifact aggregate."""

from typing import Optional


class ArtifactDomainError(Exception):
    """Base exception for all artifact domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize artifact domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class ArtifactNotFoundError(ArtifactDomainError):
    """Declared local path of an artifact is missing or unreadable."""

    def __init__(
        self,
        path: str,
        name: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize artifact not found error.

        Args:
            path: The local path that could not be read.
            name: Name of the artifact, when known.
            correlation_id: Optional correlation ID for tracing.
        """
        prefix = f"Artifact {name} not found" if name else "Artifact not found"
        super().__init__(f"{prefix}: {path}", correlation_id=correlation_id)
        self.path = path
        self.name = name


class ArchiveError(ArtifactDomainError):
    """Packaging an artifact failed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize archive error.

        Args:
            message: Human-readable error description.
            path: Local path that was being archived.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message, correlation_id=correlation_id)
        self.path = path


class ArchiveCancelledError(ArchiveError):
    """Archive creation was cancelled or exceeded its timeout."""


class StoreAssignmentError(ArtifactDomainError):
    """Remote location for an artifact could not be computed."""

    def __init__(
        self,
        name: str,
        reason: str,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize store assignment error.

        Args:
            name: Name of the artifact.
            reason: Why no location could be assigned.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Cannot assign storage location for artifact {name}: {reason}",
            correlation_id=correlation_id,
        )
        self.name = name


class ArtifactStoreError(ArtifactDomainError):
    """Infrastructure-level remote store failure."""


class SerializationError(ArtifactDomainError):
    """Output snapshot could not be encoded or decoded."""


class ArtifactBatchError(ArtifactDomainError):
    """Failure affecting the whole batch of a step (not a single artifact)."""

    def __init__(
        self,
        step_id: str,
        reason: str,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize batch error.

        Args:
            step_id: Step whose batch failed.
            reason: Human-readable failure reason.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Artifact batch failed for step {step_id}: {reason}",
            correlation_id=correlation_id,
        )
        self.step_id = step_id
