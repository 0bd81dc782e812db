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

"""Response DTOs for outputs orchestrator use cases."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from core.artifacts.entities import ArtifactDescriptor


@dataclass(frozen=True)
class ArtifactFailure:
    """An artifact excluded from the outputs, and why."""

    name: str
    error_code: str
    message: str


@dataclass
class SaveArtifactsResult:
    """Result DTO for SaveArtifactsUseCase and UploadArtifactsUseCase."""

    step_id: str
    correlation_id: str
    declared_count: int
    artifacts: List[ArtifactDescriptor] = field(default_factory=list)
    failures: List[ArtifactFailure] = field(default_factory=list)
    staged_paths: Dict[str, Path] = field(default_factory=dict)

    @property
    def saved_count(self) -> int:
        """Number of finalized records."""
        return len(self.artifacts)

    @property
    def all_saved(self) -> bool:
        """Whether every declared artifact was saved."""
        return self.saved_count == self.declared_count


@dataclass(frozen=True)
class OutputSnapshot:
    """Independent copy of a step's finalized records.

    Shares no objects with the saver's records.
    """

    step_id: str
    artifacts: Tuple[ArtifactDescriptor, ...]


@dataclass
class PublishOutputsResult:
    """Result DTO for PublishOutputsUseCase."""

    step_id: str
    correlation_id: str
    declared_count: int
    snapshot: OutputSnapshot
    document: str
    failures: List[ArtifactFailure] = field(default_factory=list)

    @property
    def saved_count(self) -> int:
        """Number of reported artifacts."""
        return len(self.snapshot.artifacts)
