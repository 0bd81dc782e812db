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

"""SaveArtifacts command DTO."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional, Tuple

from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.value_objects import StorageLocation


@dataclass(frozen=True)
class SaveArtifactsCommand:
    """Command to save the declared output artifacts of a step.

    Attributes:
        step_id: Identifier of the step that produced the artifacts.
        correlation_id: Request correlation identifier for tracing.
        artifacts: Declared artifacts, in declaration order.
        archive_location: Step's default archive location.
        work_dir: Step volume root; when given it must exist for the
            batch to run at all.
    """

    step_id: str
    correlation_id: str
    artifacts: Tuple[ArtifactDescriptor, ...]
    archive_location: Optional[StorageLocation] = None
    work_dir: Optional[Path] = None

    STEP_ID_MAX_LENGTH: ClassVar[int] = 253
    MAX_ARTIFACTS: ClassVar[int] = 500
    STEP_ID_PATTERN: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")

    def __post_init__(self) -> None:
        """Validate command fields."""
        if not self.step_id or not self.step_id.strip():
            raise ValueError("step_id cannot be empty")
        if len(self.step_id) > self.STEP_ID_MAX_LENGTH:
            raise ValueError(
                f"step_id must be <= {self.STEP_ID_MAX_LENGTH} chars, "
                f"got {len(self.step_id)}"
            )
        if not self.STEP_ID_PATTERN.fullmatch(self.step_id):
            raise ValueError(
                f"step_id must start with a letter or digit and contain only "
                f"letters, digits, '.', '_' or '-': {self.step_id!r}"
            )
        if not isinstance(self.artifacts, tuple):
            object.__setattr__(self, "artifacts", tuple(self.artifacts))
        if len(self.artifacts) > self.MAX_ARTIFACTS:
            raise ValueError(
                f"a step may declare at most {self.MAX_ARTIFACTS} artifacts, "
                f"got {len(self.artifacts)}"
            )
        seen = set()
        for artifact in self.artifacts:
            if artifact.name in seen:
                raise ValueError(f"duplicate artifact name: {artifact.name}")
            seen.add(artifact.name)
