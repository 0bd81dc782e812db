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

"""Pydantic models for the orchestrator reporting payload."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.artifacts.value_objects import ArchiveStrategy


class ArtifactPayload(BaseModel):  # pylint: disable=too-few-public-methods
    """Flat JSON representation of one artifact."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Artifact name, unique within the step")
    path: Optional[str] = Field(default=None, description="Local path on the step's volume")
    preview_path: Optional[str] = Field(
        default=None,
        alias="previewPath",
        description="Relative path inside the content used for preview rendering",
    )
    archive: Optional[ArchiveStrategy] = Field(
        default=None, description="Archive strategy: none, tar-gzip or zip"
    )
    bucket: Optional[str] = Field(default=None, description="Remote store bucket")
    key: Optional[str] = Field(default=None, description="Remote store object key")
    optional: Optional[bool] = Field(
        default=None, description="Whether a missing local path is expected"
    )


class OutputsPayload(BaseModel):  # pylint: disable=too-few-public-methods
    """Document reported to the orchestrator for one step."""

    model_config = ConfigDict(populate_by_name=True)

    step_id: str = Field(..., min_length=1, alias="stepId")
    artifacts: List[ArtifactPayload] = Field(default_factory=list)
