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

"""Pydantic schemas for Step Outputs API requests and responses."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from infra.reporting.payloads import ArtifactPayload


class ArchiveLocationRequest(BaseModel):
    """Default remote location for artifacts without an explicit one."""

    bucket: str = Field(..., min_length=1, description="Remote store bucket")
    key: str = Field(..., min_length=1, description="Key prefix for the step's artifacts")


class SaveOutputsRequest(BaseModel):
    """Request model for saving and reporting a step's artifacts."""

    model_config = ConfigDict(populate_by_name=True)

    artifacts: List[ArtifactPayload] = Field(
        default_factory=list, description="Artifacts declared by the step"
    )
    archive_location: Optional[ArchiveLocationRequest] = Field(
        default=None,
        alias="archiveLocation",
        description="Default location used when an artifact carries none",
    )
    work_dir: Optional[str] = Field(
        default=None,
        alias="workDir",
        description="Step work directory that must exist for the batch to run",
    )


class ArtifactFailureResponse(BaseModel):
    """One artifact that was declared but not saved."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Artifact name")
    error_code: str = Field(..., alias="errorCode", description="Failure code")
    message: str = Field(..., description="Failure description")


class SaveOutputsResponse(BaseModel):
    """Response model for a completed save-and-report cycle (200 OK)."""

    model_config = ConfigDict(populate_by_name=True)

    step_id: str = Field(..., alias="stepId", description="Step identifier")
    declared_count: int = Field(..., alias="declaredCount", description="Artifacts declared")
    saved_count: int = Field(..., alias="savedCount", description="Artifacts saved")
    artifacts: List[ArtifactPayload] = Field(
        default_factory=list, description="Reported artifacts with their final locations"
    )
    failures: List[ArtifactFailureResponse] = Field(
        default_factory=list, description="Artifacts skipped with their reason"
    )


class OutputsErrorResponse(BaseModel):
    """Standard error response body for step outputs operations."""

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    correlation_id: str = Field(..., description="Request correlation ID")
    timestamp: str = Field(..., description="Error timestamp (ISO 8601)")
