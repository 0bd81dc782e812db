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

"""FastAPI routes for step output operations."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status

from api.logging_utils import create_step_log_file, log_secure_info, remove_step_logger
from api.outputs.dependencies import (
    get_outputs_correlation_id,
    get_publish_outputs_use_case,
)
from api.outputs.schemas import (
    ArtifactFailureResponse,
    OutputsErrorResponse,
    SaveOutputsRequest,
    SaveOutputsResponse,
)
from core.artifacts.exceptions import (
    ArtifactBatchError,
    ArtifactDomainError,
    SerializationError,
)
from core.artifacts.value_objects import StorageLocation
from infra.reporting.mappers import ArtifactMapper
from infra.reporting.payloads import OutputsPayload
from orchestrator.outputs.commands import SaveArtifactsCommand
from orchestrator.outputs.use_cases import PublishOutputsUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/steps", tags=["Step Outputs"])


def _build_error_response(
    error_code: str,
    message: str,
    correlation_id: str,
) -> OutputsErrorResponse:
    return OutputsErrorResponse(
        error=error_code,
        message=message,
        correlation_id=correlation_id,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )


def _build_command(
    step_id: str,
    request: SaveOutputsRequest,
    correlation_id: str,
) -> SaveArtifactsCommand:
    """Translate the request body into a SaveArtifactsCommand.

    Raises:
        ValueError: If any artifact, the default location or the step id is invalid.
    """
    archive_location = None
    if request.archive_location is not None:
        archive_location = StorageLocation(
            bucket=request.archive_location.bucket,
            key=request.archive_location.key,
        )
    return SaveArtifactsCommand(
        step_id=step_id,
        correlation_id=correlation_id,
        artifacts=tuple(ArtifactMapper.to_domain(item) for item in request.artifacts),
        archive_location=archive_location,
        work_dir=Path(request.work_dir) if request.work_dir else None,
    )


@router.post(
    "/{step_id}/outputs",
    response_model=SaveOutputsResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Save and report step outputs",
    description="Archive, upload and report the artifacts declared by a step",
    responses={
        200: {"description": "Outputs reported", "model": SaveOutputsResponse},
        400: {"description": "Invalid request", "model": OutputsErrorResponse},
        500: {"description": "Internal error", "model": OutputsErrorResponse},
    },
)
def save_step_outputs(
    step_id: str,
    request: SaveOutputsRequest,
    use_case: PublishOutputsUseCase = Depends(get_publish_outputs_use_case),
    correlation_id: str = Depends(get_outputs_correlation_id),
) -> SaveOutputsResponse:
    """Save every declared artifact of a step and return the reported document.

    Artifacts that cannot be saved are listed under ``failures`` and left
    out of ``artifacts``; the request itself still succeeds.
    """
    logger.info(
        "Save outputs request: step_id=%s, artifacts=%d, correlation_id=%s",
        step_id,
        len(request.artifacts),
        correlation_id,
    )

    try:
        command = _build_command(step_id, request, correlation_id)
    except ValueError as exc:
        log_secure_info("warning", f"Invalid outputs request for step {step_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_build_error_response(
                "INVALID_REQUEST",
                str(exc),
                correlation_id,
            ).model_dump(),
        ) from exc

    create_step_log_file(command.step_id)
    try:
        result = use_case.execute(command)
        document = OutputsPayload.model_validate_json(result.document)

        return SaveOutputsResponse(
            step_id=result.step_id,
            declared_count=result.declared_count,
            saved_count=result.saved_count,
            artifacts=document.artifacts,
            failures=[
                ArtifactFailureResponse(
                    name=failure.name,
                    error_code=failure.error_code,
                    message=failure.message,
                )
                for failure in result.failures
            ],
        )

    except ArtifactBatchError as exc:
        log_secure_info(
            "error",
            f"Outputs batch failed for step {step_id}",
            correlation_id,
            step_id=command.step_id,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_build_error_response(
                "BATCH_FAILED",
                exc.message,
                correlation_id,
            ).model_dump(),
        ) from exc

    except SerializationError as exc:
        log_secure_info(
            "error",
            f"Outputs report could not be encoded for step {step_id}",
            correlation_id,
            step_id=command.step_id,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_build_error_response(
                "SERIALIZATION_FAILED",
                exc.message,
                correlation_id,
            ).model_dump(),
        ) from exc

    except ArtifactDomainError as exc:
        log_secure_info(
            "error",
            f"Outputs processing error for step {step_id}",
            correlation_id,
            step_id=command.step_id,
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_build_error_response(
                "INTERNAL_ERROR",
                exc.message,
                correlation_id,
            ).model_dump(),
        ) from exc

    finally:
        remove_step_logger(command.step_id)
