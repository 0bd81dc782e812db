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

"""UploadArtifacts use case implementation."""

import threading
from typing import Optional

from api.logging_utils import log_secure_info
from core.artifacts.exceptions import ArtifactStoreError
from core.artifacts.interfaces import RemoteStoreClient

from ..commands.save_artifacts import SaveArtifactsCommand
from ..dtos import ArtifactFailure, SaveArtifactsResult
from .save_artifacts import SaveArtifactsUseCase


class UploadArtifactsUseCase:
    """Saves a step's artifacts and uploads them to the remote store.

    Wraps SaveArtifactsUseCase: a record is kept only if its content was
    written to its storage location. Upload failures are per-artifact.
    """

    def __init__(
        self,
        save_artifacts_use_case: SaveArtifactsUseCase,
        store_client: RemoteStoreClient,
    ) -> None:
        self._save_artifacts_use_case = save_artifacts_use_case
        self._store_client = store_client

    def execute(
        self,
        command: SaveArtifactsCommand,
        cancel_event: Optional[threading.Event] = None,
    ) -> SaveArtifactsResult:
        """Save and upload the artifacts of a step.

        Args:
            command: SaveArtifactsCommand with step_id, artifacts, location.
            cancel_event: Set by the caller to stop before the next upload.

        Returns:
            SaveArtifactsResult listing only uploaded records.

        Raises:
            ArtifactBatchError: If the step's work directory is gone.
        """
        saved = self._save_artifacts_use_case.execute(command, cancel_event)

        result = SaveArtifactsResult(
            step_id=saved.step_id,
            correlation_id=saved.correlation_id,
            declared_count=saved.declared_count,
            failures=list(saved.failures),
        )
        for record in saved.artifacts:
            if cancel_event is not None and cancel_event.is_set():
                result.failures.append(
                    ArtifactFailure(
                        name=record.name,
                        error_code="UPLOAD_CANCELLED",
                        message="Upload cancelled before artifact was written",
                    )
                )
                continue

            staged_path = saved.staged_paths[record.name]
            try:
                self._store_client.put(staged_path, record.storage_location)
            except ArtifactStoreError as e:
                log_secure_info(
                    "warning",
                    f"Skipping artifact {record.name}: STORE_UPLOAD_FAILED: {e.message}",
                    step_id=command.step_id,
                )
                result.failures.append(
                    ArtifactFailure(
                        name=record.name,
                        error_code="STORE_UPLOAD_FAILED",
                        message=e.message,
                    )
                )
                continue

            result.artifacts.append(record)
            result.staged_paths[record.name] = staged_path

        return result
