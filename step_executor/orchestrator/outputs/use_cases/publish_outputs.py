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

"""PublishOutputs use case implementation."""

import tempfile
import threading
from pathlib import Path
from typing import Callable, Optional

from api.logging_utils import log_secure_info
from core.artifacts.interfaces import (
    Archiver,
    LocationAssigner,
    PathValidator,
    RemoteStoreClient,
)

from ..commands.save_artifacts import SaveArtifactsCommand
from ..dtos import PublishOutputsResult
from .report_outputs import ReportOutputsUseCase
from .save_artifacts import SaveArtifactsUseCase
from .upload_artifacts import UploadArtifactsUseCase


class PublishOutputsUseCase:
    """Use case for the full save-and-report cycle of a step.

    Orchestrates:
    1. Temporary staging directory for archives (removed on every exit path)
    2. Save (validate, archive, assign location) and upload
    3. Snapshot and JSON encoding for the orchestrator
    """

    def __init__(
        self,
        path_validator: PathValidator,
        location_assigner: LocationAssigner,
        store_client: RemoteStoreClient,
        report_outputs_use_case: ReportOutputsUseCase,
        archiver_factory: Callable[..., Archiver],
        staging_base: Optional[Path] = None,
        max_workers: int = 1,
    ) -> None:  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self._path_validator = path_validator
        self._location_assigner = location_assigner
        self._store_client = store_client
        self._report_outputs_use_case = report_outputs_use_case
        self._archiver_factory = archiver_factory
        self._staging_base = staging_base
        self._max_workers = max_workers

    def execute(
        self,
        command: SaveArtifactsCommand,
        cancel_event: Optional[threading.Event] = None,
    ) -> PublishOutputsResult:
        """Save, upload and report the artifacts of a step.

        Args:
            command: SaveArtifactsCommand with step_id, artifacts, location.
            cancel_event: Set by the caller to abort in-flight work.

        Returns:
            PublishOutputsResult with the snapshot and its JSON document.

        Raises:
            ArtifactBatchError: If the step's work directory is gone.
            SerializationError: If the snapshot cannot be encoded.
        """
        if self._staging_base is not None:
            self._staging_base.mkdir(parents=True, exist_ok=True)

        with tempfile.TemporaryDirectory(
            prefix=f"step-outputs-{command.step_id}-",
            dir=self._staging_base,
        ) as tmp_dir:
            archiver = self._archiver_factory(staging_dir=Path(tmp_dir))
            save_use_case = SaveArtifactsUseCase(
                path_validator=self._path_validator,
                archiver=archiver,
                location_assigner=self._location_assigner,
                max_workers=self._max_workers,
            )
            upload_use_case = UploadArtifactsUseCase(
                save_artifacts_use_case=save_use_case,
                store_client=self._store_client,
            )
            result = upload_use_case.execute(command, cancel_event)

        snapshot = self._report_outputs_use_case.report(result.artifacts, command.step_id)
        document = self._report_outputs_use_case.serialize(snapshot)

        log_secure_info(
            "info",
            f"Reported {len(snapshot.artifacts)}/{result.declared_count} artifact(s) "
            f"for step {command.step_id}",
            step_id=command.step_id,
            end_section=True,
        )
        return PublishOutputsResult(
            step_id=command.step_id,
            correlation_id=command.correlation_id,
            declared_count=result.declared_count,
            snapshot=snapshot,
            document=document,
            failures=list(result.failures),
        )
