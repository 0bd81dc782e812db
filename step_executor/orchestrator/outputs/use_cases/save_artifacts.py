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

"""SaveArtifacts use case implementation."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from api.logging_utils import log_secure_info
from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.exceptions import (
    ArchiveCancelledError,
    ArchiveError,
    ArtifactBatchError,
    ArtifactNotFoundError,
    StoreAssignmentError,
)
from core.artifacts.interfaces import Archiver, LocationAssigner, PathValidator
from core.artifacts.value_objects import StorageLocation

from ..commands.save_artifacts import SaveArtifactsCommand
from ..dtos import ArtifactFailure, SaveArtifactsResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ArtifactOutcome:
    """Outcome of processing one declared artifact."""

    record: Optional[ArtifactDescriptor] = None
    staged_path: Optional[Path] = None
    failure: Optional[ArtifactFailure] = None


class SaveArtifactsUseCase:
    """Use case for saving the declared output artifacts of a step.

    For every descriptor, in declaration order:
    1. Path validation (missing paths are skipped)
    2. Archiving per the descriptor's strategy
    3. Storage location assignment

    A failing artifact is logged and left out of the output; it never
    aborts the rest of the batch. With ``max_workers > 1`` artifacts are
    processed on a thread pool and the output is reassembled in
    declaration order.
    """

    def __init__(
        self,
        path_validator: PathValidator,
        archiver: Archiver,
        location_assigner: LocationAssigner,
        max_workers: int = 1,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._path_validator = path_validator
        self._archiver = archiver
        self._location_assigner = location_assigner
        self._max_workers = max_workers

    def save_all(
        self,
        descriptors: Sequence[ArtifactDescriptor],
        default_location: Optional[StorageLocation],
        cancel_event: Optional[threading.Event] = None,
    ) -> List[ArtifactDescriptor]:
        """Save every artifact that can be saved.

        Args:
            descriptors: Declared artifacts, in declaration order.
            default_location: Step's default archive location.
            cancel_event: Set by the caller to abort archive creation.

        Returns:
            Finalized records of the artifacts that succeeded, in
            declaration order. May be shorter than descriptors.
        """
        outcomes = self._process_batch(
            descriptors, default_location, cancel_event, step_id=None
        )
        return [outcome.record for outcome in outcomes if outcome.record is not None]

    def execute(
        self,
        command: SaveArtifactsCommand,
        cancel_event: Optional[threading.Event] = None,
    ) -> SaveArtifactsResult:
        """Save the artifacts of a step.

        Args:
            command: SaveArtifactsCommand with step_id, artifacts, location.
            cancel_event: Set by the caller to abort archive creation.

        Returns:
            SaveArtifactsResult with finalized records and failures.

        Raises:
            ArtifactBatchError: If the step's work directory is gone.
        """
        self._guard_work_dir(command)

        log_secure_info(
            "info",
            f"Saving {len(command.artifacts)} artifact(s) for step {command.step_id}",
            step_id=command.step_id,
        )
        outcomes = self._process_batch(
            command.artifacts,
            command.archive_location,
            cancel_event,
            step_id=command.step_id,
        )

        result = SaveArtifactsResult(
            step_id=command.step_id,
            correlation_id=command.correlation_id,
            declared_count=len(command.artifacts),
        )
        for outcome in outcomes:
            if outcome.record is not None:
                result.artifacts.append(outcome.record)
                result.staged_paths[outcome.record.name] = outcome.staged_path
            elif outcome.failure is not None:
                result.failures.append(outcome.failure)

        log_secure_info(
            "info",
            f"Saved {result.saved_count}/{result.declared_count} artifact(s) "
            f"for step {command.step_id}",
            step_id=command.step_id,
        )
        return result

    # ------------------------------------------------------------------
    # Batch processing
    # ------------------------------------------------------------------

    def _guard_work_dir(self, command: SaveArtifactsCommand) -> None:
        """Fail the whole batch if the step's volume is not there."""
        if command.work_dir is not None and not command.work_dir.is_dir():
            raise ArtifactBatchError(
                step_id=command.step_id,
                reason=f"work directory does not exist: {command.work_dir}",
                correlation_id=command.correlation_id,
            )

    def _process_batch(
        self,
        descriptors: Sequence[ArtifactDescriptor],
        default_location: Optional[StorageLocation],
        cancel_event: Optional[threading.Event],
        step_id: Optional[str],
    ) -> List[_ArtifactOutcome]:
        """Process descriptors and return outcomes in declaration order."""
        if self._max_workers == 1 or len(descriptors) <= 1:
            return [
                self._save_one(descriptor, default_location, cancel_event, step_id)
                for descriptor in descriptors
            ]

        logger.debug(
            "Processing %d artifact(s) on %d worker thread(s)",
            len(descriptors),
            self._max_workers,
        )
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="save-artifact"
        ) as pool:
            futures = [
                pool.submit(
                    self._save_one, descriptor, default_location, cancel_event, step_id
                )
                for descriptor in descriptors
            ]
            return [future.result() for future in futures]

    def _save_one(
        self,
        descriptor: ArtifactDescriptor,
        default_location: Optional[StorageLocation],
        cancel_event: Optional[threading.Event],
        step_id: Optional[str],
    ) -> _ArtifactOutcome:
        """Validate, archive and locate a single artifact."""
        try:
            self._path_validator.validate(descriptor.local_path)
        except ArtifactNotFoundError as e:
            if descriptor.optional:
                log_secure_info(
                    "info",
                    f"Skipping optional artifact {descriptor.name}: {e.message}",
                    step_id=step_id,
                )
                return _ArtifactOutcome()
            return self._fail(descriptor, "ARTIFACT_NOT_FOUND", e.message, step_id)

        try:
            staged_path = self._archiver.archive(
                descriptor.local_path, descriptor.archive_strategy, cancel_event
            )
        except ArchiveCancelledError as e:
            return self._fail(descriptor, "ARCHIVE_CANCELLED", e.message, step_id)
        except ArchiveError as e:
            return self._fail(descriptor, "ARCHIVE_FAILED", e.message, step_id)

        try:
            record = self._location_assigner.assign(descriptor, default_location)
        except StoreAssignmentError as e:
            return self._fail(descriptor, "STORE_ASSIGNMENT_FAILED", e.message, step_id)

        log_secure_info(
            "debug",
            f"Artifact {record.name} finalized at {record.storage_location}",
            step_id=step_id,
        )
        return _ArtifactOutcome(record=record, staged_path=staged_path)

    @staticmethod
    def _fail(
        descriptor: ArtifactDescriptor,
        error_code: str,
        message: str,
        step_id: Optional[str],
    ) -> _ArtifactOutcome:
        """Log a per-artifact failure and turn it into an outcome."""
        log_secure_info(
            "warning",
            f"Skipping artifact {descriptor.name}: {error_code}: {message}",
            step_id=step_id,
        )
        return _ArtifactOutcome(
            failure=ArtifactFailure(
                name=descriptor.name, error_code=error_code, message=message
            )
        )
