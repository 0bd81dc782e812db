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

"""ReportOutputs use case implementation."""

import copy
import logging
from typing import Sequence

from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.exceptions import SerializationError
from core.artifacts.interfaces import SnapshotSerializer

from ..dtos import OutputSnapshot

logger = logging.getLogger(__name__)


class ReportOutputsUseCase:
    """Produces the outputs snapshot reported to the orchestrator.

    The snapshot is a deep copy of the saver's records, so neither side
    can observe later changes made by the other.
    """

    def __init__(self, serializer: SnapshotSerializer) -> None:
        self._serializer = serializer

    def report(
        self,
        records: Sequence[ArtifactDescriptor],
        step_id: str,
    ) -> OutputSnapshot:
        """Clone finalized records into an independent snapshot.

        Args:
            records: Finalized records, in declaration order.
            step_id: Step the records belong to.

        Returns:
            OutputSnapshot sharing no objects with records.
        """
        unfinalized = [record.name for record in records if not record.is_finalized]
        if unfinalized:
            logger.warning(
                "Reporting artifacts without storage location for step %s: %s",
                step_id,
                ", ".join(unfinalized),
            )
        return OutputSnapshot(
            step_id=step_id,
            artifacts=tuple(copy.deepcopy(list(records))),
        )

    def serialize(self, snapshot: OutputSnapshot) -> str:
        """Encode a snapshot as the orchestrator's JSON document.

        Raises:
            SerializationError: If the snapshot cannot be encoded.
        """
        try:
            return self._serializer.encode(snapshot.step_id, list(snapshot.artifacts))
        except SerializationError:
            logger.error("Failed to serialize outputs for step %s", snapshot.step_id)
            raise

    def deserialize(self, document: str) -> OutputSnapshot:
        """Decode a JSON document back into a snapshot.

        Raises:
            SerializationError: If the document is malformed.
        """
        step_id, records = self._serializer.decode(document)
        return OutputSnapshot(step_id=step_id, artifacts=tuple(records))
