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

"""JSON implementation of the SnapshotSerializer port."""

from typing import List, Tuple

from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.exceptions import SerializationError

from .mappers import ArtifactMapper
from .payloads import OutputsPayload


class JsonSnapshotSerializer:
    """Encodes finalized records as the orchestrator's JSON document.

    Keys are camelCase (``previewPath``, ``stepId``); absent values are
    omitted rather than written as null.
    """

    def encode(self, step_id: str, records: List[ArtifactDescriptor]) -> str:
        """Encode records as a JSON document.

        Args:
            step_id: Step the records belong to.
            records: Finalized records.

        Returns:
            JSON document.

        Raises:
            SerializationError: If encoding fails.
        """
        try:
            payload = OutputsPayload(
                step_id=step_id,
                artifacts=[ArtifactMapper.to_payload(record) for record in records],
            )
            return payload.model_dump_json(by_alias=True, exclude_none=True)
        except (ValueError, TypeError, AttributeError) as e:
            raise SerializationError(
                f"Failed to encode outputs for step {step_id}: {e}"
            ) from e

    def decode(self, document: str) -> Tuple[str, List[ArtifactDescriptor]]:
        """Decode a JSON document produced by encode.

        Args:
            document: JSON document.

        Returns:
            Tuple of (step_id, records).

        Raises:
            SerializationError: If the document is malformed.
        """
        try:
            payload = OutputsPayload.model_validate_json(document)
            records = [ArtifactMapper.to_domain(item) for item in payload.artifacts]
        except ValueError as e:
            raise SerializationError(f"Failed to decode outputs document: {e}") from e
        return payload.step_id, records
