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

"""FastAPI dependency providers for Step Outputs API."""

import uuid
from typing import Optional

from fastapi import Header

from orchestrator.outputs.use_cases import PublishOutputsUseCase

CORRELATION_ID_MAX_LENGTH = 128


def _get_container():
    """Lazy import of container to avoid circular imports."""
    from container import container  # pylint: disable=import-outside-toplevel
    return container


def get_publish_outputs_use_case() -> PublishOutputsUseCase:
    """Provide the publish outputs use case."""
    return _get_container().publish_outputs_use_case()


def get_outputs_correlation_id(
    x_correlation_id: Optional[str] = Header(
        default=None,
        alias="X-Correlation-Id",
        description="Request tracing ID",
    ),
) -> str:
    """Return provided correlation ID or generate one."""
    if x_correlation_id and x_correlation_id.strip():
        candidate = x_correlation_id.strip()
        if len(candidate) <= CORRELATION_ID_MAX_LENGTH:
            return candidate
    return str(uuid.uuid4())
