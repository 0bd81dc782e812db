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

"""Use cases for the outputs orchestrator."""

from .save_artifacts import SaveArtifactsUseCase
from .report_outputs import ReportOutputsUseCase
from .upload_artifacts import UploadArtifactsUseCase
from .publish_outputs import PublishOutputsUseCase

__all__ = [
    "SaveArtifactsUseCase",
    "ReportOutputsUseCase",
    "UploadArtifactsUseCase",
    "PublishOutputsUseCase",
]
