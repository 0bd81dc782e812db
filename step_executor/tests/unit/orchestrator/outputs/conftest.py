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

"""Shared fixtures for outputs orchestrator tests."""

import uuid

import pytest

from core.artifacts.services import DefaultLocationAssigner, LocalPathValidator
from infra.archive.file_archiver import FileArchiver
from orchestrator.outputs.use_cases import SaveArtifactsUseCase


@pytest.fixture
def staging_dir(tmp_path):
    """Staging directory for archives produced during a test."""
    return tmp_path / "staging"


@pytest.fixture
def file_archiver(staging_dir):
    """Real archiver writing into the staging directory."""
    return FileArchiver(staging_dir=staging_dir)


@pytest.fixture
def save_use_case(file_archiver):
    """SaveArtifactsUseCase wired with real collaborators."""
    return SaveArtifactsUseCase(
        path_validator=LocalPathValidator(),
        archiver=file_archiver,
        location_assigner=DefaultLocationAssigner(),
    )


@pytest.fixture
def correlation_id():
    return str(uuid.uuid4())
