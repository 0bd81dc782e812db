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

"""Shared pytest fixtures for Step Executor tests."""

# pylint: disable=redefined-outer-name

from pathlib import Path

import pytest

from api import logging_utils
from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.value_objects import ArchiveStrategy, StorageLocation

# Note: pythonpath is set in pyproject.toml at project root


@pytest.fixture(autouse=True)
def step_log_base(tmp_path_factory, monkeypatch) -> Path:
    """Route per-step log files to a temporary directory."""
    log_base = tmp_path_factory.mktemp("step-logs")
    monkeypatch.setattr(logging_utils, "_log_base", log_base)
    return log_base


@pytest.fixture
def default_location() -> StorageLocation:
    """Default archive location of a step."""
    return StorageLocation(bucket="test-bucket", key="test-workflow")


@pytest.fixture
def report_dir(tmp_path) -> Path:
    """A small HTML report directory."""
    root = tmp_path / "report"
    (root / "css").mkdir(parents=True)
    (root / "index.html").write_text("<html><body>report</body></html>")
    (root / "css" / "site.css").write_text("body { margin: 0; }")
    return root


@pytest.fixture
def log_file(tmp_path) -> Path:
    """A single plain-text file artifact."""
    path = tmp_path / "build.log"
    path.write_text("step finished\n")
    return path


@pytest.fixture
def report_descriptor(report_dir) -> ArtifactDescriptor:
    """Descriptor for the HTML report, archived as tar.gz with a preview."""
    return ArtifactDescriptor(
        name="report",
        local_path=str(report_dir),
        preview_path="index.html",
        archive_strategy=ArchiveStrategy.TAR_GZIP,
    )
