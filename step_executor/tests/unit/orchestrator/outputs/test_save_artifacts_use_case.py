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

"""Unit tests for SaveArtifactsUseCase."""

import logging
import tarfile
from unittest.mock import MagicMock

import pytest

from core.artifacts.entities import ArtifactDescriptor
from core.artifacts.exceptions import (
    ArchiveCancelledError,
    ArchiveError,
    ArtifactBatchError,
)
from core.artifacts.services import DefaultLocationAssigner, LocalPathValidator
from core.artifacts.value_objects import ArchiveStrategy, StorageLocation
from orchestrator.outputs.commands import SaveArtifactsCommand
from orchestrator.outputs.use_cases import SaveArtifactsUseCase


def _make_dirs(root, names):
    """Create one directory with an index.html per name."""
    paths = {}
    for name in names:
        path = root / name
        path.mkdir(parents=True)
        (path / "index.html").write_text(name)
        paths[name] = path
    return paths


class TestSaveAll:
    """Tests for the save_all fold."""

    def test_existing_directory_is_saved_unchanged(
        self, save_use_case, report_dir, default_location
    ):
        """A pass-through artifact keeps its name, path and preview."""
        descriptor = ArtifactDescriptor(
            name="test-report",
            local_path=str(report_dir),
            preview_path="index.html",
            archive_strategy=ArchiveStrategy.NONE,
        )

        records = save_use_case.save_all([descriptor], default_location)

        assert len(records) == 1
        record = records[0]
        assert record.preview_path == "index.html"
        assert record.local_path == str(report_dir)
        assert record.storage_location == StorageLocation(
            bucket="test-bucket", key="test-workflow/test-report"
        )

    def test_missing_directory_is_skipped_and_logged(
        self, save_use_case, tmp_path, default_location, caplog
    ):
        """A missing path yields no record, a warning, and no exception."""
        descriptor = ArtifactDescriptor(
            name="test-report",
            local_path=str(tmp_path / "gone"),
            preview_path="index.html",
        )

        with caplog.at_level(logging.WARNING):
            records = save_use_case.save_all([descriptor], default_location)

        assert records == []
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "test-report" in warnings[0]
        assert "ARTIFACT_NOT_FOUND" in warnings[0]

    def test_missing_paths_do_not_disturb_order(
        self, save_use_case, tmp_path, default_location
    ):
        """N declared with K missing yields N-K records in declaration order."""
        present = _make_dirs(tmp_path, ["first", "third", "fifth"])
        descriptors = [
            ArtifactDescriptor(name="first", local_path=str(present["first"])),
            ArtifactDescriptor(name="second", local_path=str(tmp_path / "no-second")),
            ArtifactDescriptor(name="third", local_path=str(present["third"])),
            ArtifactDescriptor(name="fourth", local_path=str(tmp_path / "no-fourth")),
            ArtifactDescriptor(name="fifth", local_path=str(present["fifth"])),
        ]

        records = save_use_case.save_all(descriptors, default_location)

        assert [r.name for r in records] == ["first", "third", "fifth"]

    def test_overlong_path_is_skipped_not_raised(
        self, save_use_case, tmp_path, default_location
    ):
        """A path the filesystem rejects is skipped and the batch continues."""
        present = _make_dirs(tmp_path, ["good"])
        descriptors = [
            ArtifactDescriptor(name="bad", local_path=str(tmp_path / ("x" * 300))),
            ArtifactDescriptor(name="good", local_path=str(present["good"])),
        ]

        records = save_use_case.save_all(descriptors, default_location)

        assert [r.name for r in records] == ["good"]

    def test_empty_input(self, save_use_case, default_location):
        assert save_use_case.save_all([], default_location) == []

    def test_every_field_preserved(self, save_use_case, report_dir, default_location):
        """Only storage_location differs between descriptor and record."""
        descriptor = ArtifactDescriptor(
            name="report",
            local_path=str(report_dir),
            preview_path="html/index.html",
            archive_strategy=ArchiveStrategy.ZIP,
            optional=True,
        )

        (record,) = save_use_case.save_all([descriptor], default_location)

        assert record.name == descriptor.name
        assert record.local_path == descriptor.local_path
        assert record.preview_path == descriptor.preview_path
        assert record.archive_strategy == descriptor.archive_strategy
        assert record.optional == descriptor.optional
        assert record.storage_location.key == "test-workflow/report.zip"

    def test_parallel_processing_keeps_order(self, file_archiver, tmp_path, default_location):
        """Worker threads do not change the output order."""
        names = [f"artifact-{i}" for i in range(8)]
        paths = _make_dirs(tmp_path, names)
        descriptors = [
            ArtifactDescriptor(
                name=name,
                local_path=str(paths[name]),
                archive_strategy=ArchiveStrategy.TAR_GZIP,
            )
            for name in names
        ]
        use_case = SaveArtifactsUseCase(
            path_validator=LocalPathValidator(),
            archiver=file_archiver,
            location_assigner=DefaultLocationAssigner(),
            max_workers=4,
        )

        records = use_case.save_all(descriptors, default_location)

        assert [r.name for r in records] == names

    def test_invalid_worker_count_raises(self, file_archiver):
        with pytest.raises(ValueError, match="max_workers"):
            SaveArtifactsUseCase(
                path_validator=LocalPathValidator(),
                archiver=file_archiver,
                location_assigner=DefaultLocationAssigner(),
                max_workers=0,
            )


class TestExecute:
    """Tests for execute with a SaveArtifactsCommand."""

    def test_archived_artifact_is_staged(
        self, save_use_case, report_descriptor, default_location, correlation_id, staging_dir
    ):
        """The staged path of an archived artifact points to the archive."""
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(report_descriptor,),
            archive_location=default_location,
        )

        result = save_use_case.execute(command)

        assert result.all_saved
        staged = result.staged_paths["report"]
        assert staged.name == "report.tgz"
        assert staging_dir in staged.parents
        with tarfile.open(staged, "r:gz") as tf:
            assert "index.html" in tf.getnames()
        assert result.artifacts[0].storage_location.key == "test-workflow/report.tgz"

    def test_pass_through_staged_path_is_source(
        self, save_use_case, log_file, default_location, correlation_id
    ):
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(ArtifactDescriptor(name="log", local_path=str(log_file)),),
            archive_location=default_location,
        )

        result = save_use_case.execute(command)

        assert result.staged_paths["log"] == log_file

    def test_optional_missing_artifact_is_not_a_failure(
        self, save_use_case, tmp_path, default_location, correlation_id
    ):
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(
                ArtifactDescriptor(
                    name="coverage", local_path=str(tmp_path / "absent"), optional=True
                ),
            ),
            archive_location=default_location,
        )

        result = save_use_case.execute(command)

        assert result.declared_count == 1
        assert result.saved_count == 0
        assert result.failures == []

    def test_required_missing_artifact_is_reported(
        self, save_use_case, tmp_path, default_location, correlation_id
    ):
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(ArtifactDescriptor(name="report", local_path=str(tmp_path / "absent")),),
            archive_location=default_location,
        )

        result = save_use_case.execute(command)

        assert [f.error_code for f in result.failures] == ["ARTIFACT_NOT_FOUND"]
        assert result.failures[0].name == "report"
        assert not result.all_saved

    def test_missing_default_location_fails_artifact(
        self, save_use_case, report_dir, correlation_id
    ):
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(ArtifactDescriptor(name="report", local_path=str(report_dir)),),
        )

        result = save_use_case.execute(command)

        assert result.artifacts == []
        assert result.failures[0].error_code == "STORE_ASSIGNMENT_FAILED"

    @pytest.mark.parametrize(
        "error,code",
        [
            (ArchiveError("tar exploded"), "ARCHIVE_FAILED"),
            (ArchiveCancelledError("cancelled"), "ARCHIVE_CANCELLED"),
        ],
    )
    def test_archive_errors_fail_single_artifact(
        self, report_dir, log_file, default_location, correlation_id, error, code
    ):
        """An archive error only removes the affected artifact."""
        archiver = MagicMock()
        archiver.archive.side_effect = [error, log_file]
        use_case = SaveArtifactsUseCase(
            path_validator=LocalPathValidator(),
            archiver=archiver,
            location_assigner=DefaultLocationAssigner(),
        )
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(
                ArtifactDescriptor(
                    name="report",
                    local_path=str(report_dir),
                    archive_strategy=ArchiveStrategy.TAR_GZIP,
                ),
                ArtifactDescriptor(name="log", local_path=str(log_file)),
            ),
            archive_location=default_location,
        )

        result = use_case.execute(command)

        assert [r.name for r in result.artifacts] == ["log"]
        assert result.failures[0].name == "report"
        assert result.failures[0].error_code == code

    def test_cancel_event_forwarded_to_archiver(
        self, report_dir, default_location, correlation_id
    ):
        archiver = MagicMock()
        archiver.archive.return_value = report_dir
        use_case = SaveArtifactsUseCase(
            path_validator=LocalPathValidator(),
            archiver=archiver,
            location_assigner=DefaultLocationAssigner(),
        )
        cancel_event = MagicMock()
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(ArtifactDescriptor(name="report", local_path=str(report_dir)),),
            archive_location=default_location,
        )

        use_case.execute(command, cancel_event)

        archiver.archive.assert_called_once_with(
            str(report_dir), ArchiveStrategy.NONE, cancel_event
        )

    def test_missing_work_dir_fails_batch(
        self, save_use_case, tmp_path, default_location, correlation_id
    ):
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(),
            archive_location=default_location,
            work_dir=tmp_path / "volume-gone",
        )

        with pytest.raises(ArtifactBatchError, match="step-1"):
            save_use_case.execute(command)

    def test_existing_work_dir_passes(
        self, save_use_case, tmp_path, default_location, correlation_id
    ):
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id=correlation_id,
            artifacts=(),
            archive_location=default_location,
            work_dir=tmp_path,
        )

        result = save_use_case.execute(command)

        assert result.declared_count == 0
        assert result.all_saved
