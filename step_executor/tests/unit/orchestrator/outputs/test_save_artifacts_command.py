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

"""Unit tests for SaveArtifactsCommand."""

import pytest

from core.artifacts.entities import ArtifactDescriptor
from orchestrator.outputs.commands import SaveArtifactsCommand


def _descriptor(name):
    return ArtifactDescriptor(name=name, local_path=f"/work/{name}")


class TestSaveArtifactsCommand:
    """Tests for SaveArtifactsCommand validation."""

    def test_valid_command(self, default_location):
        command = SaveArtifactsCommand(
            step_id="step-1",
            correlation_id="corr-1",
            artifacts=[_descriptor("a"), _descriptor("b")],
            archive_location=default_location,
        )
        assert isinstance(command.artifacts, tuple)
        assert [a.name for a in command.artifacts] == ["a", "b"]

    def test_empty_artifacts_allowed(self):
        command = SaveArtifactsCommand(step_id="step-1", correlation_id="c", artifacts=())
        assert command.artifacts == ()

    def test_empty_step_id_raises(self):
        with pytest.raises(ValueError, match="step_id cannot be empty"):
            SaveArtifactsCommand(step_id=" ", correlation_id="c", artifacts=())

    def test_step_id_too_long_raises(self):
        with pytest.raises(ValueError, match="step_id must be"):
            SaveArtifactsCommand(
                step_id="s" * (SaveArtifactsCommand.STEP_ID_MAX_LENGTH + 1),
                correlation_id="c",
                artifacts=(),
            )

    @pytest.mark.parametrize("step_id", ["..", ".", "../etc", "a/b", "-step", "step\n"])
    def test_step_id_unsafe_for_paths_raises(self, step_id):
        with pytest.raises(ValueError, match="step_id must start with"):
            SaveArtifactsCommand(step_id=step_id, correlation_id="c", artifacts=())

    @pytest.mark.parametrize("step_id", ["step-1", "Build_2", "v1.2.3", "7"])
    def test_step_id_accepted(self, step_id):
        command = SaveArtifactsCommand(step_id=step_id, correlation_id="c", artifacts=())
        assert command.step_id == step_id

    def test_duplicate_names_raise(self):
        with pytest.raises(ValueError, match="duplicate artifact name: a"):
            SaveArtifactsCommand(
                step_id="step-1",
                correlation_id="c",
                artifacts=(_descriptor("a"), _descriptor("a")),
            )

    def test_too_many_artifacts_raise(self):
        artifacts = [
            _descriptor(f"a{i}") for i in range(SaveArtifactsCommand.MAX_ARTIFACTS + 1)
        ]
        with pytest.raises(ValueError, match="at most"):
            SaveArtifactsCommand(step_id="step-1", correlation_id="c", artifacts=artifacts)
