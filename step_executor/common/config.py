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

"""Configuration loader for the Step Executor."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import configparser

DEFAULT_CONFIG_PATH = "/etc/step_executor/step_executor.ini"


@dataclass
class ArtifactOutputsConfig:
    """Artifact outputs pipeline configuration."""
    backend: str
    staging_dir: str
    archive_timeout_seconds: int
    max_workers: int
    log_base: str


@dataclass
class FileStoreConfig:
    """File store configuration."""
    base_path: str


@dataclass
class StepExecutorConfig:
    """Step Executor configuration."""
    artifact_outputs: ArtifactOutputsConfig
    file_store: Optional[FileStoreConfig]


def load_config(config_path: Optional[str] = None) -> StepExecutorConfig:
    """Load Step Executor configuration from INI file.

    Args:
        config_path: Path to configuration file. If None, uses STEP_EXECUTOR_CONFIG_PATH
                    environment variable or default path.

    Returns:
        StepExecutorConfig instance.

    Raises:
        FileNotFoundError: If config file not found.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = os.getenv("STEP_EXECUTOR_CONFIG_PATH", DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    parser = configparser.ConfigParser()
    parser.read(config_file)

    if not parser.sections():
        raise ValueError(f"Empty configuration file: {config_file}")

    section = "artifact_outputs"
    backend = parser.get(section, "backend", fallback="memory_store")
    if backend not in ("memory_store", "file_store"):
        raise ValueError(f"Unsupported artifact_outputs backend: {backend}")

    # Parse optional limits with defaults
    archive_timeout_seconds = 300
    max_workers = 1

    if parser.has_option(section, "archive_timeout_seconds"):
        archive_timeout_seconds = parser.getint(section, "archive_timeout_seconds")

    if parser.has_option(section, "max_workers"):
        max_workers = parser.getint(section, "max_workers")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    artifact_outputs = ArtifactOutputsConfig(
        backend=backend,
        staging_dir=parser.get(section, "staging_dir", fallback="/tmp/step_executor"),
        archive_timeout_seconds=archive_timeout_seconds,
        max_workers=max_workers,
        log_base=parser.get(section, "log_base", fallback="/var/log/step_executor"),
    )

    # Parse file_store config only if backend is file_store
    file_store = None
    if backend == "file_store":
        if parser.has_section("file_store") and parser.has_option("file_store", "base_path"):
            file_store = FileStoreConfig(
                base_path=parser.get("file_store", "base_path")
            )
        else:
            raise ValueError("file_store section with base_path is required when backend=file_store")

    return StepExecutorConfig(
        artifact_outputs=artifact_outputs,
        file_store=file_store,
    )
