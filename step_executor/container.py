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

"""Dependency Injector containers for the Step Executor API."""
# pylint: disable=c-extension-no-member

import logging
import os
from pathlib import Path

from dependency_injector import containers, providers

from common.config import ArtifactOutputsConfig, load_config
from core.artifacts.services import DefaultLocationAssigner, LocalPathValidator
from core.artifacts.value_objects import ArchiveTimeout
from infra.archive.file_archiver import FileArchiver
from infra.artifact_store.file_remote_store import FileRemoteStore
from infra.artifact_store.in_memory_remote_store import InMemoryRemoteStore
from infra.reporting.json_serializer import JsonSnapshotSerializer
from orchestrator.outputs.use_cases import PublishOutputsUseCase, ReportOutputsUseCase

logger = logging.getLogger(__name__)

_DEFAULT_STORE_PATH = Path("/opt/step_executor/store")
_DEFAULT_OUTPUTS_CONFIG = ArtifactOutputsConfig(
    backend="file_store",
    staging_dir="/tmp/step_executor",
    archive_timeout_seconds=300,
    max_workers=1,
    log_base="/var/log/step_executor",
)


def _load_outputs_config() -> ArtifactOutputsConfig:
    """Return the artifact_outputs section, or defaults if config is unusable."""
    try:
        return load_config().artifact_outputs
    except (FileNotFoundError, ValueError) as exc:
        logger.warning("Using default artifact outputs configuration: %s", exc)
        return _DEFAULT_OUTPUTS_CONFIG


def _create_remote_store():
    """Factory function to create the remote store based on configuration.

    Returns:
        InMemoryRemoteStore or FileRemoteStore based on config.
    """
    try:
        config = load_config()

        if config.artifact_outputs.backend == "file_store" and config.file_store is not None:
            return FileRemoteStore(base_path=Path(config.file_store.base_path))

        if config.artifact_outputs.backend == "memory_store":
            return InMemoryRemoteStore()

        return FileRemoteStore(base_path=_DEFAULT_STORE_PATH)
    except (FileNotFoundError, ValueError):
        # If config not found or invalid, use file store with defaults as fallback
        return FileRemoteStore(base_path=_DEFAULT_STORE_PATH)


_OUTPUTS_CONFIG = _load_outputs_config()


class DevContainer(containers.DeclarativeContainer):  # pylint: disable=R0903
    """Development profile container.

    Uploads go to an in-memory store so no storage backend is required.

    Activated when ENV=dev (default).
    """

    archive_timeout = providers.Singleton(
        ArchiveTimeout,
        seconds=_OUTPUTS_CONFIG.archive_timeout_seconds,
    )

    # --- Artifact services ---
    path_validator = providers.Singleton(LocalPathValidator)
    location_assigner = providers.Singleton(DefaultLocationAssigner)
    snapshot_serializer = providers.Singleton(JsonSnapshotSerializer)
    remote_store = providers.Singleton(InMemoryRemoteStore)

    archiver = providers.Factory(
        FileArchiver,
        timeout=archive_timeout,
    )

    # --- Use cases ---
    report_outputs_use_case = providers.Factory(
        ReportOutputsUseCase,
        serializer=snapshot_serializer,
    )

    publish_outputs_use_case = providers.Factory(
        PublishOutputsUseCase,
        path_validator=path_validator,
        location_assigner=location_assigner,
        store_client=remote_store,
        report_outputs_use_case=report_outputs_use_case,
        archiver_factory=archiver.provider,
        staging_base=Path(_OUTPUTS_CONFIG.staging_dir),
        max_workers=_OUTPUTS_CONFIG.max_workers,
    )


class ProdContainer(containers.DeclarativeContainer):  # pylint: disable=R0903
    """Production profile container.

    Uploads go to the backend selected in the configuration file.

    Activated when ENV=prod.
    """

    archive_timeout = providers.Singleton(
        ArchiveTimeout,
        seconds=_OUTPUTS_CONFIG.archive_timeout_seconds,
    )

    # --- Artifact services ---
    path_validator = providers.Singleton(LocalPathValidator)
    location_assigner = providers.Singleton(DefaultLocationAssigner)
    snapshot_serializer = providers.Singleton(JsonSnapshotSerializer)
    remote_store = providers.Singleton(_create_remote_store)

    archiver = providers.Factory(
        FileArchiver,
        timeout=archive_timeout,
    )

    # --- Use cases ---
    report_outputs_use_case = providers.Factory(
        ReportOutputsUseCase,
        serializer=snapshot_serializer,
    )

    publish_outputs_use_case = providers.Factory(
        PublishOutputsUseCase,
        path_validator=path_validator,
        location_assigner=location_assigner,
        store_client=remote_store,
        report_outputs_use_case=report_outputs_use_case,
        archiver_factory=archiver.provider,
        staging_base=Path(_OUTPUTS_CONFIG.staging_dir),
        max_workers=_OUTPUTS_CONFIG.max_workers,
    )


def get_outputs_config() -> ArtifactOutputsConfig:
    """Return the artifact outputs configuration the container was built with."""
    return _OUTPUTS_CONFIG


def get_container_class():
    """Select container class based on ENV environment variable.

    Returns:
        DevContainer if ENV=dev (default)
        ProdContainer if ENV=prod

    Usage:
        ENV=prod python main.py
    """
    env = os.getenv("ENV", "dev").lower()

    if env == "prod":
        return ProdContainer

    return DevContainer


Container = get_container_class()

# Singleton container instance shared across app and dependencies
container = Container()


__all__ = ["Container", "container", "get_container_class", "get_outputs_config"]
