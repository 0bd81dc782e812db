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

"""Filesystem implementation of the Archiver port."""

import logging
import shutil
import tarfile
import tempfile
import threading
import time
import zipfile
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional, Tuple

from core.artifacts.exceptions import ArchiveCancelledError, ArchiveError
from core.artifacts.value_objects import ArchiveStrategy, ArchiveTimeout

logger = logging.getLogger(__name__)


class FileArchiver:
    """Packages artifact content into tar.gz or zip files on local disk.

    Each archive is written to ``<name>.partial`` inside a private
    subdirectory of the staging directory and renamed once complete, so a
    cancelled or failed run never leaves a truncated archive behind.

    File content is copied in chunks and the cancel event and deadline are
    checked before each chunk, so one large file cannot outlive the timeout
    by more than a single chunk.
    """

    CHUNK_SIZE: int = 1024 * 1024

    def __init__(
        self,
        staging_dir: Path,
        timeout: Optional[ArchiveTimeout] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize file archiver.

        Args:
            staging_dir: Directory receiving produced archives.
            timeout: Upper bound for a single archive.
            clock: Monotonic time source.
        """
        self._staging_dir = staging_dir
        self._timeout = timeout if timeout is not None else ArchiveTimeout.default()
        self._clock = clock

    def archive(
        self,
        local_path: str,
        strategy: ArchiveStrategy,
        cancel_event: Optional[threading.Event] = None,
    ) -> Path:
        """Package the content at local_path.

        Args:
            local_path: File or directory to package.
            strategy: Packaging to apply.
            cancel_event: Set by the caller to abort archive creation.

        Returns:
            Path of the produced archive, or local_path for NONE.

        Raises:
            ArchiveError: If packaging fails.
            ArchiveCancelledError: If cancelled or timed out.
        """
        if strategy == ArchiveStrategy.NONE:
            return Path(local_path)

        source = Path(local_path)
        if not source.exists():
            raise ArchiveError(
                f"Cannot archive missing path: {local_path}", path=local_path
            )

        try:
            self._staging_dir.mkdir(parents=True, exist_ok=True)
            work_dir = Path(tempfile.mkdtemp(prefix="archive-", dir=self._staging_dir))
        except OSError as e:
            raise ArchiveError(
                f"Failed to prepare staging directory {self._staging_dir}: {e}",
                path=local_path,
            ) from e

        target = work_dir / f"{source.name}{strategy.file_extension}"
        partial = target.with_name(target.name + ".partial")
        deadline = self._clock() + self._timeout.seconds
        completed = False

        try:
            if strategy == ArchiveStrategy.TAR_GZIP:
                self._write_tar_gzip(source, partial, cancel_event, deadline)
            else:
                self._write_zip(source, partial, cancel_event, deadline)
            partial.replace(target)
            completed = True
        except ArchiveError:
            raise
        except (OSError, tarfile.TarError, zipfile.BadZipFile, ValueError) as e:
            raise ArchiveError(
                f"Failed to create {strategy.value} archive of {local_path}: {e}",
                path=local_path,
            ) from e
        finally:
            if not completed:
                shutil.rmtree(work_dir, ignore_errors=True)

        logger.debug(
            "Archived %s as %s (%d bytes)", local_path, target, target.stat().st_size
        )
        return target

    def _write_tar_gzip(
        self,
        source: Path,
        destination: Path,
        cancel_event: Optional[threading.Event],
        deadline: float,
    ) -> None:
        """Write a gzip-compressed tarball of source to destination."""
        def check() -> None:
            self._check_interrupted(source, cancel_event, deadline)

        with tarfile.open(destination, mode="w:gz") as tf:
            for file_path, arcname in self._iter_entries(source):
                check()
                info = tf.gettarinfo(str(file_path), arcname=arcname)
                if info is None:
                    logger.debug("Skipping unsupported file type: %s", file_path)
                    continue
                if info.isreg():
                    with open(file_path, "rb") as fh:
                        tf.addfile(info, _InterruptibleReader(fh, check))
                else:
                    tf.addfile(info)

    def _write_zip(
        self,
        source: Path,
        destination: Path,
        cancel_event: Optional[threading.Event],
        deadline: float,
    ) -> None:
        """Write a deflated zip archive of source to destination."""
        with zipfile.ZipFile(destination, "w", zipfile.ZIP_DEFLATED) as zf:
            for file_path, arcname in self._iter_entries(source):
                self._check_interrupted(source, cancel_event, deadline)
                if file_path.is_dir():
                    zf.write(str(file_path), arcname=arcname)
                    continue
                info = zipfile.ZipInfo.from_file(str(file_path), arcname=arcname)
                info.compress_type = zipfile.ZIP_DEFLATED
                with open(file_path, "rb") as src, zf.open(info, "w") as dest:
                    while True:
                        self._check_interrupted(source, cancel_event, deadline)
                        chunk = src.read(self.CHUNK_SIZE)
                        if not chunk:
                            break
                        dest.write(chunk)

    @staticmethod
    def _iter_entries(source: Path) -> Iterator[Tuple[Path, str]]:
        """Yield (path, archive name) pairs in a stable order.

        A single file is stored under its own name; a directory's entries
        are stored relative to the directory.
        """
        if source.is_file():
            yield source, source.name
            return
        for file_path in sorted(source.rglob("*")):
            yield file_path, file_path.relative_to(source).as_posix()

    def _check_interrupted(
        self,
        source: Path,
        cancel_event: Optional[threading.Event],
        deadline: float,
    ) -> None:
        """Raise if the caller cancelled or the timeout elapsed."""
        if cancel_event is not None and cancel_event.is_set():
            raise ArchiveCancelledError(
                f"Archive creation cancelled for {source}", path=str(source)
            )
        if self._clock() > deadline:
            raise ArchiveCancelledError(
                f"Archive creation for {source} exceeded timeout of {self._timeout}",
                path=str(source),
            )


class _InterruptibleReader:  # pylint: disable=too-few-public-methods
    """File wrapper that runs a check before every read."""

    def __init__(self, fileobj: BinaryIO, check: Callable[[], None]) -> None:
        self._fileobj = fileobj
        self._check = check

    def read(self, size: int = -1) -> bytes:
        self._check()
        return self._fileobj.read(size)
