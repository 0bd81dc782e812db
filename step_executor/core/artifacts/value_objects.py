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

"""Value objects for Artifact domain.

All value objects are immutable and defined by their values, not identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ArchiveStrategy(str, Enum):
    """Packaging applied to an artifact before it is stored.

    NONE: Content is stored as-is (e.g., an HTML report browsed in place).
    TAR_GZIP: Content is packed into a gzip-compressed tarball.
    ZIP: Content is packed into a deflated zip archive.
    """

    NONE = "none"
    TAR_GZIP = "tar-gzip"
    ZIP = "zip"

    @property
    def file_extension(self) -> str:
        """Suffix appended to the artifact name in the remote key."""
        return _EXTENSIONS[self]


_EXTENSIONS = {
    ArchiveStrategy.NONE: "",
    ArchiveStrategy.TAR_GZIP: ".tgz",
    ArchiveStrategy.ZIP: ".zip",
}


@dataclass(frozen=True)
class StorageLocation:
    """Coordinate of an artifact in the remote store.

    Attributes:
        bucket: Bucket (or container) name.
        key: Object key within the bucket (e.g., "my-workflow/report.tgz").

    Raises:
        ValueError: If bucket or key is empty, too long, or unsafe.
    """

    bucket: str
    key: str

    BUCKET_MAX_LENGTH: ClassVar[int] = 255
    KEY_MAX_LENGTH: ClassVar[int] = 1024

    def __post_init__(self) -> None:
        """Validate bucket and key."""
        if not self.bucket or not self.bucket.strip():
            raise ValueError("StorageLocation bucket cannot be empty")
        if len(self.bucket) > self.BUCKET_MAX_LENGTH:
            raise ValueError(
                f"StorageLocation bucket length cannot exceed "
                f"{self.BUCKET_MAX_LENGTH} characters, got {len(self.bucket)}"
            )
        if "/" in self.bucket or self.bucket in (".", ".."):
            raise ValueError(
                f"StorageLocation bucket must be a single path segment: {self.bucket}"
            )
        if not self.key or not self.key.strip():
            raise ValueError("StorageLocation key cannot be empty")
        if len(self.key) > self.KEY_MAX_LENGTH:
            raise ValueError(
                f"StorageLocation key length cannot exceed "
                f"{self.KEY_MAX_LENGTH} characters, got {len(self.key)}"
            )
        if ".." in self.key.split("/") or "\\" in self.key:
            raise ValueError(
                f"StorageLocation key must not contain path traversal or backslash: {self.key}"
            )
        if self.key.startswith("/"):
            raise ValueError(
                f"StorageLocation key must not be an absolute path: {self.key}"
            )
        if "\x00" in self.key or "\x00" in self.bucket:
            raise ValueError("StorageLocation must not contain null bytes")

    def join(self, *parts: str) -> "StorageLocation":
        """Return a location in the same bucket with parts appended to the key.

        Args:
            parts: Key segments to append, joined with "/".

        Returns:
            New StorageLocation.
        """
        segments = [self.key.rstrip("/")]
        segments.extend(part.strip("/") for part in parts)
        return StorageLocation(bucket=self.bucket, key="/".join(segments))

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.bucket}/{self.key}"


@dataclass(frozen=True)
class ArchiveTimeout:
    """Upper bound for creating a single archive.

    Attributes:
        seconds: Timeout duration in seconds.

    Raises:
        ValueError: If seconds is not within valid range.
    """

    seconds: int

    MIN_SECONDS: ClassVar[int] = 1
    MAX_SECONDS: ClassVar[int] = 3600
    DEFAULT_SECONDS: ClassVar[int] = 300

    def __post_init__(self) -> None:
        """Validate timeout range."""
        if not isinstance(self.seconds, int) or isinstance(self.seconds, bool):
            raise ValueError(
                f"Timeout seconds must be an integer, got {type(self.seconds)}"
            )
        if self.seconds < self.MIN_SECONDS or self.seconds > self.MAX_SECONDS:
            raise ValueError(
                f"Timeout must be between {self.MIN_SECONDS} and "
                f"{self.MAX_SECONDS} seconds, got {self.seconds}"
            )

    @classmethod
    def default(cls) -> "ArchiveTimeout":
        """Create default timeout configuration."""
        return cls(seconds=cls.DEFAULT_SECONDS)

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.seconds}s"
