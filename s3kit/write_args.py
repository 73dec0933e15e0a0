"""Arguments for requests that write object data."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from typing import BinaryIO

from .errors import (
    InvalidMaxPartSizeError,
    InvalidMinPartSizeError,
    InvalidObjectSizeError,
    InvalidPartCountError,
    InvalidPartNumberError,
    InvalidUploadIdError,
    MissingPartSizeError,
)
from .object_args import ObjectArgs
from .read_args import ComposeSource, CopySource
from .types import Directive, Retention, Sse
from .utils import Multimap, merge, to_iso8601utc, urlencode

MIN_PART_SIZE = 5_242_880  # 5 MiB
MAX_PART_SIZE = 5_368_709_120  # 5 GiB
MAX_OBJECT_SIZE = 5_497_558_138_880  # 5 TiB
MAX_MULTIPART_COUNT = 10_000
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def build_write_headers(
    extra_headers: Multimap | None,
    headers: Multimap | None,
    user_metadata: Multimap | None,
    sse: Sse | None,
    tags: dict[str, str] | None,
    retention: Retention | None,
    legal_hold: bool,
) -> Multimap:
    """Collect the request headers of an object write."""
    result = Multimap()
    for source in (extra_headers, headers, user_metadata):
        if source is not None:
            merge(result, source)
    if sse is not None:
        merge(result, sse.headers())
    if tags:
        tagging = "&".join(
            f"{urlencode(key)}={urlencode(value)}" for key, value in tags.items()
        )
        result.add("x-amz-tagging", tagging)
    if retention is not None:
        result.add("x-amz-object-lock-mode", str(retention.mode))
        result.add(
            "x-amz-object-lock-retain-until-date",
            to_iso8601utc(retention.retain_until_date),
        )
    if legal_hold:
        result.add("x-amz-object-lock-legal-hold", "ON")
    return result


def calc_part_info(object_size: int | None, part_size: int | None) -> tuple[int, int]:
    """Return (part size, part count); the count is -1 when the size is unknown."""
    if part_size is not None:
        if part_size < MIN_PART_SIZE:
            raise InvalidMinPartSizeError(part_size)
        if part_size > MAX_PART_SIZE:
            raise InvalidMaxPartSizeError(part_size)

    if object_size is None:
        if part_size is None:
            raise MissingPartSizeError()
        return part_size, -1

    if object_size > MAX_OBJECT_SIZE:
        raise InvalidObjectSizeError(object_size)

    if part_size is None:
        psize = _ceil_div(object_size, MAX_MULTIPART_COUNT)
        psize = MIN_PART_SIZE * _ceil_div(psize, MIN_PART_SIZE)
    else:
        psize = part_size
    psize = min(psize, object_size)

    part_count = _ceil_div(object_size, psize) if psize > 0 else 1
    if part_count > MAX_MULTIPART_COUNT:
        raise InvalidPartCountError(object_size, psize, MAX_MULTIPART_COUNT)
    return psize, part_count


@dataclass
class _ObjectWriteArgs(ObjectArgs):
    headers: Multimap | None = field(default=None, kw_only=True)
    user_metadata: Multimap | None = field(default=None, kw_only=True)
    sse: Sse | None = field(default=None, kw_only=True)
    tags: dict[str, str] | None = field(default=None, kw_only=True)
    retention: Retention | None = field(default=None, kw_only=True)
    legal_hold: bool = field(default=False, kw_only=True)

    def _write_headers(self) -> Multimap:
        return build_write_headers(
            self.extra_headers,
            self.headers,
            self.user_metadata,
            self.sse,
            self.tags,
            self.retention,
            self.legal_hold,
        )


@dataclass
class PutObjectApiArgs(_ObjectWriteArgs):
    """Arguments for a single-request object upload."""

    data: bytes
    query_params: Multimap | None = None

    def get_headers(self) -> Multimap:
        """Return the headers of this write request."""
        return self._write_headers()


@dataclass
class UploadPartArgs(_ObjectWriteArgs):
    """Arguments for uploading one part of a multipart upload."""

    upload_id: str
    part_number: int
    data: bytes

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.upload_id:
            raise InvalidUploadIdError("upload ID cannot be empty")
        if not 1 <= self.part_number <= MAX_MULTIPART_COUNT:
            raise InvalidPartNumberError(
                f"part number must be between 1 and {MAX_MULTIPART_COUNT}"
            )

    def get_headers(self) -> Multimap:
        """Return the headers of this write request."""
        return self._write_headers()


@dataclass
class PutObjectArgs(_ObjectWriteArgs):
    """Arguments for uploading an object from a binary stream.

    When ``part_size`` is omitted a suitable one is worked out from
    ``object_size``; after construction ``part_size`` holds the size used.
    """

    stream: BinaryIO
    object_size: int | None = None
    part_size: int | None = None
    content_type: str = DEFAULT_CONTENT_TYPE
    part_count: int = field(init=False, default=-1)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.part_size, self.part_count = calc_part_info(
            self.object_size, self.part_size
        )

    def get_headers(self) -> Multimap:
        """Return the headers of this write request."""
        return self._write_headers()


@dataclass
class CopyObjectArgs(_ObjectWriteArgs):
    """Arguments for copying an object on the server."""

    source: CopySource
    metadata_directive: Directive | None = None
    tagging_directive: Directive | None = None

    def get_headers(self) -> Multimap:
        """Return the headers of this write request."""
        return self._write_headers()


@dataclass
class ComposeObjectArgs(_ObjectWriteArgs):
    """Arguments for building an object out of several sources."""

    sources: list[ComposeSource]

    def get_headers(self) -> Multimap:
        """Return the headers of this write request."""
        return self._write_headers()


@dataclass
class UploadObjectArgs(_ObjectWriteArgs):
    """Arguments for uploading a local file as an object."""

    filename: str
    content_type: str = DEFAULT_CONTENT_TYPE
    object_size: int = field(init=False, default=0)
    part_size: int = field(init=False, default=0)
    part_count: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        super().__post_init__()
        info = os.stat(self.filename)
        if not stat.S_ISREG(info.st_mode):
            raise OSError(f"{self.filename}: not a file")
        self.object_size = info.st_size
        self.part_size, self.part_count = calc_part_info(self.object_size, None)