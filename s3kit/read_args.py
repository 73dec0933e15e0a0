"""Arguments for requests that read, copy or compose existing objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .errors import (
    InvalidComposeSourceError,
    InvalidPartNumberError,
    InvalidUploadIdError,
)
from .object_args import ObjectArgs, ObjectVersionArgs
from .types import Sse
from .utils import Multimap, merge, to_http_header_value, urlencode

DEFAULT_EXPIRY_SECONDS = 604_800  # 7 days
_MAX_PART_NUMBER = 10_000


@dataclass
class _ConditionalSource(ObjectVersionArgs):
    ssec: Sse | None = None
    offset: int | None = None
    length: int | None = None
    match_etag: str | None = None
    not_match_etag: str | None = None
    modified_since: datetime | None = None
    unmodified_since: datetime | None = None

    def _copy_source(self) -> str:
        source = f"/{self.bucket}/{self.object}"
        if self.version_id is not None:
            source += "?versionId=" + urlencode(self.version_id)
        return source

    def _copy_condition_headers(self, headers: Multimap) -> None:
        if self.match_etag is not None:
            headers.add("x-amz-copy-source-if-match", self.match_etag)
        if self.not_match_etag is not None:
            headers.add("x-amz-copy-source-if-none-match", self.not_match_etag)
        if self.modified_since is not None:
            headers.add(
                "x-amz-copy-source-if-modified-since",
                to_http_header_value(self.modified_since),
            )
        if self.unmodified_since is not None:
            headers.add(
                "x-amz-copy-source-if-unmodified-since",
                to_http_header_value(self.unmodified_since),
            )


@dataclass
class ObjectConditionalReadArgs(_ConditionalSource):
    """Arguments for reads that may carry a byte range and preconditions."""

    def _range_value(self) -> str:
        if self.length is not None:
            offset = self.offset or 0
            return f"bytes={offset}-{offset + self.length - 1}"
        if self.offset is not None:
            return f"bytes={self.offset}-"
        return ""

    def get_headers(self) -> Multimap:
        """Return the headers of a conditional read request."""
        headers = Multimap()
        range_value = self._range_value()
        if range_value:
            headers.add("Range", range_value)
        if self.match_etag is not None:
            headers.add("if-match", self.match_etag)
        if self.not_match_etag is not None:
            headers.add("if-none-match", self.not_match_etag)
        if self.modified_since is not None:
            headers.add("if-modified-since", to_http_header_value(self.modified_since))
        if self.unmodified_since is not None:
            headers.add(
                "if-unmodified-since", to_http_header_value(self.unmodified_since)
            )
        if self.ssec is not None:
            merge(headers, self.ssec.headers())
        return headers

    def get_copy_headers(self) -> Multimap:
        """Return the headers describing this object as a copy source."""
        headers = Multimap()
        headers.add("x-amz-copy-source", self._copy_source())
        range_value = self._range_value()
        if range_value:
            headers.add("x-amz-copy-source-range", range_value)
        self._copy_condition_headers(headers)
        if self.ssec is not None:
            merge(headers, self.ssec.copy_headers())
        return headers


GetObjectArgs = ObjectConditionalReadArgs
StatObjectArgs = ObjectConditionalReadArgs
CopySource = ObjectConditionalReadArgs


@dataclass
class ComposeSource(_ConditionalSource):
    """A source object, or part of one, for composing a new object."""

    _object_size: int | None = field(default=None, init=False, repr=False, compare=False)
    _headers: Multimap | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def object_size(self) -> int:
        """Size of the source object; known once build_headers() has run."""
        if self._object_size is None:
            raise RuntimeError("build_headers() must be called first")
        return self._object_size

    @property
    def headers(self) -> Multimap:
        """Copy-source headers; known once build_headers() has run."""
        if self._headers is None:
            raise RuntimeError("build_headers() must be called first")
        return self._headers.copy()

    def _fail(self, kind: str, value: int, object_size: int) -> InvalidComposeSourceError:
        return InvalidComposeSourceError(
            kind, self.bucket, self.object, self.version_id, value, object_size
        )

    def build_headers(self, object_size: int, etag: str) -> None:
        """Validate the range against the object size and build the headers."""
        if self.offset is not None and self.offset >= object_size:
            raise self._fail("offset", self.offset, object_size)
        if self.length is not None:
            if self.length > object_size:
                raise self._fail("length", self.length, object_size)
            end = (self.offset or 0) + self.length
            if end > object_size:
                raise self._fail("size", end, object_size)

        self._object_size = object_size

        headers = Multimap()
        headers.add("x-amz-copy-source", self._copy_source())
        self._copy_condition_headers(headers)
        if self.ssec is not None:
            merge(headers, self.ssec.copy_headers())
        if "x-amz-copy-source-if-match" not in headers:
            headers.add("x-amz-copy-source-if-match", etag)
        self._headers = headers


@dataclass
class SelectObjectContentArgs(ObjectArgs):
    """Arguments for running a select query over an object."""

    request: Any
    version_id: str | None = None
    ssec: Sse | None = None


@dataclass
class UploadPartCopyArgs(ObjectArgs):
    """Arguments for uploading a part copied from another object."""

    upload_id: str
    part_number: int
    headers: Multimap

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.upload_id:
            raise InvalidUploadIdError("upload ID cannot be empty")
        if not 1 <= self.part_number <= _MAX_PART_NUMBER:
            raise InvalidPartNumberError(
                f"part number must be between 1 and {_MAX_PART_NUMBER}"
            )


@dataclass
class DownloadObjectArgs(ObjectArgs):
    """Arguments for downloading an object into a local file."""

    filename: str
    version_id: str | None = None
    ssec: Sse | None = None
    overwrite: bool = False


@dataclass
class GetPresignedObjectUrlArgs(ObjectArgs):
    """Arguments for building a presigned URL of an object."""

    method: str
    version_id: str | None = None
    expiry_seconds: int | None = DEFAULT_EXPIRY_SECONDS
    request_time: datetime | None = None