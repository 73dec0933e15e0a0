"""Arguments for requests that address a single object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .bucket_args import BucketArgs
from .errors import (
    EmptyPartsError,
    InvalidObjectNameError,
    InvalidRetentionConfigError,
    InvalidUploadIdError,
)
from .types import Part, RetentionMode
from .utils import Multimap


@dataclass
class ObjectArgs(BucketArgs):
    """Arguments naming a bucket and an object in it."""

    object: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.object:
            raise InvalidObjectNameError("object name cannot be empty")


@dataclass
class ObjectVersionArgs(ObjectArgs):
    """Object arguments with an optional version ID."""

    version_id: str | None = None


RemoveObjectArgs = ObjectVersionArgs
EnableObjectLegalHoldArgs = ObjectVersionArgs
DisableObjectLegalHoldArgs = ObjectVersionArgs
IsObjectLegalHoldEnabledArgs = ObjectVersionArgs
GetObjectRetentionArgs = ObjectVersionArgs
DeleteObjectTagsArgs = ObjectVersionArgs
GetObjectTagsArgs = ObjectVersionArgs


@dataclass
class AbortMultipartUploadArgs(ObjectArgs):
    """Arguments for aborting a multipart upload."""

    upload_id: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.upload_id:
            raise InvalidUploadIdError("upload ID cannot be empty")


@dataclass
class CompleteMultipartUploadArgs(AbortMultipartUploadArgs):
    """Arguments for completing a multipart upload from its parts."""

    parts: list[Part]

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.parts:
            raise EmptyPartsError("parts cannot be empty")


@dataclass
class CreateMultipartUploadArgs(ObjectArgs):
    """Arguments for starting a multipart upload."""

    headers: Multimap | None = None


@dataclass
class SetObjectRetentionArgs(ObjectArgs):
    """Arguments for setting or clearing an object's retention."""

    retention_mode: RetentionMode | None = None
    retain_until_date: datetime | None = None
    version_id: str | None = None
    bypass_governance_mode: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        if (self.retention_mode is None) != (self.retain_until_date is None):
            raise InvalidRetentionConfigError(
                "both mode and retain_until_date must be set or unset"
            )


@dataclass
class SetObjectTagsArgs(ObjectArgs):
    """Arguments for setting an object's tags."""

    tags: dict[str, str]
    version_id: str | None = None