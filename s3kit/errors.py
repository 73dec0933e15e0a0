"""Exceptions raised when request arguments fail validation."""

from __future__ import annotations


class S3Error(Exception):
    """Base class for every error raised by this package."""


class InvalidBucketNameError(S3Error, ValueError):
    """The bucket name breaks the naming rules."""


class InvalidObjectNameError(S3Error, ValueError):
    """The object name is not acceptable."""


class InvalidUploadIdError(S3Error, ValueError):
    """The multipart upload ID is missing or empty."""


class InvalidPartNumberError(S3Error, ValueError):
    """The part number lies outside the allowed range."""


class EmptyPartsError(S3Error, ValueError):
    """A multipart completion was requested with no parts."""


class InvalidRetentionConfigError(S3Error, ValueError):
    """Retention mode and retain-until date do not agree."""


class PostPolicyError(S3Error, ValueError):
    """A post policy condition or form-data request is invalid."""


class InvalidMinPartSizeError(S3Error, ValueError):
    """The part size is below the smallest one allowed."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            f"part size {size} is not supported; minimum allowed 5MiB"
        )


class InvalidMaxPartSizeError(S3Error, ValueError):
    """The part size is above the largest one allowed."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            f"part size {size} is not supported; maximum allowed 5GiB"
        )


class InvalidObjectSizeError(S3Error, ValueError):
    """The object size is above the largest one allowed."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            f"object size {size} is not supported; maximum allowed 5TiB"
        )


class MissingPartSizeError(S3Error, ValueError):
    """Neither the object size nor the part size was given."""

    def __init__(self) -> None:
        super().__init__(
            "valid part size must be provided when object size is unknown"
        )


class InvalidPartCountError(S3Error, ValueError):
    """The object would need more parts than an upload may have."""

    def __init__(self, object_size: int, part_size: int, part_count: int) -> None:
        self.object_size = object_size
        self.part_size = part_size
        self.part_count = part_count
        super().__init__(
            f"object size {object_size} and part size {part_size} "
            f"make more than {part_count} parts for upload"
        )


class InvalidComposeSourceError(S3Error, ValueError):
    """A compose source's offset, length or range exceeds the object size.

    ``kind`` is one of ``"offset"``, ``"length"`` or ``"size"``.
    """

    KINDS = ("offset", "length", "size")

    def __init__(
        self,
        kind: str,
        bucket: str,
        object_name: str,
        version_id: str | None,
        value: int,
        object_size: int,
    ) -> None:
        if kind not in self.KINDS:
            raise ValueError(f"unknown compose source error kind {kind!r}")
        self.kind = kind
        self.bucket = bucket
        self.object_name = object_name
        self.version_id = version_id
        self.value = value
        self.object_size = object_size

        source = f"{bucket}/{object_name}"
        if version_id:
            source += f"?versionId={version_id}"
        if kind == "offset":
            detail = f"offset {value} is beyond object size {object_size}"
        elif kind == "length":
            detail = f"length {value} is beyond object size {object_size}"
        else:
            detail = (
                f"compose size {value} (offset + length) "
                f"is beyond object size {object_size}"
            )
        super().__init__(f"source {source}: {detail}")