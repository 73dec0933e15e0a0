"""Arguments for bucket-level requests."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass
from typing import Any

from .utils import Multimap, check_bucket_name


@dataclass
class BucketArgs:
    """Arguments naming a single bucket."""

    bucket: str
    _: KW_ONLY
    extra_headers: Multimap | None = None
    extra_query_params: Multimap | None = None
    region: str | None = None

    def __post_init__(self) -> None:
        check_bucket_name(self.bucket, True)


BucketExistsArgs = BucketArgs
RemoveBucketArgs = BucketArgs
DeleteBucketEncryptionArgs = BucketArgs
GetBucketEncryptionArgs = BucketArgs
DeleteBucketLifecycleArgs = BucketArgs
GetBucketLifecycleArgs = BucketArgs
DeleteBucketNotificationArgs = BucketArgs
GetBucketNotificationArgs = BucketArgs
DeleteBucketPolicyArgs = BucketArgs
GetBucketPolicyArgs = BucketArgs
DeleteBucketReplicationArgs = BucketArgs
GetBucketReplicationArgs = BucketArgs
DeleteBucketTagsArgs = BucketArgs
GetBucketTagsArgs = BucketArgs
DeleteObjectLockConfigArgs = BucketArgs
GetObjectLockConfigArgs = BucketArgs


@dataclass
class MakeBucketArgs(BucketArgs):
    """Arguments for creating a bucket, optionally with object lock."""

    object_lock: bool = False


@dataclass
class SetBucketEncryptionArgs(BucketArgs):
    """Arguments for setting a bucket's default encryption."""

    config: Any


@dataclass
class SetBucketLifecycleArgs(BucketArgs):
    """Arguments for setting a bucket's lifecycle configuration."""

    config: Any


@dataclass
class SetBucketNotificationArgs(BucketArgs):
    """Arguments for setting a bucket's notification configuration."""

    config: Any


@dataclass
class SetBucketPolicyArgs(BucketArgs):
    """Arguments for setting a bucket's policy given as JSON text."""

    config: str


@dataclass
class SetBucketReplicationArgs(BucketArgs):
    """Arguments for setting a bucket's replication configuration."""

    config: Any


@dataclass
class SetBucketTagsArgs(BucketArgs):
    """Arguments for setting a bucket's tags."""

    tags: dict[str, str]


@dataclass
class SetBucketVersioningArgs(BucketArgs):
    """Arguments for enabling or suspending bucket versioning."""

    status: bool
    mfa_delete: bool | None = None


@dataclass
class SetObjectLockConfigArgs(BucketArgs):
    """Arguments for setting a bucket's object lock configuration."""

    config: Any