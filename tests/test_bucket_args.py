import pytest

from s3kit.bucket_args import (
    BucketArgs,
    BucketExistsArgs,
    GetBucketTagsArgs,
    MakeBucketArgs,
    RemoveBucketArgs,
    SetBucketEncryptionArgs,
    SetBucketLifecycleArgs,
    SetBucketNotificationArgs,
    SetBucketPolicyArgs,
    SetBucketReplicationArgs,
    SetBucketTagsArgs,
    SetBucketVersioningArgs,
    SetObjectLockConfigArgs,
)
from s3kit.errors import InvalidBucketNameError
from s3kit.utils import Multimap

POLICY = """
{
    "Version": "2012-10-17",
    "Statement": [
        {
            "Action": ["s3:GetObject"],
            "Effect": "Allow",
            "Principal": {"AWS": ["*"]},
            "Resource": ["arn:aws:s3:::my-bucket/myobject*"],
            "Sid": ""
        }
    ]
}
"""


def test_bucket_args_defaults():
    args = BucketArgs("my-bucket")
    assert args.bucket == "my-bucket"
    assert args.extra_headers is None
    assert args.extra_query_params is None
    assert args.region is None


def test_bucket_args_keyword_options():
    headers = Multimap({"x-custom": "1"})
    args = BucketArgs("my-bucket", extra_headers=headers, region="us-east-1")
    assert args.extra_headers.get("x-custom") == "1"
    assert args.region == "us-east-1"


@pytest.mark.parametrize("name", ["", "ab", "My-Bucket", "a..b", "192.168.1.1", "x" * 64])
def test_invalid_bucket_names_rejected(name):
    with pytest.raises(InvalidBucketNameError):
        BucketArgs(name)


def test_aliases_share_validation():
    assert BucketExistsArgs("asiatrip").bucket == "asiatrip"
    assert RemoveBucketArgs("asiatrip").bucket == "asiatrip"
    with pytest.raises(InvalidBucketNameError):
        GetBucketTagsArgs("UPPER")


def test_make_bucket_object_lock():
    args = MakeBucketArgs("my-bucket")
    assert args.object_lock is False
    args.object_lock = True
    assert MakeBucketArgs("my-bucket", True).object_lock is True


def test_make_bucket_rejects_bad_name():
    with pytest.raises(InvalidBucketNameError):
        MakeBucketArgs("a_b")


def test_set_bucket_policy():
    args = SetBucketPolicyArgs("my-bucket", POLICY)
    assert args.config == POLICY
    assert args.bucket == "my-bucket"


def test_set_bucket_tags():
    tags = {"Project": "Project One", "User": "jsmith"}
    args = SetBucketTagsArgs("my-bucket", tags)
    assert args.tags == {"Project": "Project One", "User": "jsmith"}


def test_set_bucket_versioning():
    enabled = SetBucketVersioningArgs("my-bucket", True)
    assert enabled.status is True
    assert enabled.mfa_delete is None
    disabled = SetBucketVersioningArgs("my-bucket", False)
    assert disabled.status is False


@pytest.mark.parametrize(
    "cls",
    [
        SetBucketEncryptionArgs,
        SetBucketLifecycleArgs,
        SetBucketNotificationArgs,
        SetBucketReplicationArgs,
        SetObjectLockConfigArgs,
    ],
)
def test_config_args_keep_config(cls):
    config = {"rules": ["rule1"]}
    args = cls("my-bucket", config)
    assert args.config is config
    assert args.region is None


@pytest.mark.parametrize(
    "cls",
    [
        SetBucketEncryptionArgs,
        SetBucketLifecycleArgs,
        SetBucketNotificationArgs,
        SetBucketReplicationArgs,
        SetObjectLockConfigArgs,
    ],
)
def test_config_args_validate_bucket(cls):
    with pytest.raises(InvalidBucketNameError):
        cls("-bad-", {})


def test_config_is_required():
    with pytest.raises(TypeError):
        SetBucketPolicyArgs("my-bucket")