import io
from datetime import datetime, timezone

import pytest

from s3kit.errors import (
    InvalidBucketNameError,
    InvalidMaxPartSizeError,
    InvalidMinPartSizeError,
    InvalidObjectNameError,
    InvalidObjectSizeError,
    InvalidPartCountError,
    InvalidPartNumberError,
    InvalidUploadIdError,
    MissingPartSizeError,
)
from s3kit.read_args import ComposeSource, CopySource
from s3kit.types import Directive, Retention, RetentionMode, Sse
from s3kit.utils import Multimap
from s3kit.write_args import (
    MAX_MULTIPART_COUNT,
    MAX_OBJECT_SIZE,
    MIN_PART_SIZE,
    ComposeObjectArgs,
    CopyObjectArgs,
    PutObjectApiArgs,
    PutObjectArgs,
    UploadObjectArgs,
    UploadPartArgs,
    build_write_headers,
    calc_part_info,
)

MIB = 1024 * 1024


class _FixedSse(Sse):
    def headers(self) -> Multimap:
        return Multimap({"x-amz-server-side-encryption": "AES256"})


def test_calc_part_info_small_object():
    assert calc_part_info(16, None) == (16, 1)


def test_calc_part_info_empty_object():
    assert calc_part_info(0, None) == (0, 1)


def test_calc_part_info_multipart():
    assert calc_part_info(16 + 5 * MIB, None) == (5 * MIB, 2)


def test_calc_part_info_unknown_size():
    assert calc_part_info(None, 5 * MIB) == (5 * MIB, -1)


def test_calc_part_info_explicit_part_size():
    assert calc_part_info(12 * MIB, 5 * MIB) == (5 * MIB, 3)


def test_calc_part_info_max_object_invariants():
    psize, count = calc_part_info(MAX_OBJECT_SIZE, None)
    assert count <= MAX_MULTIPART_COUNT
    assert psize * count >= MAX_OBJECT_SIZE
    assert psize % MIN_PART_SIZE == 0


def test_calc_part_info_errors():
    with pytest.raises(MissingPartSizeError):
        calc_part_info(None, None)
    with pytest.raises(InvalidMinPartSizeError):
        calc_part_info(16, 1024)
    with pytest.raises(InvalidMaxPartSizeError):
        calc_part_info(16, 6 * 1024 * MIB)
    with pytest.raises(InvalidObjectSizeError):
        calc_part_info(MAX_OBJECT_SIZE + 1, None)
    with pytest.raises(InvalidPartCountError):
        calc_part_info(100 * 1024 * MIB, 5 * MIB)


def test_build_write_headers_full():
    headers = build_write_headers(
        Multimap({"x-extra": "1"}),
        Multimap({"Content-Type": "text/plain"}),
        Multimap({"x-amz-meta-color": "blue"}),
        _FixedSse(),
        {"Project": "Project One", "User": "jsmith"},
        Retention(RetentionMode.GOVERNANCE, datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
        True,
    )
    assert headers.keys() == [
        "x-extra",
        "Content-Type",
        "x-amz-meta-color",
        "x-amz-server-side-encryption",
        "x-amz-tagging",
        "x-amz-object-lock-mode",
        "x-amz-object-lock-retain-until-date",
        "x-amz-object-lock-legal-hold",
    ]
    assert headers.get("x-amz-tagging") == "Project=Project%20One&User=jsmith"
    assert headers.get("x-amz-object-lock-mode") == "GOVERNANCE"
    assert headers.get("x-amz-object-lock-retain-until-date") == "2030-01-02T03:04:05.000Z"
    assert headers.get("x-amz-object-lock-legal-hold") == "ON"


def test_build_write_headers_empty():
    headers = build_write_headers(None, None, None, None, {}, None, False)
    assert len(headers) == 0


def test_put_object_api_args_headers():
    args = PutObjectApiArgs("my-bucket", "my-object", b"ACE", legal_hold=True)
    assert args.data == b"ACE"
    assert args.get_headers().get("x-amz-object-lock-legal-hold") == "ON"
    with pytest.raises(InvalidObjectNameError):
        PutObjectApiArgs("my-bucket", "", b"ACE")


def test_upload_part_args_validation():
    args = UploadPartArgs("my-bucket", "my-object", "c53a2b73", 3, b"ACE")
    assert args.part_number == 3
    with pytest.raises(InvalidUploadIdError):
        UploadPartArgs("my-bucket", "my-object", "", 3, b"ACE")
    with pytest.raises(InvalidPartNumberError):
        UploadPartArgs("my-bucket", "my-object", "c53a2b73", 0, b"ACE")
    with pytest.raises(InvalidPartNumberError):
        UploadPartArgs("my-bucket", "my-object", "c53a2b73", 10001, b"ACE")


def test_put_object_args_from_stream():
    data = b"hello, world"
    args = PutObjectArgs("my-bucket", "my-object", io.BytesIO(data), len(data))
    assert args.part_size == len(data)
    assert args.part_count == 1
    assert args.content_type == "application/octet-stream"
    assert args.stream.read() == data


def test_put_object_args_multipart_and_errors():
    size = 16 + 5 * MIB
    args = PutObjectArgs("my-bucket", "my-object", io.BytesIO(), size)
    assert (args.part_size, args.part_count) == (5 * MIB, 2)
    with pytest.raises(MissingPartSizeError):
        PutObjectArgs("my-bucket", "my-object", io.BytesIO())
    with pytest.raises(InvalidBucketNameError):
        PutObjectArgs("my..bucket", "my-object", io.BytesIO(), 1)


def test_copy_object_args():
    source = CopySource("my-src-bucket", "my-src-object")
    args = CopyObjectArgs(
        "my-bucket", "my-object", source, metadata_directive=Directive.REPLACE
    )
    assert args.source.get_copy_headers().get("x-amz-copy-source") == "/my-src-bucket/my-src-object"
    assert args.metadata_directive is Directive.REPLACE
    assert args.tagging_directive is None


def test_compose_object_args():
    source = ComposeSource("my-bucket", "src-object", offset=3, length=5)
    args = ComposeObjectArgs("my-bucket", "my-object", [source], tags={"a": "b"})
    args.sources[0].build_headers(16, "etag-value")
    assert args.sources[0].object_size == 16
    assert args.sources[0].headers.get("x-amz-copy-source-if-match") == "etag-value"
    assert args.get_headers().get("x-amz-tagging") == "a=b"


def test_upload_object_args(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"x" * 16)
    args = UploadObjectArgs("my-bucket", "my-object", str(path))
    assert args.object_size == 16
    assert (args.part_size, args.part_count) == (16, 1)
    assert args.content_type == "application/octet-stream"


def test_upload_object_args_errors(tmp_path):
    with pytest.raises(OSError, match="not a file"):
        UploadObjectArgs("my-bucket", "my-object", str(tmp_path))
    with pytest.raises(FileNotFoundError):
        UploadObjectArgs("my-bucket", "my-object", str(tmp_path / "missing"))